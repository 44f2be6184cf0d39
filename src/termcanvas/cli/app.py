"""Typer CLI application with demo commands."""

import logging
import math
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from termcanvas.config import CanvasConfig
from termcanvas.core.color import Color
from termcanvas.logging_conf import setup_logging

logger = logging.getLogger(__name__)

# Colors cycled by the block demo, skipping black
DEMO_COLORS = [c for c in Color if c is not Color.BLACK]


def _load_config(
    width: Optional[int],
    height: Optional[int],
    renderer: Optional[str],
    log_level: Optional[str],
    log_file: Optional[Path] = None,
) -> CanvasConfig:
    """Merge CLI options over TERMCANVAS_* environment settings."""
    config = CanvasConfig.from_env()
    if width is not None or height is not None:
        config.with_dimensions(
            width if width is not None else config.pixel_width,
            height if height is not None else config.pixel_height,
        )
    if renderer:
        config.with_renderer(renderer)
    if log_level:
        config.with_log_level(log_level)
    if log_file:
        config.with_log_file(log_file)
    setup_logging(config.log_level, config.log_file)
    logger.debug("Loaded config %s", config.to_dict())
    return config


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="termcanvas",
        help="Draw with half blocks and Braille dots in the terminal.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    WidthOpt = Annotated[Optional[int], typer.Option("--width", "-W", help="Minimum width in pixels")]
    HeightOpt = Annotated[Optional[int], typer.Option("--height", "-H", help="Minimum height in pixels")]
    LogOpt = Annotated[Optional[str], typer.Option("--log-level", "-l", help="Log level (DEBUG, INFO, ...)")]
    LogFileOpt = Annotated[Optional[Path], typer.Option("--log-file", help="Also write logs to this rotating file")]

    def configure(width, height, renderer, log_level, log_file) -> CanvasConfig:
        try:
            return _load_config(width, height, renderer, log_level, log_file)
        except ValueError as exc:
            console.print(f"[red]{exc}[/]")
            raise typer.Exit(1)

    @app.command()
    def block(
        width: WidthOpt = None,
        height: HeightOpt = None,
        renderer: Annotated[Optional[str], typer.Option("--renderer", "-r", help="Cell renderer: ansi or text")] = None,
        label: Annotated[str, typer.Option("--label", help="Text drawn under the lines")] = "termcanvas",
        fg: Annotated[str, typer.Option("--fg", help="Label text color")] = "white",
        bg: Annotated[str, typer.Option("--bg", help="Label background color")] = "blue",
        log_level: LogOpt = None,
        log_file: LogFileOpt = None,
    ) -> None:
        """Draw a fan of colored lines with half blocks."""
        config = configure(width, height, renderer, log_level, log_file)
        try:
            label_fg = Color.from_name(fg)
            label_bg = Color.from_name(bg)
        except ValueError as exc:
            console.print(f"[red]{exc}[/]")
            raise typer.Exit(1)
        canvas = config.block_canvas()

        size = max(canvas.width * 2, 16)
        for i, color in enumerate(DEMO_COLORS):
            canvas.line(0, 0, size - 1, i * size // len(DEMO_COLORS), color)
        canvas.text(0, size + 2, label_fg, label_bg, label)

        print(canvas.frame())

    @app.command()
    def dots(
        width: WidthOpt = None,
        height: HeightOpt = None,
        periods: Annotated[float, typer.Option("--periods", "-p", help="Number of sine periods")] = 2.0,
        log_level: LogOpt = None,
        log_file: LogFileOpt = None,
    ) -> None:
        """Plot a sine wave with Braille dots."""
        config = configure(width, height, None, log_level, log_file)
        canvas = config.dot_canvas()

        cols = max(config.pixel_width, 2)
        mid = max(config.pixel_height, 4) // 2
        amplitude = mid - 1
        prev = None
        for x in range(cols):
            y = mid - round(math.sin(2 * math.pi * periods * x / cols) * amplitude)
            if prev is not None:
                canvas.line(prev[0], prev[1], x, y)
            prev = (x, y)

        print(canvas.frame())

    @app.command()
    def turtle(
        sides: Annotated[int, typer.Option("--sides", "-s", help="Sides per turn of the spiral")] = 6,
        steps: Annotated[int, typer.Option("--steps", "-n", help="Number of segments to draw")] = 36,
        length: Annotated[float, typer.Option("--length", help="Length of the first segment")] = 4.0,
        grow: Annotated[float, typer.Option("--grow", help="Length added per segment")] = 1.0,
        log_level: LogOpt = None,
        log_file: LogFileOpt = None,
    ) -> None:
        """Draw a polygon spiral with a turtle."""
        if sides < 3:
            console.print(f"[red]A polygon needs at least 3 sides, got {sides}[/]")
            raise typer.Exit(1)
        config = configure(None, None, None, log_level, log_file)

        reach = length + grow * steps
        walker = config.turtle(reach, reach)
        angle = 360.0 / sides
        dist = length
        for _ in range(steps):
            walker.forward(dist)
            walker.right(angle)
            dist += grow

        print(walker.frame())
        console.print(f"[dim]{walker!r}[/]")

    return app
