"""Canvas configuration shared by the CLI and library callers."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

from termcanvas.draw.block_canvas import BlockCanvas
from termcanvas.draw.dot_canvas import DotCanvas
from termcanvas.draw.turtle import Turtle
from termcanvas.render import RENDERERS, CellRenderer, get_renderer

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

ENV_PREFIX = "TERMCANVAS_"

logger = logging.getLogger(__name__)


@dataclass
class CanvasConfig:
    """
    Settings for building canvases.

    Sizes are in pixels, matching the canvas constructors.

    Example:
        >>> config = (CanvasConfig()
        ...     .with_dimensions(120, 48)
        ...     .with_renderer("text"))
        >>> canvas = config.block_canvas()
    """

    pixel_width: int = 80
    pixel_height: int = 40
    renderer: str = "ansi"
    log_level: str = "WARNING"
    log_file: Optional[str] = None  # None = console only

    def with_dimensions(self, width: int, height: int) -> CanvasConfig:
        """Set minimum canvas size in pixels."""
        if width < 0 or height < 0:
            raise ValueError(f"Dimensions must be non-negative, got {width}x{height}")
        self.pixel_width = width
        self.pixel_height = height
        return self

    def with_renderer(self, name: str) -> CanvasConfig:
        """Set the half-block renderer: 'ansi' or 'text'."""
        name = name.strip().lower()
        if name not in RENDERERS:
            raise ValueError(f"Invalid renderer: {name}")
        self.renderer = name
        return self

    def with_log_level(self, level: str) -> CanvasConfig:
        """Set log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)."""
        level = level.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {level}")
        self.log_level = level
        return self

    def with_log_file(self, path: Optional[str | Path]) -> CanvasConfig:
        """Also write logs to a rotating file at ``path`` (None disables)."""
        self.log_file = str(Path(path).expanduser()) if path else None
        return self

    def make_renderer(self) -> CellRenderer:
        return get_renderer(self.renderer)

    def block_canvas(self) -> BlockCanvas:
        return BlockCanvas(self.pixel_width, self.pixel_height, renderer=self.make_renderer())

    def dot_canvas(self) -> DotCanvas:
        return DotCanvas(self.pixel_width, self.pixel_height)

    def turtle(self, x: float = 0.0, y: float = 0.0) -> Turtle:
        """Create a turtle on a canvas of the configured size."""
        return Turtle.from_canvas(x, y, self.dot_canvas())

    def to_dict(self) -> dict[str, Any]:
        return {
            "pixel_width": self.pixel_width,
            "pixel_height": self.pixel_height,
            "renderer": self.renderer,
            "log_level": self.log_level,
            "log_file": self.log_file,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CanvasConfig:
        """Build a config from a dictionary, validating every value."""
        defaults = cls()
        return (cls()
            .with_dimensions(
                int(data.get("pixel_width", defaults.pixel_width)),
                int(data.get("pixel_height", defaults.pixel_height)),
            )
            .with_renderer(str(data.get("renderer", defaults.renderer)))
            .with_log_level(str(data.get("log_level", defaults.log_level)))
            .with_log_file(data.get("log_file", defaults.log_file)))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CanvasConfig:
        """
        Build a config from TERMCANVAS_* environment variables.

        Recognized: TERMCANVAS_WIDTH, TERMCANVAS_HEIGHT, TERMCANVAS_RENDERER,
        TERMCANVAS_LOG_LEVEL, TERMCANVAS_LOG_FILE. Missing variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        data: dict[str, Any] = {}
        for key, field_name in (
            ("WIDTH", "pixel_width"),
            ("HEIGHT", "pixel_height"),
            ("RENDERER", "renderer"),
            ("LOG_LEVEL", "log_level"),
            ("LOG_FILE", "log_file"),
        ):
            value = env.get(ENV_PREFIX + key)
            if value:
                data[field_name] = value
        try:
            return cls.from_dict(data)
        except ValueError as exc:
            logger.debug("Rejected environment config %r", data)
            raise ValueError(f"Invalid {ENV_PREFIX}* environment: {exc}") from exc
