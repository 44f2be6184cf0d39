"""Turtle - a cursor that walks around a DotCanvas drawing lines.

http://en.wikipedia.org/wiki/Turtle_graphics
"""

from __future__ import annotations

import logging
import math

from termcanvas.draw.dot_canvas import DotCanvas

logger = logging.getLogger(__name__)


def _to_pixel(value: float) -> int:
    """Round a position to the nearest pixel (halves up), clamped at 0."""
    pixel = math.floor(value)
    if value - pixel >= 0.5:
        pixel += 1
    return max(0, pixel)


class Turtle:
    """
    A turtle that draws on its own DotCanvas.

    The turtle starts with its brush down, facing right (heading 0).
    Positive turns are clockwise on screen, since y grows downwards.

    Example:
        >>> turtle = Turtle(0, 0)
        >>> for _ in range(4):
        ...     turtle.forward(10)
        ...     turtle.right(90)
        >>> print(turtle.frame())
    """

    def __init__(self, x: float = 0.0, y: float = 0.0, canvas: DotCanvas | None = None):
        self.x = float(x)
        self.y = float(y)
        self.heading = 0.0
        self.brush = True
        self.canvas = canvas if canvas is not None else DotCanvas(0, 0)

    @classmethod
    def from_canvas(cls, x: float, y: float, canvas: DotCanvas) -> Turtle:
        """Create a turtle that takes ownership of an existing canvas."""
        return cls(x, y, canvas)

    def __repr__(self) -> str:
        state = "down" if self.brush else "up"
        return f"Turtle(x={self.x:g}, y={self.y:g}, heading={self.heading:g}, brush={state})"

    def set_width(self, cells: int) -> Turtle:
        """Set the canvas minimum width in cells (not pixels)."""
        self.canvas.width = cells
        return self

    def set_height(self, cells: int) -> Turtle:
        """Set the canvas minimum height in cells (not pixels)."""
        self.canvas.height = cells
        return self

    def up(self) -> None:
        """Pull the brush up."""
        self.brush = False

    def down(self) -> None:
        """Push the brush down."""
        self.brush = True

    def toggle_brush(self) -> None:
        """Flip the brush between up and down."""
        self.brush = not self.brush

    def forward(self, dist: float) -> None:
        """Move forward by ``dist`` pixels along the current heading."""
        rad = math.radians(self.heading)
        self.teleport(self.x + math.cos(rad) * dist, self.y + math.sin(rad) * dist)

    def back(self, dist: float) -> None:
        """Move backward by ``dist`` pixels."""
        self.forward(-dist)

    def teleport(self, x: float, y: float) -> None:
        """
        Move to (x, y).

        Draws a line from the old position if the brush is down. Line
        endpoints are rounded and clamped to non-negative pixels; the
        stored position is not.
        """
        if self.brush:
            logger.debug("Drawing (%g, %g) -> (%g, %g)", self.x, self.y, x, y)
            self.canvas.line(_to_pixel(self.x), _to_pixel(self.y), _to_pixel(x), _to_pixel(y))
        self.x = float(x)
        self.y = float(y)

    def right(self, angle: float) -> None:
        """Turn clockwise by ``angle`` degrees."""
        self.heading += angle

    def left(self, angle: float) -> None:
        """Turn counter-clockwise by ``angle`` degrees."""
        self.heading -= angle

    def frame(self) -> str:
        """Render the turtle's canvas."""
        return self.canvas.frame()

    # aliases
    pu = up
    pd = down
    fd = forward
    bk = back
    rt = right
    lt = left
    mv = teleport
