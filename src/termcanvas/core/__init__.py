"""Core data structures shared by the canvases."""

from termcanvas.core.color import Color
from termcanvas.core.grid import SparseGrid, line_points
from termcanvas.core.pixel import DEFAULT_PIXEL, PairPixel, Pixel, TextCellError, TextPixel

__all__ = [
    "Color",
    "SparseGrid",
    "line_points",
    "Pixel",
    "TextPixel",
    "PairPixel",
    "DEFAULT_PIXEL",
    "TextCellError",
]
