"""
termcanvas: pixel drawing inside a text terminal

Pack several logical pixels into each character cell and render the
result as a string ready to print.

Quick Start:
    >>> import termcanvas as tc
    >>> canvas = tc.BlockCanvas(40, 40)
    >>> canvas.line(0, 0, 19, 19, tc.Color.RED)
    >>> print(canvas.frame())
    >>> turtle = tc.Turtle(0, 0)
    >>> turtle.forward(10)
    >>> print(turtle.frame())

Features:
    - BlockCanvas: 8-color half blocks, 2 sub-pixels per cell, text labels
    - DotCanvas: Braille patterns, 2x4 monochrome sub-pixels per cell
    - Turtle: turtle-graphics cursor drawing on a DotCanvas
    - Sparse storage: canvases grow to fit whatever is drawn
    - Pluggable cell renderers (ANSI escapes or plain glyphs)
"""

__version__ = "0.1.0"

# Core types
from termcanvas.core.color import Color
from termcanvas.core.grid import SparseGrid, line_points
from termcanvas.core.pixel import PairPixel, TextCellError, TextPixel

# Canvases
from termcanvas.draw.block_canvas import BlockCanvas
from termcanvas.draw.dot_canvas import DotCanvas
from termcanvas.draw.turtle import Turtle

# Rendering and configuration
from termcanvas.render import AnsiRenderer, TextRenderer, get_renderer
from termcanvas.config import CanvasConfig

__all__ = [
    # Version
    "__version__",
    # Core types
    "Color",
    "SparseGrid",
    "line_points",
    "TextPixel",
    "PairPixel",
    "TextCellError",
    # Canvases
    "BlockCanvas",
    "DotCanvas",
    "Turtle",
    # Rendering
    "AnsiRenderer",
    "TextRenderer",
    "get_renderer",
    # Configuration
    "CanvasConfig",
]
