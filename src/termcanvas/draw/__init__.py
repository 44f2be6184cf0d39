"""Draw module - canvases and the turtle cursor."""

from termcanvas.draw.block_canvas import BlockCanvas
from termcanvas.draw.dot_canvas import DotCanvas, braille_char, dot_bit
from termcanvas.draw.turtle import Turtle

__all__ = [
    "BlockCanvas",
    "DotCanvas",
    "Turtle",
    "braille_char",
    "dot_bit",
]
