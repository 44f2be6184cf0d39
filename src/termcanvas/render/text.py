"""Render half-block cells as plain glyphs (no color escapes)."""

from termcanvas.core.color import Color
from termcanvas.core.pixel import PairPixel, Pixel, TextPixel

# Block glyphs chosen by which sub-pixels are lit (non-black)
HALF_BLOCKS = {
    (False, False): " ",
    (True, False): "▀",
    (False, True): "▄",
    (True, True): "█",
}


class TextRenderer:
    """
    Render a canvas for terminals without ANSI color support.

    Text cells keep their character. Color cells treat black as unlit and
    pick the block glyph covering the lit halves.
    """

    name = "text"

    def render_cell(self, pixel: Pixel) -> str:
        if isinstance(pixel, PairPixel):
            return HALF_BLOCKS[(pixel.top != Color.BLACK, pixel.bottom != Color.BLACK)]
        if isinstance(pixel, TextPixel):
            return pixel.char
        raise TypeError(f"Cannot render {type(pixel).__name__}")

    def render_row(self, row: list[Pixel]) -> str:
        return ''.join(self.render_cell(pixel) for pixel in row)
