"""Render half-block cells to ANSI escape sequences."""

from termcanvas.core.color import Color
from termcanvas.core.constants import CSI, LOWER_HALF, RESET
from termcanvas.core.pixel import PairPixel, Pixel, TextPixel


class AnsiRenderer:
    """
    Encode cells with 8-color SGR escapes.

    Every cell carries its own background and foreground escape, and each
    row ends with a full reset so colors never bleed past the line:

        ESC[0;4<bg>m ESC[3<fg>m <char>
    """

    name = "ansi"

    def colors(self, bg: Color, fg: Color) -> str:
        """Return the escape pair selecting a background and foreground color."""
        return f"{CSI}0;{bg.to_sgr_bg()}m{CSI}{fg.to_sgr_fg()}m"

    def render_cell(self, pixel: Pixel) -> str:
        if isinstance(pixel, PairPixel):
            return f"{self.colors(pixel.top, pixel.bottom)}{LOWER_HALF}"
        if isinstance(pixel, TextPixel):
            return f"{self.colors(pixel.bg, pixel.fg)}{pixel.char}"
        raise TypeError(f"Cannot render {type(pixel).__name__}")

    def render_row(self, row: list[Pixel]) -> str:
        return ''.join(self.render_cell(pixel) for pixel in row) + RESET
