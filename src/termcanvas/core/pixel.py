"""Pixel - cell variants of the half-block canvas."""

from __future__ import annotations

from dataclasses import dataclass

from termcanvas.core.color import Color


class TextCellError(TypeError):
    """A color sub-pixel was requested from a cell that holds text."""


@dataclass(frozen=True, slots=True)
class TextPixel:
    """One printable character drawn with a background and foreground color."""
    bg: Color = Color.BLACK
    fg: Color = Color.BLACK
    char: str = ' '


@dataclass(frozen=True, slots=True)
class PairPixel:
    """
    Two vertically stacked color sub-pixels sharing one terminal cell.

    Rendered as a lower half block: the background shows the top
    sub-pixel and the foreground shows the bottom one.
    """
    top: Color = Color.BLACK
    bottom: Color = Color.BLACK

    def __getitem__(self, index: int) -> Color:
        if index == 0:
            return self.top
        if index == 1:
            return self.bottom
        raise IndexError(f"Sub-pixel index must be 0 or 1, got {index}")

    def with_color(self, index: int, color: Color) -> PairPixel:
        """Return a copy with sub-pixel ``index`` replaced by ``color``."""
        if index == 0:
            return PairPixel(color, self.bottom)
        if index == 1:
            return PairPixel(self.top, color)
        raise IndexError(f"Sub-pixel index must be 0 or 1, got {index}")


Pixel = TextPixel | PairPixel

# Absent cells render as a blank black text cell
DEFAULT_PIXEL = TextPixel()
