"""DotCanvas - monochrome drawing with Braille characters.

Each terminal cell packs a 2x4 block of dots into one Braille pattern,
for eight times the resolution of plain characters and no color.
"""

from __future__ import annotations

import logging
from typing import Callable

from termcanvas.core.constants import BRAILLE_OFFSET, DOT_BITS
from termcanvas.core.grid import SparseGrid, line_points

logger = logging.getLogger(__name__)


def dot_bit(x: int, y: int) -> int:
    """Return the Braille mask bit for pixel (x, y) within its cell."""
    return DOT_BITS[y % 4][x % 2]


def braille_char(mask: int) -> str:
    """Return the glyph for a dot mask. An empty mask is a plain space."""
    if mask == 0:
        return ' '
    return chr(BRAILLE_OFFSET + mask)


class DotCanvas:
    """
    Sparse Braille canvas.

    Note that the canvas can still draw outside the given dimensions
    (expanding the frame) if a pixel is set outside them.

    Example:
        >>> canvas = DotCanvas()
        >>> canvas.set(0, 0)
        >>> canvas.frame()
        '⠁'
    """

    def __init__(self, width: int = 0, height: int = 0):
        """
        Initialize an empty canvas.

        Args:
            width: Minimum width in pixels (stored as width // 2 cells)
            height: Minimum height in pixels (stored as height // 4 cells)
        """
        self._grid: SparseGrid[int] = SparseGrid.from_pixels(width, height, 0)

    @property
    def width(self) -> int:
        """Configured minimum width in cells."""
        return self._grid.width

    @width.setter
    def width(self, cells: int) -> None:
        if cells < 0:
            raise ValueError(f"Width must be non-negative, got {cells}")
        self._grid.width = cells

    @property
    def height(self) -> int:
        """Configured minimum height in cells."""
        return self._grid.height

    @height.setter
    def height(self, cells: int) -> None:
        if cells < 0:
            raise ValueError(f"Height must be non-negative, got {cells}")
        self._grid.height = cells

    @property
    def grid(self) -> SparseGrid[int]:
        return self._grid

    def clear(self) -> None:
        """Remove every dot. The configured size is kept."""
        logger.debug("Clearing dot canvas (%d cells)", len(self._grid))
        self._grid.clear()

    def _apply(self, x: int, y: int, op: Callable[[int, int], int]) -> None:
        col, row = x // 2, y // 4
        mask = self._grid.lookup(col, row)
        self._grid.put(col, row, op(mask, dot_bit(x, y)))

    def set(self, x: int, y: int) -> None:
        """Turn on the dot at (x, y)."""
        self._apply(x, y, lambda mask, bit: mask | bit)

    def unset(self, x: int, y: int) -> None:
        """Turn off the dot at (x, y)."""
        self._apply(x, y, lambda mask, bit: mask & ~bit)

    def toggle(self, x: int, y: int) -> None:
        """Flip the dot at (x, y)."""
        self._apply(x, y, lambda mask, bit: mask ^ bit)

    def get(self, x: int, y: int) -> bool:
        """Whether the dot at (x, y) is on."""
        mask = self._grid.get(x // 2, y // 4)
        if mask is None:
            return False
        return mask & dot_bit(x, y) != 0

    line_points = staticmethod(line_points)

    def line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Draw a line from (x1, y1) to (x2, y2)."""
        for x, y in line_points(x1, y1, x2, y2):
            self.set(x, y)

    def rows(self) -> list[str]:
        """
        Render each row of the canvas.

        Each row is four pixels tall, since one Braille character spans
        two by four pixels.
        """
        return [''.join(braille_char(mask) for mask in row) for row in self._grid.rows()]

    def frame(self) -> str:
        """Render the whole canvas as one string."""
        return '\n'.join(self.rows())
