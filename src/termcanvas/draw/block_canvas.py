"""BlockCanvas - colored drawing with half-block characters.

Each terminal cell holds either a line of text or two stacked color
sub-pixels, so the canvas has twice the vertical resolution of the
terminal. Drawing coordinates are pixels: ``x`` maps one-to-one to a
column and ``y // 2`` picks the row.
"""

from __future__ import annotations

import logging

from termcanvas.core.color import Color
from termcanvas.core.grid import SparseGrid, line_points
from termcanvas.core.pixel import DEFAULT_PIXEL, PairPixel, Pixel, TextCellError, TextPixel
from termcanvas.render.base import CellRenderer
from termcanvas.render.terminal import AnsiRenderer

logger = logging.getLogger(__name__)

BLANK_PAIR = PairPixel(Color.BLACK, Color.BLACK)


class BlockCanvas:
    """
    Sparse 8-color canvas rendered with lower half blocks.

    The canvas never rejects a write: drawing past the configured size
    grows the rendered frame to include it.

    Example:
        >>> canvas = BlockCanvas(20, 16)
        >>> canvas.line(0, 0, 9, 7, Color.RED)
        >>> canvas.text(0, 10, Color.WHITE, Color.BLUE, "hi")
        >>> print(canvas.frame())
    """

    def __init__(self, width: int = 0, height: int = 0, renderer: CellRenderer | None = None):
        """
        Initialize an empty canvas.

        Args:
            width: Minimum width in pixels (stored as width // 2 cells)
            height: Minimum height in pixels (stored as height // 4 cells)
            renderer: Cell encoding strategy, ANSI escapes by default
        """
        self._grid: SparseGrid[Pixel] = SparseGrid.from_pixels(width, height, DEFAULT_PIXEL)
        self.renderer: CellRenderer = renderer if renderer is not None else AnsiRenderer()

    @property
    def width(self) -> int:
        """Configured minimum width in cells."""
        return self._grid.width

    @property
    def height(self) -> int:
        """Configured minimum height in cells."""
        return self._grid.height

    @property
    def grid(self) -> SparseGrid[Pixel]:
        return self._grid

    def clear(self) -> None:
        """Remove everything drawn. The configured size is kept."""
        logger.debug("Clearing block canvas (%d cells)", len(self._grid))
        self._grid.clear()

    def text(self, x: int, y: int, fg: Color, bg: Color, s: str) -> None:
        """Write a string starting at pixel (x, y), one character per column."""
        row = y // 2
        for i, char in enumerate(s):
            self._grid.put(x + i, row, TextPixel(bg, fg, char))

    def set(self, x: int, y: int, color: Color) -> None:
        """
        Color the sub-pixel at (x, y).

        A text cell is replaced by a black pair before the sub-pixel is set.
        """
        row = y // 2
        cell = self._grid.get(x, row)
        if not isinstance(cell, PairPixel):
            cell = BLANK_PAIR
        self._grid.put(x, row, cell.with_color(y % 2, color))

    def unset(self, x: int, y: int) -> None:
        """
        Reset the sub-pixel at (x, y) to black.

        Raises:
            TextCellError: If the cell holds text
        """
        row = y // 2
        cell = self._grid.get(x, row)
        if cell is None:
            cell = BLANK_PAIR
        elif isinstance(cell, TextPixel):
            raise TextCellError(f"Cannot unset pixel ({x}, {y}): cell ({x}, {row}) holds text {cell.char!r}")
        self._grid.put(x, row, cell.with_color(y % 2, Color.BLACK))

    def get(self, x: int, y: int) -> Color:
        """
        Get the color of the sub-pixel at (x, y). Unwritten cells are black.

        Raises:
            TextCellError: If the cell holds text; use ``pixel_at`` to inspect it
        """
        row = y // 2
        cell = self._grid.get(x, row)
        if cell is None:
            return Color.BLACK
        if isinstance(cell, TextPixel):
            raise TextCellError(f"Cannot read pixel ({x}, {y}): cell ({x}, {row}) holds text {cell.char!r}")
        return cell[y % 2]

    def pixel_at(self, x: int, y: int) -> Pixel:
        """Return the cell variant containing pixel (x, y)."""
        return self._grid.lookup(x, y // 2)

    line_points = staticmethod(line_points)

    def line(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
        """Draw a line from (x1, y1) to (x2, y2) in ``color``."""
        for x, y in line_points(x1, y1, x2, y2):
            self.set(x, y, color)

    def rows(self) -> list[str]:
        """Render each terminal row of the canvas."""
        return [self.renderer.render_row(row) for row in self._grid.rows()]

    def frame(self) -> str:
        """Render the whole canvas as one string."""
        return '\n'.join(self.rows())
