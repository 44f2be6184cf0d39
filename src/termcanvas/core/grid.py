"""SparseGrid - unbounded cell storage and line rasterization shared by all canvases."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


def line_points(x1: int, y1: int, x2: int, y2: int) -> list[tuple[int, int]]:
    """
    Return the points of the line from (x1, y1) to (x2, y2), both inclusive.

    Each step advances the major axis by one and truncates the minor axis
    offset, so shallow or steep lines may repeat a point. Points are ordered
    from the first endpoint to the second.
    """
    xdiff = abs(x2 - x1)
    ydiff = abs(y2 - y1)
    xdir = 1 if x1 <= x2 else -1
    ydir = 1 if y1 <= y2 else -1

    r = max(xdiff, ydiff)
    if r == 0:
        return [(x1, y1)]

    return [
        (x1 + xdir * (i * xdiff // r), y1 + ydir * (i * ydiff // r))
        for i in range(r + 1)
    ]


class SparseGrid(Generic[T]):
    """
    A sparse 2D map of cells keyed by (column, row).

    Only written cells are stored. The grid keeps a configured minimum
    size in cell units; the effective size grows to cover the largest
    column and row ever written and is recomputed on every call to
    ``bounds()``, so clearing the grid falls back to the configured size.
    """

    def __init__(self, width: int, height: int, default: T):
        """
        Args:
            width: Minimum width in cells
            height: Minimum height in cells
            default: Value reported for cells that were never written
        """
        if width < 0 or height < 0:
            raise ValueError(f"Grid size must be non-negative, got {width}x{height}")
        self.width = width
        self.height = height
        self.default = default
        self._cells: dict[tuple[int, int], T] = {}

    @classmethod
    def from_pixels(cls, pixel_width: int, pixel_height: int, default: T) -> SparseGrid[T]:
        """Create a grid sized from pixel units (2 pixels wide, 4 pixels tall per cell)."""
        if pixel_width < 0 or pixel_height < 0:
            raise ValueError(f"Pixel size must be non-negative, got {pixel_width}x{pixel_height}")
        return cls(pixel_width // 2, pixel_height // 4, default)

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, pos: tuple[int, int]) -> bool:
        return pos in self._cells

    def get(self, col: int, row: int) -> T | None:
        """Get the stored cell, or None if it was never written."""
        return self._cells.get((col, row))

    def lookup(self, col: int, row: int) -> T:
        """Get the stored cell, or the default if it was never written."""
        return self._cells.get((col, row), self.default)

    def put(self, col: int, row: int, value: T) -> None:
        """Store a cell, growing the effective bounds if needed."""
        self._cells[(col, row)] = value

    def clear(self) -> None:
        """Remove every stored cell. Configured size is kept."""
        self._cells.clear()

    def bounds(self) -> tuple[int, int]:
        """Return the largest (column, row) to render."""
        max_col = max((col for col, _ in self._cells), default=0)
        max_row = max((row for _, row in self._cells), default=0)
        return max(self.width, max_col), max(self.height, max_row)

    def rows(self) -> Iterator[list[T]]:
        """Iterate over rows from 0 to the effective height, inclusive."""
        max_col, max_row = self.bounds()
        for row in range(max_row + 1):
            yield [self.lookup(col, row) for col in range(max_col + 1)]

    def cells(self) -> Iterator[tuple[int, int, T]]:
        """Iterate over stored cells as (col, row, cell) tuples."""
        for (col, row), cell in self._cells.items():
            yield col, row, cell
