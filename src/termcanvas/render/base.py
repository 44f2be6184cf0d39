"""Renderer protocol for half-block canvases."""

from typing import Protocol, runtime_checkable

from termcanvas.core.pixel import Pixel


@runtime_checkable
class CellRenderer(Protocol):
    """Strategy that turns one row of canvas cells into a display string."""

    name: str

    def render_cell(self, pixel: Pixel) -> str:
        """Encode a single cell."""
        ...

    def render_row(self, row: list[Pixel]) -> str:
        """Encode a full row, including any line terminator."""
        ...
