"""Renderers for turning half-block canvases into display strings."""

import logging

from termcanvas.render.base import CellRenderer
from termcanvas.render.terminal import AnsiRenderer
from termcanvas.render.text import TextRenderer

logger = logging.getLogger(__name__)

RENDERERS: dict[str, type] = {
    AnsiRenderer.name: AnsiRenderer,
    TextRenderer.name: TextRenderer,
}


def get_renderer(name: str) -> CellRenderer:
    """Create a renderer by name ('ansi' or 'text')."""
    try:
        renderer_cls = RENDERERS[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown renderer: {name!r} (expected one of {', '.join(RENDERERS)})") from None
    logger.debug("Using %s renderer", renderer_cls.name)
    return renderer_cls()


__all__ = ["CellRenderer", "AnsiRenderer", "TextRenderer", "RENDERERS", "get_renderer"]
