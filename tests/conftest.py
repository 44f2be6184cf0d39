"""Shared pytest fixtures."""

import logging
from typing import Iterator

import pytest
from typer.testing import CliRunner

from termcanvas.draw.block_canvas import BlockCanvas
from termcanvas.draw.dot_canvas import DotCanvas
from termcanvas.draw.turtle import Turtle


@pytest.fixture
def block_canvas() -> BlockCanvas:
    """A 4x8 pixel block canvas (2x2 cells configured)."""
    return BlockCanvas(4, 8)


@pytest.fixture
def dot_canvas() -> DotCanvas:
    """A 4x8 pixel dot canvas (2x2 cells configured)."""
    return DotCanvas(4, 8)


@pytest.fixture
def turtle() -> Turtle:
    """A turtle at the origin with its brush down, facing right."""
    return Turtle(0, 0)


@pytest.fixture
def restore_root_handlers() -> Iterator[None]:
    """Remove any handler a test adds to the root logger."""
    root = logging.getLogger()
    before = list(root.handlers)
    yield
    for handler in root.handlers[:]:
        if handler not in before:
            root.removeHandler(handler)
            handler.close()


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()
