"""Tests for BlockCanvas."""

import pytest

from termcanvas.core.color import Color
from termcanvas.core.pixel import PairPixel, TextCellError, TextPixel
from termcanvas.draw.block_canvas import BlockCanvas
from termcanvas.render.text import TextRenderer

BLANK = "\x1b[0;40m\x1b[30m "
RESET = "\x1b[0m"


class TestBlockCanvas:
    """Tests for drawing on BlockCanvas."""

    def test_dimensions_from_pixels(self, block_canvas: BlockCanvas) -> None:
        assert block_canvas.width == 2
        assert block_canvas.height == 2

    def test_set_get(self, block_canvas: BlockCanvas) -> None:
        block_canvas.set(1, 3, Color.RED)
        assert block_canvas.get(1, 3) is Color.RED
        assert block_canvas.get(1, 2) is Color.BLACK

    @pytest.mark.parametrize("color", list(Color))
    def test_set_get_every_color(self, color: Color) -> None:
        canvas = BlockCanvas()
        canvas.set(6, 5, color)
        assert canvas.get(6, 5) is color

    def test_sub_pixel_halves(self, block_canvas: BlockCanvas) -> None:
        block_canvas.set(0, 0, Color.GREEN)
        block_canvas.set(0, 1, Color.BLUE)
        assert block_canvas.pixel_at(0, 0) == PairPixel(Color.GREEN, Color.BLUE)

    def test_get_unwritten(self, block_canvas: BlockCanvas) -> None:
        assert block_canvas.get(100, 100) is Color.BLACK

    def test_unset(self, block_canvas: BlockCanvas) -> None:
        block_canvas.set(2, 2, Color.YELLOW)
        block_canvas.set(2, 3, Color.CYAN)
        block_canvas.unset(2, 2)
        assert block_canvas.get(2, 2) is Color.BLACK
        assert block_canvas.get(2, 3) is Color.CYAN

    def test_unset_unwritten_creates_pair(self, block_canvas: BlockCanvas) -> None:
        block_canvas.unset(0, 1)
        assert block_canvas.pixel_at(0, 1) == PairPixel(Color.BLACK, Color.BLACK)

    def test_text(self, block_canvas: BlockCanvas) -> None:
        block_canvas.text(2, 4, Color.WHITE, Color.BLUE, "hi")
        assert block_canvas.pixel_at(2, 4) == TextPixel(Color.BLUE, Color.WHITE, "h")
        assert block_canvas.pixel_at(3, 5) == TextPixel(Color.BLUE, Color.WHITE, "i")

    def test_text_replaces_pair(self, block_canvas: BlockCanvas) -> None:
        block_canvas.set(0, 0, Color.RED)
        block_canvas.text(0, 1, Color.GREEN, Color.BLACK, "x")
        assert isinstance(block_canvas.pixel_at(0, 0), TextPixel)

    def test_set_converts_text_cell(self, block_canvas: BlockCanvas) -> None:
        block_canvas.text(0, 0, Color.WHITE, Color.RED, "x")
        block_canvas.set(0, 1, Color.MAGENTA)
        assert block_canvas.pixel_at(0, 0) == PairPixel(Color.BLACK, Color.MAGENTA)

    def test_get_text_cell_raises(self, block_canvas: BlockCanvas) -> None:
        block_canvas.text(0, 0, Color.WHITE, Color.RED, "x")
        with pytest.raises(TextCellError):
            block_canvas.get(0, 0)

    def test_unset_text_cell_raises_without_change(self, block_canvas: BlockCanvas) -> None:
        block_canvas.text(0, 0, Color.WHITE, Color.RED, "x")
        with pytest.raises(TextCellError):
            block_canvas.unset(0, 1)
        assert block_canvas.pixel_at(0, 0) == TextPixel(Color.RED, Color.WHITE, "x")

    def test_text_cell_error_is_type_error(self) -> None:
        assert issubclass(TextCellError, TypeError)

    def test_line(self, block_canvas: BlockCanvas) -> None:
        block_canvas.line(0, 0, 3, 0, Color.GREEN)
        for x in range(4):
            assert block_canvas.get(x, 0) is Color.GREEN
        assert block_canvas.get(4, 0) is Color.BLACK

    def test_zero_length_line(self) -> None:
        canvas = BlockCanvas()
        canvas.line(3, 3, 3, 3, Color.RED)
        assert len(canvas.grid) == 1
        assert canvas.get(3, 3) is Color.RED

    def test_clear(self, block_canvas: BlockCanvas) -> None:
        block_canvas.set(9, 9, Color.RED)
        block_canvas.text(0, 0, Color.WHITE, Color.BLACK, "abc")
        block_canvas.clear()
        assert block_canvas.get(9, 9) is Color.BLACK
        assert block_canvas.get(0, 0) is Color.BLACK
        assert len(block_canvas.rows()) == 3
        assert block_canvas.width == 2


class TestBlockCanvasRender:
    """Tests for BlockCanvas frames."""

    def test_empty_frame(self, block_canvas: BlockCanvas) -> None:
        rows = block_canvas.rows()
        assert rows == [BLANK * 3 + RESET] * 3

    def test_pair_cell(self) -> None:
        canvas = BlockCanvas()
        canvas.set(0, 0, Color.RED)
        canvas.set(0, 1, Color.BLUE)
        assert canvas.frame() == "\x1b[0;41m\x1b[34m▄" + RESET

    def test_text_cell(self) -> None:
        canvas = BlockCanvas()
        canvas.text(0, 0, Color.YELLOW, Color.GREEN, "A")
        assert canvas.frame() == "\x1b[0;42m\x1b[33mA" + RESET

    def test_frame_grows_with_writes(self) -> None:
        canvas = BlockCanvas()
        canvas.set(5, 7, Color.RED)
        rows = canvas.rows()
        assert len(rows) == 4
        assert all(row.endswith(RESET) for row in rows)
        assert rows[0] == BLANK * 6 + RESET

    def test_frame_shrinks_after_clear(self) -> None:
        canvas = BlockCanvas()
        canvas.set(5, 7, Color.RED)
        canvas.clear()
        assert canvas.frame() == BLANK + RESET

    def test_frame_joins_rows(self, block_canvas: BlockCanvas) -> None:
        assert block_canvas.frame() == "\n".join(block_canvas.rows())

    def test_text_renderer(self) -> None:
        canvas = BlockCanvas(renderer=TextRenderer())
        canvas.set(0, 0, Color.RED)
        canvas.set(1, 1, Color.RED)
        canvas.text(2, 0, Color.WHITE, Color.BLACK, "ok")
        assert canvas.frame() == "▀▄ok"
