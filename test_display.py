"""
Tests for the display helpers: board layout, textures, labels.
No window is opened.
"""

import pytest

from display.config import DisplayConfig, to_hex
from display.layout import BoardLayout
from display.symbols import SymbolRenderer, current_symbol_text, winner_text
from logic.board import IndexOutOfRangeError, Mark
from logic.win_checker import Outcome


def test_config_sizes():
    config = DisplayConfig()
    assert config.cell_size == config.SYMBOL_SIZE * config.SYMBOL_SCALE
    assert config.cell_pitch > config.cell_size
    assert to_hex(config.BACKGROUND_COLOR) == "#282c34"
    assert to_hex((255, 0, 16, 255)) == "#ff0010"


def test_center_cell_is_canvas_center():
    layout = BoardLayout(width=600, height=400)
    assert layout.cell_center(4) == pytest.approx((300.0, 200.0))


def test_cells_are_row_major():
    layout = BoardLayout()
    x0, y0 = layout.cell_center(0)
    x2, y2 = layout.cell_center(2)
    x6, y6 = layout.cell_center(6)
    assert x0 < x2 and y0 == pytest.approx(y2)
    assert y0 < y6 and x0 == pytest.approx(x6)


def test_every_center_hits_its_own_cell():
    layout = BoardLayout()
    for index in range(9):
        assert layout.cell_at(*layout.cell_center(index)) == index


def test_gap_and_outside_hit_nothing():
    layout = BoardLayout()
    left, top, right, bottom = layout.cell_bounds(4)
    x, y = layout.cell_center(4)
    # Between cell 4 and cell 5
    assert layout.cell_at(right + 1, y) is None
    assert layout.cell_at(-10, -10) is None
    assert layout.cell_at(layout.width / 2, 0) is None


def test_cell_edges_are_half_open():
    layout = BoardLayout()
    left, top, right, bottom = layout.cell_bounds(0)
    assert layout.cell_at(left, top) == 0
    assert layout.cell_at(right, top) is None


def test_layout_rejects_bad_index():
    with pytest.raises(IndexOutOfRangeError):
        BoardLayout().cell_center(9)


def test_textures_have_cell_size():
    renderer = SymbolRenderer()
    size = int(DisplayConfig().cell_size)
    for mark in Mark:
        image = renderer.get(mark)
        assert image.size == (size, size)
        assert image.mode == "RGBA"


def test_textures_differ_and_are_cached():
    renderer = SymbolRenderer()
    x = renderer.get(Mark.X)
    o = renderer.get(Mark.O)
    empty = renderer.get(Mark.EMPTY)
    assert x.tobytes() != empty.tobytes()
    assert o.tobytes() != empty.tobytes()
    assert x.tobytes() != o.tobytes()
    assert renderer.get(Mark.X) is x
    assert renderer.get(Mark.X, highlighted=True) is not x


def test_empty_texture_is_plain():
    config = DisplayConfig()
    image = SymbolRenderer(config).get(Mark.EMPTY)
    assert image.getcolors() == [(image.width * image.height, config.EMPTY_COLOR)]


def test_labels():
    assert current_symbol_text(Mark.X) == "Current symbol is X"
    assert current_symbol_text(None) == ""
    assert winner_text(Outcome.win(Mark.O)) == "The winner is O!"
    assert winner_text(Outcome.draw()) == "It's a draw!"
    assert winner_text(Outcome.in_progress()) == ""


def test_board_fits_between_control_bars():
    config = DisplayConfig()
    assert config.board_extent <= config.canvas_height
    assert config.board_extent <= config.WINDOW_WIDTH

    layout = BoardLayout(config, config.WINDOW_WIDTH, config.canvas_height)
    for index in range(9):
        left, top, right, bottom = layout.cell_bounds(index)
        assert left >= 0 and right <= config.WINDOW_WIDTH
        assert top >= 0 and bottom <= config.canvas_height
