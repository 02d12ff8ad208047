import pytest

from tictactoe.layout import (
    BOARD_DIMENSION,
    CELL_PADDING,
    CELL_SIZE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Rect,
    board_rect,
    cell_at,
    cell_rect,
    iter_coordinates,
)
from tictactoe.model import BOARD_SIZE, Coordinate


def test_rect_contains_is_half_open():
    rect = Rect(10, 20, 5, 5)
    assert rect.contains(10, 20)
    assert rect.contains(14.9, 24.9)
    assert not rect.contains(15, 20)
    assert not rect.contains(10, 25)
    assert not rect.contains(9.9, 22)


def test_board_dimension_matches_cells_and_padding():
    rect = board_rect(WINDOW_WIDTH, WINDOW_HEIGHT)
    assert rect.width == 380
    assert rect.height == 380
    assert BOARD_DIMENSION == 380
    first = cell_rect(Coordinate(0, 0))
    second = cell_rect(Coordinate(0, 1))
    assert first.width == CELL_SIZE
    assert second.x - (first.x + first.width) == CELL_PADDING


def test_board_is_centred():
    rect = board_rect(WINDOW_WIDTH, WINDOW_HEIGHT)
    assert rect.x * 2 + rect.width == WINDOW_WIDTH
    assert rect.y * 2 + rect.height == WINDOW_HEIGHT
    assert rect.width == BOARD_DIMENSION


def test_iter_coordinates_row_major():
    coords = list(iter_coordinates())
    assert len(coords) == BOARD_SIZE * BOARD_SIZE
    assert coords == sorted(coords)
    assert coords[0] == Coordinate(0, 0)
    assert coords[-1] == Coordinate(BOARD_SIZE - 1, BOARD_SIZE - 1)


def test_corner_cells_touch_board_edges():
    board = board_rect()
    first = cell_rect(Coordinate(0, 0))
    last = cell_rect(Coordinate(BOARD_SIZE - 1, BOARD_SIZE - 1))
    assert (first.x, first.y) == (board.x, board.y)
    assert last.x + last.width == board.x + board.width
    assert last.y + last.height == board.y + board.height


@pytest.mark.parametrize("coordinate", list(iter_coordinates()))
def test_cell_at_centre_round_trip(coordinate):
    rect = cell_rect(coordinate)
    assert cell_at(rect.x + rect.width / 2, rect.y + rect.height / 2) == coordinate
    assert cell_at(rect.x, rect.y) == coordinate


def test_padding_and_outside_are_not_cells():
    rect = cell_rect(Coordinate(0, 0))
    gap_x = rect.x + rect.width + CELL_PADDING / 2
    assert cell_at(gap_x, rect.y + 1) is None
    assert cell_at(0, 0) is None
    assert cell_at(WINDOW_WIDTH - 1, WINDOW_HEIGHT - 1) is None


def test_other_window_size_keeps_round_trip():
    coordinate = Coordinate(2, 1)
    rect = cell_rect(coordinate, 1000, 1000)
    assert cell_at(rect.x + 1, rect.y + 1, 1000, 1000) == coordinate
    assert cell_at(rect.x + 1, rect.y + 1) != coordinate