"""Window geometry, sizes and colours of the game screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from tictactoe.model import BOARD_SIZE, Coordinate, Player

WINDOW_WIDTH = 700
WINDOW_HEIGHT = 800

CELL_SIZE = 120.0
CELL_PADDING = 10.0
BOARD_DIMENSION = BOARD_SIZE * CELL_SIZE + (BOARD_SIZE - 1) * CELL_PADDING

FONT_SIZE_CELL = 100.0
FONT_SIZE_MESSAGE = 60.0


def _rgb(r: float, g: float, b: float) -> tuple[int, int, int]:
    return (round(r * 255), round(g * 255), round(b * 255))


CLEAR_COLOR = (43, 44, 47)
COLOR_BOARD = _rgb(0.2, 0.2, 0.2)
COLOR_X = _rgb(0.9, 0.2, 0.2)
COLOR_O = _rgb(0.2, 0.2, 0.9)
COLOR_CELL = _rgb(0.4, 0.4, 0.4)
COLOR_CELL_HOVER = _rgb(0.5, 0.5, 0.5)
COLOR_MESSAGE = (255, 255, 255)

MARK_COLORS = {Player.X: COLOR_X, Player.O: COLOR_O}


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in window pixels."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, x: float, y: float) -> bool:
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height


def board_rect(window_width: float = WINDOW_WIDTH, window_height: float = WINDOW_HEIGHT) -> Rect:
    """The board, centred in the window."""
    return Rect(
        (window_width - BOARD_DIMENSION) / 2,
        (window_height - BOARD_DIMENSION) / 2,
        BOARD_DIMENSION,
        BOARD_DIMENSION,
    )


def cell_rect(
    coordinate: Coordinate,
    window_width: float = WINDOW_WIDTH,
    window_height: float = WINDOW_HEIGHT,
) -> Rect:
    """The rectangle of one cell inside the board."""
    board = board_rect(window_width, window_height)
    step = CELL_SIZE + CELL_PADDING
    return Rect(board.x + coordinate.col * step, board.y + coordinate.row * step, CELL_SIZE, CELL_SIZE)


def iter_coordinates() -> Iterator[Coordinate]:
    """Every cell, row by row."""
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            yield Coordinate(row, col)


def cell_at(
    x: float,
    y: float,
    window_width: float = WINDOW_WIDTH,
    window_height: float = WINDOW_HEIGHT,
) -> Coordinate | None:
    """The cell under a point, or None for padding and outside the board."""
    return next(
        (c for c in iter_coordinates() if cell_rect(c, window_width, window_height).contains(x, y)),
        None,
    )