"""Board state and rules for a game of noughts and crosses."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator

BOARD_SIZE = 3


class Player(enum.Enum):
    """The occupant of a cell, or whose turn it is."""

    X = "X"
    O = "O"  # noqa: E741
    NONE = "None"

    def __str__(self) -> str:
        return self.value

    def next(self) -> Player:
        """The player who moves after this one; NONE stays NONE."""
        return {Player.X: Player.O, Player.O: Player.X}.get(self, Player.NONE)

    def is_none(self) -> bool:
        return self is Player.NONE


@dataclass(frozen=True, order=True)
class Coordinate:
    """A cell position on the board."""

    row: int
    col: int


def _empty_grid() -> list[list[Player]]:
    return [[Player.NONE] * BOARD_SIZE for _ in range(BOARD_SIZE)]


@dataclass
class Board:
    """A square grid of cells, each empty or taken by a player."""

    grid: list[list[Player]] = field(default_factory=_empty_grid)

    @staticmethod
    def _check(coordinate: Coordinate) -> None:
        if not (0 <= coordinate.row < BOARD_SIZE and 0 <= coordinate.col < BOARD_SIZE):
            raise IndexError(f"{coordinate} is outside the board")

    def get(self, coordinate: Coordinate) -> Player:
        """Return the occupant of the cell."""
        self._check(coordinate)
        return self.grid[coordinate.row][coordinate.col]

    def is_empty(self, coordinate: Coordinate) -> bool:
        return self.get(coordinate).is_none()

    def place(self, coordinate: Coordinate, player: Player) -> None:
        """Put a player's mark into an empty cell."""
        if player.is_none():
            raise ValueError("cannot place an empty mark")
        if not self.is_empty(coordinate):
            raise ValueError(f"cell {coordinate} is already taken")
        self.grid[coordinate.row][coordinate.col] = player

    def _lines(self) -> Iterator[list[Player]]:
        yield from (list(row) for row in self.grid)
        yield from (list(col) for col in zip(*self.grid))
        yield [self.grid[i][i] for i in range(BOARD_SIZE)]
        yield [self.grid[i][BOARD_SIZE - 1 - i] for i in range(BOARD_SIZE)]

    def winner(self) -> Player | None:
        """The player holding a full row, column or diagonal, if any."""
        for line in self._lines():
            first = line[0]
            if not first.is_none() and all(cell is first for cell in line):
                return first
        return None

    def is_draw(self) -> bool:
        """True when every cell is taken."""
        return all(not cell.is_none() for row in self.grid for cell in row)


@dataclass(frozen=True)
class GameResult:
    """How a game ended: a winner, or a draw when winner is None."""

    winner: Player | None = None

    def message(self) -> str:
        if self.winner is None:
            return "draw..."
        return f"{self.winner} wins!"