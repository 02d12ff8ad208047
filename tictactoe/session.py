"""The running game: turns, results and what the screen should show."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from tictactoe.layout import COLOR_CELL, COLOR_CELL_HOVER
from tictactoe.model import Board, Coordinate, GameResult, Player

RESTART_MESSAGE = "Click to Restart!"


class GameState(enum.Enum):
    PLAYING = enum.auto()
    GAME_OVER = enum.auto()


@dataclass
class Session:
    """One game in progress, restartable after it ends."""

    board: Board = field(default_factory=Board)
    current_turn: Player = Player.X
    state: GameState = GameState.PLAYING
    result: GameResult | None = None
    hovered: Coordinate | None = None

    def reset(self) -> None:
        """Start a fresh game with X to move."""
        self.board = Board()
        self.current_turn = Player.X
        self.state = GameState.PLAYING
        self.result = None
        self.hovered = None

    def _finish(self, result: GameResult) -> None:
        self.result = result
        self.state = GameState.GAME_OVER

    def click_cell(self, coordinate: Coordinate) -> bool:
        """Play the current turn into a cell; return whether a mark was placed."""
        if self.state is not GameState.PLAYING or not self.board.is_empty(coordinate):
            return False
        self.board.place(coordinate, self.current_turn)
        winner = self.board.winner()
        if winner is not None:
            self._finish(GameResult(winner))
        elif self.board.is_draw():
            self._finish(GameResult())
        else:
            self.current_turn = self.current_turn.next()
        return True

    def hover(self, coordinate: Coordinate | None) -> None:
        """Record the cell under the pointer while playing."""
        if self.state is GameState.PLAYING:
            self.hovered = coordinate

    def click_anywhere(self) -> bool:
        """Restart after a finished game; return whether it restarted."""
        if self.state is not GameState.GAME_OVER:
            return False
        self.reset()
        return True

    def cell_color(self, coordinate: Coordinate) -> tuple[int, int, int]:
        return COLOR_CELL_HOVER if coordinate == self.hovered else COLOR_CELL

    def game_over_lines(self) -> list[str]:
        """The result and restart messages, or nothing while playing."""
        if self.state is not GameState.GAME_OVER or self.result is None:
            return []
        return [self.result.message(), RESTART_MESSAGE]