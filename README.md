# tictactoe

A two-player tic-tac-toe game for one screen. The players take turns clicking
cells in a pygame window.

## Installing

```
pip install .
```

## Playing

```
tictactoe
```

A 700×800 window opens with a 3×3 board centred in it. X moves first, and the
players take turns after that. To mark an empty cell, click it with the left
mouse button. A cell lightens while the mouse pointer is over it. Clicking a
cell that is already marked does nothing.

The game ends when one player has three marks in a row, a column or a
diagonal. It ends in a draw when the board is full. The result then appears
as "X wins!", "O wins!" or "draw...", with "Click to Restart!" below it. Click
the left mouse button anywhere to start a new game. Close the window to quit.

## Using the game logic

The rules are separate from the window code and can be used on their own:

```python
from tictactoe.model import Board, Coordinate, Player

board = Board()
for col in range(3):
    board.place(Coordinate(0, col), Player.X)
print(board.winner())   # X
print(board.is_draw())  # False
```

`Board.place` raises `ValueError` when the cell is already taken. It raises
`IndexError` when the coordinate is off the board.

`tictactoe.session.Session` holds a whole game: the board, whose turn it is,
the hovered cell, the state (`GameState.PLAYING` or `GameState.GAME_OVER`)
and the result. Drive it with these methods:

- `click_cell(coordinate)` places the current player's mark and returns
  whether a mark was placed.
- `hover(coordinate)` records the cell under the pointer.
- `click_anywhere()` restarts a finished game.

`game_over_lines()` gives the messages to show once the game has ended.

`tictactoe.layout` holds the window geometry. `cell_at(x, y)` maps a pixel
position to the cell under it. `cell_rect` and `board_rect` give the
rectangles to draw.

## Running the tests

```
pip install .[test]
pytest
```