# tictacnegro

Tic-tac-toe for two players at one terminal, played with pieces of three sizes.
Each player starts with two small, two medium and two large pieces. A piece can
be put on an empty square or on a piece smaller than it, which takes over that
square. Three squares in a row, column or diagonal win.

The prompts and messages of the game are in Spanish.

## Installing

```
pip install .
```

## Playing

```
tictacnegro
```

The main game draws the board as a picture on an 11x11 character grid. Each
turn asks for a square (1 to 9, read left to right, top to bottom) and then a
size:

```
[1] large
[2] medium
[3] small
```

A square outside 1-9 is asked for again. A move is refused, and the turn starts
over, if the square holds one of your own pieces, if your piece is not bigger
than the one already there, or if you have no pieces left of that size. The
match ends when someone has three in a line, or with no winner when the board
is full or the player to move has no legal move left. Afterwards you are asked
whether to play again: `0` starts a new match, any other number quits.

Two other versions of the game are included:

```
tictacnegro-redux
```

plays a single game and shows the board as a grid of labels such as `[A2]`
(player A, medium piece) or `[R3]` (player R, large piece). Each turn asks for
a square and a size (1 = small, 2 = medium, 3 = large). Here a larger piece may
also cover one of your own pieces. The game ends with a winner or when every
square is taken.

```
tictacnegro-classic
```

only draws the pieces, with no capture rules and no win check: each player may
still use only two pieces of each size, and a match lasts twelve moves. It then
offers another match in the same way as `tictacnegro`.

None of the commands take options other than `--help`. Entering text that does
not start with a number shows an error and asks again; end of input (Ctrl-D)
quits.

## Using it from Python

The rules live in `tictacnegro.board` and can be used without the terminal:

```python
from tictacnegro.board import Board, InvalidMove, Player, Reserve, Size

board = Board(forbid_own_cover=True)
reserve = Reserve()
board.place(Player.ONE, 5, Size.SMALL, reserve)
print(board.cell(5))          # (<Player.ONE: 1>, <Size.SMALL: 1>)
print(reserve.remaining(Size.SMALL))   # 1
print(board.render())
print(board.winner())         # None
```

- `Board.place` raises `InvalidMove` (a `ValueError`) when a move breaks the
  rules; the board and the reserve are left unchanged.
- `Board.winner()`, `Board.is_full()` and `Board.has_valid_moves(player, reserve)`
  report the state of the game.
- `Board(forbid_own_cover=False)` allows covering your own pieces.
- `Player.other()` gives the opponent.

`tictacnegro.canvas.Canvas` draws pieces as shapes: `draw(quadrant, size, player)`
with a quadrant from 0 to 8, `glyph_at(row, column)` and `render()`.
`tictacnegro.prompts.read_number` is the integer prompt the games use; it takes
an input function and an output stream, so the games can be driven from code:
`tictacnegro.game.play_match`, `tictacnegro.redux.play` and
`tictacnegro.classic.play_match` all accept `input_fn` and `output`.

## What it does not do

There is no computer opponent, no play over a network and no saving or loading
of games: two people take turns at the same terminal.

## Running the tests

```
pip install ".[test]"
pytest
```