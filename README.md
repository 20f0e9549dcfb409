# jeuechecs

A small two-player chess board for the desktop. Both players share one
window. To move a piece, drag it onto a square. The program keeps track of
whose turn it is and refuses any move that would leave the mover's own king
attacked. A "Reset Board" button puts every piece back in its starting place.

## Rules it knows

Only the piece movements are implemented:

- A pawn steps one square forward onto an empty square and captures one
  square diagonally forward. A pawn that has not moved yet may also go two
  squares forward if the destination square is empty. The square in between
  is not checked.
- Knights, bishops, rooks, queens and kings move and capture as usual.
  Sliding pieces stop at the first occupied square.

A move is refused when it is not the piece's side to move, when the piece
cannot reach the target square, or when the move would leave that side's
king on a square the other side can move to.

The game does not support castling, en passant or promotion. It does not
detect checkmate or stalemate, and it has no move history, undo or saving of
games.

## Installing

```
pip install .
```

The window is drawn with Tkinter, which ships with most Python builds. The
pieces are drawn as Unicode chess glyphs.

## Playing

```
jeuechecs
```

The command takes no options besides `--help`. White moves first. The label
under the board shows "White turn" or "Black turn".

## Using the game model

The rules live apart from the window, in `jeuechecs.game`:

```python
from jeuechecs.game import ChessGame

game = ChessGame()
print(game.turn_text())            # "White turn"
print(game.legal_targets((6, 4)))  # squares the white e-pawn can reach
game.move((6, 4), (4, 4))          # True if the move was played
print(game.piece_at(4, 4))
```

Positions are `(row, col)` pairs. Row 0 is Black's back rank, and row 7 is
White's.

- `ChessGame(empty=True)` starts with an empty board. `reset()` sets up the
  starting position with White to move, and `clear()` removes every piece.
- `add_piece(name, position, is_white)` places a piece and replaces whatever
  stood on that square. A position off the board raises `ValueError`. At
  most two kings may be on the board at once. Adding another raises
  `TooManyKingsError`.
- `remove_piece(position)` takes a piece off and returns it.
- `move(source, target)` returns `False` when the move is refused and raises
  `ValueError` if `source` is empty.
- `pieces(is_white)`, `king(is_white)`, `attacked_squares(by_white)` and
  `change_turn()` give access to the rest of the state.

The pieces themselves are in `jeuechecs.pieces`. `piece_class(name)` maps a
name such as `"Queen"` to its class. Any unknown name gives `King`. Each
piece's `calculate_moves(board)` lists the squares it can reach on any object
that has a `piece_at(row, col)` method.

The window is `jeuechecs.gui.ChessWindow`. That module also has the helpers
`square_color`, `square_at` and `piece_symbol`.

## Running the tests

```
pip install .[test]
pytest
```