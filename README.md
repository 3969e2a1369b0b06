# smithchess

A compact chess board model. It provides:

- the standard starting position, on squares numbered 0 (a1) to 63 (h8);
- move generation for every piece, including the pawn's double step,
  en passant and castling;
- automatic promotion of a pawn to a queen when it reaches the last rank;
- reading games written in Smith notation (`e2e4`, `e7e5`, `e1g1c`, ...);
- a text rendering of the board, with the reachable squares marked.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

```
smithchess game.txt
```

This reads the moves in `game.txt`, one Smith-notation move per
whitespace-separated word. The moves are applied in order. Reading stops at
the first move that cannot be parsed or is not among the moving piece's
possible moves. The resulting board is then printed as text. White pieces
are shown in lower case and black pieces in upper case. Without a file
argument the program prints the starting position. A file that cannot be
read leaves the board at the starting position.

## Library use

```python
from smithchess.board import Board
from smithchess.game import get_possible_moves, move, parse
from smithchess.render import render_text

board = Board()
print(sorted(get_possible_moves(board, 12)))   # pawn on e2 -> [20, 28]

parsed = parse("e2e4")
move(board, parsed.position_from, parsed.position_to)   # True
print(render_text(board))
```

Squares are numbered row by row from White's side. Square `row * 8 + col`
has row 0 as rank 1 and column 0 as file a.

- `smithchess.position`: `Position` (a square with `row`, `column` and
  `location`) and `is_valid(row, col)`.
- `smithchess.pieces`: `Piece` and its subclasses `Pawn`, `King`, `Queen`,
  `Rook`, `Bishop` and `Knight`. Each has `get_moves(board)`, which returns
  a set of locations.
- `smithchess.board`: `Board`. It supports indexing by location or
  `Position`, and has `pieces()`, `place_piece`, `remove_piece`, `replace`
  and `execute_move`.
- `smithchess.game`: `parse` (returns a `ParsedMove`), `move`,
  `get_possible_moves`, `read_file`, `handle_frame` and `main`.
- `smithchess.render`: `render_text`, and the screen geometry of squares
  and pieces as `Quad` values (`board_squares`, `piece_quads`,
  `selected_quad`, `hover_quads`, `possible_quad`, `x_from_position`,
  `y_from_position`).
- `smithchess.interface`: `Interface`, which keeps the selection, hover
  position, window size and frame rate of a board driven by the mouse
  (`click`, `hover`, `position_from_xy`, ...).

## What it does not do

- It opens no window and draws nothing on screen. `smithchess.render`
  computes the coordinates and colours of the shapes. `Interface` and
  `handle_frame` keep the click-to-move state. Displaying either is left to
  the caller.
- It does not enforce turn order. It does not detect check, checkmate or
  stalemate.
- `parse` records the capture, castling, en passant and promotion markers
  of a Smith move. Moves are still made from their two squares alone, and
  a pawn that reaches the last rank always becomes a queen.