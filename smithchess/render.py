"""Geometry and text rendering of the board, its highlights and its pieces."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Protocol

from .pieces import Piece
from .position import BOARD_SIZE

SQUARE_SIZE = 32
_HALF_SQUARE = SQUARE_SIZE // 2
_SQUARES = BOARD_SIZE * BOARD_SIZE

Color = tuple[int, int, int]
Vertex = tuple[int, int]

# Pieces: white and black.
RGB_WHITE: Color = (255, 255, 255)
RGB_BLACK: Color = (0, 0, 0)

# Normal squares: tan and brown.
RGB_WHITE_SQUARE: Color = (210, 180, 140)
RGB_BLACK_SQUARE: Color = (165, 42, 42)

# A selected, hovered or reachable square.
RGB_SELECTED: Color = (256, 0, 0)

# Each piece is drawn as quadrilaterals given as (x0, y0, x1, y1, x2, y2, x3, y3)
# relative to the centre of its square.
_PIECE_SHAPES: dict[str, tuple[tuple[int, ...], ...]] = {
    "k": (
        (1, 8, -1, 8, -1, 1, 1, 1),        # cross vertical
        (-3, 6, 3, 6, 3, 4, -3, 4),        # cross horizontal
        (-8, 3, -8, -3, -3, -3, -3, 3),    # bump left
        (8, 3, 8, -3, 3, -3, 3, 3),        # bump right
        (5, 1, 5, -5, -5, -5, -5, 1),      # centre column
        (8, -4, -8, -4, -8, -5, 8, -5),    # base centre
        (8, -6, -8, -6, -8, -8, 8, -8),    # base
    ),
    "q": (
        (8, 8, 5, 8, 5, 5, 8, 5),          # right crown jewel
        (-8, 8, -5, 8, -5, 5, -8, 5),      # left crown jewel
        (2, 8, -2, 8, -2, 5, 2, 5),        # centre crown jewel
        (7, 5, 5, 5, 1, 0, 5, 0),          # right crown holder
        (-7, 5, -5, 5, -1, 0, -5, 0),      # left crown holder
        (1, 5, 1, 0, -1, 0, -1, 5),        # centre crown holder
        (4, 0, -4, 0, -4, -2, 4, -2),      # upper base
        (6, -3, -6, -3, -6, -5, 6, -5),    # middle base
        (8, -6, -8, -6, -8, -8, 8, -8),    # base
    ),
    "r": (
        (-8, 7, -8, 4, -4, 4, -4, 7),      # left battlement
        (8, 7, 8, 4, 4, 4, 4, 7),          # right battlement
        (2, 7, 2, 4, -2, 4, -2, 7),        # centre battlement
        (4, 3, 4, -5, -4, -5, -4, 3),      # wall
        (6, -6, -6, -6, -6, -8, 6, -8),    # base
    ),
    "n": (
        (-7, 3, -3, 6, -1, 3, -5, 0),      # muzzle
        (-2, 6, -2, 8, 0, 8, 0, 3),        # head
        (-3, 6, 3, 6, 6, 1, 1, 1),         # main
        (6, 1, 1, 1, -5, -5, 5, -5),       # body
        (6, -6, -6, -6, -6, -8, 6, -8),    # base
    ),
    "b": (
        (-1, 8, -1, 2, 1, 2, 1, 8),        # centre of head
        (1, 8, 1, 2, 5, 2, 5, 5),          # right part of head
        (-4, 5, -4, 2, -2, 2, -2, 6),      # left of head
        (-5, 3, -5, 2, 5, 2, 5, 3),        # base of head
        (-2, 2, -4, -5, 4, -5, 2, 2),      # neck
        (6, -6, -6, -6, -6, -8, 6, -8),    # base
    ),
    "p": (
        (1, 7, -1, 7, -2, 5, 2, 5),        # top of head
        (3, 5, -3, 5, -3, 3, 3, 3),        # bottom of head
        (1, 3, -1, 3, -2, -3, 2, -3),      # neck
        (4, -3, -4, -3, -4, -5, 4, -5),    # base
    ),
}


@dataclass(frozen=True)
class Quad:
    """A filled quadrilateral in screen pixels with its fill colour."""

    vertices: tuple[Vertex, Vertex, Vertex, Vertex]
    color: Color

    @classmethod
    def square(cls, pos: int, inset: int, color: Color) -> Quad:
        """The square at a board location, shrunk by inset pixels on each side."""
        row, col = divmod(pos, BOARD_SIZE)
        left = col * SQUARE_SIZE + inset
        right = (col + 1) * SQUARE_SIZE - inset
        bottom = row * SQUARE_SIZE + inset
        top = (row + 1) * SQUARE_SIZE - inset
        return cls(((left, bottom), (right, bottom), (right, top), (left, top)), color)


class _BoardLike(Protocol):
    def __getitem__(self, location: int) -> Optional[Piece]: ...


def x_from_position(position: int) -> int:
    """Pixel x of the left edge of a board location's square."""
    return (position % BOARD_SIZE) * SQUARE_SIZE


def y_from_position(position: int) -> int:
    """Pixel y of the bottom edge of a board location's square."""
    return (position // BOARD_SIZE) * SQUARE_SIZE


def _on_board(pos: int) -> bool:
    return 0 <= pos < _SQUARES


def _square_color(pos: int) -> Color:
    row, col = divmod(pos, BOARD_SIZE)
    return RGB_BLACK_SQUARE if (row + col) % 2 == 0 else RGB_WHITE_SQUARE


def piece_quads(letter: str, position: int, white: bool) -> list[Quad]:
    """The quadrilaterals that draw a piece of the given letter on a square."""
    try:
        shape = _PIECE_SHAPES[letter.lower()]
    except KeyError:
        raise ValueError(f"unknown piece letter {letter!r}") from None
    cx = x_from_position(position) + _HALF_SQUARE
    cy = y_from_position(position) + _HALF_SQUARE
    color = RGB_WHITE if white else RGB_BLACK
    return [
        Quad(
            (
                (cx + x0, cy + y0),
                (cx + x1, cy + y1),
                (cx + x2, cy + y2),
                (cx + x3, cy + y3),
            ),
            color,
        )
        for x0, y0, x1, y1, x2, y2, x3, y3 in shape
    ]


def board_squares() -> list[Quad]:
    """The 64 checkerboard squares, from a1 row by row to h8."""
    return [Quad.square(pos, 1, _square_color(pos)) for pos in range(_SQUARES)]


def selected_quad(pos: int) -> Optional[Quad]:
    """The highlight for the selected square, or None when off the board."""
    if not _on_board(pos):
        return None
    return Quad.square(pos, 3, RGB_SELECTED)


def hover_quads(pos: int) -> list[Quad]:
    """A highlight frame around the hovered square, or nothing off the board."""
    if not _on_board(pos):
        return []
    return [
        Quad.square(pos, 0, RGB_SELECTED),
        Quad.square(pos, 2, _square_color(pos)),
    ]


def possible_quad(pos: int) -> Optional[Quad]:
    """The marker for a square a piece may move to, or None when off the board."""
    if not _on_board(pos):
        return None
    return Quad.square(pos, 7, RGB_SELECTED)


_FRAME = "+---a-b-c-d-e-f-g-h---+"
_BLANK = "|                     |"


def render_text(board: _BoardLike, possible: Iterable[int] = ()) -> str:
    """Draw the board as text, rank 8 at the top.

    White pieces are lower case, black pieces upper case, and empty squares
    that a piece may move to are marked with a dot.
    """
    reachable = set(possible)
    lines = [_FRAME, _BLANK]
    for row in reversed(range(BOARD_SIZE)):
        cells = []
        for col in range(BOARD_SIZE):
            pos = row * BOARD_SIZE + col
            piece = board[pos]
            if piece is not None:
                cells.append(piece.letter if piece.white else piece.letter.upper())
            elif pos in reachable:
                cells.append(".")
            else:
                cells.append(" ")
        rank = str(row + 1)
        lines.append(f"{rank}   {' '.join(cells)}   {rank}")
    lines.extend((_BLANK, _FRAME))
    return "\n".join(lines)