"""Chess pieces and the squares each of them may move to."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Iterable, Optional, Protocol

from .position import BOARD_SIZE, Position, is_valid

Delta = tuple[int, int]

_KING_DELTAS: tuple[Delta, ...] = (
    (1, -1), (1, 0), (1, 1),
    (0, -1), (0, 1),
    (-1, -1), (-1, 0), (-1, 1),
)
_ROOK_DELTAS: tuple[Delta, ...] = ((1, 0), (0, -1), (0, 1), (-1, 0))
_BISHOP_DELTAS: tuple[Delta, ...] = ((1, -1), (1, 1), (-1, -1), (-1, 1))
_KNIGHT_DELTAS: tuple[Delta, ...] = (
    (2, -1), (2, 1),
    (1, -2), (1, 2),
    (-1, -2), (-1, 2),
    (-2, -1), (-2, 1),
)
_PAWN_DELTAS: tuple[Delta, ...] = ((1, 0),)

_SQUARES = BOARD_SIZE * BOARD_SIZE


class BoardLike(Protocol):
    """Anything that yields the piece on a location index, or None."""

    def __getitem__(self, location: int) -> Optional[Piece]: ...


class Piece(ABC):
    """A piece with a colour, a square and a count of moves made."""

    letter: ClassVar[str] = " "

    def __init__(self, row: int, col: int, white: bool) -> None:
        self.position = Position(row, col)
        self.white = white
        self.n_moves = 0
        self.last_move = 0

    @property
    def unmoved(self) -> bool:
        return self.n_moves == 0

    def increase_moves(self) -> None:
        self.n_moves += 1

    def just_moved(self, current_move: int) -> bool:
        return current_move - 1 == self.last_move

    def check_for_promotion(self) -> bool:
        """Return True for a pawn standing on the far back row."""
        if self.letter != "p":
            return False
        return self.position.row == (BOARD_SIZE - 1 if self.white else 0)

    @abstractmethod
    def get_moves(self, board: BoardLike) -> set[int]:
        """Return the locations this piece may move to."""

    def _on_board(self, board: BoardLike) -> bool:
        location = self.position.location
        return 0 <= location < _SQUARES and board[location] is not None

    def _can_land(self, board: BoardLike, row: int, col: int) -> bool:
        target = board[row * BOARD_SIZE + col]
        if target is None:
            return True
        return target.white != self.white and self.letter != "p"

    def _moves_no_slide(self, board: BoardLike, deltas: Iterable[Delta]) -> set[int]:
        row, col = self.position.row, self.position.column
        moves = set()
        for d_row, d_col in deltas:
            r = row + d_row if self.white else row - d_row
            c = col + d_col
            if is_valid(r, c) and self._can_land(board, r, c):
                moves.add(r * BOARD_SIZE + c)
        return moves

    def _moves_slide(self, board: BoardLike, deltas: Iterable[Delta]) -> set[int]:
        row, col = self.position.row, self.position.column
        moves = set()
        for d_row, d_col in deltas:
            r, c = row + d_row, col + d_col
            while is_valid(r, c) and board[r * BOARD_SIZE + c] is None:
                moves.add(r * BOARD_SIZE + c)
                r += d_row
                c += d_col
            if is_valid(r, c) and self._can_land(board, r, c):
                moves.add(r * BOARD_SIZE + c)
        return moves

    def __repr__(self) -> str:
        colour = "white" if self.white else "black"
        return f"{type(self).__name__}({colour}, {self.position!r})"


class Pawn(Piece):
    letter = "p"

    def get_moves(self, board: BoardLike) -> set[int]:
        if not self._on_board(board):
            return set()
        row, col = self.position.row, self.position.column
        forward = 1 if self.white else -1
        moves = self._moves_no_slide(board, _PAWN_DELTAS)

        # Double step from either pawn rank.
        r = row + 2 * forward
        if row in (1, BOARD_SIZE - 2) and is_valid(r, col) and board[r * BOARD_SIZE + col] is None:
            moves.add(r * BOARD_SIZE + col)

        # Diagonal captures.
        r = row + forward
        for c in (col - 1, col + 1):
            if is_valid(r, c):
                target = board[r * BOARD_SIZE + c]
                if target is not None and target.white != self.white:
                    moves.add(r * BOARD_SIZE + c)

        # En passant against a pawn that has moved exactly once.
        if row == (4 if self.white else 3):
            for c in (col - 1, col + 1):
                if is_valid(row, c):
                    target = board[row * BOARD_SIZE + c]
                    if target is not None and target.letter == "p" and target.n_moves == 1:
                        moves.add((row + forward) * BOARD_SIZE + c)
        return moves


class King(Piece):
    letter = "k"

    def get_moves(self, board: BoardLike) -> set[int]:
        if not self._on_board(board):
            return set()
        moves = self._moves_no_slide(board, _KING_DELTAS)

        if self.n_moves == 0:
            king_pos = 4 if self.white else 60
            rook = board[king_pos - 4]
            if (
                rook is not None
                and all(board[king_pos - i] is None for i in (1, 2, 3))
                and rook.letter == "r"
                and rook.n_moves == 0
            ):
                moves.add(king_pos - 2)
            rook = board[king_pos + 3]
            if (
                rook is not None
                and all(board[king_pos + i] is None for i in (1, 2))
                and rook.letter == "r"
                and rook.n_moves == 0
            ):
                moves.add(king_pos + 2)
        return moves


class Queen(Piece):
    letter = "q"

    def get_moves(self, board: BoardLike) -> set[int]:
        if not self._on_board(board):
            return set()
        return self._moves_slide(board, _KING_DELTAS)


class Rook(Piece):
    letter = "r"

    def get_moves(self, board: BoardLike) -> set[int]:
        if not self._on_board(board):
            return set()
        return self._moves_slide(board, _ROOK_DELTAS)


class Bishop(Piece):
    letter = "b"

    def get_moves(self, board: BoardLike) -> set[int]:
        if not self._on_board(board):
            return set()
        return self._moves_slide(board, _BISHOP_DELTAS)


class Knight(Piece):
    letter = "n"

    def get_moves(self, board: BoardLike) -> set[int]:
        if not self._on_board(board):
            return set()
        return self._moves_no_slide(board, _KNIGHT_DELTAS)