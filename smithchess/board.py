"""The chess board: an 8x8 grid of pieces and the rules for moving them."""

from __future__ import annotations

from typing import Iterator, Optional, Union

from .pieces import Bishop, King, Knight, Pawn, Piece, Queen, Rook
from .position import BOARD_SIZE, Position

_SQUARES = BOARD_SIZE * BOARD_SIZE

# Back-rank layout from the a-file to the h-file.
_BACK_RANK = (Rook, Knight, Bishop, Queen, King, Bishop, Knight, Rook)


class Board:
    """Holds every piece in play, indexed by location 0..63 (a1 = 0, h8 = 63)."""

    def __init__(self) -> None:
        self.current_move = 0
        self._squares: list[Optional[Piece]] = [None] * _SQUARES
        for col, piece_type in enumerate(_BACK_RANK):
            self.place_piece(piece_type(0, col, True))
            self.place_piece(piece_type(BOARD_SIZE - 1, col, False))
        for col in range(BOARD_SIZE):
            self.place_piece(Pawn(1, col, True))
            self.place_piece(Pawn(BOARD_SIZE - 2, col, False))

    @staticmethod
    def _location(position: Union[Position, int]) -> int:
        location = position.location if isinstance(position, Position) else position
        if not 0 <= location < _SQUARES:
            raise IndexError(f"location {location} is off the board")
        return location

    def __getitem__(self, position: Union[Position, int]) -> Optional[Piece]:
        """Return the piece on a square, or None if the square is empty."""
        return self._squares[self._location(position)]

    def pieces(self) -> Iterator[Piece]:
        """Yield every piece on the board in location order."""
        return (piece for piece in self._squares if piece is not None)

    def place_piece(self, piece: Piece) -> None:
        """Put a piece on the square its own position names."""
        self._squares[self._location(piece.position.location)] = piece

    def remove_piece(self, pos: int) -> None:
        """Take whatever stands on a square off the board."""
        self._squares[self._location(pos)] = None

    def replace(self, piece: Piece, pos: int) -> None:
        """Remove the piece at pos and put a new piece on the board."""
        self.remove_piece(pos)
        self.place_piece(piece)

    def execute_move(self, position_from: int, position_to: int) -> None:
        """Move a piece, handling en passant, castling and promotion."""
        from_loc = self._location(position_from)
        to_loc = self._location(position_to)
        piece = self._squares[from_loc]
        if piece is None:
            raise ValueError(f"no piece at location {from_loc}")

        from_row, from_col = divmod(from_loc, BOARD_SIZE)
        to_row, to_col = divmod(to_loc, BOARD_SIZE)

        # A pawn moving diagonally onto an empty square takes en passant.
        if piece.letter == "p" and from_col != to_col and self._squares[to_loc] is None:
            self._squares[from_row * BOARD_SIZE + to_col] = None

        piece.position.set(to_row, to_col)
        self.place_piece(piece)
        piece.increase_moves()

        # A king moving two squares castles; bring the rook across.
        if piece.letter == "k":
            if from_loc - to_loc == 2:
                self.execute_move(to_loc - 2, to_loc + 1)
            elif to_loc - from_loc == 2:
                self.execute_move(to_loc + 1, to_loc - 1)

        self._squares[from_loc] = None

        landed = self._squares[to_loc]
        if landed is not None and landed.check_for_promotion():
            self.replace(Queen(to_row, to_col, landed.white), to_loc)

    def __repr__(self) -> str:
        return f"Board({sum(1 for _ in self.pieces())} pieces)"