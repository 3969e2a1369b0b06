"""Squares of the chess board, numbered 0..63 from a1 row by row."""

from __future__ import annotations

BOARD_SIZE = 8


def is_valid(row: int, col: int) -> bool:
    """Return True if the row and column both lie on the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


class Position:
    """A square on the board, stored as a single location index."""

    __slots__ = ("location",)

    def __init__(self, row: int = 0, col: int = 0) -> None:
        self.location = 0
        self.set(row, col)

    @classmethod
    def from_location(cls, location: int) -> Position:
        """Build a position straight from a location index."""
        position = cls()
        position.location = location
        return position

    @property
    def row(self) -> int:
        return self.location // BOARD_SIZE

    @property
    def column(self) -> int:
        return self.location % BOARD_SIZE

    def set(self, row: int, col: int) -> None:
        """Move to the given row and column."""
        self.location = row * BOARD_SIZE + col

    def set_row(self, row: int) -> None:
        """Change the row, keeping the column."""
        self.set(row, self.column)

    def set_column(self, col: int) -> None:
        """Change the column, keeping the row."""
        self.set(self.row, col)

    def adjust_row(self, d_row: int) -> None:
        """Shift the row by d_row unless that would leave the board."""
        row = self.row + d_row
        if 0 <= row < BOARD_SIZE:
            self.set(row, self.column)

    def adjust_col(self, d_col: int) -> None:
        """Shift the column by d_col unless that would leave the board."""
        col = self.column + d_col
        if 0 <= col < BOARD_SIZE:
            self.set(self.row, col)

    def copy(self) -> Position:
        return Position.from_location(self.location)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.location == other.location

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Position(row={self.row}, col={self.column})"