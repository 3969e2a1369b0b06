"""Playing a game: move validation, Smith-notation parsing and the command line."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

from .board import Board
from .interface import NO_POSITION, Interface
from .position import BOARD_SIZE
from .render import render_text

_SQUARES = BOARD_SIZE * BOARD_SIZE
_CAPTURES = frozenset("pnbrqk")
_PROMOTIONS = frozenset("NBRQ")


@dataclass(frozen=True)
class ParsedMove:
    """One move in Smith notation, such as ``e5d6pE`` or ``e1g1c``.

    Locations are 0..63, or -1 for both when the text names a square
    off the board. A blank ``capture`` or ``promotion`` means none.
    """

    position_from: int
    position_to: int
    capture: str = " "
    promotion: str = " "
    castle_king: bool = False
    castle_queen: bool = False
    en_passant: bool = False

    @property
    def is_valid(self) -> bool:
        return self.position_from != NO_POSITION and self.position_to != NO_POSITION


def get_possible_moves(board: Board, location: int) -> set[int]:
    """The locations the piece on a square may move to; empty if there is none."""
    if not 0 <= location < _SQUARES:
        return set()
    piece = board[location]
    if piece is None:
        return set()
    return piece.get_moves(board)


def move(board: Board, position_from: int, position_to: int) -> bool:
    """Make one move if it is among the piece's possible moves.

    Returns False when no move was indicated (either end is -1) or the
    move is not allowed. Raises ValueError for other off-board locations.
    """
    if position_from == NO_POSITION or position_to == NO_POSITION:
        return False
    for location in (position_from, position_to):
        if not 0 <= location < _SQUARES:
            raise ValueError(f"location {location} is off the board")
    if position_to in get_possible_moves(board, position_from):
        board.execute_move(position_from, position_to)
        return True
    return False


def _square(file_char: str, rank_char: str) -> int:
    return (ord(rank_char) - ord("1")) * BOARD_SIZE + (ord(file_char) - ord("a"))


def parse(text_move: str) -> ParsedMove:
    """Read a move written in Smith notation."""
    if len(text_move) < 4:
        raise ValueError(f"move {text_move!r} is too short")
    position_from = _square(text_move[0], text_move[1])
    position_to = _square(text_move[2], text_move[3])

    capture = " "
    promotion = " "
    castle_king = castle_queen = en_passant = False
    for char in text_move[4:]:
        if char in _CAPTURES:
            capture = char.lower()
        elif char == "c":
            castle_king = True
        elif char == "C":
            castle_queen = True
        elif char == "E":
            en_passant = True
        elif char in _PROMOTIONS:
            promotion = char

    if not (0 <= position_from < _SQUARES and 0 <= position_to < _SQUARES):
        position_from = position_to = NO_POSITION

    return ParsedMove(
        position_from=position_from,
        position_to=position_to,
        capture=capture,
        promotion=promotion,
        castle_king=castle_king,
        castle_queen=castle_queen,
        en_passant=en_passant,
    )


def read_file(file_name: Union[str, Path], board: Board) -> int:
    """Play the moves in a file until one is not allowed.

    Returns how many moves were made; a file that cannot be read makes none.
    """
    try:
        text = Path(file_name).read_text()
    except OSError:
        return 0
    applied = 0
    for token in text.split():
        try:
            parsed = parse(token)
        except ValueError:
            break
        if not move(board, parsed.position_from, parsed.position_to):
            break
        applied += 1
    return applied


def handle_frame(ui: Interface, board: Board) -> set[int]:
    """Act on the current selection and return the squares to mark as possible.

    If the previous and current selections form an allowed move it is made
    and the selection cleared; otherwise the moves of the selected piece
    are returned. Selecting an empty square clears the selection.
    """
    possible: set[int] = set()
    if move(board, ui.previous_position, ui.select_position):
        ui.clear_select_position()
    else:
        possible = get_possible_moves(board, ui.select_position)

    selected = ui.select_position
    if selected != NO_POSITION and 0 <= selected < _SQUARES and board[selected] is None:
        ui.clear_select_position()
    return possible


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Set up a board, play the moves of an optional file and print the result."""
    parser = argparse.ArgumentParser(
        prog="smithchess",
        description="Play a chess game written in Smith notation.",
    )
    parser.add_argument("file", nargs="?", help="file of moves in Smith notation")
    args = parser.parse_args(argv)

    board = Board()
    if args.file is not None:
        read_file(args.file, board)
    print(render_text(board))
    return 0