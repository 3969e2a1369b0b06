import pytest

from smithchess.board import Board
from smithchess.game import (
    ParsedMove,
    get_possible_moves,
    handle_frame,
    main,
    move,
    parse,
    read_file,
)
from smithchess.interface import Interface
from smithchess.pieces import Pawn
from smithchess.position import Position


def sq(row, col):
    return Position(row, col).location


# Pawn cases


def test_pawn_blocked():
    board = Board()
    p = Pawn(3, 3, True)
    board.place_piece(p)
    board.place_piece(Pawn(4, 3, False))
    assert get_possible_moves(board, p.position.location) == set()


def test_pawn_simple_move():
    board = Board()
    p = Pawn(2, 3, True)
    board.place_piece(p)
    assert get_possible_moves(board, p.position.location) == {27}


def test_pawn_initial_move():
    board = Board()
    p = Pawn(1, 3, True)
    board.place_piece(p)
    assert get_possible_moves(board, p.position.location) == {19, 27}


def test_pawn_capture():
    board = Board()
    p = Pawn(5, 1, True)
    board.place_piece(p)
    for col in (0, 1, 2):
        board.place_piece(Pawn(6, col, False))
    assert get_possible_moves(board, p.position.location) == {48, 50}


def test_pawn_en_passant():
    board = Board()
    p = Pawn(4, 4, True)
    target = Pawn(4, 3, False)
    target.n_moves = 1
    board.place_piece(p)
    board.place_piece(target)
    moves = get_possible_moves(board, sq(4, 4))
    assert moves == {sq(5, 4), sq(5, 3)}
    assert move(board, sq(4, 4), sq(5, 3)) is True
    assert board[sq(4, 3)] is None
    assert board[sq(5, 3)] is p


def test_pawn_promotion_by_capture():
    board = Board()
    board.place_piece(Pawn(6, 1, True))
    assert move(board, sq(6, 1), sq(7, 0)) is True
    promoted = board[sq(7, 0)]
    assert promoted.letter == "q"
    assert promoted.white is True


# get_possible_moves / move


def test_possible_moves_empty_square_and_off_board():
    board = Board()
    assert get_possible_moves(board, sq(3, 3)) == set()
    assert get_possible_moves(board, -1) == set()
    assert get_possible_moves(board, 64) == set()


def test_move_without_selection_returns_false():
    board = Board()
    assert move(board, -1, sq(3, 4)) is False
    assert move(board, sq(1, 4), -1) is False


def test_move_off_board_raises():
    board = Board()
    with pytest.raises(ValueError):
        move(board, 70, sq(3, 4))
    with pytest.raises(ValueError):
        move(board, sq(1, 4), -5)


def test_illegal_move_leaves_board_unchanged():
    board = Board()
    pawn = board[sq(1, 4)]
    assert move(board, sq(1, 4), sq(4, 4)) is False
    assert board[sq(1, 4)] is pawn
    assert board[sq(4, 4)] is None


def test_castle_king_side_through_move():
    board = Board()
    board.remove_piece(sq(0, 5))
    board.remove_piece(sq(0, 6))
    assert move(board, sq(0, 4), sq(0, 6)) is True
    assert board[sq(0, 6)].letter == "k"
    assert board[sq(0, 5)].letter == "r"
    assert board[sq(0, 7)] is None


# parse


def test_parse_simple_move():
    parsed = parse("e2e4")
    assert parsed.position_from == sq(1, 4)
    assert parsed.position_to == sq(3, 4)
    assert parsed.capture == " "
    assert parsed.promotion == " "
    assert parsed.is_valid


def test_parse_capture_and_en_passant():
    parsed = parse("e5d6pE")
    assert parsed.capture == "p"
    assert parsed.en_passant is True
    assert parsed.castle_king is False


def test_parse_castles_and_promotion():
    assert parse("e1g1c").castle_king is True
    assert parse("e1c1C").castle_queen is True
    assert parse("a7a8Q").promotion == "Q"


def test_parse_off_board():
    parsed = parse("a9a1")
    assert parsed == ParsedMove(-1, -1)
    assert not parsed.is_valid


def test_parse_too_short():
    with pytest.raises(ValueError):
        parse("e2")


# read_file


def test_read_file_plays_moves(tmp_path):
    path = tmp_path / "game.txt"
    path.write_text("e2e4 e7e5\ng1f3\n")
    board = Board()
    assert read_file(path, board) == 3
    assert board[sq(3, 4)].letter == "p"
    assert board[sq(4, 4)].letter == "p"
    assert board[sq(2, 5)].letter == "n"


def test_read_file_stops_at_illegal_move(tmp_path):
    path = tmp_path / "game.txt"
    path.write_text("e2e5 e7e5")
    board = Board()
    assert read_file(path, board) == 0
    assert board[sq(6, 4)].letter == "p"


def test_read_file_missing(tmp_path):
    board = Board()
    assert read_file(tmp_path / "absent.txt", board) == 0
    assert sum(1 for _ in board.pieces()) == 32


# handle_frame


def test_handle_frame_select_then_move():
    board = Board()
    ui = Interface()
    ui.set_select_position(sq(1, 4))
    assert handle_frame(ui, board) == {sq(2, 4), sq(3, 4)}
    ui.set_select_position(sq(3, 4))
    assert handle_frame(ui, board) == set()
    assert ui.select_position == -1
    assert board[sq(3, 4)].letter == "p"
    assert board[sq(1, 4)] is None


def test_handle_frame_empty_square_clears_selection():
    board = Board()
    ui = Interface()
    ui.set_select_position(sq(4, 4))
    assert handle_frame(ui, board) == set()
    assert ui.select_position == -1
    assert ui.previous_position == -1


# main


def test_main_prints_start_position(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "+---a-b-c-d-e-f-g-h---+" in out
    assert "1   r n b q k b n r   1" in out


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "game.txt"
    path.write_text("e2e4")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "2   p p p p   p p p   2" in out