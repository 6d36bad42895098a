"""Tests for the visitation accumulator."""

from chesshue.core.enums import Color, PieceType
from chesshue.core.models import SquareVisit
from chesshue.core.types import parse_square
from chesshue.notation.pgn import normalize_pgn, normalize_sans
from chesshue.visual.accumulator import accumulate


def test_single_move_game() -> None:
    board = accumulate(normalize_pgn("1. e4"))

    e4 = board.by_name("e4")
    assert e4.visits == (SquareVisit(PieceType.PAWN, Color.WHITE, 1),)
    assert sum(1 for sq in board if sq.visits) == 1
    assert board.total_moves == 1


def test_visit_count_matches_plies_plus_castles(opera_pgn: str) -> None:
    moves = normalize_pgn(opera_pgn)
    castles = sum(1 for m in moves if m.castle is not None)
    board = accumulate(moves)
    assert castles == 1
    assert board.total_visits == len(moves) + castles


def test_castling_adds_king_then_rook() -> None:
    board = accumulate(normalize_sans(["e4", "e5", "Nf3", "Nc6", "Bc4", "Bc5", "O-O"]))
    assert board.by_name("g1").visits == (SquareVisit(PieceType.KING, Color.WHITE, 7),)
    assert board.by_name("f1").visits[-1] == SquareVisit(PieceType.ROOK, Color.WHITE, 7)


def test_captures_extend_history(opera_pgn: str) -> None:
    board = accumulate(normalize_pgn(opera_pgn))
    # e5: black pawn (2), white pawn dxe5 (7), black pawn dxe5 (10)
    assert [v.move_number for v in board.by_name("e5").visits] == [2, 7, 10]
    assert board.by_name("e5").visits[1].color is Color.WHITE


def test_move_numbers_non_decreasing_per_square(opera_pgn: str) -> None:
    board = accumulate(normalize_pgn(opera_pgn))
    for square in board:
        numbers = [v.move_number for v in square.visits]
        assert numbers == sorted(numbers)


def test_origins_are_not_recorded() -> None:
    board = accumulate(normalize_sans(["Nf3"]))
    assert board.by_name("g1").visits == ()
    assert board[parse_square("f3")].visits[0].piece_type is PieceType.KNIGHT


def test_pure_and_repeatable(opera_pgn: str) -> None:
    moves = normalize_pgn(opera_pgn)
    assert accumulate(moves) == accumulate(moves)


def test_empty_move_list() -> None:
    board = accumulate([])
    assert board.total_visits == 0
    assert board.total_moves == 0
