"""Tests for PGN normalization through python-chess."""

import pytest

from chesshue.core.enums import CastleSide, Color, PieceType
from chesshue.core.types import parse_square
from chesshue.notation.pgn import (
    PgnImportError,
    normalize_pgn,
    normalize_sans,
    occupancy_by_ply,
    position_after,
    read_game,
)


class TestReadGame:
    def test_headers_and_sans(self, opera_pgn: str) -> None:
        info, moves = read_game(opera_pgn)
        assert info.white == "Paul Morphy"
        assert info.result == "1-0"
        assert len(moves) == 33
        assert info.sans[0] == "e4"
        assert info.sans[-1] == "Rd8#"

    def test_plies_are_one_indexed_and_alternate(self, opera_pgn: str) -> None:
        _info, moves = read_game(opera_pgn)
        assert [m.move_number for m in moves] == list(range(1, 34))
        assert moves[0].color is Color.WHITE
        assert moves[1].color is Color.BLACK

    def test_queenside_castle_reports_rook(self, opera_pgn: str) -> None:
        _info, moves = read_game(opera_pgn)
        castle = moves[22]
        assert castle.san == "O-O-O"
        assert castle.castle is CastleSide.QUEENSIDE
        assert castle.piece_type is PieceType.KING
        assert castle.target_square == parse_square("c1")
        assert castle.rook_target == parse_square("d1")

    def test_capture_flag(self, opera_pgn: str) -> None:
        _info, moves = read_game(opera_pgn)
        assert moves[6].san == "dxe5"
        assert moves[6].is_capture
        assert not moves[0].is_capture

    def test_empty_text_raises(self) -> None:
        with pytest.raises(PgnImportError):
            read_game("")

    def test_illegal_move_raises(self) -> None:
        with pytest.raises(PgnImportError):
            read_game("1. e4 e5 2. Ke3 Nf6")


class TestDegradation:
    def test_normalize_pgn_swallows_errors(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        assert normalize_pgn("1. e5 e4") == []
        assert "empty move list" in caplog.text

    def test_normalize_pgn_returns_descriptors(self) -> None:
        moves = normalize_pgn("1. e4")
        assert len(moves) == 1
        assert moves[0].target_square == parse_square("e4")

    def test_normalize_sans_rejects_illegal_list(self) -> None:
        assert normalize_sans(["e4", "e4"]) == []


def test_promotion_recorded_as_pawn() -> None:
    moves = normalize_sans(
        ["a4", "h5", "a5", "h4", "a6", "h3", "axb7", "hxg2", "bxa8=Q"]
    )
    promo = moves[-1]
    assert promo.piece_type is PieceType.PAWN
    assert promo.promotion is PieceType.QUEEN
    assert promo.target_square == parse_square("a8")


def test_en_passant_counts_as_capture() -> None:
    moves = normalize_sans(["e4", "a6", "e5", "d5", "exd6"])
    assert moves[-1].is_capture


def test_position_after_replays_uci() -> None:
    moves = normalize_sans(["e4", "e5", "Nf3"])
    pieces = position_after(moves[:1])
    assert parse_square("e2") not in pieces
    assert pieces[parse_square("e4")].piece_type is PieceType.PAWN
    assert len(position_after(moves)) == 32


def test_occupancy_by_ply_starts_with_the_start_position() -> None:
    moves = normalize_sans(["e4", "d5", "exd5"])
    positions = occupancy_by_ply(moves)
    assert len(positions) == 4
    assert len(positions[0]) == 32
    assert len(positions[3]) == 31
    assert positions[3] == position_after(moves)
