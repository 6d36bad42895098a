"""Tests for the PieceClass value object."""

import pytest

from chesshue.core.enums import Color, PieceType
from chesshue.core.piece import (
    ALL_PIECE_CLASSES,
    BLACK_PIECE_CLASSES,
    PieceClass,
    piece_classes_of,
)


def test_fen_char_round_trip() -> None:
    knight = PieceClass.from_char("N")
    assert knight == PieceClass(PieceType.KNIGHT, Color.WHITE)
    assert str(knight) == "N"
    assert str(PieceClass.from_char("q")) == "q"


def test_from_char_rejects_unknown_letter() -> None:
    with pytest.raises(ValueError, match="Invalid piece character"):
        PieceClass.from_char("x")


def test_dict_form_uses_plain_codes() -> None:
    queen = PieceClass(PieceType.QUEEN, Color.BLACK)
    assert queen.to_dict() == {"pieceType": "q", "pieceColor": "b"}
    assert PieceClass.from_dict({"pieceType": "q", "pieceColor": "b"}) == queen


@pytest.mark.parametrize(
    "payload",
    [{}, {"pieceType": "q"}, {"pieceType": "z", "pieceColor": "w"}, "qb", None],
)
def test_from_dict_rejects_bad_payloads(payload: object) -> None:
    with pytest.raises(ValueError):
        PieceClass.from_dict(payload)  # type: ignore[arg-type]


def test_display_helpers() -> None:
    piece = PieceClass(PieceType.KNIGHT, Color.BLACK)
    assert piece.symbol == "♞"
    assert piece.label == "Black Knight"


def test_canonical_ordering() -> None:
    assert len(ALL_PIECE_CLASSES) == 12
    assert len(set(ALL_PIECE_CLASSES)) == 12
    assert ALL_PIECE_CLASSES[0] == PieceClass(PieceType.KING, Color.WHITE)
    assert ALL_PIECE_CLASSES[-1] == PieceClass(PieceType.PAWN, Color.BLACK)
    assert piece_classes_of(Color.BLACK) == BLACK_PIECE_CLASSES
    assert all(p.color is Color.BLACK for p in BLACK_PIECE_CLASSES)
