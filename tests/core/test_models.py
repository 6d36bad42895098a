"""Tests for the visit-history data model."""

import pytest

from chesshue.core.enums import Color, PieceType
from chesshue.core.models import BoardSquare, MoveDescriptor, SquareVisit, VisitBoard
from chesshue.core.piece import PieceClass
from chesshue.core.types import parse_square

WN = PieceClass(PieceType.KNIGHT, Color.WHITE)
BP = PieceClass(PieceType.PAWN, Color.BLACK)


def _visit(piece: PieceClass, move_number: int) -> SquareVisit:
    return SquareVisit(piece.piece_type, piece.color, move_number)


class TestBoardSquare:
    def test_piece_classes_in_first_appearance_order(self) -> None:
        square = BoardSquare(
            parse_square("e5"), (_visit(BP, 2), _visit(WN, 5), _visit(BP, 8))
        )
        assert square.piece_classes == (BP, WN)

    def test_move_numbers_sorted_and_unique(self) -> None:
        square = BoardSquare(
            parse_square("f3"), (_visit(WN, 3), _visit(WN, 3), _visit(BP, 1))
        )
        assert square.move_numbers == (1, 3)

    def test_name_and_color(self) -> None:
        square = BoardSquare(parse_square("h1"))
        assert square.name == "h1"
        assert square.is_light
        assert (square.file, square.rank) == (7, 0)


class TestVisitBoard:
    def test_empty_board(self) -> None:
        board = VisitBoard.empty()
        assert board.total_moves == 0
        assert board.total_visits == 0
        assert [sq.square for sq in board] == list(range(64))

    def test_requires_64_squares(self) -> None:
        with pytest.raises(ValueError, match="64 squares"):
            VisitBoard(tuple(BoardSquare(sq) for sq in range(10)))

    def test_lookup_helpers(self) -> None:
        lists: list[list[SquareVisit]] = [[] for _ in range(64)]
        lists[parse_square("d4")].append(_visit(WN, 1))
        board = VisitBoard.from_visit_lists(lists, total_moves=1)

        assert board.by_name("d4").visits == (_visit(WN, 1),)
        assert board.square_at(3, 3) is board[parse_square("d4")]
        assert board.rows()[3][3].name == "d4"
        assert board.total_visits == 1


def test_move_descriptor_numbers() -> None:
    move = MoveDescriptor(
        move_number=4,
        san="Nc6",
        piece_type=PieceType.KNIGHT,
        color=Color.BLACK,
        from_square=parse_square("b8"),
        target_square=parse_square("c6"),
    )
    assert move.full_move_number == 2
    assert move.piece_class == PieceClass(PieceType.KNIGHT, Color.BLACK)


def test_color_from_ply() -> None:
    assert Color.from_ply(1) is Color.WHITE
    assert Color.from_ply(2) is Color.BLACK
    assert Color.WHITE.opposite is Color.BLACK
