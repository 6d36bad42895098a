"""Core domain layer — visit history value objects with zero external dependencies.

Quick start::

    from chesshue.core import VisitBoard, SquareVisit, PieceType, Color

    board = VisitBoard.empty()
    assert board.by_name("e4").visits == ()
"""

from chesshue.core.enums import (
    AnnotationKind,
    CastleSide,
    Color,
    Emphasis,
    GamePhase,
    OverlapClass,
    PieceType,
)
from chesshue.core.models import (
    BoardSquare,
    GameInfo,
    MoveDescriptor,
    SquareVisit,
    VisitBoard,
)
from chesshue.core.piece import (
    ALL_PIECE_CLASSES,
    BLACK_PIECE_CLASSES,
    PIECE_TYPE_ORDER,
    WHITE_PIECE_CLASSES,
    PieceClass,
    piece_classes_of,
)
from chesshue.core.types import (
    Square,
    file_of,
    is_light_square,
    make_square,
    parse_square,
    rank_of,
    square_name,
    try_parse_square,
)

__all__ = [
    # Enums
    "AnnotationKind",
    "CastleSide",
    "Color",
    "Emphasis",
    "GamePhase",
    "OverlapClass",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "is_light_square",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    "try_parse_square",
    # Domain objects
    "ALL_PIECE_CLASSES",
    "BLACK_PIECE_CLASSES",
    "BoardSquare",
    "GameInfo",
    "MoveDescriptor",
    "PIECE_TYPE_ORDER",
    "PieceClass",
    "SquareVisit",
    "VisitBoard",
    "WHITE_PIECE_CLASSES",
    "piece_classes_of",
]
