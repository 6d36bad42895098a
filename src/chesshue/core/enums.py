"""Core enumerations for the visitation domain."""

from __future__ import annotations

from enum import StrEnum


class Color(StrEnum):
    """Side color, valued by its one-letter code."""

    WHITE = "w"
    BLACK = "b"

    @property
    def opposite(self) -> Color:
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @classmethod
    def from_ply(cls, move_number: int) -> Color:
        """Mover of the 1-indexed ply *move_number* (odd plies are white)."""
        return cls.WHITE if move_number % 2 == 1 else cls.BLACK


class PieceType(StrEnum):
    """Piece types, valued by their lowercase FEN letter."""

    KING = "k"
    QUEEN = "q"
    ROOK = "r"
    BISHOP = "b"
    KNIGHT = "n"
    PAWN = "p"


class CastleSide(StrEnum):
    KINGSIDE = "kingside"
    QUEENSIDE = "queenside"


class AnnotationKind(StrEnum):
    """Text annotations around the board that can be hovered."""

    WHITE_PLAYER = "white-player"
    BLACK_PLAYER = "black-player"
    MOVE_NOTATION = "move-notation"


class Emphasis(StrEnum):
    """Resolved highlight outcome for one square, legend entry or label.

    A single value per entity keeps "dimmed" and "emphasized" exclusive.
    """

    NEUTRAL = "neutral"
    DIMMED = "dimmed"
    EMPHASIZED = "emphasized"
    FOCUSED = "focused"  # hovered square / hovered move target

    @property
    def is_dimmed(self) -> bool:
        return self is Emphasis.DIMMED

    @property
    def is_emphasized(self) -> bool:
        return self in (Emphasis.EMPHASIZED, Emphasis.FOCUSED)


class OverlapClass(StrEnum):
    """Compare-mode verdict for a square with two locked piece classes."""

    OVERLAP = "overlap"
    ONLY_FIRST = "only-first"
    ONLY_SECOND = "only-second"
    NEITHER = "neither"


class GamePhase(StrEnum):
    OPENING = "opening"
    MIDDLEGAME = "middlegame"
    ENDGAME = "endgame"
