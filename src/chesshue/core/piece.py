"""Piece class value object."""

from __future__ import annotations

from dataclasses import dataclass

from chesshue.core.enums import Color, PieceType

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_NAMES: dict[PieceType, str] = {
    PieceType.KING: "King",
    PieceType.QUEEN: "Queen",
    PieceType.ROOK: "Rook",
    PieceType.BISHOP: "Bishop",
    PieceType.KNIGHT: "Knight",
    PieceType.PAWN: "Pawn",
}


@dataclass(frozen=True, slots=True)
class PieceClass:
    """A ``(piece_type, color)`` pair; all white pawns share one class."""

    piece_type: PieceType
    color: Color

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        letter = self.piece_type.value
        return letter.upper() if self.color is Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> PieceClass:
        """Create a class from a FEN character, e.g. 'N' → white knight."""
        try:
            piece_type = PieceType(char.lower())
        except ValueError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(piece_type, color)

    def to_dict(self) -> dict[str, str]:
        return {"pieceType": self.piece_type.value, "pieceColor": self.color.value}

    @classmethod
    def from_dict(cls, data: dict[str, str]) -> PieceClass:
        """Inverse of :meth:`to_dict`; raises ``ValueError`` on bad codes."""
        try:
            return cls(PieceType(data["pieceType"]), Color(data["pieceColor"]))
        except (KeyError, TypeError):
            raise ValueError(f"Invalid piece class payload: {data!r}") from None

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    @property
    def label(self) -> str:
        side = "White" if self.color is Color.WHITE else "Black"
        return f"{side} {_NAMES[self.piece_type]}"


PIECE_TYPE_ORDER = (
    PieceType.KING,
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.PAWN,
)

WHITE_PIECE_CLASSES: tuple[PieceClass, ...] = tuple(
    PieceClass(pt, Color.WHITE) for pt in PIECE_TYPE_ORDER
)
BLACK_PIECE_CLASSES: tuple[PieceClass, ...] = tuple(
    PieceClass(pt, Color.BLACK) for pt in PIECE_TYPE_ORDER
)
# Legend order: white king … white pawn, then black king … black pawn.
ALL_PIECE_CLASSES: tuple[PieceClass, ...] = WHITE_PIECE_CLASSES + BLACK_PIECE_CLASSES


def piece_classes_of(color: Color) -> tuple[PieceClass, ...]:
    return WHITE_PIECE_CLASSES if color is Color.WHITE else BLACK_PIECE_CLASSES
