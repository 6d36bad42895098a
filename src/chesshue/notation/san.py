"""Display-only SAN token parsing.

Unlike a full SAN resolver this never looks at a position: it only reads
the piece letter, capture marker and target square out of the token so
that hovering a move in the notation can be linked to board squares.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from chesshue.core.enums import Color, PieceType
from chesshue.core.piece import PieceClass
from chesshue.core.types import Square, parse_square, try_parse_square

_SAN_PIECE_REV: dict[str, PieceType] = {
    "K": PieceType.KING,
    "Q": PieceType.QUEEN,
    "R": PieceType.ROOK,
    "B": PieceType.BISHOP,
    "N": PieceType.KNIGHT,
}

# King destination per castling side and color.
_CASTLE_TARGETS: dict[tuple[str, Color], str] = {
    ("O-O", Color.WHITE): "g1",
    ("O-O", Color.BLACK): "g8",
    ("O-O-O", Color.WHITE): "c1",
    ("O-O-O", Color.BLACK): "c8",
}

_PROMOTION_RE = re.compile(r"=?[QRBN]$")
_SUFFIX_CHARS = "+#!?"


@dataclass(slots=True, frozen=True)
class ParsedSan:
    """What a SAN token says about the move without a board."""

    piece_type: PieceType
    color: Color
    target_square: Square
    is_capture: bool
    from_hint: str | None = None  # unresolved disambiguation, e.g. "b" in "Nbd7"

    @property
    def piece_class(self) -> PieceClass:
        return PieceClass(self.piece_type, self.color)


def parse_san_token(san: str, color: Color) -> ParsedSan | None:
    """Parse *san* played by *color*; return ``None`` for malformed tokens."""
    clean = san.strip().rstrip(_SUFFIX_CHARS)
    if not clean:
        return None

    # Castling
    normalized = clean.replace("0", "O")
    if normalized in ("O-O", "O-O-O"):
        target = parse_square(_CASTLE_TARGETS[(normalized, color)])
        return ParsedSan(PieceType.KING, color, target, is_capture=False)

    # Piece type
    if clean[0] in _SAN_PIECE_REV:
        piece_type = _SAN_PIECE_REV[clean[0]]
        clean = clean[1:]
    else:
        piece_type = PieceType.PAWN

    # Promotion (pawns only)
    if piece_type is PieceType.PAWN:
        clean = _PROMOTION_RE.sub("", clean)

    # Capture marker
    is_capture = "x" in clean
    clean = clean.replace("x", "")

    # Destination (last two chars)
    target = try_parse_square(clean[-2:])
    if target is None:
        return None

    hint = clean[:-2] or None
    return ParsedSan(piece_type, color, target, is_capture, hint)

