"""Notation package: PGN normalization and display-only SAN parsing."""

from chesshue.notation.pgn import (
    PgnImportError,
    normalize_pgn,
    normalize_sans,
    occupancy_by_ply,
    position_after,
    read_game,
)
from chesshue.notation.san import ParsedSan, parse_san_token

__all__ = [
    "ParsedSan",
    "PgnImportError",
    "normalize_pgn",
    "normalize_sans",
    "occupancy_by_ply",
    "parse_san_token",
    "position_after",
    "read_game",
]
