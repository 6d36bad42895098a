"""Square type alias and coordinate helpers.

Board layout (Little-Endian Rank-File mapping, same as python-chess):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63
"""

from __future__ import annotations

import re
from typing import TypeAlias

Square: TypeAlias = int  # 0–63

_SQUARE_NAME_RE = re.compile(r"^[a-h][1-8]$")


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return sq & 7


def rank_of(sq: Square) -> int:
    """Rank index 0–7 (1–8)."""
    return sq >> 3


def make_square(file: int, rank: int) -> Square:
    """Create square from file (0–7) and rank (0–7)."""
    return rank * 8 + file


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a1', 63 → 'h8'."""
    return chr(ord("a") + file_of(sq)) + str(rank_of(sq) + 1)


def is_square_name(name: str) -> bool:
    """True for exactly two characters matching ``[a-h][1-8]``."""
    return _SQUARE_NAME_RE.match(name) is not None


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → 28."""
    if not is_square_name(name):
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(ord(name[0]) - ord("a"), int(name[1]) - 1)


def try_parse_square(name: str) -> Square | None:
    """Like :func:`parse_square` but returns ``None`` for bad names."""
    if not is_square_name(name):
        return None
    return parse_square(name)


def is_light_square(sq: Square) -> bool:
    """a1 is dark, h1 is light."""
    return (file_of(sq) + rank_of(sq)) % 2 == 1


ALL_SQUARES: tuple[Square, ...] = tuple(range(64))
