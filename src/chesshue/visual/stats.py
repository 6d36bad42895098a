"""Summary statistics over a game's moves and visit board."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from chesshue.core.enums import Color
from chesshue.core.models import MoveDescriptor, VisitBoard
from chesshue.core.piece import ALL_PIECE_CLASSES, PieceClass


def piece_activity(moves: Iterable[MoveDescriptor]) -> dict[PieceClass, int]:
    """Number of plies made by each piece class (all 12 keys present)."""
    counts = dict.fromkeys(ALL_PIECE_CLASSES, 0)
    for move in moves:
        counts[move.piece_class] += 1
    return counts


def most_active(activity: dict[PieceClass, int]) -> PieceClass | None:
    """Busiest class; ties keep legend order. ``None`` for an empty game."""
    best: PieceClass | None = None
    for piece_class in ALL_PIECE_CLASSES:
        count = activity.get(piece_class, 0)
        if count and (best is None or count > activity[best]):
            best = piece_class
    return best


@dataclass(slots=True, frozen=True)
class Territory:
    """Per-color visit counts, ``grid[rank][file]`` with rank 0 = rank 1."""

    white: tuple[tuple[int, ...], ...]
    black: tuple[tuple[int, ...], ...]
    white_percent: int
    black_percent: int

    def grid(self, color: Color) -> tuple[tuple[int, ...], ...]:
        return self.white if color is Color.WHITE else self.black


def territory(board: VisitBoard) -> Territory:
    """Split the board's visits by color.

    Percentages are whole numbers summing to 100; an empty board is an
    even 50/50.
    """
    white = [[0] * 8 for _ in range(8)]
    black = [[0] * 8 for _ in range(8)]
    for rank, row in enumerate(board.rows()):
        for file, square in enumerate(row):
            for visit in square.visits:
                grid = white if visit.color is Color.WHITE else black
                grid[rank][file] += 1

    white_total = sum(map(sum, white))
    black_total = sum(map(sum, black))
    total = white_total + black_total
    white_percent = 50 if total == 0 else round(white_total * 100 / total)
    return Territory(
        white=tuple(tuple(row) for row in white),
        black=tuple(tuple(row) for row in black),
        white_percent=white_percent,
        black_percent=100 - white_percent,
    )
