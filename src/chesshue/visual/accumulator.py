"""Visitation accumulator: replay a move stream into per-square history."""

from __future__ import annotations

from collections.abc import Iterable

from chesshue.core.enums import PieceType
from chesshue.core.models import MoveDescriptor, SquareVisit, VisitBoard


def accumulate(moves: Iterable[MoveDescriptor]) -> VisitBoard:
    """Build the visit board for *moves* in one pure pass.

    Each ply appends one visit at its destination (castling appends the
    king and then the rook). Origins are not recorded and nothing is ever
    removed, so captures only extend the history.
    """
    visit_lists: list[list[SquareVisit]] = [[] for _ in range(64)]
    total_moves = 0

    for move in moves:
        total_moves += 1
        visit_lists[move.target_square].append(
            SquareVisit(move.piece_type, move.color, move.move_number)
        )
        if move.castle is not None and move.rook_target is not None:
            visit_lists[move.rook_target].append(
                SquareVisit(PieceType.ROOK, move.color, move.move_number)
            )

    return VisitBoard.from_visit_lists(visit_lists, total_moves)
