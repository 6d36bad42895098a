"""Temporal filter: the visit board as of a given ply."""

from __future__ import annotations

from chesshue.core.enums import GamePhase
from chesshue.core.models import BoardSquare, VisitBoard

# Last ply of each phase (20 plies = 10 full moves).
_OPENING_LAST_PLY = 20
_MIDDLEGAME_LAST_PLY = 60


def clamp_move(move: int, total_moves: int) -> int:
    """Clamp a timeline cursor into ``0..total_moves``."""
    return max(0, min(move, total_moves))


def filter_board(board: VisitBoard, move: int) -> VisitBoard:
    """Keep only visits with ``move_number <= move``.

    Pure and non-destructive: the input board is never touched. A cursor
    at or past the end means "show everything" and returns *board* itself.
    """
    if move >= board.total_moves:
        return board
    cutoff = max(0, move)
    squares = tuple(
        square
        if not square.visits or square.visits[-1].move_number <= cutoff
        else BoardSquare(
            square.square,
            tuple(v for v in square.visits if v.move_number <= cutoff),
        )
        for square in board.squares
    )
    return VisitBoard(squares, board.total_moves)


def phase_of(move_number: int) -> GamePhase:
    if move_number <= _OPENING_LAST_PLY:
        return GamePhase.OPENING
    if move_number <= _MIDDLEGAME_LAST_PLY:
        return GamePhase.MIDDLEGAME
    return GamePhase.ENDGAME


def phase_range(phase: GamePhase, total_moves: int) -> tuple[int, int]:
    """Inclusive ply range of *phase*, clipped to the game length.

    Returns ``(0, 0)`` when the game never reaches the phase.
    """
    bounds = {
        GamePhase.OPENING: (1, _OPENING_LAST_PLY),
        GamePhase.MIDDLEGAME: (_OPENING_LAST_PLY + 1, _MIDDLEGAME_LAST_PLY),
        GamePhase.ENDGAME: (_MIDDLEGAME_LAST_PLY + 1, total_moves),
    }
    start, end = bounds[phase]
    end = min(end, total_moves)
    if start > end:
        return 0, 0
    return start, end
