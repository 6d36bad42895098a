"""Composition root: PGN text → everything a view needs to draw a game."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from chesshue.core.models import GameInfo, MoveDescriptor, VisitBoard
from chesshue.core.piece import PieceClass
from chesshue.core.types import Square
from chesshue.notation.pgn import (
    PgnImportError,
    normalize_sans,
    occupancy_by_ply,
    read_game,
)
from chesshue.visual.accumulator import accumulate
from chesshue.visual.compositor import (
    DEFAULT_CONFIG,
    BoardColors,
    ColorResolver,
    CompositorConfig,
    RectPrimitive,
    composite_board,
)
from chesshue.visual.highlight import (
    HighlightResolution,
    HighlightSource,
    HighlightState,
    resolve_highlights,
)
from chesshue.visual.timeline import clamp_move, filter_board

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class GameVisualization:
    """A loaded game: metadata, ply descriptors and the full visit board.

    The piece occupancy of every ply is replayed once at construction;
    ``positions[n]`` is the board after ply ``n``.
    """

    info: GameInfo = field(default_factory=GameInfo)
    moves: tuple[MoveDescriptor, ...] = ()
    board: VisitBoard = field(default_factory=VisitBoard.empty)
    positions: tuple[dict[Square, PieceClass], ...] = field(
        default=(), repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if not self.positions:
            object.__setattr__(self, "positions", self._replay())

    def _replay(self) -> tuple[dict[Square, PieceClass], ...]:
        try:
            return tuple(occupancy_by_ply(self.moves, self.info.start_fen))
        except PgnImportError as exc:
            _LOGGER.warning("Cannot rebuild piece positions: %s", exc)
            return ()

    @classmethod
    def from_moves(
        cls, moves: Iterable[MoveDescriptor], info: GameInfo | None = None
    ) -> GameVisualization:
        moves = tuple(moves)
        if info is None:
            info = GameInfo(sans=tuple(m.san for m in moves))
        return cls(info, moves, accumulate(moves))

    @property
    def total_moves(self) -> int:
        return self.board.total_moves

    @property
    def is_empty(self) -> bool:
        return self.total_moves == 0

    def move(self, move_number: int) -> MoveDescriptor | None:
        if 1 <= move_number <= len(self.moves):
            return self.moves[move_number - 1]
        return None

    def board_at(self, move: int | None = None) -> VisitBoard:
        """Visit board as of ply *move* (``None`` = the whole game)."""
        if move is None:
            return self.board
        return filter_board(self.board, clamp_move(move, self.total_moves))

    def pieces_at(self, move: int | None = None) -> dict[Square, PieceClass]:
        """Occupied squares after ply *move*, for the piece overlay."""
        count = self.total_moves if move is None else clamp_move(move, self.total_moves)
        if count >= len(self.positions):
            return {}
        return dict(self.positions[count])

    def highlights(
        self,
        state: HighlightState | HighlightSource | None = None,
        move: int | None = None,
    ) -> HighlightResolution:
        return resolve_highlights(self.board_at(move), state)

    def render(
        self,
        palette: ColorResolver,
        state: HighlightState | HighlightSource | None = None,
        *,
        move: int | None = None,
        tile_size: float = 80.0,
        colors: BoardColors | None = None,
        flipped: bool = False,
        config: CompositorConfig = DEFAULT_CONFIG,
    ) -> tuple[tuple[RectPrimitive, ...], ...]:
        """Primitives for all 64 squares at ply *move*."""
        board = self.board_at(move)
        return composite_board(
            board,
            palette,
            resolve_highlights(board, state),
            tile_size=tile_size,
            colors=colors,
            flipped=flipped,
            config=config,
        )


def visualize_pgn(pgn_text: str) -> GameVisualization:
    """Load a PGN game; unreadable input yields an empty visualization."""
    try:
        info, moves = read_game(pgn_text)
    except PgnImportError as exc:
        _LOGGER.warning("Could not load PGN, showing an empty board: %s", exc)
        return GameVisualization()
    _LOGGER.info("Loaded %s vs %s (%d plies)", info.white, info.black, len(moves))
    return GameVisualization.from_moves(moves, info)


def visualize_sans(sans: Iterable[str]) -> GameVisualization:
    """Load a bare SAN move list from the standard start position."""
    return GameVisualization.from_moves(normalize_sans(sans))
