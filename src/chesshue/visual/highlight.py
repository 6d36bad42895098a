"""Highlight resolver: merge the interactive highlight sources.

Five sources can be active at once. For board squares and legend
entries the highest-precedence active one decides:

1. hovered square
2. hovered move
3. locked pieces (compare mode with exactly two locks)
4. hovered legend entry (suppressed while anything is locked)
5. hovered annotation (labels and legend only, never board squares)

Every consumer reads a :class:`HighlightState` snapshot. Renders without
interaction (exports, thumbnails) use :data:`NEUTRAL_STATE` through
:class:`NullHighlightSource`, so resolution never has to guess whether a
highlight context exists.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Protocol

from chesshue.core.enums import AnnotationKind, Color, Emphasis, OverlapClass
from chesshue.core.models import BoardSquare, SquareVisit, VisitBoard
from chesshue.core.piece import ALL_PIECE_CLASSES, PieceClass, piece_classes_of
from chesshue.core.types import Square, square_name
from chesshue.notation.san import parse_san_token

_LOGGER = logging.getLogger(__name__)

MAX_LOCKED_PIECES = 2


class HighlightSourceKind(StrEnum):
    SQUARE = "square"
    MOVE = "move"
    LOCK = "lock"
    LEGEND = "legend"
    ANNOTATION = "annotation"


# ── Source payloads ──────────────────────────────────────────────────────────


@dataclass(slots=True, frozen=True)
class HoveredSquare:
    """Pointer over a board square, with its reverse move index."""

    square: Square
    pieces: tuple[PieceClass, ...] = ()
    move_numbers: tuple[int, ...] = ()

    @classmethod
    def from_board_square(cls, board_square: BoardSquare) -> HoveredSquare:
        return cls(
            board_square.square,
            board_square.piece_classes,
            board_square.move_numbers,
        )

    @property
    def name(self) -> str:
        return square_name(self.square)


@dataclass(slots=True, frozen=True)
class HoveredMove:
    """Pointer over one ply in the move notation."""

    move_number: int
    san: str
    piece: PieceClass
    target_square: Square
    is_capture: bool = False

    @classmethod
    def from_san(cls, move_number: int, san: str) -> HoveredMove | None:
        """Build from SAN text; ``None`` when the token cannot be read."""
        parsed = parse_san_token(san, Color.from_ply(move_number))
        if parsed is None:
            return None
        return cls(
            move_number,
            san,
            parsed.piece_class,
            parsed.target_square,
            parsed.is_capture,
        )


@dataclass(slots=True, frozen=True)
class HoveredAnnotation:
    kind: AnnotationKind
    pieces: tuple[PieceClass, ...] = ()

    @classmethod
    def for_kind(cls, kind: AnnotationKind) -> HoveredAnnotation:
        """Player names map to all six classes of their color."""
        if kind is AnnotationKind.WHITE_PLAYER:
            return cls(kind, piece_classes_of(Color.WHITE))
        if kind is AnnotationKind.BLACK_PLAYER:
            return cls(kind, piece_classes_of(Color.BLACK))
        return cls(kind)


@dataclass(slots=True, frozen=True)
class HighlightState:
    """Immutable snapshot of every interaction source."""

    hovered_square: HoveredSquare | None = None
    hovered_move: HoveredMove | None = None
    locked_pieces: tuple[PieceClass, ...] = ()
    compare_mode: bool = False
    highlighted_piece: PieceClass | None = None
    hovered_annotation: HoveredAnnotation | None = None

    @property
    def is_neutral(self) -> bool:
        return self.board_source() is None and self.hovered_annotation is None

    @property
    def is_comparing(self) -> bool:
        return self.compare_mode and len(self.locked_pieces) == MAX_LOCKED_PIECES

    def board_source(self) -> HighlightSourceKind | None:
        """Highest-precedence source that affects board squares."""
        if self.hovered_square is not None:
            return HighlightSourceKind.SQUARE
        if self.hovered_move is not None:
            return HighlightSourceKind.MOVE
        if self.locked_pieces:
            return HighlightSourceKind.LOCK
        if self.highlighted_piece is not None:
            return HighlightSourceKind.LEGEND
        return None

    def board_pieces(self) -> tuple[PieceClass, ...]:
        """Piece classes of the deciding board source, in role order."""
        source = self.board_source()
        if source is HighlightSourceKind.SQUARE:
            assert self.hovered_square is not None
            return self.hovered_square.pieces
        if source is HighlightSourceKind.MOVE:
            assert self.hovered_move is not None
            return (self.hovered_move.piece,)
        if source is HighlightSourceKind.LOCK:
            return self.locked_pieces
        if source is HighlightSourceKind.LEGEND:
            assert self.highlighted_piece is not None
            return (self.highlighted_piece,)
        return ()

    def legend_pieces(self) -> tuple[PieceClass, ...] | None:
        """Match set for legend entries, ``None`` when nothing is active."""
        if self.board_source() is not None:
            return self.board_pieces()
        if self.hovered_annotation is not None and self.hovered_annotation.pieces:
            return self.hovered_annotation.pieces
        return None


NEUTRAL_STATE = HighlightState()


# ── Capability interface ─────────────────────────────────────────────────────


class HighlightSource(Protocol):
    """Anything that can hand out the current highlight snapshot."""

    def snapshot(self) -> HighlightState: ...


class NullHighlightSource:
    """Non-interactive default: every source inactive."""

    __slots__ = ()

    def snapshot(self) -> HighlightState:
        return NEUTRAL_STATE


StateCallback = Callable[[HighlightState], None]


class HighlightStore:
    """Mutable owner of the live highlight state.

    Only the current user's pointer and click events write here. Each
    mutation replaces the snapshot wholesale and notifies listeners.
    """

    __slots__ = ("_state", "on_changed", "__weakref__")

    def __init__(self) -> None:
        self._state = NEUTRAL_STATE
        self.on_changed: list[StateCallback] = []

    def snapshot(self) -> HighlightState:
        return self._state

    # ── Hover sources ────────────────────────────────────────────────────

    def hover_square(self, board_square: BoardSquare | None) -> None:
        hovered = (
            None
            if board_square is None
            else HoveredSquare.from_board_square(board_square)
        )
        self._update(hovered_square=hovered)

    def hover_move(self, move: HoveredMove | None) -> None:
        self._update(hovered_move=move)

    def hover_move_san(self, move_number: int, san: str) -> None:
        """Hover a ply by its SAN text; unreadable tokens clear the hover."""
        move = HoveredMove.from_san(move_number, san)
        if move is None:
            _LOGGER.debug("Ignoring hover on unreadable SAN %r", san)
        self._update(hovered_move=move)

    def hover_legend(self, piece_class: PieceClass | None) -> None:
        self._update(highlighted_piece=piece_class)

    def hover_annotation(self, kind: AnnotationKind | None) -> None:
        annotation = None if kind is None else HoveredAnnotation.for_kind(kind)
        self._update(hovered_annotation=annotation)

    # ── Locks / compare ──────────────────────────────────────────────────

    def toggle_lock(self, piece_class: PieceClass) -> None:
        """Unlock if locked, else lock; a third lock evicts the oldest."""
        locked = self._state.locked_pieces
        if piece_class in locked:
            new_locked = tuple(p for p in locked if p != piece_class)
        else:
            new_locked = (locked + (piece_class,))[-MAX_LOCKED_PIECES:]
        compare = self._state.compare_mode and len(new_locked) == MAX_LOCKED_PIECES
        self._update(locked_pieces=new_locked, compare_mode=compare)

    def set_locked(self, pieces: Sequence[PieceClass]) -> None:
        """Replace the locks wholesale, keeping the last two distinct ones."""
        distinct: dict[PieceClass, None] = {}
        for piece in pieces:
            distinct.pop(piece, None)
            distinct[piece] = None
        self._update(locked_pieces=tuple(distinct)[-MAX_LOCKED_PIECES:])

    def clear_locks(self) -> None:
        self._update(locked_pieces=(), compare_mode=False)

    def set_compare_mode(self, enabled: bool) -> None:
        self._update(compare_mode=enabled)

    def reset(self) -> None:
        """Drop all interaction state (e.g. on game change)."""
        self._set(NEUTRAL_STATE)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _update(self, **changes: object) -> None:
        self._set(replace(self._state, **changes))  # type: ignore[arg-type]

    def _set(self, state: HighlightState) -> None:
        if state == self._state:
            return
        self._state = state
        for callback in list(self.on_changed):
            callback(state)


# ── Resolution ───────────────────────────────────────────────────────────────


@dataclass(slots=True, frozen=True)
class SquareHighlight:
    """Resolved highlight for one board square."""

    square: Square
    emphasis: Emphasis = Emphasis.NEUTRAL
    matching_visits: tuple[SquareVisit, ...] = ()
    overlap: OverlapClass | None = None
    is_hovered: bool = False
    is_move_target: bool = False
    active_pieces: tuple[PieceClass, ...] = ()
    source: HighlightSourceKind | None = None

    @property
    def dim(self) -> bool:
        return self.emphasis.is_dimmed

    @property
    def is_active(self) -> bool:
        """Whether a board source is steering emphasis at all."""
        return self.source is not None


def neutral_square(board_square: BoardSquare) -> SquareHighlight:
    return SquareHighlight(board_square.square, matching_visits=board_square.visits)


def _matching(
    visits: tuple[SquareVisit, ...], pieces: tuple[PieceClass, ...]
) -> tuple[SquareVisit, ...]:
    return tuple(v for v in visits if v.piece_class in pieces)


def _overlap(
    visits: tuple[SquareVisit, ...], first: PieceClass, second: PieceClass
) -> OverlapClass:
    classes = {v.piece_class for v in visits}
    has_first = first in classes
    has_second = second in classes
    if has_first and has_second:
        return OverlapClass.OVERLAP
    if has_first:
        return OverlapClass.ONLY_FIRST
    if has_second:
        return OverlapClass.ONLY_SECOND
    return OverlapClass.NEITHER


def classify_square(
    board_square: BoardSquare, state: HighlightState | None = None
) -> SquareHighlight:
    """Resolve *board_square* against the board-affecting sources."""
    state = state or NEUTRAL_STATE
    source = state.board_source()
    if source is None:
        return neutral_square(board_square)

    pieces = state.board_pieces()
    visits = board_square.visits
    matching = _matching(visits, pieces)
    emphasis = Emphasis.EMPHASIZED if matching else Emphasis.DIMMED
    is_hovered = False
    is_target = False
    overlap: OverlapClass | None = None

    if source is HighlightSourceKind.SQUARE:
        assert state.hovered_square is not None
        if board_square.square == state.hovered_square.square:
            is_hovered = True
            emphasis = Emphasis.FOCUSED
            matching = visits
        elif not pieces:
            # An empty hovered square only marks itself.
            emphasis = Emphasis.NEUTRAL
            matching = visits
    elif source is HighlightSourceKind.MOVE:
        assert state.hovered_move is not None
        if board_square.square == state.hovered_move.target_square:
            is_target = True
            emphasis = Emphasis.FOCUSED
    elif source is HighlightSourceKind.LOCK and state.is_comparing:
        first, second = state.locked_pieces
        overlap = _overlap(visits, first, second)

    return SquareHighlight(
        square=board_square.square,
        emphasis=emphasis,
        matching_visits=matching,
        overlap=overlap,
        is_hovered=is_hovered,
        is_move_target=is_target,
        active_pieces=pieces,
        source=source,
    )


def resolve_legend_entry(
    piece_class: PieceClass, state: HighlightState | None = None
) -> Emphasis:
    """Emphasized if the deciding source matches, dimmed if it does not."""
    match_set = (state or NEUTRAL_STATE).legend_pieces()
    if match_set is None:
        return Emphasis.NEUTRAL
    return Emphasis.EMPHASIZED if piece_class in match_set else Emphasis.DIMMED


def resolve_move_entry(
    move_number: int, state: HighlightState | None = None
) -> Emphasis:
    """Emphasis of one ply in the move notation."""
    state = state or NEUTRAL_STATE
    if state.hovered_square is not None:
        if move_number in state.hovered_square.move_numbers:
            return Emphasis.EMPHASIZED
        return Emphasis.DIMMED
    if state.hovered_move is not None and state.hovered_move.move_number == move_number:
        return Emphasis.FOCUSED
    return Emphasis.NEUTRAL


_PLAYER_COLORS: dict[AnnotationKind, Color] = {
    AnnotationKind.WHITE_PLAYER: Color.WHITE,
    AnnotationKind.BLACK_PLAYER: Color.BLACK,
}


def resolve_annotation(
    kind: AnnotationKind, state: HighlightState | None = None
) -> Emphasis:
    """Emphasis of a text annotation (player names, move notation)."""
    state = state or NEUTRAL_STATE
    if state.hovered_annotation is not None and state.hovered_annotation.kind is kind:
        return Emphasis.FOCUSED

    source = state.board_source()
    player_color = _PLAYER_COLORS.get(kind)
    if player_color is None:
        if source is HighlightSourceKind.MOVE:
            return Emphasis.EMPHASIZED
        return Emphasis.NEUTRAL

    colors = {piece.color for piece in state.board_pieces()}
    if source in (HighlightSourceKind.SQUARE, HighlightSourceKind.MOVE):
        return Emphasis.EMPHASIZED if player_color in colors else Emphasis.NEUTRAL
    if source in (HighlightSourceKind.LOCK, HighlightSourceKind.LEGEND):
        return Emphasis.EMPHASIZED if player_color in colors else Emphasis.DIMMED
    return Emphasis.NEUTRAL


@dataclass(slots=True, frozen=True)
class HighlightResolution:
    """Everything a view needs to paint one highlight state."""

    state: HighlightState
    squares: tuple[SquareHighlight, ...]
    legend: dict[PieceClass, Emphasis]
    moves: tuple[Emphasis, ...]  # index = ply - 1
    annotations: dict[AnnotationKind, Emphasis]

    def square(self, sq: Square) -> SquareHighlight:
        return self.squares[sq]

    def move(self, move_number: int) -> Emphasis:
        if 1 <= move_number <= len(self.moves):
            return self.moves[move_number - 1]
        return Emphasis.NEUTRAL


def resolve_highlights(
    board: VisitBoard,
    state: HighlightState | HighlightSource | None = None,
    legend_classes: Sequence[PieceClass] | None = None,
) -> HighlightResolution:
    """Resolve every square, legend entry, ply and annotation at once.

    *state* may be a snapshot, any :class:`HighlightSource`, or ``None``
    for the neutral state.
    """
    if state is None:
        snapshot = NEUTRAL_STATE
    elif isinstance(state, HighlightState):
        snapshot = state
    else:
        snapshot = state.snapshot()

    classes = ALL_PIECE_CLASSES if legend_classes is None else legend_classes
    return HighlightResolution(
        state=snapshot,
        squares=tuple(classify_square(square, snapshot) for square in board),
        legend={pc: resolve_legend_entry(pc, snapshot) for pc in classes},
        moves=tuple(
            resolve_move_entry(ply, snapshot)
            for ply in range(1, board.total_moves + 1)
        ),
        annotations={
            kind: resolve_annotation(kind, snapshot) for kind in AnnotationKind
        },
    )
