"""Immutable data model of a game's visit history."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from chesshue.core.enums import CastleSide, Color, PieceType
from chesshue.core.piece import PieceClass
from chesshue.core.types import (
    ALL_SQUARES,
    Square,
    file_of,
    is_light_square,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


@dataclass(slots=True, frozen=True)
class MoveDescriptor:
    """One validated ply as reported by the rules engine."""

    move_number: int  # 1-indexed ply
    san: str
    piece_type: PieceType
    color: Color
    from_square: Square
    target_square: Square
    is_capture: bool = False
    castle: CastleSide | None = None
    rook_target: Square | None = None
    promotion: PieceType | None = None
    uci: str = ""

    @property
    def piece_class(self) -> PieceClass:
        return PieceClass(self.piece_type, self.color)

    @property
    def full_move_number(self) -> int:
        """PGN move number, e.g. ply 3 → ``2``."""
        return (self.move_number + 1) // 2


@dataclass(slots=True, frozen=True)
class SquareVisit:
    """A piece class ending a move on a square.

    Only the semantic identity is stored, never a resolved color, so a
    palette swap never requires replaying the game.
    """

    piece_type: PieceType
    color: Color
    move_number: int

    @property
    def piece_class(self) -> PieceClass:
        return PieceClass(self.piece_type, self.color)


@dataclass(slots=True, frozen=True)
class BoardSquare:
    """A board square with its chronological visit list."""

    square: Square
    visits: tuple[SquareVisit, ...] = ()

    @property
    def file(self) -> int:
        return file_of(self.square)

    @property
    def rank(self) -> int:
        return rank_of(self.square)

    @property
    def name(self) -> str:
        return square_name(self.square)

    @property
    def is_light(self) -> bool:
        return is_light_square(self.square)

    @property
    def piece_classes(self) -> tuple[PieceClass, ...]:
        """Distinct visiting classes in order of first appearance."""
        seen: dict[PieceClass, None] = {}
        for visit in self.visits:
            seen.setdefault(visit.piece_class, None)
        return tuple(seen)

    @property
    def move_numbers(self) -> tuple[int, ...]:
        """Sorted distinct plies that ended on this square."""
        return tuple(sorted({visit.move_number for visit in self.visits}))


@dataclass(slots=True, frozen=True)
class VisitBoard:
    """8×8 grid of :class:`BoardSquare`, indexed by 0–63 square.

    History only grows: a captured piece's earlier visits stay recorded.
    """

    squares: tuple[BoardSquare, ...]
    total_moves: int = 0

    def __post_init__(self) -> None:
        if len(self.squares) != 64:
            raise ValueError(f"VisitBoard needs 64 squares, got {len(self.squares)}")

    @classmethod
    def empty(cls) -> VisitBoard:
        return cls(tuple(BoardSquare(sq) for sq in ALL_SQUARES), 0)

    @classmethod
    def from_visit_lists(
        cls, visit_lists: Sequence[Sequence[SquareVisit]], total_moves: int
    ) -> VisitBoard:
        return cls(
            tuple(
                BoardSquare(sq, tuple(visits)) for sq, visits in enumerate(visit_lists)
            ),
            total_moves,
        )

    # ── Access ───────────────────────────────────────────────────────────

    def __getitem__(self, sq: Square) -> BoardSquare:
        return self.squares[sq]

    def __iter__(self) -> Iterator[BoardSquare]:
        return iter(self.squares)

    def square_at(self, file: int, rank: int) -> BoardSquare:
        return self.squares[make_square(file, rank)]

    def by_name(self, name: str) -> BoardSquare:
        return self.squares[parse_square(name)]

    def rows(self) -> tuple[tuple[BoardSquare, ...], ...]:
        """Matrix view: ``rows()[rank][file]``."""
        return tuple(self.squares[rank * 8 : rank * 8 + 8] for rank in range(8))

    @property
    def total_visits(self) -> int:
        return sum(len(square.visits) for square in self.squares)


@dataclass(slots=True, frozen=True)
class GameInfo:
    """PGN header metadata plus the SAN move list."""

    white: str = "?"
    black: str = "?"
    event: str = "?"
    date: str = "?"
    result: str = "*"
    start_fen: str = STARTING_FEN
    sans: tuple[str, ...] = field(default_factory=tuple)
