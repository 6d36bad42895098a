"""Layer compositor: one square's visit history → nested rectangles.

Every board renderer goes through :func:`composite_square`. It emits a
flat, ordered list of :class:`RectPrimitive` (base square, color layers
largest first, optional glow ring) and nothing else, so any 2D backend
can draw it.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

from chesshue.core.enums import Color, Emphasis, OverlapClass, PieceType
from chesshue.core.models import SquareVisit, VisitBoard
from chesshue.core.types import file_of, rank_of
from chesshue.visual.highlight import (
    HighlightResolution,
    HighlightSourceKind,
    SquareHighlight,
)


class ColorResolver(Protocol):
    def resolve(self, piece_type: PieceType, color: Color) -> str: ...


@dataclass(frozen=True, slots=True)
class CompositorConfig:
    padding_ratio: float = 0.08
    shrink_ratio: float = 0.7
    max_layers: int = 6
    min_layer_ratio: float = 0.1
    dimmed_opacity: float = 0.15
    dimmed_base_opacity: float = 0.3
    glow_ratio: float = 0.02


DEFAULT_CONFIG = CompositorConfig()


@dataclass(frozen=True, slots=True)
class BoardColors:
    light: str
    dark: str
    border: str

    @classmethod
    def light_mode(cls) -> BoardColors:
        return cls(light="#F5F5F4", dark="#D6D3D1", border="#A8A29E")

    @classmethod
    def dark_mode(cls) -> BoardColors:
        return cls(light="#3F3F46", dark="#27272A", border="#18181B")

    def square_color(self, is_light: bool) -> str:
        return self.light if is_light else self.dark


class PrimitiveKind(StrEnum):
    BASE = "base"
    LAYER = "layer"
    GLOW = "glow"


class GlowKind(StrEnum):
    HOVER = "hover"
    OVERLAP = "overlap"
    ONLY_FIRST = "only-first"
    ONLY_SECOND = "only-second"
    SELECTION = "selection"


# color, opacity, stroke width as a multiple of the glow unit
_GLOW_STYLES: dict[GlowKind, tuple[str, float, float]] = {
    GlowKind.HOVER: ("#FBBF24", 0.8, 2.0),
    GlowKind.OVERLAP: ("#A855F7", 0.8, 2.0),
    GlowKind.ONLY_FIRST: ("#38BDF8", 0.6, 1.5),
    GlowKind.ONLY_SECOND: ("#FB7185", 0.6, 1.5),
    GlowKind.SELECTION: ("#FFFFFF", 0.6, 1.0),
}

_OVERLAP_GLOWS: dict[OverlapClass, GlowKind] = {
    OverlapClass.OVERLAP: GlowKind.OVERLAP,
    OverlapClass.ONLY_FIRST: GlowKind.ONLY_FIRST,
    OverlapClass.ONLY_SECOND: GlowKind.ONLY_SECOND,
}


def glow_style(kind: GlowKind) -> tuple[str, float, float]:
    return _GLOW_STYLES[kind]


@dataclass(frozen=True, slots=True)
class RectPrimitive:
    """Axis-aligned rectangle; ``fill`` is ``None`` for stroke-only glows."""

    x: float
    y: float
    width: float
    height: float
    fill: str | None
    opacity: float = 1.0
    stroke: str | None = None
    stroke_width: float = 0.0
    stroke_opacity: float = 1.0
    kind: PrimitiveKind = PrimitiveKind.LAYER
    glow: GlowKind | None = None


@dataclass(frozen=True, slots=True)
class Layer:
    """One unique color on a square.

    ``role`` is the index into the active piece set of the strongest
    matching visit (0 = first lock), ``None`` when nothing matched.
    """

    color: str
    matches: bool
    role: int | None = None


def _match_rank(role: int | None, active_count: int) -> int:
    return 0 if role is None else active_count - role


def collapse_layers(
    visits: Sequence[SquareVisit],
    palette: ColorResolver,
    highlight: SquareHighlight | None = None,
) -> list[Layer]:
    """Unique colors in first-appearance order, tagged with their match.

    A later visit of the same color only upgrades the layer's role when
    it matches a strictly higher-precedence piece (first lock beats
    second lock).
    """
    active = highlight.active_pieces if highlight is not None else ()
    is_active = highlight is not None and highlight.is_active
    layers: list[Layer] = []
    index_of: dict[str, int] = {}

    for visit in visits:
        color = palette.resolve(visit.piece_type, visit.color)
        piece_class = visit.piece_class
        role = active.index(piece_class) if piece_class in active else None
        matches = not is_active or role is not None
        existing = index_of.get(color)
        if existing is None:
            index_of[color] = len(layers)
            layers.append(Layer(color, matches, role))
            continue
        layer = layers[existing]
        if _match_rank(role, len(active)) > _match_rank(layer.role, len(active)):
            layers[existing] = Layer(color, True, role)
        elif matches and not layer.matches:
            layers[existing] = Layer(color, True, layer.role)
    return layers


def layer_sizes(
    count: int, size: float, config: CompositorConfig = DEFAULT_CONFIG
) -> list[float]:
    """Side lengths of up to ``config.max_layers`` nested layers."""
    nesting = min(count, config.max_layers)
    if nesting <= 0:
        return []
    current = size - 2 * size * config.padding_ratio
    reduction = current * config.shrink_ratio / nesting
    sizes: list[float] = []
    for _ in range(nesting):
        sizes.append(current)
        current -= reduction
        if current < size * config.min_layer_ratio:
            break
    return sizes


def _glow_kind(highlight: SquareHighlight) -> GlowKind | None:
    if highlight.is_hovered or highlight.is_move_target:
        return GlowKind.HOVER
    if highlight.emphasis is not Emphasis.EMPHASIZED:
        return None
    if highlight.source not in (HighlightSourceKind.LOCK, HighlightSourceKind.LEGEND):
        return None
    if highlight.overlap is not None:
        return _OVERLAP_GLOWS.get(highlight.overlap)
    return GlowKind.SELECTION


def _layer_opacity(
    layer: Layer, highlight: SquareHighlight | None, config: CompositorConfig
) -> float:
    if highlight is None or not highlight.is_active or highlight.is_hovered:
        return 1.0
    if highlight.emphasis is Emphasis.NEUTRAL:
        return 1.0
    return 1.0 if layer.matches else config.dimmed_opacity


def composite_square(
    visits: Sequence[SquareVisit],
    palette: ColorResolver,
    highlight: SquareHighlight | None = None,
    *,
    x: float = 0.0,
    y: float = 0.0,
    size: float = 1.0,
    base_color: str | None = None,
    config: CompositorConfig = DEFAULT_CONFIG,
) -> tuple[RectPrimitive, ...]:
    """Draw list for one square, back to front.

    Pure: the same visits, palette and highlight always give an equal
    tuple. ``highlight=None`` renders the neutral state. The base square
    is emitted only when *base_color* is given.
    """
    primitives: list[RectPrimitive] = []

    if base_color is not None:
        dimmed = highlight is not None and highlight.emphasis.is_dimmed
        primitives.append(
            RectPrimitive(
                x,
                y,
                size,
                size,
                base_color,
                opacity=config.dimmed_base_opacity if dimmed else 1.0,
                kind=PrimitiveKind.BASE,
            )
        )

    layers = collapse_layers(visits, palette, highlight)
    for layer, side in zip(layers, layer_sizes(len(layers), size, config)):
        offset = (size - side) / 2
        primitives.append(
            RectPrimitive(
                x + offset,
                y + offset,
                side,
                side,
                layer.color,
                opacity=_layer_opacity(layer, highlight, config),
            )
        )

    glow = _glow_kind(highlight) if highlight is not None else None
    if glow is not None:
        color, opacity, width_factor = _GLOW_STYLES[glow]
        unit = size * config.glow_ratio
        primitives.append(
            RectPrimitive(
                x + unit,
                y + unit,
                size - 2 * unit,
                size - 2 * unit,
                None,
                stroke=color,
                stroke_width=unit * width_factor,
                stroke_opacity=opacity,
                kind=PrimitiveKind.GLOW,
                glow=glow,
            )
        )

    return tuple(primitives)


def square_origin(
    square: int, tile_size: float, *, flipped: bool = False
) -> tuple[float, float]:
    """Top-left corner of *square* with rank 8 at the top (unless flipped)."""
    file, rank = file_of(square), rank_of(square)
    if flipped:
        return (7 - file) * tile_size, rank * tile_size
    return file * tile_size, (7 - rank) * tile_size


def composite_board(
    board: VisitBoard,
    palette: ColorResolver,
    resolution: HighlightResolution | None = None,
    *,
    tile_size: float = 80.0,
    colors: BoardColors | None = None,
    flipped: bool = False,
    config: CompositorConfig = DEFAULT_CONFIG,
) -> tuple[tuple[RectPrimitive, ...], ...]:
    """Composite all 64 squares; the result is indexed by square."""
    colors = colors or BoardColors.light_mode()
    result: list[tuple[RectPrimitive, ...]] = []
    for board_square in board:
        x, y = square_origin(board_square.square, tile_size, flipped=flipped)
        highlight = resolution.square(board_square.square) if resolution else None
        result.append(
            composite_square(
                board_square.visits,
                palette,
                highlight,
                x=x,
                y=y,
                size=tile_size,
                base_color=colors.square_color(board_square.is_light),
                config=config,
            )
        )
    return tuple(result)
