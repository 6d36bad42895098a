"""Visualization engine: pure functions from visit history to draw primitives.

Quick start::

    from chesshue.visual import visualize_pgn, get_palette

    game = visualize_pgn("1. e4 e5 2. Nf3 Nc6")
    squares = game.render(get_palette("modern"), move=2)
"""

from chesshue.visual.accumulator import accumulate
from chesshue.visual.compositor import (
    BoardColors,
    CompositorConfig,
    RectPrimitive,
    composite_board,
    composite_square,
)
from chesshue.visual.game import GameVisualization, visualize_pgn, visualize_sans
from chesshue.visual.highlight import (
    NEUTRAL_STATE,
    HighlightSource,
    HighlightState,
    HighlightStore,
    NullHighlightSource,
    resolve_highlights,
)
from chesshue.visual.palette import (
    PALETTES,
    Palette,
    PaletteContext,
    get_palette,
    random_custom_palette,
)
from chesshue.visual.snapshot import InteractionSnapshot
from chesshue.visual.stats import piece_activity, territory
from chesshue.visual.timeline import clamp_move, filter_board, phase_of, phase_range

__all__ = [
    # Pipeline
    "accumulate",
    "filter_board",
    "clamp_move",
    "phase_of",
    "phase_range",
    "resolve_highlights",
    "composite_square",
    "composite_board",
    # Palettes
    "PALETTES",
    "Palette",
    "PaletteContext",
    "get_palette",
    "random_custom_palette",
    # Highlight state
    "NEUTRAL_STATE",
    "HighlightSource",
    "HighlightState",
    "HighlightStore",
    "NullHighlightSource",
    # Output / config
    "BoardColors",
    "CompositorConfig",
    "RectPrimitive",
    # Games
    "GameVisualization",
    "InteractionSnapshot",
    "piece_activity",
    "territory",
    "visualize_pgn",
    "visualize_sans",
]
