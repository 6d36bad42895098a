"""Tests for the nested-rectangle compositor."""

from __future__ import annotations

import pytest

from chesshue.core.enums import Color, PieceType
from chesshue.core.models import BoardSquare, SquareVisit
from chesshue.core.piece import PieceClass
from chesshue.core.types import parse_square
from chesshue.notation.pgn import normalize_sans
from chesshue.visual.accumulator import accumulate
from chesshue.visual.compositor import (
    DEFAULT_CONFIG,
    BoardColors,
    CompositorConfig,
    GlowKind,
    PrimitiveKind,
    collapse_layers,
    composite_board,
    composite_square,
    layer_sizes,
    square_origin,
)
from chesshue.visual.highlight import (
    HighlightState,
    HoveredSquare,
    classify_square,
    resolve_highlights,
)
from chesshue.visual.palette import Palette, get_palette

WQ = PieceClass(PieceType.QUEEN, Color.WHITE)
BQ = PieceClass(PieceType.QUEEN, Color.BLACK)
WP = PieceClass(PieceType.PAWN, Color.WHITE)

_TEST_PALETTE = Palette(
    "test",
    "Test",
    {WQ: "#111111", BQ: "#111111", WP: "#222222"},
)


def _visit(piece: PieceClass, ply: int) -> SquareVisit:
    return SquareVisit(piece.piece_type, piece.color, ply)


def _layers(primitives):
    return [p for p in primitives if p.kind is PrimitiveKind.LAYER]


def _glow(primitives):
    glows = [p for p in primitives if p.kind is PrimitiveKind.GLOW]
    assert len(glows) <= 1
    return glows[0] if glows else None


class TestLayerSizes:
    def test_nested_sizes(self) -> None:
        sizes = layer_sizes(3, 100.0)
        # 84 available after padding; each step takes 84 * 0.7 / 3
        assert sizes == pytest.approx([84.0, 64.4, 44.8])

    def test_capped_at_six(self) -> None:
        assert len(layer_sizes(11, 100.0)) == 6
        assert layer_sizes(0, 100.0) == []

    def test_stops_below_minimum(self) -> None:
        config = CompositorConfig(shrink_ratio=1.0, min_layer_ratio=0.5)
        assert layer_sizes(6, 100.0, config) == pytest.approx([84.0, 70.0, 56.0])


class TestCollapseLayers:
    def test_unique_colors_in_first_appearance_order(self) -> None:
        visits = [_visit(WP, 1), _visit(WQ, 2), _visit(WP, 3), _visit(BQ, 4)]
        layers = collapse_layers(visits, _TEST_PALETTE)
        assert [layer.color for layer in layers] == ["#222222", "#111111"]
        assert all(layer.matches for layer in layers)

    @pytest.mark.parametrize("locks", [(WQ, BQ), (BQ, WQ)])
    def test_shared_color_takes_first_lock_role(self, locks) -> None:
        square = BoardSquare(parse_square("d2"), (_visit(BQ, 6), _visit(WQ, 7)))
        highlight = classify_square(square, HighlightState(locked_pieces=locks))
        layers = collapse_layers(square.visits, _TEST_PALETTE, highlight)
        assert len(layers) == 1
        assert layers[0].matches
        assert layers[0].role == 0

    def test_later_match_upgrades_unmatched_layer(self) -> None:
        square = BoardSquare(parse_square("d2"), (_visit(BQ, 6), _visit(WQ, 7)))
        highlight = classify_square(square, HighlightState(locked_pieces=(WQ,)))
        (layer,) = collapse_layers(square.visits, _TEST_PALETTE, highlight)
        assert layer.matches
        assert layer.role == 0


class TestCompositeSquare:
    def test_empty_square_is_base_only(self) -> None:
        primitives = composite_square(
            (), _TEST_PALETTE, size=80.0, base_color="#F5F5F4"
        )
        assert len(primitives) == 1
        assert primitives[0].kind is PrimitiveKind.BASE
        assert primitives[0].opacity == 1.0

    def test_no_base_without_color(self) -> None:
        primitives = composite_square([_visit(WP, 1)], _TEST_PALETTE)
        assert [p.kind for p in primitives] == [PrimitiveKind.LAYER]

    def test_layers_are_centered_and_shrinking(self) -> None:
        visits = [_visit(WP, 1), _visit(WQ, 2)]
        primitives = composite_square(visits, _TEST_PALETTE, x=80, y=160, size=100)
        layers = _layers(primitives)
        assert layers[0].width > layers[1].width
        for layer in layers:
            assert layer.width == layer.height
            assert layer.x - 80 == pytest.approx((100 - layer.width) / 2)
            assert layer.y - 160 == pytest.approx((100 - layer.width) / 2)

    def test_is_deterministic(self) -> None:
        visits = [_visit(WP, 1), _visit(WQ, 2), _visit(BQ, 3)]
        square = BoardSquare(parse_square("e4"), tuple(visits))
        highlight = classify_square(square, HighlightState(locked_pieces=(WQ,)))
        first = composite_square(visits, _TEST_PALETTE, highlight, size=64)
        second = composite_square(visits, _TEST_PALETTE, highlight, size=64)
        assert first == second

    def test_neutral_render_has_full_opacity_and_no_glow(self) -> None:
        visits = [_visit(WP, 1), _visit(WQ, 2)]
        primitives = composite_square(visits, _TEST_PALETTE, base_color="#FFFFFF")
        assert all(p.opacity == 1.0 for p in primitives)
        assert _glow(primitives) is None

    def test_lock_dims_non_matching_layers(self) -> None:
        square = BoardSquare(parse_square("e4"), (_visit(WP, 1), _visit(WQ, 2)))
        highlight = classify_square(square, HighlightState(locked_pieces=(WQ,)))
        primitives = composite_square(
            square.visits, _TEST_PALETTE, highlight, size=100, base_color="#FFFFFF"
        )
        assert primitives[0].opacity == 1.0
        opacities = [p.opacity for p in _layers(primitives)]
        assert opacities == [DEFAULT_CONFIG.dimmed_opacity, 1.0]
        glow = _glow(primitives)
        assert glow is not None and glow.glow is GlowKind.SELECTION

    def test_unmatched_square_is_dimmed(self) -> None:
        square = BoardSquare(parse_square("e4"), (_visit(WP, 1),))
        highlight = classify_square(square, HighlightState(locked_pieces=(WQ,)))
        primitives = composite_square(
            square.visits, _TEST_PALETTE, highlight, base_color="#FFFFFF"
        )
        assert primitives[0].opacity == DEFAULT_CONFIG.dimmed_base_opacity
        assert _layers(primitives)[0].opacity == DEFAULT_CONFIG.dimmed_opacity
        assert _glow(primitives) is None


class TestGlows:
    @pytest.fixture
    def board(self):
        sans = ["e4", "d5", "exd5", "Qxd5", "Nc3", "Qxd2+", "Qxd2", "Nf6", "Qd4"]
        return accumulate(normalize_sans(sans))

    def test_hovered_square_ring(self, board) -> None:
        d5 = board.by_name("d5")
        state = HighlightState(hovered_square=HoveredSquare.from_board_square(d5))
        highlight = resolve_highlights(board, state).square(d5.square)
        palette = get_palette("modern")
        primitives = composite_square(d5.visits, palette, highlight, size=100)
        glow = _glow(primitives)
        assert glow is not None
        assert glow.glow is GlowKind.HOVER
        assert glow.stroke == "#FBBF24"
        assert glow.stroke_width == pytest.approx(4.0)
        assert glow.x == pytest.approx(2.0)
        assert glow.width == pytest.approx(96.0)
        assert all(layer.opacity == 1.0 for layer in _layers(primitives))

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("d2", GlowKind.OVERLAP),
            ("d4", GlowKind.ONLY_FIRST),
            ("d5", GlowKind.ONLY_SECOND),
        ],
    )
    def test_compare_rings(self, board, name, expected) -> None:
        state = HighlightState(locked_pieces=(WQ, BQ), compare_mode=True)
        square = board.by_name(name)
        highlight = classify_square(square, state)
        primitives = composite_square(square.visits, get_palette("modern"), highlight)
        glow = _glow(primitives)
        assert glow is not None
        assert glow.glow is expected


class TestCompositeBoard:
    def test_origin_and_orientation(self) -> None:
        a1 = parse_square("a1")
        assert square_origin(a1, 80) == (0, 560)
        assert square_origin(a1, 80, flipped=True) == (560, 0)
        assert square_origin(parse_square("h8"), 80) == (560, 0)

    def test_sixty_four_squares_with_board_colors(self) -> None:
        board = accumulate(normalize_sans(["e4", "e5"]))
        colors = BoardColors.dark_mode()
        squares = composite_board(board, get_palette("modern"), colors=colors)
        assert len(squares) == 64
        a1 = squares[parse_square("a1")]
        assert a1[0].kind is PrimitiveKind.BASE
        assert a1[0].fill == colors.dark
        assert squares[parse_square("h1")][0].fill == colors.light
        assert len(_layers(squares[parse_square("e4")])) == 1

    def test_render_is_repeatable(self) -> None:
        board = accumulate(normalize_sans(["e4", "e5", "Nf3"]))
        resolution = resolve_highlights(board, HighlightState(locked_pieces=(WP,)))
        palette = get_palette("modern")
        assert composite_board(board, palette, resolution) == composite_board(
            board, palette, resolution
        )
