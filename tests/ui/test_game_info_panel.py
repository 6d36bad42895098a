"""Tests for the game info header."""

from __future__ import annotations

from chesshue.core.enums import AnnotationKind, Emphasis
from chesshue.core.models import GameInfo
from chesshue.ui.panels.game_info_panel import GameInfoPanel
from chesshue.visual.game import GameVisualization, visualize_pgn
from chesshue.visual.stats import piece_activity, territory


def test_shows_players_and_event() -> None:
    panel = GameInfoPanel()
    panel.set_info(GameInfo(white="Morphy", black="Isouard", event="Paris Opera"))
    assert "Morphy" in panel.player_label(AnnotationKind.WHITE_PLAYER).text()
    assert "Isouard" in panel.player_label(AnnotationKind.BLACK_PLAYER).text()
    assert "Paris Opera" in panel._event.text()


def test_player_emphasis() -> None:
    panel = GameInfoPanel()
    panel.apply_emphasis(
        {
            AnnotationKind.WHITE_PLAYER: Emphasis.FOCUSED,
            AnnotationKind.BLACK_PLAYER: Emphasis.DIMMED,
        }
    )
    white = panel.player_label(AnnotationKind.WHITE_PLAYER)
    black = panel.player_label(AnnotationKind.BLACK_PLAYER)
    assert white.property("emphasis") == "focused"
    assert black.property("emphasis") == "dimmed"


def test_stats_line(opera_pgn: str) -> None:
    game = visualize_pgn(opera_pgn)
    panel = GameInfoPanel()
    panel.set_stats(piece_activity(game.moves), territory(game.board))
    text = panel._stats.text()
    assert "Most active:" in text
    assert "Territory" in text and "%" in text


def test_stats_line_for_empty_game() -> None:
    panel = GameInfoPanel()
    game = GameVisualization()
    panel.set_stats(piece_activity(game.moves), territory(game.board))
    assert panel._stats.text() == "No moves · Territory 50% / 50%"
