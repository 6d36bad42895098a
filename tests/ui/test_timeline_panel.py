"""Tests for timeline scrubbing and playback."""

from __future__ import annotations

from chesshue.core.enums import GamePhase
from chesshue.ui.panels.timeline_panel import TimelinePanel


def test_new_game_starts_at_the_end_without_signal() -> None:
    panel = TimelinePanel()
    moves: list[int] = []
    panel.move_changed.connect(moves.append)

    panel.set_total_moves(33)
    assert panel.current_move == 33
    assert panel.total_moves == 33
    assert moves == []
    assert "33 / 33" in panel._label.text()


def test_step_and_clamp() -> None:
    panel = TimelinePanel()
    panel.set_total_moves(10)
    moves: list[int] = []
    panel.move_changed.connect(moves.append)

    panel.set_move(0)
    panel.step(-1)
    panel.step(3)
    panel.set_move(99)
    assert moves == [0, 3, 10]
    assert panel._label.text().startswith("Ply 10 / 10")


def test_start_label() -> None:
    panel = TimelinePanel()
    panel.set_total_moves(5)
    panel.set_move(0)
    assert panel._label.text() == "Start / 5"


def test_phase_jump() -> None:
    panel = TimelinePanel()
    panel.set_total_moves(80)
    panel.jump_to_phase(GamePhase.OPENING)
    assert panel.current_move == 20
    panel.jump_to_phase(GamePhase.MIDDLEGAME)
    assert panel.current_move == 60


def test_playback_rewinds_and_stops_at_end() -> None:
    panel = TimelinePanel()
    panel.set_total_moves(2)

    panel.play()
    assert panel.is_playing()
    assert panel.current_move == 0

    panel._on_tick()
    panel._on_tick()
    assert panel.current_move == 2
    panel._on_tick()
    assert not panel.is_playing()


def test_phase_buttons_disabled_for_short_game() -> None:
    panel = TimelinePanel()
    panel.set_total_moves(10)
    assert panel._phase_buttons[GamePhase.OPENING].isEnabled()
    assert not panel._phase_buttons[GamePhase.ENDGAME].isEnabled()
