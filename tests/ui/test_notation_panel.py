"""Tests for the move notation panel."""

from __future__ import annotations

from chesshue.core.enums import Color, Emphasis
from chesshue.ui.panels.move_panel import MovePanel, figurine_san


def test_figurine_san_replaces_leading_piece_and_promotion() -> None:
    assert figurine_san("Nf3", Color.WHITE) == "♘f3"
    assert figurine_san("e8=Q+", Color.WHITE) == "e8=♕+"
    assert figurine_san("Qxd2+", Color.BLACK) == "♛xd2+"


def test_set_sans_and_toggle_notation() -> None:
    panel = MovePanel()
    panel.set_sans(["Nf3", "Nc6", "e4"])

    assert panel.move_button(1).text() == "♘f3"
    assert panel.move_button(2).text() == "♞c6"
    assert panel.move_button(4) is None

    panel.set_use_figurine_notation(False)
    assert panel.move_button(1).text() == "Nf3"


def test_click_reports_ply() -> None:
    panel = MovePanel()
    panel.set_sans(["e4", "e5", "Nf3"])
    clicked: list[int] = []
    panel.move_clicked.connect(clicked.append)

    panel.move_button(3).click()
    assert clicked == [3]


def test_apply_emphasis_per_ply() -> None:
    panel = MovePanel()
    panel.set_sans(["e4", "e5"])
    panel.apply_emphasis((Emphasis.FOCUSED, Emphasis.DIMMED), Emphasis.EMPHASIZED)

    assert panel.move_button(1).property("emphasis") == "focused"
    assert panel.move_button(2).property("emphasis") == "dimmed"
    assert panel.header().property("emphasis") == "emphasized"
