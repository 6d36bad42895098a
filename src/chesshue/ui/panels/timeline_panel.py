"""TimelinePanel — scrub, step and play back through the game's plies."""

from __future__ import annotations

from PyQt6.QtCore import Qt, QTimer, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from chesshue.core.enums import GamePhase
from chesshue.visual.timeline import clamp_move, phase_of, phase_range


class TimelinePanel(QWidget):
    """Slider over ``0..total_moves`` with playback and phase jumps.

    Signals:
        move_changed(int): New cursor position (0 = before the first ply).
    """

    move_changed = pyqtSignal(int)

    PLAYBACK_INTERVAL_MS = 600

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._total = 0
        self._timer = QTimer(self)
        self._timer.setInterval(self.PLAYBACK_INTERVAL_MS)
        self._timer.timeout.connect(self._on_tick)
        self._phase_buttons: dict[GamePhase, QPushButton] = {}
        self._setup_ui()
        self._update_label()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        row = QHBoxLayout()
        self._btn_play = QPushButton("▶")
        self._btn_play.setCheckable(True)
        self._btn_play.setFixedWidth(44)
        self._btn_play.toggled.connect(self._on_play_toggled)
        row.addWidget(self._btn_play)

        self._slider = QSlider(Qt.Orientation.Horizontal)
        self._slider.setRange(0, 0)
        self._slider.valueChanged.connect(self._on_slider_changed)
        row.addWidget(self._slider, 1)

        self._label = QLabel()
        self._label.setFont(QFont("Adwaita Sans", 10))
        self._label.setMinimumWidth(110)
        row.addWidget(self._label)
        layout.addLayout(row)

        phases = QHBoxLayout()
        for phase in GamePhase:
            btn = QPushButton(phase.value.capitalize())
            btn.clicked.connect(lambda _checked=False, p=phase: self.jump_to_phase(p))
            phases.addWidget(btn)
            self._phase_buttons[phase] = btn
        layout.addLayout(phases)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def current_move(self) -> int:
        return self._slider.value()

    @property
    def total_moves(self) -> int:
        return self._total

    def is_playing(self) -> bool:
        return self._timer.isActive()

    def set_total_moves(self, total: int) -> None:
        """Reset for a new game; the cursor starts at the final position."""
        self.stop()
        self._total = max(0, total)
        self._slider.blockSignals(True)
        self._slider.setRange(0, self._total)
        self._slider.setValue(self._total)
        self._slider.blockSignals(False)
        for phase, btn in self._phase_buttons.items():
            btn.setEnabled(phase_range(phase, self._total) != (0, 0))
        self._update_label()

    def set_move(self, move: int) -> None:
        self._slider.setValue(clamp_move(move, self._total))

    def step(self, delta: int) -> None:
        self.set_move(self.current_move + delta)

    def jump_to_phase(self, phase: GamePhase) -> None:
        """Place the cursor at the last ply of *phase*."""
        start, end = phase_range(phase, self._total)
        if (start, end) != (0, 0):
            self.set_move(end)

    def play(self) -> None:
        self._btn_play.setChecked(True)

    def stop(self) -> None:
        self._btn_play.setChecked(False)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _on_play_toggled(self, playing: bool) -> None:
        if playing:
            if self.current_move >= self._total:
                self.set_move(0)
            self._btn_play.setText("⏸")
            self._timer.start()
        else:
            self._btn_play.setText("▶")
            self._timer.stop()

    def _on_tick(self) -> None:
        if self.current_move >= self._total:
            self.stop()
            return
        self.step(1)

    def _on_slider_changed(self, value: int) -> None:
        self._update_label()
        self.move_changed.emit(value)

    def _update_label(self) -> None:
        move = self.current_move
        if move == 0:
            self._label.setText(f"Start / {self._total}")
            return
        phase = phase_of(move).value.capitalize()
        self._label.setText(f"Ply {move} / {self._total} · {phase}")
