"""MovePanel — the game's moves in SAN, hoverable and clickable per ply."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtCore import QEvent, Qt, pyqtSignal
from PyQt6.QtGui import QEnterEvent, QFont
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QSizePolicy,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from chesshue.core.enums import Color, Emphasis
from chesshue.ui.styles.theme import set_emphasis

# Unicode figurine symbols: white = outline, black = filled
_FIGURINE: dict[Color, dict[str, str]] = {
    Color.WHITE: {"K": "♔", "Q": "♕", "R": "♖", "B": "♗", "N": "♘"},
    Color.BLACK: {"K": "♚", "Q": "♛", "R": "♜", "B": "♝", "N": "♞"},
}

_MOVE_BUTTON_STYLE = """
QToolButton {
    background: transparent;
    color: #d4d4d4;
    border: 1px solid transparent;
    border-radius: 4px;
    padding: 2px 8px;
    text-align: left;
    font-family: "AdwaitaMono Nerd Font", "Adwaita Sans", monospace;
    font-size: 13px;
}
QToolButton:hover {
    background: #3c3c3c;
    border-color: #555;
}
QToolButton[emphasis="dimmed"] {
    color: #5c5c5c;
}
QToolButton[emphasis="emphasized"] {
    color: #fbbf24;
}
QToolButton[emphasis="focused"] {
    background: #264f78;
    border-color: #fbbf24;
    color: #f0f6ff;
}
"""


def figurine_san(san: str, color: Color) -> str:
    """Replace piece letters in *san* with Unicode figurine symbols for *color*."""
    table = _FIGURINE[color]

    # Replace leading piece letter (Nf3, Qxd5, Ke2…)
    if san and san[0] in table:
        san = table[san[0]] + san[1:]

    # Replace promotion target (e8=Q → e8=♕)
    if "=" in san:
        prefix, _, promo = san.partition("=")
        san = prefix + "=" + table.get(promo[:1], promo[:1]) + promo[1:]

    return san


class _MoveButton(QToolButton):
    hovered = pyqtSignal(int)  # ply, 0 on leave

    def __init__(self, text: str, ply: int) -> None:
        super().__init__()
        self.ply = ply
        self.setText(text)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.setStyleSheet(_MOVE_BUTTON_STYLE)

    def enterEvent(self, event: QEnterEvent | None) -> None:
        self.hovered.emit(self.ply)
        super().enterEvent(event)

    def leaveEvent(self, event: QEvent | None) -> None:
        self.hovered.emit(0)
        super().leaveEvent(event)


class MovePanel(QWidget):
    """Move notation block.

    Signals:
        move_hovered(int): 1-based ply under the pointer, ``0`` when none.
        move_clicked(int): 1-based ply to jump the timeline to.
        notation_hovered(bool): Pointer entered / left the whole block.
    """

    move_hovered = pyqtSignal(int)
    move_clicked = pyqtSignal(int)
    notation_hovered = pyqtSignal(bool)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._sans: list[str] = []
        self._move_buttons: dict[int, _MoveButton] = {}
        self._use_figurine_notation = True
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._header = QLabel("Moves")
        self._header.setFont(QFont("Adwaita Sans", 12, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._header)

        self._list = QListWidget()
        self._list.setAlternatingRowColors(True)
        self._list.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        self._list.setFont(QFont("AdwaitaMono Nerd Font", 12))
        layout.addWidget(self._list)

    # ── Public API ───────────────────────────────────────────────────────

    def header(self) -> QLabel:
        return self._header

    def move_button(self, ply: int) -> QToolButton | None:
        return self._move_buttons.get(ply)

    def set_sans(self, sans: Sequence[str]) -> None:
        """Rebuild the entire move list."""
        self._sans = list(sans)
        self._rebuild_list()

    def set_use_figurine_notation(self, enabled: bool) -> None:
        if self._use_figurine_notation == enabled:
            return
        self._use_figurine_notation = enabled
        self._rebuild_list()

    def apply_emphasis(self, moves: Sequence[Emphasis], header: Emphasis) -> None:
        """Per-ply emphasis (index = ply - 1) plus the block header."""
        for ply, btn in self._move_buttons.items():
            emphasis = moves[ply - 1] if ply <= len(moves) else Emphasis.NEUTRAL
            set_emphasis(btn, emphasis)
        set_emphasis(self._header, header)

    # ── Events ───────────────────────────────────────────────────────────

    def enterEvent(self, event: QEnterEvent | None) -> None:
        self.notation_hovered.emit(True)
        super().enterEvent(event)

    def leaveEvent(self, event: QEvent | None) -> None:
        self.notation_hovered.emit(False)
        super().leaveEvent(event)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _format_san(self, san: str, color: Color) -> str:
        if self._use_figurine_notation:
            return figurine_san(san, color)
        return san

    def _create_move_button(self, san: str, ply: int) -> _MoveButton:
        btn = _MoveButton(self._format_san(san, Color.from_ply(ply)), ply)
        btn.hovered.connect(self.move_hovered.emit)
        btn.clicked.connect(
            lambda _checked=False, move_ply=ply: self.move_clicked.emit(move_ply)
        )
        self._move_buttons[ply] = btn
        return btn

    def _rebuild_list(self) -> None:
        self._list.clear()
        self._move_buttons.clear()
        for index in range(0, len(self._sans), 2):
            row_widget = QWidget()
            row_layout = QHBoxLayout(row_widget)
            row_layout.setContentsMargins(6, 2, 6, 2)
            row_layout.setSpacing(8)

            num_label = QLabel(f"{index // 2 + 1}.")
            num_label.setFont(QFont("Adwaita Sans", 12))
            num_label.setFixedWidth(28)
            num_label.setAlignment(
                Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
            )
            row_layout.addWidget(num_label)

            white_ply = index + 1
            row_layout.addWidget(
                self._create_move_button(self._sans[index], white_ply), 1
            )
            if index + 1 < len(self._sans):
                row_layout.addWidget(
                    self._create_move_button(self._sans[index + 1], white_ply + 1), 1
                )
            else:
                spacer = QWidget()
                spacer.setSizePolicy(
                    QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed
                )
                row_layout.addWidget(spacer, 1)

            item = QListWidgetItem()
            item.setSizeHint(row_widget.sizeHint())
            self._list.addItem(item)
            self._list.setItemWidget(item, row_widget)
