"""LegendPanel — piece-class color legend with hover, lock, compare and recolor."""

from __future__ import annotations

from collections.abc import Mapping

from PyQt6.QtCore import QEvent, Qt, pyqtSignal
from PyQt6.QtGui import QEnterEvent, QFont
from PyQt6.QtWidgets import (
    QCheckBox,
    QGridLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from chesshue.core.enums import Emphasis
from chesshue.core.piece import ALL_PIECE_CLASSES, PieceClass
from chesshue.ui.styles.theme import glow_color, set_emphasis
from chesshue.visual.compositor import ColorResolver, GlowKind

_ROLE_GLOWS = (GlowKind.ONLY_FIRST, GlowKind.ONLY_SECOND)


class _LegendButton(QPushButton):
    """Checkable swatch button that reports pointer enter/leave."""

    hovered = pyqtSignal(object)  # PieceClass | None

    def __init__(self, piece_class: PieceClass, parent: QWidget | None = None) -> None:
        super().__init__(f"{piece_class.symbol}  {piece_class.label}", parent)
        self.piece_class = piece_class
        self.setCheckable(True)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setFont(QFont("Adwaita Sans", 10))
        self.setMinimumHeight(30)
        self.setContextMenuPolicy(Qt.ContextMenuPolicy.CustomContextMenu)

    def enterEvent(self, event: QEnterEvent | None) -> None:
        self.hovered.emit(self.piece_class)
        super().enterEvent(event)

    def leaveEvent(self, event: QEvent | None) -> None:
        self.hovered.emit(None)
        super().leaveEvent(event)


class LegendPanel(QWidget):
    """Twelve piece-class swatches plus the compare-mode switch.

    Signals:
        piece_hovered(object): ``PieceClass`` under the pointer, or ``None``.
        piece_clicked(object): ``PieceClass`` whose lock should toggle.
        compare_toggled(bool): Compare-mode check box changed.
        color_edit_requested(object): ``PieceClass`` right-clicked for a
            custom color.
    """

    piece_hovered = pyqtSignal(object)
    piece_clicked = pyqtSignal(object)
    compare_toggled = pyqtSignal(bool)
    color_edit_requested = pyqtSignal(object)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._buttons: dict[PieceClass, _LegendButton] = {}
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        header = QLabel("Pieces")
        header.setFont(QFont("Adwaita Sans", 12, QFont.Weight.Bold))
        header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(header)

        grid = QGridLayout()
        grid.setSpacing(4)
        for index, piece_class in enumerate(ALL_PIECE_CLASSES):
            btn = _LegendButton(piece_class)
            btn.hovered.connect(self.piece_hovered.emit)
            btn.clicked.connect(
                lambda _checked=False, pc=piece_class: self.piece_clicked.emit(pc)
            )
            btn.customContextMenuRequested.connect(
                lambda _pos, pc=piece_class: self.color_edit_requested.emit(pc)
            )
            # White classes in the left column, black in the right.
            grid.addWidget(btn, index % 6, index // 6)
            self._buttons[piece_class] = btn
        layout.addLayout(grid)

        self._compare = QCheckBox("Compare locked pieces")
        self._compare.setEnabled(False)
        self._compare.toggled.connect(self.compare_toggled.emit)
        layout.addWidget(self._compare)
        layout.addStretch()

    # ── Public API ───────────────────────────────────────────────────────

    def button(self, piece_class: PieceClass) -> QPushButton:
        return self._buttons[piece_class]

    def compare_checkbox(self) -> QCheckBox:
        return self._compare

    def set_palette(self, palette: ColorResolver) -> None:
        """Recolor the swatches."""
        for piece_class, btn in self._buttons.items():
            color = palette.resolve(piece_class.piece_type, piece_class.color)
            btn.setStyleSheet(f"QPushButton {{ border-left: 8px solid {color}; }}")

    def set_locks(self, locked: tuple[PieceClass, ...], compare_mode: bool) -> None:
        """Mirror the lock order; compare only makes sense with two locks."""
        for piece_class, btn in self._buttons.items():
            btn.setChecked(piece_class in locked)
            btn.setToolTip("")
        if compare_mode and len(locked) == 2:
            for role, piece_class in enumerate(locked):
                name = glow_color(_ROLE_GLOWS[role]).name()
                tip = f"Compare role {role + 1} ({name})"
                self._buttons[piece_class].setToolTip(tip)
        self._compare.setEnabled(len(locked) == 2)
        self._compare.blockSignals(True)
        self._compare.setChecked(compare_mode)
        self._compare.blockSignals(False)

    def apply_emphasis(self, legend: Mapping[PieceClass, Emphasis]) -> None:
        for piece_class, btn in self._buttons.items():
            set_emphasis(btn, legend.get(piece_class, Emphasis.NEUTRAL))
