"""Visual theme constants and QSS styles for Chesshue."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import QWidget

from chesshue.core.enums import Emphasis
from chesshue.visual.compositor import BoardColors, GlowKind, glow_style


def qcolor(hex_color: str, opacity: float = 1.0) -> QColor:
    """``#RRGGBB`` plus an opacity in 0..1 → QColor."""
    color = QColor(hex_color)
    color.setAlphaF(max(0.0, min(1.0, opacity)))
    return color


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the heat board."""

    light_square: QColor
    dark_square: QColor
    border: QColor
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares
    background: QColor

    @classmethod
    def from_colors(cls, colors: BoardColors, *, dark_mode: bool) -> BoardTheme:
        return cls(
            light_square=qcolor(colors.light),
            dark_square=qcolor(colors.dark),
            border=qcolor(colors.border),
            coord_light=qcolor(colors.light),
            coord_dark=qcolor(colors.dark),
            background=QColor(30, 30, 30) if dark_mode else QColor(250, 250, 249),
        )

    @classmethod
    def light(cls) -> BoardTheme:
        return cls.from_colors(BoardColors.light_mode(), dark_mode=False)

    @classmethod
    def dark(cls) -> BoardTheme:
        return cls.from_colors(BoardColors.dark_mode(), dark_mode=True)


def glow_color(kind: GlowKind) -> QColor:
    """Stroke colour of a glow ring, alpha included."""
    hex_color, opacity, _width = glow_style(kind)
    return qcolor(hex_color, opacity)


def set_emphasis(widget: QWidget, emphasis: Emphasis) -> None:
    """Expose *emphasis* to QSS as the ``emphasis`` property and repolish."""
    if widget.property("emphasis") == emphasis.value:
        return
    widget.setProperty("emphasis", emphasis.value)
    style = widget.style()
    if style is not None:
        style.unpolish(widget)
        style.polish(widget)
    widget.update()


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QLabel[emphasis="dimmed"], QPushButton[emphasis="dimmed"] {
    color: #6b6b6b;
}
QLabel[emphasis="emphasized"], QLabel[emphasis="focused"],
QPushButton[emphasis="emphasized"], QPushButton[emphasis="focused"] {
    color: #fbbf24;
    font-weight: bold;
}

QListWidget {
    background: #1e1e1e;
    color: #d4d4d4;
    border: 1px solid #3c3c3c;
    font-family: "Adwaita Sans", "Consolas", monospace;
    font-size: 13px;
}

QListWidget::item:selected {
    background: #264f78;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:checked {
    background: #264f78;
    border-color: #fbbf24;
}

QComboBox, QCheckBox {
    color: #e0e0e0;
}

QSlider::groove:horizontal {
    height: 6px;
    background: #3c3c3c;
    border-radius: 3px;
}
QSlider::handle:horizontal {
    width: 14px;
    margin: -5px 0;
    background: #fbbf24;
    border-radius: 7px;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
