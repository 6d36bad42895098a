"""GameInfoPanel — players, event line and game stats; names are hover targets."""

from __future__ import annotations

from collections.abc import Mapping

from PyQt6.QtCore import QEvent, Qt, pyqtSignal
from PyQt6.QtGui import QEnterEvent, QFont
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from chesshue.core.enums import AnnotationKind, Emphasis
from chesshue.core.models import GameInfo
from chesshue.core.piece import PieceClass
from chesshue.ui.styles.theme import set_emphasis
from chesshue.visual.stats import Territory, most_active


class _PlayerLabel(QLabel):
    hovered = pyqtSignal(object)  # AnnotationKind | None

    def __init__(self, kind: AnnotationKind) -> None:
        super().__init__()
        self.kind = kind
        self.setFont(QFont("Adwaita Sans", 12, QFont.Weight.Bold))
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)

    def enterEvent(self, event: QEnterEvent | None) -> None:
        self.hovered.emit(self.kind)
        super().enterEvent(event)

    def leaveEvent(self, event: QEvent | None) -> None:
        self.hovered.emit(None)
        super().leaveEvent(event)


class GameInfoPanel(QWidget):
    """Signals:
    annotation_hovered(object): ``AnnotationKind`` under the pointer or ``None``.
    """

    annotation_hovered = pyqtSignal(object)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(2)

        players = QHBoxLayout()
        self._white = _PlayerLabel(AnnotationKind.WHITE_PLAYER)
        self._black = _PlayerLabel(AnnotationKind.BLACK_PLAYER)
        vs = QLabel("vs")
        vs.setAlignment(Qt.AlignmentFlag.AlignCenter)
        players.addWidget(self._white, 1)
        players.addWidget(vs)
        players.addWidget(self._black, 1)
        self._white.hovered.connect(self.annotation_hovered.emit)
        self._black.hovered.connect(self.annotation_hovered.emit)
        layout.addLayout(players)

        self._event = QLabel()
        self._event.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._event.setFont(QFont("Adwaita Sans", 10))
        layout.addWidget(self._event)

        self._stats = QLabel()
        self._stats.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._stats.setFont(QFont("Adwaita Sans", 9))
        layout.addWidget(self._stats)

        self.set_info(GameInfo())

    def player_label(self, kind: AnnotationKind) -> QLabel:
        return self._white if kind is AnnotationKind.WHITE_PLAYER else self._black

    def set_info(self, info: GameInfo) -> None:
        self._white.setText(f"♔ {info.white}")
        self._black.setText(f"♚ {info.black}")
        self._event.setText(f"{info.event} · {info.date} · {info.result}")

    def set_stats(
        self, activity: Mapping[PieceClass, int], territory: Territory
    ) -> None:
        """Busiest piece class and the white/black share of visits."""
        busiest = most_active(dict(activity))
        if busiest is None:
            lead = "No moves"
        else:
            count = activity[busiest]
            lead = f"Most active: {busiest.symbol} {busiest.label} ({count})"
        self._stats.setText(
            f"{lead} · Territory {territory.white_percent}% / "
            f"{territory.black_percent}%"
        )

    def apply_emphasis(self, annotations: Mapping[AnnotationKind, Emphasis]) -> None:
        for label in (self._white, self._black):
            set_emphasis(label, annotations.get(label.kind, Emphasis.NEUTRAL))
