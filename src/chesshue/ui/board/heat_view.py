"""HeatBoardView — QGraphicsView wrapper for the heat board scene."""

from __future__ import annotations

from PyQt6.QtCore import QEvent, Qt, pyqtSignal
from PyQt6.QtGui import QPainter, QResizeEvent
from PyQt6.QtWidgets import QGraphicsView, QSizePolicy, QWidget

from chesshue.ui.board.heat_scene import HeatBoardScene


class HeatBoardView(QGraphicsView):
    """Displays the heat scene, scaled to fit the widget.

    Signals:
        square_hovered(int): Bubbled up from HeatBoardScene.
    """

    square_hovered = pyqtSignal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        self._scene = HeatBoardScene()
        super().__init__(self._scene, parent)

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(320, 320)
        self.setMouseTracking(True)

        self._scene.square_hovered.connect(self.square_hovered.emit)

    @property
    def board_scene(self) -> HeatBoardScene:
        return self._scene

    def leaveEvent(self, event: QEvent | None) -> None:
        self._scene.clear_hover()
        super().leaveEvent(event)

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)
