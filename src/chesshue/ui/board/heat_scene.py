"""HeatBoardScene — QGraphicsScene that draws the composited heat board."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chesshue.core.models import BoardSquare, VisitBoard
from chesshue.core.types import Square, file_of, make_square, rank_of
from chesshue.ui.styles.theme import BoardTheme, qcolor
from chesshue.visual.compositor import (
    BoardColors,
    ColorResolver,
    PrimitiveKind,
    RectPrimitive,
    square_origin,
)
from chesshue.visual.game import GameVisualization
from chesshue.visual.highlight import NEUTRAL_STATE, HighlightState
from chesshue.visual.palette import get_palette
from chesshue.visual.snapshot import DEFAULT_PIECE_OPACITY

_Z_VALUES: dict[PrimitiveKind, float] = {
    PrimitiveKind.BASE: 0.0,
    PrimitiveKind.LAYER: 0.2,
    PrimitiveKind.GLOW: 0.6,
}


class HeatBoardScene(QGraphicsScene):
    """Renders compositor output, coordinates and the piece overlay.

    Signals:
        square_hovered(int): Square under the pointer, ``-1`` once it leaves.
    """

    square_hovered = pyqtSignal(int)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.light()
        self._colors = BoardColors.light_mode()
        self._palette: ColorResolver = get_palette("modern")
        self._game = GameVisualization()
        self._move: int | None = None
        self._state: HighlightState = NEUTRAL_STATE
        self._flipped = False
        self._show_coordinates = True
        self._piece_opacity = DEFAULT_PIECE_OPACITY
        self._hovered: Square | None = None

        self._primitives: tuple[tuple[RectPrimitive, ...], ...] = ()
        self._rect_items: list[QGraphicsRectItem] = []
        self._piece_items: list[QGraphicsSimpleTextItem] = []
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self.setSceneRect(0, 0, 8 * self.TILE, 8 * self.TILE)
        self.redraw()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def game(self) -> GameVisualization:
        return self._game

    @property
    def current_move(self) -> int:
        return self._game.total_moves if self._move is None else self._move

    @property
    def hovered_square(self) -> Square | None:
        return self._hovered

    @property
    def primitives(self) -> tuple[tuple[RectPrimitive, ...], ...]:
        """Last compositor output, indexed by square."""
        return self._primitives

    def visible_board(self) -> VisitBoard:
        return self._game.board_at(self._move)

    def board_square(self, sq: Square) -> BoardSquare:
        """The square as currently shown (timeline filter applied)."""
        return self.visible_board()[sq]

    def set_game(self, game: GameVisualization) -> None:
        self._game = game
        self._move = None
        self._hovered = None
        self.redraw()

    def set_move(self, move: int | None) -> None:
        """Move the timeline cursor (``None`` = whole game)."""
        self._move = move
        self.redraw()

    def set_palette(self, palette: ColorResolver) -> None:
        self._palette = palette
        self.redraw()

    def set_highlight_state(self, state: HighlightState) -> None:
        self._state = state
        self.redraw()

    def set_dark_mode(self, enabled: bool) -> None:
        if enabled:
            self._theme, self._colors = BoardTheme.dark(), BoardColors.dark_mode()
        else:
            self._theme, self._colors = BoardTheme.light(), BoardColors.light_mode()
        self.setBackgroundBrush(QBrush(self._theme.background))
        self.redraw()

    def set_flipped(self, flipped: bool) -> None:
        self._flipped = flipped
        self.redraw()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_show_coordinates(self, visible: bool) -> None:
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_piece_opacity(self, opacity: float) -> None:
        self._piece_opacity = max(0.0, min(1.0, opacity))
        for item in self._piece_items:
            item.setOpacity(self._piece_opacity)

    def clear_hover(self) -> None:
        if self._hovered is not None:
            self._hovered = None
            self.square_hovered.emit(-1)

    # ── Drawing ──────────────────────────────────────────────────────────

    def redraw(self) -> None:
        """Rebuild every item from the current game, cursor and state."""
        self._clear_items(self._rect_items)
        self._clear_items(self._piece_items)
        self._clear_items(self._coord_items)

        self._primitives = self._game.render(
            self._palette,
            self._state,
            move=self._move,
            tile_size=self.TILE,
            colors=self._colors,
            flipped=self._flipped,
        )
        for square_primitives in self._primitives:
            for primitive in square_primitives:
                self._rect_items.append(self._add_primitive(primitive))

        self._draw_pieces()
        self._draw_coordinates()

    def _add_primitive(self, primitive: RectPrimitive) -> QGraphicsRectItem:
        item = QGraphicsRectItem(
            primitive.x, primitive.y, primitive.width, primitive.height
        )
        if primitive.fill is None:
            item.setBrush(QBrush(Qt.BrushStyle.NoBrush))
        else:
            item.setBrush(QBrush(qcolor(primitive.fill)))
        if primitive.stroke is None:
            item.setPen(QPen(Qt.PenStyle.NoPen))
        else:
            pen = QPen(qcolor(primitive.stroke, primitive.stroke_opacity))
            pen.setWidthF(primitive.stroke_width)
            item.setPen(pen)
        item.setOpacity(primitive.opacity)
        item.setZValue(_Z_VALUES[primitive.kind])
        self.addItem(item)
        return item

    def _draw_pieces(self) -> None:
        t = self.TILE
        font = QFont("Adwaita Sans", max(12, int(t * 0.55)))
        for sq, piece_class in sorted(self._game.pieces_at(self._move).items()):
            x, y = square_origin(sq, t, flipped=self._flipped)
            txt = QGraphicsSimpleTextItem(piece_class.symbol)
            txt.setFont(font)
            txt.setBrush(QBrush(self._theme.border))
            bounds = txt.boundingRect()
            txt.setPos(x + (t - bounds.width()) / 2, y + (t - bounds.height()) / 2)
            txt.setOpacity(self._piece_opacity)
            txt.setZValue(1)
            self.addItem(txt)
            self._piece_items.append(txt)

    def _draw_coordinates(self) -> None:
        t = self.TILE
        font = QFont("Adwaita Sans", max(9, t // 8))
        for sq in range(64):
            f, r = file_of(sq), rank_of(sq)
            x, y = square_origin(sq, t, flipped=self._flipped)
            is_light = (f + r) % 2 == 1
            theme = self._theme
            brush = QBrush(theme.coord_dark if is_light else theme.coord_light)

            # Rank numbers (left edge)
            if (f == 0 and not self._flipped) or (f == 7 and self._flipped):
                self._add_coord(str(r + 1), font, brush, x + 2, y + 1)

            # File letters (bottom edge)
            if (r == 0 and not self._flipped) or (r == 7 and self._flipped):
                letter = chr(ord("a") + f)
                self._add_coord(letter, font, brush, x + t - 12, y + t - 16)

    def _add_coord(
        self, text: str, font: QFont, brush: QBrush, x: float, y: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(text)
        txt.setFont(font)
        txt.setBrush(brush)
        txt.setPos(x, y)
        txt.setZValue(0.9)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    def _clear_items(self, items: list) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Mouse interaction ────────────────────────────────────────────────

    def mouseMoveEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is not None:
            self.hover_at(event.scenePos())
        super().mouseMoveEvent(event)

    def hover_at(self, pos: QPointF) -> None:
        sq = self._pos_to_square(pos)
        if sq == self._hovered:
            return
        self._hovered = sq
        self.square_hovered.emit(-1 if sq is None else sq)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        if self._flipped:
            f, r = 7 - col, row
        else:
            f, r = col, 7 - row
        return make_square(f, r)
