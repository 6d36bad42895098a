"""MainWindow — top-level viewer window wiring every panel to the highlight store."""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QCheckBox,
    QColorDialog,
    QComboBox,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QSlider,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from chesshue.core.enums import AnnotationKind
from chesshue.core.piece import PieceClass
from chesshue.ui.board.heat_view import HeatBoardView
from chesshue.ui.panels.game_info_panel import GameInfoPanel
from chesshue.ui.panels.legend_panel import LegendPanel
from chesshue.ui.panels.move_panel import MovePanel
from chesshue.ui.panels.timeline_panel import TimelinePanel
from chesshue.ui.settings import AppSettings
from chesshue.ui.styles.theme import qcolor
from chesshue.visual.game import GameVisualization, visualize_pgn
from chesshue.visual.highlight import HighlightState, HighlightStore, resolve_highlights
from chesshue.visual.palette import (
    CUSTOM_PALETTE_ID,
    OFFICIAL_PALETTE_IDS,
    Palette,
    PaletteContext,
    palette_display_name,
)
from chesshue.visual.snapshot import InteractionSnapshot
from chesshue.visual.stats import piece_activity, territory

_LOGGER = logging.getLogger(__name__)

SAMPLE_PGN = """\
[Event "Paris Opera"]
[Date "1858.??.??"]
[White "Paul Morphy"]
[Black "Duke Karl / Count Isouard"]
[Result "1-0"]

1. e4 e5 2. Nf3 d6 3. d4 Bg4 4. dxe5 Bxf3 5. Qxf3 dxe5 6. Bc4 Nf6 7. Qb3 Qe7
8. Nc3 c6 9. Bg5 b5 10. Nxb5 cxb5 11. Bxb5+ Nbd7 12. O-O-O Rd8 13. Rxd7 Rxd7
14. Rd1 Qe6 15. Bxd7+ Nxd7 16. Qb8+ Nxb8 17. Rd8# 1-0
"""


class MainWindow(QMainWindow):
    """Main application window for Chesshue."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Chesshue")
        self.setMinimumSize(900, 640)
        self.resize(1180, 760)

        self._settings = settings or AppSettings()
        self._palettes = PaletteContext(self._settings.palette_id)
        self._highlights = HighlightStore()
        self._game = GameVisualization()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._apply_settings()

        self.load_game(visualize_pgn(SAMPLE_PGN))

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        # Legend (left)
        self._legend = LegendPanel()
        self._legend.setFixedWidth(230)
        root.addWidget(self._legend)

        # Board + timeline (center)
        center = QVBoxLayout()
        self._info_panel = GameInfoPanel()
        center.addWidget(self._info_panel)
        self._board_view = HeatBoardView()
        center.addWidget(self._board_view, stretch=1)
        self._timeline = TimelinePanel()
        center.addWidget(self._timeline)
        root.addLayout(center, stretch=3)

        # Right panel
        right = QVBoxLayout()
        right.setSpacing(6)

        palette_row = QHBoxLayout()
        palette_row.addWidget(QLabel("Palette"))
        self._palette_combo = QComboBox()
        for palette_id in (*OFFICIAL_PALETTE_IDS, CUSTOM_PALETTE_ID):
            self._palette_combo.addItem(palette_display_name(palette_id), palette_id)
        palette_row.addWidget(self._palette_combo, 1)
        right.addLayout(palette_row)

        self._btn_randomize = QPushButton("Randomize custom")
        right.addWidget(self._btn_randomize)

        self._dark_mode = QCheckBox("Dark board")
        right.addWidget(self._dark_mode)

        opacity_row = QHBoxLayout()
        opacity_row.addWidget(QLabel("Piece opacity"))
        self._opacity_slider = QSlider(Qt.Orientation.Horizontal)
        self._opacity_slider.setRange(0, 100)
        opacity_row.addWidget(self._opacity_slider, 1)
        right.addLayout(opacity_row)

        self._move_panel = MovePanel()
        right.addWidget(self._move_panel, stretch=1)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(280)
        root.addWidget(right_widget)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel("Ready")
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        # Game menu
        self._menu_game = menu_bar.addMenu("&Game")
        assert self._menu_game is not None

        self._act_open_pgn = QAction("Open PGN…", self)
        self._act_open_pgn.setShortcut("Ctrl+O")
        self._act_open_pgn.triggered.connect(self._on_open_pgn)
        self._menu_game.addAction(self._act_open_pgn)

        self._menu_game.addSeparator()

        self._act_quit = QAction("Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

        # View menu
        self._menu_view = menu_bar.addMenu("&View")
        assert self._menu_view is not None

        self._act_flip = QAction("Flip board", self)
        self._act_flip.setShortcut("F")
        self._act_flip.triggered.connect(self._on_flip)
        self._menu_view.addAction(self._act_flip)

        self._act_coords = QAction("Show coordinates", self)
        self._act_coords.setCheckable(True)
        self._act_coords.toggled.connect(self._on_show_coordinates)
        self._menu_view.addAction(self._act_coords)

        self._act_clear_locks = QAction("Clear locks", self)
        self._act_clear_locks.setShortcut("Esc")
        self._act_clear_locks.triggered.connect(lambda: self._highlights.clear_locks())
        self._menu_view.addAction(self._act_clear_locks)

        self._menu_view.addSeparator()

        self._act_prev_ply = QAction("Previous ply", self)
        self._act_prev_ply.setShortcut("Left")
        self._act_prev_ply.triggered.connect(lambda: self._timeline.step(-1))
        self._menu_view.addAction(self._act_prev_ply)

        self._act_next_ply = QAction("Next ply", self)
        self._act_next_ply.setShortcut("Right")
        self._act_next_ply.triggered.connect(lambda: self._timeline.step(1))
        self._menu_view.addAction(self._act_next_ply)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals and engine callbacks."""
        self._board_view.square_hovered.connect(self._on_square_hovered)
        self._legend.piece_hovered.connect(self._highlights.hover_legend)
        self._legend.piece_clicked.connect(self._on_piece_clicked)
        self._legend.compare_toggled.connect(self._highlights.set_compare_mode)
        self._legend.color_edit_requested.connect(self._on_edit_custom_color)
        self._move_panel.move_hovered.connect(self._on_move_hovered)
        self._move_panel.move_clicked.connect(self._timeline.set_move)
        self._move_panel.notation_hovered.connect(self._on_notation_hovered)
        self._info_panel.annotation_hovered.connect(self._highlights.hover_annotation)
        self._timeline.move_changed.connect(self._on_move_changed)
        self._palette_combo.currentIndexChanged.connect(self._on_palette_selected)
        self._btn_randomize.clicked.connect(self._on_randomize_custom)
        self._dark_mode.toggled.connect(self._on_dark_mode)
        self._opacity_slider.valueChanged.connect(self._on_piece_opacity)

        self._highlights.on_changed.append(self._on_highlight_changed)
        self._palettes.on_changed.append(self._on_palette_changed)

    def _apply_settings(self) -> None:
        scene = self._board_view.board_scene
        scene.set_palette(self._palettes.active)
        scene.set_dark_mode(self._settings.dark_mode)
        scene.set_piece_opacity(self._settings.piece_opacity)
        scene.set_show_coordinates(self._settings.show_coordinates)
        self._legend.set_palette(self._palettes.active)
        self._act_coords.setChecked(self._settings.show_coordinates)
        self._dark_mode.setChecked(self._settings.dark_mode)
        self._opacity_slider.setValue(round(self._settings.piece_opacity * 100))
        self._select_palette_in_combo(self._palettes.active.id)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def game(self) -> GameVisualization:
        return self._game

    @property
    def highlight_store(self) -> HighlightStore:
        return self._highlights

    @property
    def palette_context(self) -> PaletteContext:
        return self._palettes

    @property
    def board_view(self) -> HeatBoardView:
        return self._board_view

    def load_game(self, game: GameVisualization) -> None:
        """Show *game*; all interaction state from the previous one is dropped."""
        self._game = game
        self._highlights.reset()
        self._board_view.board_scene.set_game(game)
        self._timeline.set_total_moves(game.total_moves)
        self._move_panel.set_sans(game.info.sans)
        self._info_panel.set_info(game.info)
        self._info_panel.set_stats(piece_activity(game.moves), territory(game.board))
        self._refresh_highlights(self._highlights.snapshot())
        self._status_label.setText(
            f"{game.info.white} vs {game.info.black}: {game.total_moves} plies"
        )

    def snapshot(self) -> InteractionSnapshot:
        state = self._highlights.snapshot()
        return self._settings.apply_to_snapshot(
            InteractionSnapshot(
                locked_pieces=state.locked_pieces,
                compare_mode=state.compare_mode,
                current_move=self._timeline.current_move,
            )
        )

    def restore_snapshot(self, snapshot: InteractionSnapshot) -> None:
        restored = AppSettings.from_snapshot(snapshot)
        self._settings.palette_id = restored.palette_id
        self._settings.dark_mode = restored.dark_mode
        self._settings.piece_opacity = restored.piece_opacity
        self._palettes.select(restored.palette_id)
        self._apply_settings()
        self._timeline.set_move(snapshot.current_move)
        self._highlights.set_locked(snapshot.locked_pieces)
        self._highlights.set_compare_mode(snapshot.compare_mode)

    # ── Event handlers ───────────────────────────────────────────────────

    def _on_square_hovered(self, sq: int) -> None:
        if sq < 0:
            self._highlights.hover_square(None)
        else:
            self._highlights.hover_square(self._board_view.board_scene.board_square(sq))

    def _on_piece_clicked(self, piece_class: PieceClass) -> None:
        self._highlights.toggle_lock(piece_class)

    def _on_move_hovered(self, ply: int) -> None:
        sans = self._game.info.sans
        if 1 <= ply <= len(sans):
            self._highlights.hover_move_san(ply, sans[ply - 1])
        else:
            self._highlights.hover_move(None)

    def _on_notation_hovered(self, inside: bool) -> None:
        self._highlights.hover_annotation(
            AnnotationKind.MOVE_NOTATION if inside else None
        )

    def _on_move_changed(self, move: int) -> None:
        scene = self._board_view.board_scene
        scene.set_move(move)
        if scene.hovered_square is not None:
            self._highlights.hover_square(scene.board_square(scene.hovered_square))
        self._refresh_highlights(self._highlights.snapshot())

    def _on_highlight_changed(self, state: HighlightState) -> None:
        self._board_view.board_scene.set_highlight_state(state)
        self._refresh_highlights(state)

    def _refresh_highlights(self, state: HighlightState) -> None:
        """Push one resolved state into every label-style consumer."""
        board = self._board_view.board_scene.visible_board()
        resolution = resolve_highlights(board, state)
        self._legend.apply_emphasis(resolution.legend)
        self._legend.set_locks(state.locked_pieces, state.compare_mode)
        self._move_panel.apply_emphasis(
            resolution.moves, resolution.annotations[AnnotationKind.MOVE_NOTATION]
        )
        self._info_panel.apply_emphasis(resolution.annotations)

    def _on_palette_selected(self, index: int) -> None:
        palette_id = self._palette_combo.itemData(index)
        if palette_id is None or palette_id == self._palettes.active.id:
            return
        self._palettes.select(palette_id)

    def _on_randomize_custom(self) -> None:
        self._palettes.randomize_custom()

    def _on_edit_custom_color(self, piece_class: PieceClass) -> None:
        current = self._palettes.active.color_of(piece_class)
        color = QColorDialog.getColor(
            qcolor(current), self, f"Custom color: {piece_class.label}"
        )
        if color.isValid():
            self._palettes.set_custom_color(piece_class, color.name())

    def _on_palette_changed(self, palette: Palette) -> None:
        self._settings.palette_id = palette.id
        self._board_view.board_scene.set_palette(palette)
        self._legend.set_palette(palette)
        self._select_palette_in_combo(palette.id)

    def _on_dark_mode(self, enabled: bool) -> None:
        self._settings.dark_mode = enabled
        self._board_view.board_scene.set_dark_mode(enabled)

    def _on_piece_opacity(self, value: int) -> None:
        self._settings.piece_opacity = value / 100
        self._board_view.board_scene.set_piece_opacity(self._settings.piece_opacity)

    def _on_flip(self) -> None:
        scene = self._board_view.board_scene
        scene.set_flipped(not scene.is_flipped())

    def _on_show_coordinates(self, visible: bool) -> None:
        self._settings.show_coordinates = visible
        self._board_view.board_scene.set_show_coordinates(visible)

    def _on_open_pgn(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Open PGN", "", "PGN files (*.pgn);;All files (*)"
        )
        if file_path:
            self.open_pgn_file(Path(file_path))

    def open_pgn_file(self, path: Path) -> None:
        try:
            pgn_text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            _LOGGER.warning("Cannot read %s: %s", path, exc)
            QMessageBox.warning(self, "Open PGN", f"Cannot read {path.name}: {exc}")
            return
        game = visualize_pgn(pgn_text)
        self.load_game(game)
        if game.is_empty and pgn_text.strip():
            self._status_label.setText(f"{path.name}: no playable game found")

    # ── Internal helpers ─────────────────────────────────────────────────

    def _select_palette_in_combo(self, palette_id: str) -> None:
        index = self._palette_combo.findData(palette_id)
        if index >= 0 and index != self._palette_combo.currentIndex():
            self._palette_combo.blockSignals(True)
            self._palette_combo.setCurrentIndex(index)
            self._palette_combo.blockSignals(False)
