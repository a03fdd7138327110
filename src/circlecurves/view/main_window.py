"""
Main Application Window
=======================
The primary GUI container: header with title and language toggle, the puzzle
canvas on the left and the two number grids on the right.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects widget signals to the controller and controller
   signals back to the widgets.
"""
import logging

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QSplitter, QLabel, QPushButton,
    QGroupBox, QScrollArea
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction

from circlecurves.config import load_stylesheet
from circlecurves.controller.puzzle import PuzzleController
from circlecurves.model.texts import PuzzleTexts
from circlecurves.view.widgets.number_grids import NumberGridWidget, PairGridWidget
from circlecurves.view.widgets.puzzle_canvas import PuzzleCanvas

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, controller: PuzzleController) -> None:
        super().__init__()
        self.controller = controller
        session = controller.session

        self.resize(1280, 800)
        self.setStyleSheet(load_stylesheet())

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(8, 8, 8, 8)

        # --- 1. HEADER ---
        header = QHBoxLayout()
        text_box = QVBoxLayout()
        self.lbl_title = QLabel()
        self.lbl_title.setStyleSheet("font-size: 20px; font-weight: bold;")
        self.lbl_instructions = QLabel()
        self.lbl_instructions.setWordWrap(True)
        self.lbl_instructions.setStyleSheet("color: #555;")
        text_box.addWidget(self.lbl_title)
        text_box.addWidget(self.lbl_instructions)
        header.addLayout(text_box, stretch=1)

        self.btn_language = QPushButton()
        self.btn_language.setMinimumHeight(32)
        header.addWidget(self.btn_language, alignment=Qt.AlignTop)
        main_layout.addLayout(header)

        # --- 2. SPLITTER (CONTENT AREA) ---
        splitter = QSplitter(Qt.Horizontal)
        main_layout.addWidget(splitter, stretch=1)

        # Left: canvas
        self.canvas = PuzzleCanvas(session)
        splitter.addWidget(self.canvas)

        # Right: pair slots (top) and numbered tiles (bottom)
        side = QWidget()
        side_layout = QVBoxLayout(side)
        side_layout.setContentsMargins(0, 0, 0, 0)

        self.grp_pairs = QGroupBox()
        pairs_layout = QVBoxLayout(self.grp_pairs)
        self.pair_grid = PairGridWidget(session.config.group_count)
        scroller = QScrollArea()
        scroller.setWidgetResizable(True)
        scroller.setWidget(self.pair_grid)
        pairs_layout.addWidget(scroller)
        side_layout.addWidget(self.grp_pairs, stretch=1)

        self.grp_numbers = QGroupBox()
        numbers_layout = QVBoxLayout(self.grp_numbers)
        self.number_grid = NumberGridWidget(session.config.total_intersections)
        numbers_layout.addWidget(self.number_grid)
        side_layout.addWidget(self.grp_numbers)

        splitter.addWidget(side)
        splitter.setSizes([880, 400])

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        # --- SIGNAL CONNECTIONS ---
        self.canvas.clicked.connect(controller.on_canvas_clicked)
        self.canvas.pointer_moved.connect(controller.on_pointer_moved)
        self.canvas.resized.connect(controller.on_viewport_resized)
        self.number_grid.tile_clicked.connect(controller.on_tile_clicked)
        self.btn_language.clicked.connect(controller.toggle_language)

        controller.scene_changed.connect(self.canvas.update)
        controller.board_changed.connect(self.on_board_changed)
        controller.texts_changed.connect(self.on_texts_changed)
        controller.status_changed.connect(self.statusBar().showMessage)

        # Initial state
        self.on_texts_changed(session.texts)
        self.on_board_changed(session.board)

    def _create_actions(self) -> None:
        self.act_new = QAction(self)
        self.act_new.setShortcut("Ctrl+N")
        self.act_new.triggered.connect(self.controller.new_puzzle)

        self.act_exit = QAction("Exit", self)
        self.act_exit.setShortcut("Ctrl+Q")
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        game_menu = self.menuBar().addMenu("&Game")
        game_menu.addAction(self.act_new)
        game_menu.addSeparator()
        game_menu.addAction(self.act_exit)

    # --- SLOTS ---

    def on_board_changed(self, board) -> None:
        self.pair_grid.refresh(board)
        self.number_grid.refresh(board)

    def on_texts_changed(self, texts: PuzzleTexts) -> None:
        self.setWindowTitle(texts.title)
        self.lbl_title.setText(texts.title)
        self.lbl_instructions.setText(texts.instructions)
        self.btn_language.setText(texts.toggle_label)
        self.act_new.setText(texts.new_puzzle)
        self.grp_pairs.setTitle(texts.pairs_title)
        self.grp_numbers.setTitle(texts.numbers_title)
        logger.debug("Texts switched to '%s'", texts.title)
