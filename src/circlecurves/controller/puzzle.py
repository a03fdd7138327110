"""
Puzzle Controller
=================
Routes Qt events to the `PuzzleSession` and announces state changes through
signals, so the canvas and the grids never touch each other.

The grow animation is driven by a single-shot `QTimer`: each timeout runs one
animation frame and re-arms the timer only while the session asks for more
frames.
Viewport resizes are debounced the same way: only the last size reported
before the window settles regenerates the puzzle.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal

from circlecurves.config import DEFAULT_CONFIG, PuzzleConfig
from circlecurves.model.board import PairOutcome
from circlecurves.model.state import PuzzleSession

logger = logging.getLogger(__name__)


class PuzzleController(QObject):
    """Owns the session and the animation timer."""
    scene_changed = Signal()           # canvas must repaint
    board_changed = Signal(object)     # PairingBoard
    texts_changed = Signal(object)     # PuzzleTexts
    status_changed = Signal(str)

    def __init__(
        self,
        width: float = 800.0,
        height: float = 600.0,
        config: PuzzleConfig = DEFAULT_CONFIG,
        seed: Optional[int] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.session = PuzzleSession(width, height, config=config, seed=seed)

        self._frame_timer = QTimer(self)
        self._frame_timer.setSingleShot(True)
        self._frame_timer.setInterval(config.frame_interval_ms)
        self._frame_timer.timeout.connect(self._on_frame)

        self._pending_size: Optional[tuple[int, int]] = None
        self._resize_timer = QTimer(self)
        self._resize_timer.setSingleShot(True)
        self._resize_timer.setInterval(config.resize_debounce_ms)
        self._resize_timer.timeout.connect(self._apply_resize)

    # --- SLOTS: canvas ---

    def on_viewport_resized(self, width: int, height: int) -> None:
        self._pending_size = (width, height)
        self._resize_timer.start()

    def on_canvas_clicked(self, x: float, y: float) -> None:
        if self.session.select_curve_at(x, y) is None:
            return
        self._frame_timer.start()

    def on_pointer_moved(self, x: float, y: float) -> None:
        if not self.session.pointer_moved():
            return
        self._frame_timer.stop()
        self.scene_changed.emit()
        self.board_changed.emit(self.session.board)
        self._announce_progress()

    # --- SLOTS: grids and actions ---

    def on_tile_clicked(self, number: int) -> None:
        outcome = self.session.select_number(number)
        if outcome is PairOutcome.IGNORED:
            return
        self.board_changed.emit(self.session.board)
        if outcome is PairOutcome.MATCHED:
            self.scene_changed.emit()
            self._announce_progress()
        elif outcome is PairOutcome.MISMATCHED:
            self.status_changed.emit(self.session.texts.mismatch)

    def toggle_language(self) -> None:
        self.session.toggle_language()
        self.texts_changed.emit(self.session.texts)

    def new_puzzle(self) -> None:
        self._frame_timer.stop()
        self.session.regenerate()
        self._emit_all()

    # --- INTERNALS ---

    def _on_frame(self) -> None:
        more = self.session.tick_animation()
        self.scene_changed.emit()
        if more:
            self._frame_timer.start()

    def _apply_resize(self) -> None:
        if self._pending_size is None:
            return
        width, height = self._pending_size
        self._pending_size = None

        had_progress = self.session.board.has_progress
        if not self.session.resize(width, height):
            return
        self._frame_timer.stop()
        self._emit_all()
        if had_progress:
            self.status_changed.emit(self.session.texts.resized)

    def _announce_progress(self) -> None:
        if self.session.is_solved:
            self.status_changed.emit(self.session.texts.solved)
        else:
            self.status_changed.emit(self.session.texts.remaining.format(left=len(self.session.curves)))

    def _emit_all(self) -> None:
        self.scene_changed.emit()
        self.board_changed.emit(self.session.board)
        self.texts_changed.emit(self.session.texts)
        self._announce_progress()
