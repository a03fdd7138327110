"""
Puzzle Canvas
Draws the scene and reports pointer and resize events in canvas pixels.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QMouseEvent, QPainter, QPaintEvent, QResizeEvent
from PySide6.QtWidgets import QSizePolicy, QWidget

from circlecurves.model.state import PuzzleSession
from circlecurves.view.renderer import render_scene

logger = logging.getLogger(__name__)


class PuzzleCanvas(QWidget):
    clicked = Signal(float, float)
    pointer_moved = Signal(float, float)
    resized = Signal(int, int)

    def __init__(self, session: PuzzleSession, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.session = session

        # Movement without a pressed button must reach us too
        self.setMouseTracking(True)
        self.setMinimumSize(320, 240)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

    # --- Qt events ---

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            render_scene(painter, self.session, self.width(), self.height())
        finally:
            painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.LeftButton:
            pos = event.position()
            self.clicked.emit(pos.x(), pos.y())
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        pos = event.position()
        self.pointer_moved.emit(pos.x(), pos.y())
        super().mouseMoveEvent(event)

    def resizeEvent(self, event: QResizeEvent) -> None:
        size = event.size()
        logger.debug("Canvas resized to %dx%d", size.width(), size.height())
        self.resized.emit(size.width(), size.height())
        super().resizeEvent(event)
