"""
Number Grids
Bottom grid of numbered tiles and top grid of pair slots.

Both widgets only mirror a `PairingBoard`; clicks are forwarded as signals.
Cells carry the `empty`, `autoFilled` and `resolved` dynamic properties that
the stylesheet in `resources/grids.qss` keys on.
"""
from __future__ import annotations

import math
from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QGridLayout, QLabel, QPushButton, QSizePolicy, QWidget

from circlecurves.model.board import PairingBoard, TileState


def _set_flag(widget: QWidget, name: str, value: bool) -> None:
    """Set a dynamic property and re-polish so the stylesheet picks it up."""
    if widget.property(name) == value:
        return
    widget.setProperty(name, value)
    widget.style().unpolish(widget)
    widget.style().polish(widget)


class NumberGridWidget(QWidget):
    """One push button per number, in a square-ish grid."""
    tile_clicked = Signal(int)

    def __init__(self, total_numbers: int, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.columns = max(1, math.ceil(math.sqrt(total_numbers)))
        self.buttons: list[QPushButton] = []

        layout = QGridLayout(self)
        layout.setSpacing(4)

        for i in range(total_numbers):
            number = i + 1
            btn = QPushButton(str(number))
            btn.setObjectName("gridCell")
            btn.setCursor(Qt.PointingHandCursor)
            btn.setProperty("empty", False)

            # Deleted tiles disappear without shifting their neighbours
            policy = btn.sizePolicy()
            policy.setRetainSizeWhenHidden(True)
            btn.setSizePolicy(policy)

            btn.clicked.connect(lambda _checked=False, n=number: self.tile_clicked.emit(n))
            layout.addWidget(btn, i // self.columns, i % self.columns)
            self.buttons.append(btn)

    def refresh(self, board: PairingBoard) -> None:
        for btn, cell in zip(self.buttons, board.tiles):
            state = cell.state
            btn.setVisible(state is not TileState.DELETED)
            available = state is TileState.AVAILABLE
            btn.setText(str(cell.number) if available else "")
            btn.setEnabled(available)
            _set_flag(btn, "empty", not available)


class PairGridWidget(QWidget):
    """Two label cells per group; groups stacked in rows."""

    def __init__(self, group_count: int, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.cells: list[tuple[QLabel, QLabel]] = []

        layout = QGridLayout(self)
        layout.setSpacing(4)

        for group in range(group_count):
            pair = []
            for position in range(2):
                lbl = QLabel("")
                lbl.setObjectName("gridCell")
                lbl.setAlignment(Qt.AlignCenter)
                lbl.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
                lbl.setProperty("empty", True)
                lbl.setProperty("autoFilled", False)
                lbl.setProperty("resolved", False)
                layout.addWidget(lbl, group, position)
                pair.append(lbl)
            self.cells.append((pair[0], pair[1]))

    def refresh(self, board: PairingBoard) -> None:
        for (first, second), slot in zip(self.cells, board.slots):
            for lbl, number, auto in zip((first, second), slot.numbers, slot.auto_filled):
                lbl.setText("" if number is None else str(number))
                _set_flag(lbl, "empty", number is None)
                _set_flag(lbl, "autoFilled", auto)
                _set_flag(lbl, "resolved", slot.resolved)
