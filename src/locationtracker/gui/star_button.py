# -*- coding: utf-8 -*-
"""Star toggle for a location's completion flag."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QPushButton, QWidget


STAR_FILLED = "★"
STAR_OUTLINE = "☆"
STAR_COLOR = {True: "#eab308", False: "#9ca3af"}


class StarButton(QPushButton):
    """Filled yellow star when completed, grey outline otherwise."""

    toggle_requested = pyqtSignal(int)

    def __init__(self, location_id: int, completed: bool, size: int = 20, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.location_id = location_id
        self._size = size
        self._completed = False
        self.setObjectName("starButton")
        self.setFlat(True)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setFixedSize(size + 8, size + 8)
        self.clicked.connect(lambda checked=False: self.toggle_requested.emit(self.location_id))
        self.set_completed(completed)

    def is_completed(self) -> bool:
        return self._completed

    def set_completed(self, completed: bool) -> None:
        self._completed = bool(completed)
        self.setText(STAR_FILLED if self._completed else STAR_OUTLINE)
        self.setToolTip("Mark as not completed" if self._completed else "Mark as completed")
        self.setStyleSheet(
            f"""
            QPushButton#starButton {{
                color: {STAR_COLOR[self._completed]};
                background: transparent;
                border: none;
                font-size: {self._size}px;
                padding: 0px;
            }}
            """
        )
