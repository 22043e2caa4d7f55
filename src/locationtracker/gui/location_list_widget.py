# -*- coding: utf-8 -*-
"""Scrollable list screen of all locations."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from locationtracker.constants import APP_TITLE
from locationtracker.gui.image_loader import location_pixmap
from locationtracker.gui.star_button import StarButton
from locationtracker.models.location import Location


THUMBNAIL_SIZE = 50


class _LocationRow(QFrame):
    """Thumbnail, name, park and star for one location."""

    activated = pyqtSignal(int)

    def __init__(self, location: Location, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.location_id = location.id
        self.setObjectName("locationRow")
        self.setCursor(Qt.CursorShape.PointingHandCursor)

        self.thumbnail_label = QLabel()
        self.thumbnail_label.setFixedSize(THUMBNAIL_SIZE, THUMBNAIL_SIZE)
        self.thumbnail_label.setPixmap(location_pixmap(location.image_name, location.name, THUMBNAIL_SIZE))

        self.name_label = QLabel(location.name)
        self.name_label.setObjectName("rowTitle")
        self.park_label = QLabel(location.park)
        self.park_label.setObjectName("mutedText")

        text_layout = QVBoxLayout()
        text_layout.setContentsMargins(0, 0, 0, 0)
        text_layout.setSpacing(2)
        text_layout.addWidget(self.name_label)
        text_layout.addWidget(self.park_label)

        self.star_button = StarButton(location.id, location.is_completed)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 6, 8, 6)
        layout.setSpacing(10)
        layout.addWidget(self.thumbnail_label)
        layout.addLayout(text_layout, 1)
        layout.addWidget(self.star_button)

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self.activated.emit(self.location_id)
        super().mousePressEvent(event)


class LocationListWidget(QWidget):
    """One row per location; rebuilt whenever the store publishes a new snapshot."""

    location_selected = pyqtSignal(int)
    toggle_requested = pyqtSignal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._rows: list[_LocationRow] = []

        self.title_label = QLabel(APP_TITLE)
        self.title_label.setObjectName("appTitle")
        self.empty_label = QLabel("No locations loaded")
        self.empty_label.setObjectName("mutedText")
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.rows_host = QWidget()
        self.rows_layout = QVBoxLayout(self.rows_host)
        self.rows_layout.setContentsMargins(0, 0, 0, 0)
        self.rows_layout.setSpacing(4)
        self.rows_layout.addStretch(1)

        self.scroll = QScrollArea()
        self.scroll.setWidgetResizable(True)
        self.scroll.setFrameShape(QFrame.Shape.NoFrame)
        self.scroll.setWidget(self.rows_host)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)
        layout.addWidget(self.title_label)
        layout.addWidget(self.empty_label)
        layout.addWidget(self.scroll, 1)

    def set_locations(self, locations: list[Location]) -> None:
        """Rebuild all rows in list order."""
        for row in self._rows:
            self.rows_layout.removeWidget(row)
            row.deleteLater()
        self._rows.clear()

        for index, location in enumerate(locations):
            row = _LocationRow(location)
            row.activated.connect(self.location_selected.emit)
            row.star_button.toggle_requested.connect(self.toggle_requested.emit)
            self._rows.append(row)
            self.rows_layout.insertWidget(index, row)

        self.empty_label.setVisible(not self._rows)

    def row_count(self) -> int:
        return len(self._rows)

    def row_for(self, location_id: int) -> _LocationRow | None:
        for row in self._rows:
            if row.location_id == location_id:
                return row
        return None
