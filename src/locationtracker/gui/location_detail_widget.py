# -*- coding: utf-8 -*-
"""Detail screen for a single location."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from locationtracker.gui.image_loader import location_pixmap
from locationtracker.gui.star_button import StarButton
from locationtracker.models.location import Location


HEADER_COLOR = {True: "#16a34a", False: "#dc2626"}
IMAGE_SIZE = 250


class LocationDetailWidget(QWidget):
    """Header band, image, name, park/state, description and star toggle."""

    back_requested = pyqtSignal()
    toggle_requested = pyqtSignal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._location: Location | None = None

        self.back_button = QPushButton("‹ Locations")
        self.back_button.setObjectName("secondaryButton")
        self.back_button.clicked.connect(self.back_requested.emit)

        self.header_band = QFrame()
        self.header_band.setObjectName("headerBand")
        self.header_band.setFixedHeight(120)

        self.image_label = QLabel()
        self.image_label.setFixedSize(IMAGE_SIZE, IMAGE_SIZE)
        self.image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.name_label = QLabel("-")
        self.name_label.setObjectName("detailTitle")
        self.name_label.setWordWrap(True)
        self.park_label = QLabel("-")
        self.park_label.setObjectName("mutedText")
        self.state_label = QLabel("-")
        self.state_label.setObjectName("mutedText")

        park_row = QHBoxLayout()
        park_row.setContentsMargins(0, 0, 0, 0)
        park_row.addWidget(self.park_label)
        park_row.addStretch(1)
        park_row.addWidget(self.state_label)

        divider = QFrame()
        divider.setFrameShape(QFrame.Shape.HLine)
        divider.setFrameShadow(QFrame.Shadow.Sunken)
        divider.setStyleSheet("color: #d1d9e6;")

        self.about_label = QLabel("About")
        self.about_label.setObjectName("sectionTitle")
        self.description_label = QLabel("")
        self.description_label.setWordWrap(True)
        self.description_label.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)

        self.star_button = StarButton(location_id=-1, completed=False)
        self.star_button.toggle_requested.connect(self._on_star_clicked)
        self.completion_label = QLabel("Not Completed")
        self.completion_label.setObjectName("mutedText")

        star_row = QHBoxLayout()
        star_row.setContentsMargins(0, 0, 0, 0)
        star_row.setSpacing(6)
        star_row.addWidget(self.star_button)
        star_row.addWidget(self.completion_label)
        star_row.addStretch(1)

        body = QWidget()
        body_layout = QVBoxLayout(body)
        body_layout.setContentsMargins(16, 0, 16, 16)
        body_layout.setSpacing(14)
        body_layout.addWidget(self.image_label, 0, Qt.AlignmentFlag.AlignHCenter)
        body_layout.addWidget(self.name_label)
        body_layout.addLayout(park_row)
        body_layout.addWidget(divider)
        body_layout.addWidget(self.about_label)
        body_layout.addWidget(self.description_label)
        body_layout.addLayout(star_row)
        body_layout.addStretch(1)

        content = QWidget()
        content_layout = QVBoxLayout(content)
        content_layout.setContentsMargins(0, 0, 0, 0)
        content_layout.setSpacing(0)
        content_layout.addWidget(self.header_band)
        content_layout.addWidget(body, 1)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        scroll.setWidget(content)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)
        layout.addWidget(self.back_button, 0, Qt.AlignmentFlag.AlignLeft)
        layout.addWidget(scroll, 1)

        self._apply_completion(False)

    def location_id(self) -> int | None:
        return self._location.id if self._location is not None else None

    def set_location(self, location: Location | None) -> None:
        """Populate all fields from a record snapshot."""
        self._location = location
        if location is None:
            self.image_label.clear()
            for label in (self.name_label, self.park_label, self.state_label):
                label.setText("-")
            self.about_label.setText("About")
            self.description_label.setText("")
            self.star_button.location_id = -1
            self._apply_completion(False)
            return

        self.image_label.setPixmap(location_pixmap(location.image_name, location.name, IMAGE_SIZE))
        self.name_label.setText(location.name)
        self.park_label.setText(location.park)
        self.state_label.setText(location.state)
        self.about_label.setText(f"About {location.name}")
        self.description_label.setText(location.description)
        self.star_button.location_id = location.id
        self._apply_completion(location.is_completed)

    def _apply_completion(self, completed: bool) -> None:
        self.star_button.set_completed(completed)
        self.completion_label.setText("Completed" if completed else "Not Completed")
        self.header_band.setStyleSheet(f"QFrame#headerBand {{ background: {HEADER_COLOR[completed]}; }}")

    def _on_star_clicked(self, location_id: int) -> None:
        if self._location is not None:
            self.toggle_requested.emit(location_id)
