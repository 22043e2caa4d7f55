# -*- coding: utf-8 -*-
"""Main window: list screen and detail screen in a stack."""

from __future__ import annotations

import logging
from typing import Any

from PyQt6.QtWidgets import QLabel, QMainWindow, QStackedWidget, QStatusBar, QVBoxLayout, QWidget

from locationtracker.constants import APP_TITLE, APP_VERSION
from locationtracker.gui.controller import AppController
from locationtracker.gui.location_detail_widget import LocationDetailWidget
from locationtracker.gui.location_list_widget import LocationListWidget
from locationtracker.models.location import Location

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Render whatever the controller publishes; send star taps back to it."""

    def __init__(self, controller: AppController, settings: dict[str, Any] | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self.settings = settings or {}

        window = self.settings.get("window", {})
        self.setWindowTitle(f"{APP_TITLE} v{APP_VERSION}")
        self.resize(int(window.get("width", 420)), int(window.get("height", 760)))

        self._build_ui()
        self._apply_styles()
        self._connect_controller()
        self._refresh_locations(self.controller.locations())

    def _build_ui(self) -> None:
        self.list_widget = LocationListWidget()
        self.list_widget.location_selected.connect(self.show_detail)
        self.list_widget.toggle_requested.connect(self.controller.toggle_completion)

        self.detail_widget = LocationDetailWidget()
        self.detail_widget.back_requested.connect(self.show_list)
        self.detail_widget.toggle_requested.connect(self.controller.toggle_completion)

        self.stack = QStackedWidget()
        self.stack.addWidget(self.list_widget)
        self.stack.addWidget(self.detail_widget)

        self.summary_label = QLabel("")
        self.summary_label.setObjectName("statusBadge")

        central = QWidget()
        central_layout = QVBoxLayout(central)
        central_layout.setContentsMargins(14, 14, 14, 14)
        central_layout.setSpacing(12)
        central_layout.addWidget(self.stack, 1)

        self.setCentralWidget(central)
        status_bar = QStatusBar()
        status_bar.addPermanentWidget(self.summary_label)
        self.setStatusBar(status_bar)

    def _connect_controller(self) -> None:
        self.controller.locations_changed.connect(self._refresh_locations)
        self.controller.status_message.connect(self.show_status)
        self.controller.error_occurred.connect(self.show_error)

    def _apply_styles(self) -> None:
        self.setStyleSheet(
            """
            QMainWindow, QWidget {
                background: #f3f5f8;
                color: #1f2937;
                font-family: "Segoe UI", "Noto Sans", sans-serif;
                font-size: 13px;
            }
            QLabel#appTitle {
                font-size: 24px;
                font-weight: 700;
                color: #0f172a;
            }
            QLabel#detailTitle {
                font-size: 22px;
                font-weight: 700;
                color: #0f172a;
            }
            QLabel#sectionTitle {
                font-size: 17px;
                font-weight: 600;
                color: #111827;
            }
            QLabel#rowTitle {
                font-size: 14px;
                font-weight: 600;
            }
            QLabel#mutedText {
                color: #6b7280;
            }
            QLabel#statusBadge {
                color: #1d4ed8;
                font-weight: 600;
                padding: 2px 8px;
            }
            QFrame#locationRow {
                background: white;
                border: 1px solid #d0d7e2;
                border-radius: 10px;
            }
            QFrame#locationRow:hover {
                border-color: #93c5fd;
                background: #f8fbff;
            }
            QPushButton#secondaryButton {
                background: white;
                border: 1px solid #d0d7e2;
                border-radius: 10px;
                padding: 6px 12px;
            }
            QPushButton#secondaryButton:hover {
                border-color: #93c5fd;
                background: #f8fbff;
            }
            """
        )

    # -------------------- navigation --------------------
    def show_list(self) -> None:
        self.detail_widget.set_location(None)
        self.stack.setCurrentWidget(self.list_widget)

    def show_detail(self, location_id: int) -> None:
        location = self.controller.location(location_id)
        if location is None:
            logger.warning("Detail requested for unknown location id %s", location_id)
            return
        self.detail_widget.set_location(location)
        self.stack.setCurrentWidget(self.detail_widget)
        self.setWindowTitle(location.name)

    def is_showing_detail(self) -> bool:
        return self.stack.currentWidget() is self.detail_widget

    # -------------------- controller slots --------------------
    def _refresh_locations(self, locations: list[Location]) -> None:
        self.list_widget.set_locations(locations)
        current_id = self.detail_widget.location_id()
        if current_id is not None:
            updated = next((item for item in locations if item.id == current_id), None)
            self.detail_widget.set_location(updated)
            if updated is None:
                self.show_list()
        self.summary_label.setText(self.controller.summary_text())
        if not self.is_showing_detail():
            self.setWindowTitle(f"{APP_TITLE} v{APP_VERSION}")

    def show_status(self, message: str) -> None:
        self.statusBar().showMessage(message, 4000)

    def show_error(self, message: str) -> None:
        self.statusBar().showMessage(f"Error: {message}")
