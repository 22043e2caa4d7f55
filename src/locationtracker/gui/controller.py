# -*- coding: utf-8 -*-
"""Bridge between the location store and the Qt widgets."""

from __future__ import annotations

import logging
from typing import Any

from PyQt6.QtCore import QObject, pyqtSignal

from locationtracker.core.errors import ErrorKind
from locationtracker.core.store import LocationsSnapshot, LocationStore
from locationtracker.models.location import Location
from locationtracker.models.store_result import StoreResult

logger = logging.getLogger(__name__)


class AppController(QObject):
    """
    Own the store, forward its change notifications as Qt signals
    and turn structured results into status messages.
    """
    locations_changed = pyqtSignal(list)
    status_message = pyqtSignal(str)
    error_occurred = pyqtSignal(str)

    def __init__(self, store: LocationStore) -> None:
        super().__init__()
        self.store = store
        self.last_result: StoreResult | None = None
        self._unsubscribe = store.subscribe(self._on_store_changed)

    @classmethod
    def from_settings(cls, settings: dict[str, Any]) -> "AppController":
        storage = settings.get("storage", {})
        store = LocationStore(
            seed_file=storage.get("seed_file") or None,
            data_dir=storage.get("data_dir") or None,
            atomic_save=bool(storage.get("atomic_save", True)),
        )
        return cls(store)

    def locations(self) -> list[Location]:
        return list(self.store.locations)

    def location(self, location_id: int) -> Location | None:
        return self.store.get(location_id)

    def summary_text(self) -> str:
        return f"{self.store.completed_count()} of {len(self.store)} completed"

    def load(self) -> StoreResult:
        return self._handle_result(self.store.load())

    def toggle_completion(self, location_id: int) -> StoreResult:
        return self._handle_result(self.store.toggle_completion(location_id))

    def shutdown(self) -> None:
        self._unsubscribe()

    def _on_store_changed(self, snapshot: LocationsSnapshot) -> None:
        self.locations_changed.emit(list(snapshot))

    def _handle_result(self, result: StoreResult) -> StoreResult:
        self.last_result = result
        if result.ok:
            self.status_message.emit(result.message)
        elif result.kind is ErrorKind.NOT_FOUND:
            self.status_message.emit(result.message)
        else:
            logger.debug("Surfacing store failure to the UI: %s", result.kind)
            self.error_occurred.emit(result.message)
        return result
