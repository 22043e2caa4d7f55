# -*- coding: utf-8 -*-
"""Authoritative in-memory location list and its JSON persistence."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from pathlib import Path

from locationtracker.core.errors import (
    DecodeFailure,
    ReadFailure,
    StorageUnavailable,
    StoreError,
    WriteFailure,
)
from locationtracker.models.location import Location, decode_locations, encode_locations
from locationtracker.models.store_result import StoreResult
from locationtracker.utils.app_paths import seed_data_file, user_data_file
from locationtracker.utils.file_utils import ensure_dir, read_json_data, write_json_file

logger = logging.getLogger(__name__)


LocationsSnapshot = tuple[Location, ...]
SubscriberCallback = Callable[[LocationsSnapshot], None]

SOURCE_USER = "user"
SOURCE_SEED = "seed"


class LocationStore:
    """Own the location list; load with seed fallback, toggle by id, save after every change.

    The in-memory list is the source of truth while the process runs. The
    per-user file is a full snapshot rewritten after each toggle and only read
    back by ``load()``. Storage problems never raise out of the public
    operations; they are logged and returned as a ``StoreResult``.
    """

    def __init__(
        self,
        data_file: str | Path | None = None,
        seed_file: str | Path | None = None,
        data_dir: str | Path | None = None,
        atomic_save: bool = True,
    ) -> None:
        self._data_file = Path(data_file) if data_file else None
        self._data_dir = data_dir
        self._seed_file = seed_data_file(seed_file)
        self.atomic_save = atomic_save
        self._locations: list[Location] = []
        self._subscribers: list[SubscriberCallback] = []

    # -------------------- read surface --------------------
    @property
    def locations(self) -> LocationsSnapshot:
        """Read-only snapshot; mutating the copies does not affect the store."""
        return tuple(replace(location) for location in self._locations)

    @property
    def seed_file(self) -> Path:
        return self._seed_file

    def get(self, location_id: int) -> Location | None:
        location = self._find(location_id)
        return replace(location) if location is not None else None

    def completed_count(self) -> int:
        return sum(1 for location in self._locations if location.is_completed)

    def __len__(self) -> int:
        return len(self._locations)

    def data_file(self) -> Path:
        """Resolve the per-user data file, raising StorageUnavailable."""
        if self._data_file is None:
            return user_data_file(self._data_dir)
        try:
            ensure_dir(self._data_file.parent)
        except OSError as exc:
            raise StorageUnavailable(f"Cannot create data directory: {exc}", self._data_file.parent) from exc
        return self._data_file

    # -------------------- subscriptions --------------------
    def subscribe(self, callback: SubscriberCallback) -> Callable[[], None]:
        """Register a change callback; returns a function that removes it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.locations
        for callback in list(self._subscribers):
            try:
                callback(snapshot)
            except Exception:
                logger.exception("Location subscriber %r failed", callback)

    # -------------------- operations --------------------
    def load(self) -> StoreResult:
        """Populate from the per-user file, or from the seed when none exists."""
        try:
            data_file = self.data_file()
        except StorageUnavailable as exc:
            return self._report(exc)

        if data_file.exists():
            path, source = data_file, SOURCE_USER
        else:
            path, source = self._seed_file, SOURCE_SEED
            logger.info("No saved locations at %s, using seed %s", data_file, path)

        try:
            locations = self._read_locations(path)
        except StoreError as exc:
            return self._report(exc)

        self._locations = locations
        logger.info("Loaded %d locations from %s file %s", len(locations), source, path)
        self._notify()
        return StoreResult.success(
            message=f"Loaded {len(locations)} locations",
            path=path,
            source=source,
        )

    def save(self) -> StoreResult:
        """Write the full list to the per-user file, replacing its content."""
        try:
            data_file = self.data_file()
            payload = encode_locations(self._locations)
            try:
                write_json_file(data_file, payload, atomic=self.atomic_save)
            except (OSError, TypeError, ValueError) as exc:
                raise WriteFailure(f"Cannot write locations: {exc}", data_file) from exc
        except StoreError as exc:
            return self._report(exc)

        logger.info("Saved %d locations to %s", len(payload), data_file)
        return StoreResult.success(message=f"Saved {len(payload)} locations", path=data_file)

    def toggle_completion(self, location_id: int) -> StoreResult:
        """Flip ``is_completed`` for one record and persist immediately.

        Unknown ids leave memory and disk untouched. The flip stays in memory
        when the save fails; the failure is returned.
        """
        location = self._find(location_id)
        if location is None:
            logger.warning("Cannot toggle unknown location id %s", location_id)
            return StoreResult.not_found(location_id)

        location.is_completed = not location.is_completed
        logger.debug("Location %s completed=%s", location.id, location.is_completed)
        result = self.save()
        self._notify()
        return replace(result, location=replace(location))

    # -------------------- internals --------------------
    def _find(self, location_id: int) -> Location | None:
        # ids are ints; True == 1 must not match record 1
        if isinstance(location_id, bool):
            return None
        for location in self._locations:
            if location.id == location_id:
                return location
        return None

    @staticmethod
    def _read_locations(path: Path) -> list[Location]:
        try:
            data = read_json_data(path)
        except FileNotFoundError as exc:
            raise ReadFailure("Location file not found", path) from exc
        except ValueError as exc:
            # JSONDecodeError and UnicodeDecodeError
            raise DecodeFailure(f"Invalid JSON: {exc}", path) from exc
        except OSError as exc:
            raise ReadFailure(f"Cannot read location file: {exc}", path) from exc

        try:
            return decode_locations(data)
        except DecodeFailure as exc:
            raise DecodeFailure(exc.message, path) from exc

    @staticmethod
    def _report(error: StoreError) -> StoreResult:
        logger.error("Location storage %s: %s", error.kind.value, error)
        return StoreResult.failure(error)
