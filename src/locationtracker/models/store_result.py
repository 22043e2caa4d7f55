# -*- coding: utf-8 -*-
"""Structured outcome of a store operation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from locationtracker.core.errors import ErrorKind, StoreError
from locationtracker.models.location import Location


@dataclass(frozen=True)
class StoreResult:
    """Success or kind-of-failure returned by load, save and toggle."""

    ok: bool
    kind: ErrorKind | None = None
    message: str = ""
    path: Path | None = None
    source: str | None = None
    location: Location | None = None

    @classmethod
    def success(
        cls,
        message: str = "",
        path: Path | None = None,
        source: str | None = None,
        location: Location | None = None,
    ) -> "StoreResult":
        return cls(ok=True, message=message, path=path, source=source, location=location)

    @classmethod
    def failure(cls, error: StoreError) -> "StoreResult":
        return cls(ok=False, kind=error.kind, message=str(error), path=error.path)

    @classmethod
    def not_found(cls, location_id: int) -> "StoreResult":
        return cls(ok=False, kind=ErrorKind.NOT_FOUND, message=f"Location id {location_id} not found")
