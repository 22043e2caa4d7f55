# -*- coding: utf-8 -*-
"""Storage error taxonomy shared by the store and file helpers."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class ErrorKind(str, Enum):
    """Kind of failure reported by a store operation."""

    STORAGE_UNAVAILABLE = "storage_unavailable"
    READ_FAILURE = "read_failure"
    DECODE_FAILURE = "decode_failure"
    WRITE_FAILURE = "write_failure"
    NOT_FOUND = "not_found"


class StoreError(Exception):
    """Base class for storage failures."""

    kind: ErrorKind = ErrorKind.READ_FAILURE

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message} ({self.path})"


class StorageUnavailable(StoreError):
    """The per-user data directory cannot be resolved or accessed."""

    kind = ErrorKind.STORAGE_UNAVAILABLE


class ReadFailure(StoreError):
    """A data file exists but cannot be read."""

    kind = ErrorKind.READ_FAILURE


class DecodeFailure(StoreError):
    """File content is not valid JSON or does not match the record schema."""

    kind = ErrorKind.DECODE_FAILURE


class WriteFailure(StoreError):
    """The persisted file cannot be written."""

    kind = ErrorKind.WRITE_FAILURE
