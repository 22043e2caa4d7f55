# -*- coding: utf-8 -*-
"""Per-user data locations and bundled resources."""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QStandardPaths

from locationtracker.constants import APP_NAME, DATA_FILE_NAME, FALLBACK_DATA_DIR_NAME
from locationtracker.core.errors import StorageUnavailable
from locationtracker.utils.file_utils import ensure_dir

logger = logging.getLogger(__name__)

RESOURCES_DIR = Path(__file__).resolve().parent.parent / "resources"


def _platform_data_dir() -> Path:
    base = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.GenericDataLocation)
    if base:
        return Path(base) / APP_NAME
    logger.warning("No platform data location available, using home directory")
    return Path.home() / FALLBACK_DATA_DIR_NAME


def user_data_dir(override: str | Path | None = None) -> Path:
    """Return the writable per-user data directory, creating it if needed."""
    target = Path(override).expanduser() if override else _platform_data_dir()
    try:
        directory = ensure_dir(target)
    except OSError as exc:
        raise StorageUnavailable(f"Cannot create data directory: {exc}", target) from exc
    if not directory.is_dir():
        raise StorageUnavailable("Data path is not a directory", directory)
    return directory


def user_data_file(override_dir: str | Path | None = None) -> Path:
    """Return the per-user persisted location file."""
    return user_data_dir(override_dir) / DATA_FILE_NAME


def seed_data_file(override: str | Path | None = None) -> Path:
    """Return the read-only seed file shipped with the package."""
    if override:
        return Path(override).expanduser()
    return RESOURCES_DIR / DATA_FILE_NAME


def assets_dir() -> Path:
    """Return the bundled image asset directory."""
    return RESOURCES_DIR / "images"
