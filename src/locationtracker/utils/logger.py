# -*- coding: utf-8 -*-
"""Root logging setup with a per-session log file."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path

from locationtracker.constants import ENV_DEBUG


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def resolve_level(level_name: str | None) -> int:
    """Map a level name to a logging level; the debug env flag wins."""
    if _env_bool(ENV_DEBUG):
        return logging.DEBUG
    level = logging.getLevelName(str(level_name or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def setup_session_logging(base_dir: str | Path, app_name: str, level_name: str | None = None) -> Path | None:
    """Configure root logging once per process and open a session log file."""
    root = logging.getLogger()
    if getattr(root, "_locationtracker_logging_configured", False):
        return getattr(root, "_locationtracker_session_log", None)

    level = resolve_level(level_name)
    root.setLevel(level)
    formatter = logging.Formatter(
        "%(asctime)s [%(threadName)s] %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    if not any(isinstance(handler, logging.StreamHandler) for handler in root.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)

    logs_dir = Path(base_dir) / "logs"
    safe_app_name = app_name.lower().replace(" ", "-")
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    session_log_path: Path | None = logs_dir / f"{safe_app_name}-{timestamp}.log"
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(session_log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        root.info("Session log file established: %s", session_log_path)
    except OSError as e:
        root.error("Failed to establish session log file: %s", e)
        session_log_path = None

    root._locationtracker_logging_configured = True  # type: ignore[attr-defined]
    root._locationtracker_session_log = session_log_path  # type: ignore[attr-defined]
    return session_log_path
