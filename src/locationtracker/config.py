# -*- coding: utf-8 -*-
"""Settings persistence and validation."""

from __future__ import annotations

import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Mapping

from locationtracker.constants import DEFAULT_SETTINGS_FILE, ENV_DATA_DIR, ENV_SEED_FILE
from locationtracker.utils.file_utils import read_json_file, write_json_file

logger = logging.getLogger(__name__)


DEFAULT_CONFIG: dict[str, Any] = {
    "storage": {
        "data_dir": "",
        "seed_file": "",
        "atomic_save": True,
    },
    "window": {"width": 420, "height": 760},
    "logging": {"level": "INFO"},
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when settings are invalid."""


def get_default_config() -> dict[str, Any]:
    """Return a deep copy of the default config."""
    return deepcopy(DEFAULT_CONFIG)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _load_env_file(env_path: Path) -> dict[str, str]:
    """Load a simple .env file (KEY=VALUE)."""
    values: dict[str, str] = {}
    if not env_path.exists():
        return values

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue
        if (value.startswith('"') and value.endswith('"')) or (
            value.startswith("'") and value.endswith("'")
        ):
            value = value[1:-1]
        values[key] = value
    return values


def _apply_env_overrides(config: dict[str, Any], env_values: Mapping[str, str]) -> dict[str, Any]:
    """Apply environment-based overrides to runtime config."""
    merged = deepcopy(config)
    data_dir = env_values.get(ENV_DATA_DIR, "").strip()
    seed_file = env_values.get(ENV_SEED_FILE, "").strip()

    if data_dir:
        merged.setdefault("storage", {})
        merged["storage"]["data_dir"] = data_dir
    if seed_file:
        merged.setdefault("storage", {})
        merged["storage"]["seed_file"] = seed_file
    return merged


def validate_config(config: dict[str, Any]) -> None:
    """Validate the fields the application reads at startup."""
    storage = config.get("storage", {})
    for key in ("data_dir", "seed_file"):
        if not isinstance(storage.get(key), str):
            raise ConfigError(f"storage.{key} must be a string")
    if not isinstance(storage.get("atomic_save"), bool):
        raise ConfigError("storage.atomic_save must be a boolean")

    window = config.get("window", {})
    for key in ("width", "height"):
        value = window.get(key)
        if not isinstance(value, int) or isinstance(value, bool) or not (200 <= value <= 4000):
            raise ConfigError(f"window.{key} must be an int in range 200..4000")

    level = config.get("logging", {}).get("level")
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise ConfigError(f"logging.level must be one of {', '.join(LOG_LEVELS)}")


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load config from JSON and merge into defaults; the process env beats .env."""
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    env_values = _load_env_file(config_path.parent / ".env")
    env_values.update({key: os.environ[key] for key in (ENV_DATA_DIR, ENV_SEED_FILE) if key in os.environ})
    if not config_path.exists():
        return _apply_env_overrides(get_default_config(), env_values)

    loaded = read_json_file(config_path)
    merged = _deep_merge(get_default_config(), loaded)
    merged = _apply_env_overrides(merged, env_values)
    validate_config(merged)
    logger.debug("Loaded settings from %s", config_path)
    return merged


def save_config(config: dict[str, Any], path: str | Path | None = None) -> Path:
    """Validate and save config as JSON."""
    validate_config(config)
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    write_json_file(config_path, config)
    return config_path
