# -*- coding: utf-8 -*-
"""File helpers with UTF-8 defaults."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any


def ensure_dir(path: str | Path) -> Path:
    """Create a directory if it does not exist."""
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def read_json_data(path: str | Path) -> Any:
    """Read and decode any JSON document."""
    file_path = Path(path)
    with file_path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def read_json_file(path: str | Path) -> dict[str, Any]:
    """Read a JSON file that must contain an object."""
    file_path = Path(path)
    data = read_json_data(file_path)
    if not isinstance(data, dict):
        raise ValueError(f"Expected JSON object in {file_path}")
    return data


def _temp_path_for(file_path: Path) -> Path:
    return file_path.with_name(f"{file_path.name}.tmp")


def write_json_file(path: str | Path, data: Any, atomic: bool = True) -> Path:
    """Write JSON to a file with indentation.

    The document is fully serialized before the target is touched. With
    ``atomic`` the text goes to a sibling ``.tmp`` file that then replaces
    the target, so readers never see a truncated file.
    """
    file_path = Path(path)
    ensure_dir(file_path.parent)
    text = json.dumps(data, indent=2, ensure_ascii=True) + "\n"

    if not atomic:
        file_path.write_text(text, encoding="utf-8")
        return file_path

    tmp_path = _temp_path_for(file_path)
    try:
        with tmp_path.open("w", encoding="utf-8") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, file_path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
    return file_path
