# -*- coding: utf-8 -*-
"""Shared pytest fixtures."""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import pytest


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def make_location_dict(location_id: int, name: str, completed: bool = False) -> dict:
    return {
        "id": location_id,
        "name": name,
        "category": "Geyser",
        "city": "West Yellowstone",
        "state": "Wyoming",
        "park": "Yellowstone National Park",
        "description": f"{name} description",
        "imageName": name.lower().replace(" ", ""),
        "isCompleted": completed,
    }


def _write_json(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def sample_records() -> list[dict]:
    return [
        make_location_dict(1, "Old Faithful"),
        make_location_dict(2, "Half Dome", completed=True),
        make_location_dict(3, "Delicate Arch"),
    ]


@pytest.fixture
def seed_file(tmp_path: Path, sample_records: list[dict]) -> Path:
    return _write_json(tmp_path / "bundle" / "locationData.json", sample_records)


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "documents" / "locationData.json"


@pytest.fixture
def write_json():
    return _write_json


@pytest.fixture
def store(data_file: Path, seed_file: Path):
    from locationtracker.core.store import LocationStore

    return LocationStore(data_file=data_file, seed_file=seed_file)


@pytest.fixture
def default_config() -> dict:
    from locationtracker.config import get_default_config

    return get_default_config()


@pytest.fixture(scope="session")
def qt_app():
    pytest.importorskip("PyQt6")
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
