# -*- coding: utf-8 -*-
"""Tests for image key resolution."""

from __future__ import annotations

from pathlib import Path

from locationtracker.utils.image_utils import placeholder_initials, resolve_image_path


PNG_HEADER = b"\x89PNG\r\n\x1a\n" + b"\x00" * 8


def test_resolve_image_path_tries_known_extensions(tmp_path: Path) -> None:
    (tmp_path / "halfdome.jpg").write_bytes(b"jpg")
    assert resolve_image_path("halfdome", tmp_path) == tmp_path / "halfdome.jpg"


def test_resolve_image_path_prefers_png(tmp_path: Path) -> None:
    (tmp_path / "halfdome.jpg").write_bytes(b"jpg")
    (tmp_path / "halfdome.png").write_bytes(PNG_HEADER)
    assert resolve_image_path("halfdome", tmp_path) == tmp_path / "halfdome.png"


def test_resolve_image_path_accepts_explicit_extension(tmp_path: Path) -> None:
    (tmp_path / "arch.jpeg").write_bytes(b"jpeg")
    assert resolve_image_path("arch.jpeg", tmp_path) == tmp_path / "arch.jpeg"


def test_resolve_image_path_missing_asset(tmp_path: Path) -> None:
    assert resolve_image_path("nothing", tmp_path) is None
    assert resolve_image_path("", tmp_path) is None


def test_resolve_image_path_rejects_path_segments(tmp_path: Path) -> None:
    (tmp_path / "inner").mkdir()
    (tmp_path / "inner" / "x.png").write_bytes(PNG_HEADER)
    assert resolve_image_path("inner/x", tmp_path) is None


def test_placeholder_initials() -> None:
    assert placeholder_initials("Old Faithful") == "OF"
    assert placeholder_initials("grand prismatic spring") == "GP"
    assert placeholder_initials("   ") == "?"