# -*- coding: utf-8 -*-
"""Image asset lookup helpers with stdlib-only code."""

from __future__ import annotations

from pathlib import Path

from locationtracker.constants import IMAGE_EXTENSIONS


def resolve_image_path(image_name: str, search_dir: str | Path) -> Path | None:
    """Find the asset file for an image key, trying the known extensions."""
    if not image_name or "/" in image_name or "\\" in image_name:
        return None
    base_dir = Path(search_dir)
    direct = base_dir / image_name
    if direct.suffix.lower() in IMAGE_EXTENSIONS and direct.is_file():
        return direct
    for extension in IMAGE_EXTENSIONS:
        candidate = base_dir / f"{image_name}{extension}"
        if candidate.is_file():
            return candidate
    return None


def placeholder_initials(name: str) -> str:
    """Up to two initials used when no image asset exists."""
    words = [word for word in name.split() if word]
    if not words:
        return "?"
    return "".join(word[0] for word in words[:2]).upper()
