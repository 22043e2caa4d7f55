# -*- coding: utf-8 -*-
"""Resolve location image keys to round pixmaps."""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QColor, QFont, QPainter, QPainterPath, QPixmap

from locationtracker.utils.app_paths import assets_dir
from locationtracker.utils.image_utils import placeholder_initials, resolve_image_path

logger = logging.getLogger(__name__)

PLACEHOLDER_BG = "#cbd5e1"
PLACEHOLDER_FG = "#334155"


def _placeholder_pixmap(display_name: str, size: int) -> QPixmap:
    pixmap = QPixmap(size, size)
    pixmap.fill(QColor(PLACEHOLDER_BG))
    painter = QPainter(pixmap)
    font = QFont()
    font.setBold(True)
    font.setPixelSize(max(8, size // 3))
    painter.setFont(font)
    painter.setPen(QColor(PLACEHOLDER_FG))
    painter.drawText(pixmap.rect(), Qt.AlignmentFlag.AlignCenter, placeholder_initials(display_name))
    painter.end()
    return pixmap


def circular_pixmap(source: QPixmap, size: int) -> QPixmap:
    """Scale to fill a square and clip to a circle."""
    scaled = source.scaled(
        size,
        size,
        Qt.AspectRatioMode.KeepAspectRatioByExpanding,
        Qt.TransformationMode.SmoothTransformation,
    )
    result = QPixmap(size, size)
    result.fill(Qt.GlobalColor.transparent)

    painter = QPainter(result)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    path = QPainterPath()
    path.addEllipse(QRectF(0, 0, size, size))
    painter.setClipPath(path)
    x = (size - scaled.width()) // 2
    y = (size - scaled.height()) // 2
    painter.drawPixmap(x, y, scaled)
    painter.end()
    return result


def location_pixmap(image_name: str, display_name: str, size: int, search_dir: str | Path | None = None) -> QPixmap:
    """Round image for a location; a lettered placeholder when the asset is missing."""
    path = resolve_image_path(image_name, search_dir or assets_dir())
    pixmap = QPixmap(str(path)) if path is not None else QPixmap()
    if pixmap.isNull():
        if path is not None:
            logger.warning("Could not decode image asset: %s", path)
        pixmap = _placeholder_pixmap(display_name, size)
    return circular_pixmap(pixmap, size)
