"""
Element pictures for the detail page. Flat images are tinted with the element's colors;
3D model references get a labelled placeholder.
"""

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import Qt, QRectF
from PySide6.QtGui import QColor, QFont, QPainter, QPixmap, QPen

from ..db.element import Element
from ..db.schema import RESOURCES_DIR
from ..theme import family_color

IMAGES_DIR = RESOURCES_DIR / "images"


def tint_color(element: Element) -> QColor | None:
    tint = element.tint()
    if tint is None:
        return None
    return QColor.fromRgbF(*tint)


def _image_path(element: Element) -> Path | None:
    if not element.image:
        return None
    path = IMAGES_DIR / element.image
    return path if path.is_file() else None


def _draw_tinted_image(painter: QPainter, path: Path, color: QColor | None, size: int) -> bool:
    source = QPixmap(str(path))
    if source.isNull():
        return False
    source = source.scaled(size, size, Qt.AspectRatioMode.KeepAspectRatio, Qt.TransformationMode.SmoothTransformation)
    if color is not None:
        tinted = QPixmap(source.size())
        tinted.fill(Qt.GlobalColor.transparent)
        p = QPainter(tinted)
        p.drawPixmap(0, 0, source)
        p.setCompositionMode(QPainter.CompositionMode.CompositionMode_Multiply)
        p.fillRect(tinted.rect(), color)
        # Multiply fills transparent areas too; restore the source alpha
        p.setCompositionMode(QPainter.CompositionMode.CompositionMode_DestinationIn)
        p.drawPixmap(0, 0, source)
        p.end()
        source = tinted
    x = (size - source.width()) // 2
    y = (size - source.height()) // 2
    painter.drawPixmap(x, y, source)
    return True


def _draw_placeholder(painter: QPainter, fill: QColor, size: int) -> None:
    painter.setPen(Qt.PenStyle.NoPen)
    painter.setBrush(fill)
    painter.drawRoundedRect(QRectF(8, 8, size - 16, size - 16), 24, 24)


def _draw_symbol(painter: QPainter, element: Element, size: int, caption: str | None = None) -> None:
    font = QFont(painter.font())
    font.setBold(True)
    font.setPixelSize(max(12, size // 4))
    painter.setFont(font)
    painter.setPen(QPen(QColor("#ffffff")))
    painter.drawText(QRectF(0, 0, size, size), Qt.AlignmentFlag.AlignCenter, element.symbol)
    if caption:
        small = QFont(font)
        small.setPixelSize(max(9, size // 18))
        small.setBold(False)
        painter.setFont(small)
        painter.drawText(
            QRectF(0, size * 0.72, size, size * 0.2),
            Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop,
            caption,
        )


def element_pixmap(element: Element, size: int = 300) -> QPixmap:
    """Square picture for the element: tinted image, model placeholder, or a family-colored tile."""
    pix = QPixmap(size, size)
    pix.fill(Qt.GlobalColor.transparent)
    painter = QPainter(pix)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    kind = element.image_kind
    tint = tint_color(element)
    if kind == "image":
        path = _image_path(element)
        if path is None or not _draw_tinted_image(painter, path, tint, size):
            _draw_placeholder(painter, tint or QColor(family_color(element.family)), size)
        _draw_symbol(painter, element, size)
    elif kind == "model":
        _draw_placeholder(painter, QColor(family_color(element.family)), size)
        _draw_symbol(painter, element, size, caption=f"3D model: {Path(element.image or '').stem}")
    else:
        _draw_placeholder(painter, QColor(family_color(element.family)), size)
        _draw_symbol(painter, element, size)
    painter.end()
    return pix
