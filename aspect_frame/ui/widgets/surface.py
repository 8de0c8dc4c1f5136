"""Placeholder content surface that paints its own geometry."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QPainter, QPaintEvent, QPen
from PySide6.QtWidgets import QWidget


class SurfaceWidget(QWidget):
    """Stands in for a video surface inside an aspect ratio frame.

    Draws a border, centre guides and a ``W × H (ratio)`` caption so the
    effect of each resize mode is visible at a glance.
    """

    def __init__(self, *, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("SurfaceWidget")
        self.setAttribute(Qt.WA_OpaquePaintEvent)

    def caption(self) -> str:
        width = self.width()
        height = self.height()
        ratio = width / height if height > 0 else 0.0
        return f"{width} × {height} ({ratio:.3f})"

    def paintEvent(self, event: QPaintEvent) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.fillRect(self.rect(), QColor(30, 30, 30))

        width = self.width()
        height = self.height()

        pen = QPen(QColor(0, 180, 216, 180))
        pen.setWidth(2)
        painter.setPen(pen)
        painter.drawRect(1, 1, width - 2, height - 2)

        guide = QPen(QColor(255, 100, 100, 100))
        guide.setStyle(Qt.DashLine)
        painter.setPen(guide)
        painter.drawLine(width // 2, 0, width // 2, height)
        painter.drawLine(0, height // 2, width, height // 2)

        painter.setPen(QColor(255, 255, 255))
        painter.drawText(self.rect(), Qt.AlignCenter, self.caption())
        painter.end()


__all__ = ["SurfaceWidget"]
