"""Shared styling helpers for the demo window.

Dark theme:
- background main: #2B2B2B
- control bar: #252525
- frame letterbox: #000000
- borders: #404040 (1 px)
- text primary: #FFFFFF
- accent: #2A8CA5 (teal/blue)
"""

from __future__ import annotations

from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication

BACKGROUND_COLOUR = QColor(43, 43, 43)  # #2B2B2B
PANEL_COLOUR = QColor(37, 37, 37)       # #252525
BORDER_COLOUR = QColor(64, 64, 64)      # #404040
TEXT_PRIMARY = QColor(255, 255, 255)    # #FFFFFF
TEXT_SECONDARY = QColor(192, 192, 192)  # #C0C0C0
ACCENT_COLOUR = QColor(42, 140, 165)    # #2A8CA5


def apply_app_palette(app: QApplication) -> None:
    """Apply the dark theme across the application."""

    palette = QPalette()

    palette.setColor(QPalette.Window, BACKGROUND_COLOUR)
    palette.setColor(QPalette.Base, PANEL_COLOUR)
    palette.setColor(QPalette.Button, PANEL_COLOUR)

    palette.setColor(QPalette.WindowText, TEXT_PRIMARY)
    palette.setColor(QPalette.Text, TEXT_PRIMARY)
    palette.setColor(QPalette.ButtonText, TEXT_PRIMARY)
    palette.setColor(QPalette.PlaceholderText, TEXT_SECONDARY)

    palette.setColor(QPalette.Highlight, ACCENT_COLOUR)
    palette.setColor(QPalette.HighlightedText, QColor(255, 255, 255))

    app.setPalette(palette)

    app.setStyleSheet(
        """
        QMainWindow, QWidget { background-color: #2B2B2B; color: #FFFFFF; }

        /* Letterbox area around the content surface */
        QWidget#AspectRatioFrame { background-color: #000000; }

        QFrame#ControlBar { background-color: #252525; border-bottom: 1px solid #404040; }
        QFrame#ControlBar QLabel { color: #C6CED6; font-size: 11px; font-weight: 600; }
        QComboBox, QDoubleSpinBox {
            background-color: #2F2F2F;
            color: #FFFFFF;
            border: 1px solid #404040;
            padding: 4px 8px;
            min-width: 60px;
        }
        QComboBox:hover, QDoubleSpinBox:hover { border: 1px solid #2A8CA5; }
        QComboBox QAbstractItemView {
            background-color: #252525;
            color: #FFFFFF;
            selection-background-color: #2A8CA5;
            border: 1px solid #404040;
        }
        QStatusBar { background-color: #252525; border-top: 1px solid #404040; color: #C0C0C0; }
        """
    )


__all__ = ["apply_app_palette"]
