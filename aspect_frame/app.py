"""Application bootstrap for the aspect frame demo."""

from __future__ import annotations

import sys
from typing import Optional

from PySide6.QtWidgets import QApplication

from .core import AspectRatioConfig
from .ui.main_window import MainWindow
from .ui.styles import apply_app_palette


def create_qt_app(existing: Optional[QApplication] = None) -> QApplication:
    """Create (or return) the Qt application instance.

    PySide requires a single QApplication instance; tests and the CLI both go
    through this helper so they never spawn a second one.
    """

    if existing is not None:
        return existing
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    return app


def run_app(config: Optional[AspectRatioConfig] = None) -> int:
    """Launch the demo window for ``config`` and return the exit code."""

    app = create_qt_app()
    apply_app_palette(app)
    window = MainWindow(config=config)
    window.show()
    return app.exec()


if __name__ == "__main__":  # pragma: no cover - convenience entry point
    sys.exit(run_app())
