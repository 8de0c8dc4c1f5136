"""Demo window hosting an aspect ratio frame and its controls."""

from __future__ import annotations

import logging

from PySide6.QtWidgets import QMainWindow, QVBoxLayout, QWidget

from aspect_frame.core import AspectRatioConfig

from .widgets.aspect_ratio_frame import AspectRatioFrame
from .widgets.control_bar import ControlBar
from .widgets.surface import SurfaceWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Control bar on top, aspect ratio frame below, listener output in the status bar."""

    def __init__(self, *, config: AspectRatioConfig | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Aspect Frame")
        self.resize(1280, 720)

        config = config or AspectRatioConfig(aspect_ratio=16 / 9)
        self._controls = ControlBar(config=config, parent=self)
        self._surface = SurfaceWidget()
        self._frame = AspectRatioFrame(
            self._surface,
            config=config,
            listener=self._on_aspect_ratio_updated,
        )

        self._controls.modeChanged.connect(self._frame.set_resize_mode)
        self._controls.aspectRatioChanged.connect(self._frame.set_aspect_ratio)
        self._controls.cropRatioChanged.connect(self._frame.set_crop_ratio)
        self._controls.keepExactChanged.connect(self._frame.set_keep_exact)

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        layout.addWidget(self._controls)
        layout.addWidget(self._frame, 1)
        self.setCentralWidget(central)

    @property
    def frame(self) -> AspectRatioFrame:
        return self._frame

    @property
    def controls(self) -> ControlBar:
        return self._controls

    def _on_aspect_ratio_updated(self, target: float, natural: float, mismatch: bool) -> None:
        box = self._frame.resolved_box()
        resolved = f"{box.width} × {box.height}" if box is not None else "-"
        message = f"target {target:.3f} · natural {natural:.3f} · mismatch {mismatch} · content {resolved}"
        logger.debug("Aspect ratio updated: %s", message)
        self.statusBar().showMessage(message)
