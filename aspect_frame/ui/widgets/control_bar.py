"""Control strip for driving an aspect ratio frame from the demo window."""

from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDoubleSpinBox,
    QFrame,
    QHBoxLayout,
    QLabel,
    QWidget,
)

from aspect_frame.core import AspectRatioConfig, ResizeMode

# (label, width/height ratio); 0 leaves the frame unconstrained.
RATIO_PRESETS: tuple[tuple[str, float], ...] = (
    ("Unset", 0.0),
    ("16:9", 16 / 9),
    ("4:3", 4 / 3),
    ("16:10", 16 / 10),
    ("21:9", 21 / 9),
    ("1:1", 1.0),
    ("9:16", 9 / 16),
)


class ControlBar(QFrame):
    """Horizontal bar with one input per frame setting.

    The ``set_*`` methods move the matching input, so the signal fires just as
    it would for a user edit whenever the value actually changes.
    """

    modeChanged = Signal(int)
    aspectRatioChanged = Signal(float)
    cropRatioChanged = Signal(float)
    keepExactChanged = Signal(bool)

    def __init__(
        self,
        *,
        config: AspectRatioConfig | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("ControlBar")
        config = config or AspectRatioConfig(aspect_ratio=16 / 9)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)
        layout.setSpacing(8)

        self._mode_combo = QComboBox(self)
        for member in ResizeMode:
            self._mode_combo.addItem(member.label, int(member))

        self._ratio_combo = QComboBox(self)
        for label, value in RATIO_PRESETS:
            self._ratio_combo.addItem(label, value)

        self._crop_spin = QDoubleSpinBox(self)
        self._crop_spin.setRange(0.0, 0.99)
        self._crop_spin.setSingleStep(0.05)
        self._crop_spin.setDecimals(2)

        self._keep_exact = QCheckBox("Keep exact", self)

        # Seed the inputs before wiring them so construction emits nothing.
        self.set_mode(config.resize_mode)
        self.set_aspect_ratio(config.aspect_ratio)
        self.set_crop_ratio(config.crop_ratio)
        self.set_keep_exact(config.keep_exact)

        self._mode_combo.currentIndexChanged.connect(self._on_mode_index_changed)
        self._ratio_combo.currentIndexChanged.connect(self._on_ratio_index_changed)
        self._crop_spin.valueChanged.connect(self.cropRatioChanged.emit)
        self._keep_exact.toggled.connect(self.keepExactChanged.emit)

        layout.addWidget(QLabel("Mode", self))
        layout.addWidget(self._mode_combo)
        layout.addWidget(QLabel("Ratio", self))
        layout.addWidget(self._ratio_combo)
        layout.addWidget(QLabel("Crop", self))
        layout.addWidget(self._crop_spin)
        layout.addWidget(self._keep_exact)
        layout.addStretch(1)

    # Accessors -------------------------------------------------------------
    def current_mode(self) -> ResizeMode:
        return ResizeMode(self._mode_combo.currentData())

    def current_aspect_ratio(self) -> float:
        return float(self._ratio_combo.currentData())

    def current_crop_ratio(self) -> float:
        return self._crop_spin.value()

    def current_keep_exact(self) -> bool:
        return self._keep_exact.isChecked()

    # Setters ---------------------------------------------------------------
    def set_mode(self, mode: ResizeMode | int | str) -> None:
        self._mode_combo.setCurrentIndex(self._mode_combo.findData(int(ResizeMode.parse(mode))))

    def set_aspect_ratio(self, ratio: float) -> None:
        """Select the preset for ``ratio``, adding a custom entry when none matches."""
        index = next(
            (i for i in range(self._ratio_combo.count()) if abs(self._ratio_combo.itemData(i) - ratio) < 1e-6),
            -1,
        )
        if index < 0:
            self._ratio_combo.addItem(f"{ratio:.3f}", float(ratio))
            index = self._ratio_combo.count() - 1
        self._ratio_combo.setCurrentIndex(index)

    def set_crop_ratio(self, ratio: float) -> None:
        self._crop_spin.setValue(ratio)

    def set_keep_exact(self, keep_exact: bool) -> None:
        self._keep_exact.setChecked(bool(keep_exact))

    def _on_mode_index_changed(self, index: int) -> None:
        if index >= 0:
            self.modeChanged.emit(int(self._mode_combo.itemData(index)))

    def _on_ratio_index_changed(self, index: int) -> None:
        if index >= 0:
            self.aspectRatioChanged.emit(float(self._ratio_combo.itemData(index)))


__all__ = ["ControlBar", "RATIO_PRESETS"]
