"""Container widget that sizes its content child to a target aspect ratio."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QRect, Qt, QTimer
from PySide6.QtGui import QResizeEvent
from PySide6.QtWidgets import QWidget

from aspect_frame.core import (
    AspectRatioConfig,
    AspectRatioListener,
    AspectRatioUpdateDispatcher,
    Box,
    PostTask,
    ResizeMode,
    resolve,
)

logger = logging.getLogger(__name__)


def _post_next_turn(task) -> None:
    QTimer.singleShot(0, task)


class AspectRatioFrame(QWidget):
    """Places its content child on the box resolved for the current config.

    The frame measures its own contents rect on every resize and on every
    config change, resolves the content box and centres the child on it. For
    zoom modes the box is larger than the frame and the overflow is clipped.

    Listener notifications are coalesced: several layout passes within one
    event turn produce a single ``listener(target, natural, mismatch)`` call.
    """

    def __init__(
        self,
        content: Optional[QWidget] = None,
        *,
        config: AspectRatioConfig | None = None,
        listener: Optional[AspectRatioListener] = None,
        post: Optional[PostTask] = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("AspectRatioFrame")
        self.setAttribute(Qt.WA_StyledBackground, True)
        self._config = config or AspectRatioConfig()
        self._dispatcher = AspectRatioUpdateDispatcher(post or _post_next_turn, listener)
        self._resolved: Box | None = None
        self._content: Optional[QWidget] = None
        if content is not None:
            self.set_content(content)

    # Content ---------------------------------------------------------------
    def content(self) -> Optional[QWidget]:
        return self._content

    def set_content(self, widget: QWidget) -> None:
        """Adopt ``widget`` as the single child sized by this frame."""
        if self._content is widget:
            return
        if self._content is not None:
            self._content.setParent(None)
        self._content = widget
        widget.setParent(self)
        widget.show()
        self._invalidate()

    # Configuration -----------------------------------------------------------
    def config(self) -> AspectRatioConfig:
        return self._config

    def aspect_ratio(self) -> float:
        return self._config.aspect_ratio

    def resize_mode(self) -> ResizeMode:
        return self._config.resize_mode

    def crop_ratio(self) -> float:
        return self._config.crop_ratio

    def keep_exact(self) -> bool:
        return self._config.keep_exact

    def set_config(self, config: AspectRatioConfig) -> None:
        if config == self._config:
            return
        logger.debug("Aspect ratio config changed: %s -> %s", self._config, config)
        self._config = config
        self._invalidate()

    def set_aspect_ratio(self, ratio: float) -> None:
        """Set the width/height ratio to satisfy; values <= 0 disable resizing."""
        self.set_config(self._config.with_aspect_ratio(ratio))

    def set_resize_mode(self, mode: ResizeMode | int | str) -> None:
        self.set_config(self._config.with_resize_mode(mode))

    def set_crop_ratio(self, ratio: float) -> None:
        """Set the share of height ADDITIONAL_ZOOM may crop; ignored outside [0, 1)."""
        self.set_config(self._config.with_crop_ratio(ratio))

    def set_keep_exact(self, keep_exact: bool) -> None:
        self.set_config(self._config.with_keep_exact(keep_exact))

    def set_deformation_tolerance(self, tolerance: float) -> None:
        self.set_config(self._config.with_deformation_tolerance(tolerance))

    def set_aspect_ratio_listener(self, listener: Optional[AspectRatioListener]) -> None:
        self._dispatcher.listener = listener

    def aspect_ratio_listener(self) -> Optional[AspectRatioListener]:
        return self._dispatcher.listener

    # Layout ------------------------------------------------------------------
    def resolved_box(self) -> Box | None:
        """Box from the last layout pass, or ``None`` when it is stale."""
        return self._resolved

    def relayout(self) -> None:
        """Resolve the content box for the current size and apply it."""
        area = self.contentsRect()
        if area.width() <= 0 or area.height() <= 0:
            return

        measured = Box(area.width(), area.height())
        result = resolve(measured, self._config)
        box = result.box
        self._resolved = box

        if self._content is not None:
            x_offset = area.x() + (area.width() - box.width) // 2
            y_offset = area.y() + (area.height() - box.height) // 2
            self._content.setGeometry(QRect(x_offset, y_offset, box.width, box.height))

        if result.update is not None:
            self._dispatcher.schedule_update(result.update)

    def resizeEvent(self, event: QResizeEvent) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self.relayout()

    def _invalidate(self) -> None:
        self._resolved = None
        self.relayout()


__all__ = ["AspectRatioFrame"]
