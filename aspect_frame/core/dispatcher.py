"""Coalesced delivery of aspect ratio updates to a single listener."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .resize import AspectRatioUpdate

logger = logging.getLogger(__name__)

# listener(target_aspect_ratio, natural_aspect_ratio, mismatch)
AspectRatioListener = Callable[[float, float, bool], None]
Task = Callable[[], None]
PostTask = Callable[[Task], None]


class AspectRatioUpdateDispatcher:
    """Reports the latest aspect ratio update at most once per event turn.

    Every :meth:`schedule_update` call replaces the pending payload. Only the
    first call after an idle period posts :meth:`flush` through ``post``, so
    any number of layout passes before the next turn collapse into one
    listener call carrying the values of the last pass.
    """

    def __init__(self, post: PostTask, listener: Optional[AspectRatioListener] = None) -> None:
        self._post = post
        self._listener = listener
        self._pending: Optional[AspectRatioUpdate] = None
        self._scheduled = False

    @property
    def listener(self) -> Optional[AspectRatioListener]:
        return self._listener

    @listener.setter
    def listener(self, listener: Optional[AspectRatioListener]) -> None:
        self._listener = listener

    @property
    def is_scheduled(self) -> bool:
        return self._scheduled

    @property
    def pending(self) -> Optional[AspectRatioUpdate]:
        return self._pending

    def schedule_update(self, update: AspectRatioUpdate) -> None:
        self._pending = update
        if not self._scheduled:
            self._scheduled = True
            self._post(self.flush)

    def flush(self) -> None:
        """Deliver the pending update; runs on the turn after scheduling."""

        # Cleared before delivery: updates scheduled from the listener post a new flush.
        self._scheduled = False
        update, self._pending = self._pending, None
        if update is None:
            return
        if self._listener is None:
            logger.debug("No aspect ratio listener attached; dropping %s", update)
            return
        self._listener(update.target_aspect_ratio, update.natural_aspect_ratio, update.mismatch)


__all__ = ["AspectRatioListener", "AspectRatioUpdateDispatcher", "PostTask"]
