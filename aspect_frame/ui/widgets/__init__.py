"""Reusable UI widgets with deferred imports.

The lazy import mechanism keeps Qt from loading during core-only workflows
while preserving direct attribute access for callers.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict

if TYPE_CHECKING:  # pragma: no cover
    from .aspect_ratio_frame import AspectRatioFrame
    from .control_bar import ControlBar, RATIO_PRESETS
    from .surface import SurfaceWidget

__all__ = [
    "AspectRatioFrame",
    "ControlBar",
    "RATIO_PRESETS",
    "SurfaceWidget",
]


_LAZY_IMPORTS: Dict[str, Callable[[], object]] = {
    "AspectRatioFrame": lambda: __import__(
        "aspect_frame.ui.widgets.aspect_ratio_frame", fromlist=["AspectRatioFrame"]
    ).AspectRatioFrame,
    "ControlBar": lambda: __import__("aspect_frame.ui.widgets.control_bar", fromlist=["ControlBar"]).ControlBar,
    "RATIO_PRESETS": lambda: __import__(
        "aspect_frame.ui.widgets.control_bar", fromlist=["RATIO_PRESETS"]
    ).RATIO_PRESETS,
    "SurfaceWidget": lambda: __import__("aspect_frame.ui.widgets.surface", fromlist=["SurfaceWidget"]).SurfaceWidget,
}


def __getattr__(name: str):
    try:
        loader = _LAZY_IMPORTS[name]
    except KeyError:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return loader()
