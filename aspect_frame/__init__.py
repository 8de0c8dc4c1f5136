"""Aspect ratio resize policies and a PySide6 frame widget for video surfaces."""

from __future__ import annotations

from typing import Any

from .core import (
    AspectRatioConfig,
    AspectRatioUpdate,
    AspectRatioUpdateDispatcher,
    Box,
    ResizeMode,
    ResizeResult,
    resolve,
)

__all__ = [
    "AspectRatioConfig",
    "AspectRatioUpdate",
    "AspectRatioUpdateDispatcher",
    "Box",
    "ResizeMode",
    "ResizeResult",
    "resolve",
    "run_app",
]


def run_app(*args: Any, **kwargs: Any) -> int:
    """Lazy import wrapper so core modules can be imported without PySide6."""

    from .app import run_app as _run_app

    return _run_app(*args, **kwargs)
