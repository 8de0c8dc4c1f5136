"""Qt side of the package: the demo window, its palette and the widgets.

Names resolve on first access so ``aspect_frame.core`` stays importable
without PySide6.
"""
from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING, Dict

if TYPE_CHECKING:  # pragma: no cover
    from .main_window import MainWindow
    from .styles import apply_app_palette
    from .widgets import AspectRatioFrame, ControlBar, SurfaceWidget

# attribute -> submodule that defines it
_EXPORTS: Dict[str, str] = {
    "AspectRatioFrame": ".widgets",
    "ControlBar": ".widgets",
    "MainWindow": ".main_window",
    "SurfaceWidget": ".widgets",
    "apply_app_palette": ".styles",
}

__all__ = sorted(_EXPORTS)


def __getattr__(name: str):
    try:
        module_name = _EXPORTS[name]
    except KeyError:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from None
    value = getattr(import_module(module_name, __name__), name)
    globals()[name] = value
    return value
