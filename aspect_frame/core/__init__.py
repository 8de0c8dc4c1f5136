"""Pure resize-policy logic and update coalescing (no Qt imports)."""

from .config import (
    DEFAULT_CROP_RATIO,
    DEFAULT_DEFORMATION_TOLERANCE,
    AspectRatioConfig,
    ResizeMode,
    is_valid_crop_ratio,
)
from .dispatcher import AspectRatioListener, AspectRatioUpdateDispatcher, PostTask
from .resize import AspectRatioUpdate, Box, ResizeResult, compute_deformation, resolve

__all__ = [
    "AspectRatioConfig",
    "AspectRatioListener",
    "AspectRatioUpdate",
    "AspectRatioUpdateDispatcher",
    "Box",
    "DEFAULT_CROP_RATIO",
    "DEFAULT_DEFORMATION_TOLERANCE",
    "PostTask",
    "ResizeMode",
    "ResizeResult",
    "compute_deformation",
    "is_valid_crop_ratio",
    "resolve",
]
