"""Resize-policy calculation for boxes that must follow a target aspect ratio."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import AspectRatioConfig, ResizeMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Box:
    """Integer width/height pair in layout pixels."""

    width: int
    height: int

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def as_tuple(self) -> tuple[int, int]:
        return (self.width, self.height)


@dataclass(frozen=True)
class AspectRatioUpdate:
    """Payload handed to aspect ratio listeners."""

    target_aspect_ratio: float
    natural_aspect_ratio: float
    mismatch: bool


@dataclass(frozen=True)
class ResizeResult:
    """Outcome of one layout pass.

    ``update`` is ``None`` while no target aspect ratio is set; in that case
    nothing should be reported to listeners.
    """

    box: Box
    update: AspectRatioUpdate | None = None

    @property
    def mismatch(self) -> bool:
        return self.update.mismatch if self.update is not None else False

    @property
    def natural_aspect_ratio(self) -> float | None:
        return self.update.natural_aspect_ratio if self.update is not None else None


def _pixels(value: float) -> int:
    # Round half to even: 562.5 -> 562, 888.9 -> 889.
    return max(1, round(value))


def _matches_target(width: int, height: int, target: float) -> bool:
    return _pixels(height * target) == width or _pixels(width / target) == height


def compute_deformation(measured: Box, target: float) -> float:
    """Signed relative difference between ``target`` and the box ratio.

    Positive values mean the target is wider than the box.
    """

    return target / measured.aspect_ratio - 1


def _additional_zoom(width: int, height: int, target: float, deformation: float, config: AspectRatioConfig) -> tuple[int, int]:
    crop = config.crop_ratio
    if deformation >= 0:
        height = _pixels(height * (1 + crop))
        return _pixels(height * target), height

    candidate = _pixels(width / target)
    if (candidate - height) / height < crop:
        if config.keep_exact:
            height = _pixels(height * (1 + crop))
            return _pixels(height * target), height
        return width, candidate
    # The crop budget cannot cover this much growth; take it anyway.
    return width, candidate


def resolve(measured: Box, config: AspectRatioConfig) -> ResizeResult:
    """Resolve the box the content should occupy inside ``measured``.

    Args:
        measured: The container's measured size. Its height must be positive.
        config: Target aspect ratio, resize mode and crop settings.

    Returns:
        A :class:`ResizeResult` with the resolved box and the update to report.
        With no target ratio set the measured box is returned untouched and no
        update is produced.
    """

    target = config.aspect_ratio
    if target <= 0:
        return ResizeResult(box=measured)

    natural = measured.aspect_ratio
    deformation = compute_deformation(measured, target)
    tolerance = config.deformation_tolerance
    if tolerance > 0 and abs(deformation) <= tolerance:
        logger.debug("Deformation %.4f within tolerance %.4f; keeping %s", deformation, tolerance, measured)
        return ResizeResult(
            box=measured,
            update=AspectRatioUpdate(target, natural, mismatch=False),
        )

    width, height = measured.width, measured.height
    mode = config.resize_mode
    if mode is ResizeMode.FIXED_WIDTH:
        height = _pixels(width / target)
    elif mode is ResizeMode.FIXED_HEIGHT:
        width = _pixels(height * target)
    elif mode is ResizeMode.ZOOM:
        if not _matches_target(width, height, target):
            if deformation > 0:
                width = _pixels(height * target)
            else:
                height = _pixels(width / target)
    elif mode is ResizeMode.FIT:
        if not _matches_target(width, height, target):
            if deformation > 0:
                height = _pixels(width / target)
            else:
                width = _pixels(height * target)
    elif mode is ResizeMode.ADDITIONAL_ZOOM:
        width, height = _additional_zoom(width, height, target, deformation, config)
    # FILL ignores the target ratio.

    box = Box(width, height)
    logger.debug("Resolved %s to %s (mode=%s, target=%.4f)", measured, box, mode.name, target)
    return ResizeResult(box=box, update=AspectRatioUpdate(target, natural, mismatch=True))


__all__ = [
    "AspectRatioUpdate",
    "Box",
    "ResizeResult",
    "compute_deformation",
    "resolve",
]
