"""Resize modes and the immutable configuration consumed by the calculator."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_CROP_RATIO = 0.2
# Suggested opt-in tolerance: ratios within 1% of each other are left alone.
DEFAULT_DEFORMATION_TOLERANCE = 0.01


class ResizeMode(IntEnum):
    """How the content box adapts to the target aspect ratio.

    FIT: either the width or the height shrinks.
    FIXED_WIDTH: the width is kept and the height follows the ratio.
    FIXED_HEIGHT: the height is kept and the width follows the ratio.
    FILL: the target ratio is ignored.
    ZOOM: either the width or the height grows.
    ADDITIONAL_ZOOM: grows the box further so that a bounded share of the
    height (the crop ratio) falls outside the container.
    """

    FIT = 0
    FIXED_WIDTH = 1
    FIXED_HEIGHT = 2
    FILL = 3
    ZOOM = 4
    ADDITIONAL_ZOOM = 5

    @classmethod
    def parse(cls, value: Any) -> "ResizeMode":
        """Coerce a member, its integer value or a name like ``"fixed-width"``."""

        if value is None:
            return cls.FIT
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise ValueError(f"Unknown resize mode value {value!r}") from None
        if isinstance(value, str):
            token = value.strip()
            if token.isdigit():
                return cls.parse(int(token))
            # Accept snake, kebab and camel case spellings.
            normalised = "".join(ch for ch in token.lower() if ch.isalnum())
            for member in cls:
                if member.name.replace("_", "").lower() == normalised:
                    return member
        options = ", ".join(member.name.lower() for member in cls)
        raise ValueError(f"Unknown resize mode {value!r}. Choose one of: {options}.")

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


def is_valid_crop_ratio(ratio: float) -> bool:
    return 0.0 <= ratio < 1.0


@dataclass(frozen=True)
class AspectRatioConfig:
    """Snapshot of every input the resize policy depends on.

    Hosts never mutate a config; each setter builds a new value with one of
    the ``with_*`` helpers and compares it against the previous one to decide
    whether a re-layout is needed.
    """

    aspect_ratio: float = 0.0
    resize_mode: ResizeMode = ResizeMode.FIT
    crop_ratio: float = DEFAULT_CROP_RATIO
    keep_exact: bool = True
    deformation_tolerance: float = 0.0

    def __post_init__(self) -> None:
        if not math.isfinite(self.aspect_ratio):
            raise ValueError(f"aspect_ratio must be finite, got {self.aspect_ratio!r}")
        if not is_valid_crop_ratio(self.crop_ratio):
            raise ValueError(f"crop_ratio must be within [0, 1), got {self.crop_ratio!r}")
        if self.deformation_tolerance < 0:
            raise ValueError(
                f"deformation_tolerance must not be negative, got {self.deformation_tolerance!r}"
            )
        if not isinstance(self.resize_mode, ResizeMode):
            object.__setattr__(self, "resize_mode", ResizeMode.parse(self.resize_mode))

    @property
    def enabled(self) -> bool:
        """True once a positive target aspect ratio has been set."""

        return self.aspect_ratio > 0

    def with_aspect_ratio(self, ratio: float) -> "AspectRatioConfig":
        """Return a config targeting ``ratio``, or ``self`` when it is NaN or infinite."""

        if not math.isfinite(ratio):
            logger.debug("Ignoring aspect ratio %r; keeping %r", ratio, self.aspect_ratio)
            return self
        return replace(self, aspect_ratio=float(ratio))

    def with_resize_mode(self, mode: ResizeMode | int | str) -> "AspectRatioConfig":
        return replace(self, resize_mode=ResizeMode.parse(mode))

    def with_crop_ratio(self, ratio: float) -> "AspectRatioConfig":
        """Return a config using ``ratio``, or ``self`` when it is out of range."""

        if not is_valid_crop_ratio(ratio):
            logger.debug("Ignoring crop ratio %r; keeping %r", ratio, self.crop_ratio)
            return self
        return replace(self, crop_ratio=float(ratio))

    def with_keep_exact(self, keep_exact: bool) -> "AspectRatioConfig":
        return replace(self, keep_exact=bool(keep_exact))

    def with_deformation_tolerance(self, tolerance: float) -> "AspectRatioConfig":
        if tolerance < 0:
            logger.debug(
                "Ignoring deformation tolerance %r; keeping %r", tolerance, self.deformation_tolerance
            )
            return self
        return replace(self, deformation_tolerance=float(tolerance))


__all__ = [
    "AspectRatioConfig",
    "DEFAULT_CROP_RATIO",
    "DEFAULT_DEFORMATION_TOLERANCE",
    "ResizeMode",
    "is_valid_crop_ratio",
]
