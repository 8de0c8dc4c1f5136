"""Resize policy behaviour for every mode."""

from __future__ import annotations

import pytest

from aspect_frame.core import AspectRatioConfig, Box, ResizeMode, compute_deformation, resolve


def _resolve(width: int, height: int, ratio: float, mode: ResizeMode, **kwargs) -> Box:
    config = AspectRatioConfig(aspect_ratio=ratio, resize_mode=mode, **kwargs)
    return resolve(Box(width, height), config).box


@pytest.mark.parametrize("ratio", [0.0, -1.0, -0.5])
@pytest.mark.parametrize("mode", list(ResizeMode))
def test_unset_ratio_leaves_box_untouched(ratio: float, mode: ResizeMode) -> None:
    measured = Box(1000, 500)
    result = resolve(measured, AspectRatioConfig(aspect_ratio=ratio, resize_mode=mode))
    assert result.box == measured
    assert result.update is None
    assert result.mismatch is False


@pytest.mark.parametrize("ratio", [0.5, 1.0, 16 / 9, 2.4])
def test_fill_ignores_target_but_reports_mismatch(ratio: float) -> None:
    measured = Box(1280, 720)
    result = resolve(measured, AspectRatioConfig(aspect_ratio=ratio, resize_mode=ResizeMode.FILL))
    assert result.box == measured
    assert result.mismatch is True
    assert result.update.target_aspect_ratio == ratio


def test_fixed_width_keeps_width() -> None:
    assert _resolve(1000, 500, 4 / 3, ResizeMode.FIXED_WIDTH) == Box(1000, 750)
    assert _resolve(1000, 900, 16 / 9, ResizeMode.FIXED_WIDTH) == Box(1000, 562)


def test_fixed_height_keeps_height() -> None:
    assert _resolve(1000, 500, 4 / 3, ResizeMode.FIXED_HEIGHT) == Box(667, 500)
    assert _resolve(400, 900, 16 / 9, ResizeMode.FIXED_HEIGHT) == Box(1600, 900)


def test_fit_shrinks_width_for_narrower_target() -> None:
    assert _resolve(1000, 500, 1.778, ResizeMode.FIT) == Box(889, 500)


def test_zoom_grows_height_for_narrower_target() -> None:
    assert _resolve(1000, 500, 1.778, ResizeMode.ZOOM) == Box(1000, 562)


@pytest.mark.parametrize(
    ("mode", "expected"),
    [(ResizeMode.FIT, Box(889, 500)), (ResizeMode.ZOOM, Box(1000, 562))],
)
def test_exact_sixteen_by_nine_target(mode: ResizeMode, expected: Box) -> None:
    # 1000 / (16 / 9) lands exactly on 562.5 and rounds to the even neighbour.
    assert _resolve(1000, 500, 16 / 9, mode) == expected


def test_half_pixel_rounds_to_even() -> None:
    assert _resolve(1920, 1080, 9 / 16, ResizeMode.FIT) == Box(608, 1080)
    assert _resolve(1000, 1000, 16 / 9, ResizeMode.FIT) == Box(1000, 562)


def test_fit_and_zoom_change_opposite_dimensions_for_wider_target() -> None:
    # Target 2.4 is wider than the 4:3 container.
    assert compute_deformation(Box(800, 600), 2.4) > 0
    assert _resolve(800, 600, 2.4, ResizeMode.FIT) == Box(800, 333)
    assert _resolve(800, 600, 2.4, ResizeMode.ZOOM) == Box(1440, 600)


@pytest.mark.parametrize(
    ("width", "height", "ratio"),
    [(1000, 500, 1.778), (800, 600, 2.4), (1080, 1920, 16 / 9), (1920, 1080, 9 / 16), (333, 777, 1.21)],
)
def test_fit_and_zoom_change_exactly_one_dimension(width: int, height: int, ratio: float) -> None:
    fit = _resolve(width, height, ratio, ResizeMode.FIT)
    zoom = _resolve(width, height, ratio, ResizeMode.ZOOM)
    fit_changes = (fit.width != width, fit.height != height)
    zoom_changes = (zoom.width != width, zoom.height != height)
    assert sum(fit_changes) == 1
    assert sum(zoom_changes) == 1
    assert fit_changes != zoom_changes


def test_additional_zoom_budget_exceeded_takes_natural_growth() -> None:
    box = _resolve(1600, 900, 4 / 3, ResizeMode.ADDITIONAL_ZOOM, crop_ratio=0.2, keep_exact=True)
    assert box == Box(1600, 1200)


def test_additional_zoom_matching_ratio_crops_full_budget() -> None:
    box = _resolve(1600, 900, 16 / 9, ResizeMode.ADDITIONAL_ZOOM, crop_ratio=0.2)
    assert box == Box(1920, 1080)


def test_additional_zoom_wider_target_grows_height_then_width() -> None:
    box = _resolve(1000, 1000, 2.0, ResizeMode.ADDITIONAL_ZOOM, crop_ratio=0.25)
    assert box == Box(2500, 1250)


def test_additional_zoom_keep_exact_forces_crop_budget() -> None:
    exact = _resolve(1600, 900, 16 / 10, ResizeMode.ADDITIONAL_ZOOM, crop_ratio=0.2, keep_exact=True)
    relaxed = _resolve(1600, 900, 16 / 10, ResizeMode.ADDITIONAL_ZOOM, crop_ratio=0.2, keep_exact=False)
    assert exact == Box(1728, 1080)
    assert relaxed == Box(1600, 1000)


def test_additional_zoom_without_crop_budget_behaves_like_zoom() -> None:
    box = _resolve(1000, 500, 1.778, ResizeMode.ADDITIONAL_ZOOM, crop_ratio=0.0)
    assert box == _resolve(1000, 500, 1.778, ResizeMode.ZOOM)


def test_fit_never_applies_additional_zoom() -> None:
    assert _resolve(1600, 900, 16 / 9, ResizeMode.FIT) == Box(1600, 900)


@pytest.mark.parametrize(
    "mode",
    [ResizeMode.FIT, ResizeMode.ZOOM, ResizeMode.FIXED_WIDTH, ResizeMode.FIXED_HEIGHT, ResizeMode.FILL],
)
@pytest.mark.parametrize(
    ("width", "height", "ratio"),
    [(1000, 500, 1.778), (1000, 1000, 16 / 9), (800, 600, 2.4), (1080, 1920, 4 / 3), (1920, 1080, 9 / 16), (641, 479, 0.77)],
)
def test_resolution_is_idempotent(mode: ResizeMode, width: int, height: int, ratio: float) -> None:
    config = AspectRatioConfig(aspect_ratio=ratio, resize_mode=mode)
    first = resolve(Box(width, height), config).box
    second = resolve(first, config).box
    assert second == first


@pytest.mark.parametrize("mode", list(ResizeMode))
def test_resolved_box_is_positive(mode: ResizeMode) -> None:
    box = _resolve(3, 1000, 0.001, mode)
    assert box.width >= 1 and box.height >= 1


def test_natural_ratio_is_measured_before_resizing() -> None:
    result = resolve(Box(1000, 500), AspectRatioConfig(aspect_ratio=1.778, resize_mode=ResizeMode.FIT))
    assert result.natural_aspect_ratio == pytest.approx(2.0)
    assert result.box.aspect_ratio == pytest.approx(1.778, rel=1e-3)


def test_tolerance_skips_near_matches() -> None:
    config = AspectRatioConfig(aspect_ratio=1.77, resize_mode=ResizeMode.FIT, deformation_tolerance=0.01)
    result = resolve(Box(1920, 1080), config)
    assert result.box == Box(1920, 1080)
    assert result.update is not None
    assert result.mismatch is False


def test_tolerance_does_not_hide_real_mismatches() -> None:
    config = AspectRatioConfig(aspect_ratio=4 / 3, resize_mode=ResizeMode.FIT, deformation_tolerance=0.01)
    result = resolve(Box(1920, 1080), config)
    assert result.box == Box(1440, 1080)
    assert result.mismatch is True


def test_zero_tolerance_is_disabled() -> None:
    config = AspectRatioConfig(aspect_ratio=16 / 9, resize_mode=ResizeMode.ADDITIONAL_ZOOM)
    result = resolve(Box(1600, 900), config)
    assert result.box == Box(1920, 1080)
    assert result.mismatch is True
