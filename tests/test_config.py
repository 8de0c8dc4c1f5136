"""Unit tests for resize modes and the immutable configuration."""

from __future__ import annotations

import unittest

from aspect_frame.core import DEFAULT_CROP_RATIO, AspectRatioConfig, ResizeMode


class ResizeModeParseTestCase(unittest.TestCase):
    def test_members_and_integer_values(self) -> None:
        self.assertIs(ResizeMode.parse(ResizeMode.ZOOM), ResizeMode.ZOOM)
        self.assertIs(ResizeMode.parse(1), ResizeMode.FIXED_WIDTH)
        self.assertIs(ResizeMode.parse("5"), ResizeMode.ADDITIONAL_ZOOM)

    def test_name_spellings(self) -> None:
        for spelling in ("fixed_width", "fixed-width", "FixedWidth", " FIXED_WIDTH "):
            with self.subTest(spelling=spelling):
                self.assertIs(ResizeMode.parse(spelling), ResizeMode.FIXED_WIDTH)

    def test_none_defaults_to_fit(self) -> None:
        self.assertIs(ResizeMode.parse(None), ResizeMode.FIT)

    def test_unknown_values_raise(self) -> None:
        for value in ("stretch", 9, True, 1.5):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    ResizeMode.parse(value)

    def test_integer_values_match_attribute_values(self) -> None:
        self.assertEqual(
            [int(mode) for mode in ResizeMode],
            [0, 1, 2, 3, 4, 5],
        )


class AspectRatioConfigTestCase(unittest.TestCase):
    def test_defaults(self) -> None:
        config = AspectRatioConfig()
        self.assertEqual(config.aspect_ratio, 0.0)
        self.assertIs(config.resize_mode, ResizeMode.FIT)
        self.assertEqual(config.crop_ratio, DEFAULT_CROP_RATIO)
        self.assertTrue(config.keep_exact)
        self.assertEqual(config.deformation_tolerance, 0.0)
        self.assertFalse(config.enabled)

    def test_invalid_crop_ratio_keeps_previous_value(self) -> None:
        config = AspectRatioConfig()
        self.assertIs(config.with_crop_ratio(-0.1), config)
        self.assertIs(config.with_crop_ratio(1.0), config)
        self.assertEqual(config.with_crop_ratio(1.0).crop_ratio, 0.2)

        updated = config.with_crop_ratio(0.35)
        self.assertEqual(updated.crop_ratio, 0.35)
        self.assertEqual(updated.with_crop_ratio(1.5).crop_ratio, 0.35)

    def test_boundary_crop_ratios(self) -> None:
        self.assertEqual(AspectRatioConfig().with_crop_ratio(0.0).crop_ratio, 0.0)
        self.assertEqual(AspectRatioConfig().with_crop_ratio(0.999).crop_ratio, 0.999)

    def test_direct_construction_validates(self) -> None:
        with self.assertRaises(ValueError):
            AspectRatioConfig(crop_ratio=1.0)
        with self.assertRaises(ValueError):
            AspectRatioConfig(deformation_tolerance=-0.5)

    def test_non_finite_aspect_ratio(self) -> None:
        for value in (float("nan"), float("inf"), float("-inf")):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    AspectRatioConfig(aspect_ratio=value)
                config = AspectRatioConfig(aspect_ratio=1.5)
                self.assertIs(config.with_aspect_ratio(value), config)

    def test_resize_mode_is_coerced(self) -> None:
        self.assertIs(AspectRatioConfig(resize_mode="zoom").resize_mode, ResizeMode.ZOOM)
        self.assertIs(AspectRatioConfig(resize_mode=2).resize_mode, ResizeMode.FIXED_HEIGHT)

    def test_builders_return_equal_values_for_unchanged_settings(self) -> None:
        config = AspectRatioConfig(aspect_ratio=1.5, resize_mode=ResizeMode.ZOOM)
        self.assertEqual(config.with_aspect_ratio(1.5), config)
        self.assertEqual(config.with_resize_mode("zoom"), config)
        self.assertEqual(config.with_keep_exact(True), config)
        self.assertNotEqual(config.with_keep_exact(False), config)

    def test_negative_tolerance_is_ignored(self) -> None:
        config = AspectRatioConfig().with_deformation_tolerance(0.01)
        self.assertEqual(config.with_deformation_tolerance(-1).deformation_tolerance, 0.01)


if __name__ == "__main__":
    unittest.main()
