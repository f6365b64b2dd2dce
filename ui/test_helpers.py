#!/usr/bin/env python3
"""
Tests for the pure drawing helpers.
"""

from __future__ import annotations

import unittest

from ui.constants import ViewConstants
from ui.helpers import blend_color


class BlendColorTests(unittest.TestCase):
    def test_endpoints(self) -> None:
        idle, hit = ViewConstants.RAY_IDLE_COLOR, ViewConstants.RAY_HIT_COLOR
        self.assertEqual(blend_color(idle, hit, 0.0), idle)
        self.assertEqual(blend_color(idle, hit, 1.0), hit)

    def test_stronger_reading_is_closer_to_hit_colour(self) -> None:
        weak = blend_color((0, 0, 0), (200, 100, 0), 0.25)
        strong = blend_color((0, 0, 0), (200, 100, 0), 0.75)
        self.assertEqual(weak, (50, 25, 0))
        self.assertEqual(strong, (150, 75, 0))

    def test_out_of_range_is_clamped(self) -> None:
        self.assertEqual(blend_color((10, 10, 10), (20, 20, 20), 3.0), (20, 20, 20))
        self.assertEqual(blend_color((10, 10, 10), (20, 20, 20), -1.0), (10, 10, 10))


if __name__ == "__main__":
    unittest.main()
