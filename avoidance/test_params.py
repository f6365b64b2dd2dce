#!/usr/bin/env python3
"""
Tests for controller parameter loading and validation.
"""

from __future__ import annotations

import math
import unittest

from avoidance.errors import ConfigurationError
from avoidance.params import ControllerParams


class ControllerParamsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        p = ControllerParams()
        self.assertEqual((p.alpha, p.delta, p.velocity, p.min_speed), (10.0, 0.5, 2.5, 0.5))
        self.assertEqual((p.brake_gain, p.steer_gain, p.bias_gain), (5.0, 20.0, 120.0))
        self.assertAlmostEqual(p.frontal_cone, math.radians(40.0))

    def test_go_straight_range_follows_alpha(self) -> None:
        lo, hi = ControllerParams(alpha=7.5).go_straight_range
        self.assertAlmostEqual(hi, math.radians(7.5))
        self.assertEqual(lo, -hi)

    def test_from_mapping_absent_keys_keep_defaults(self) -> None:
        self.assertEqual(ControllerParams.from_mapping({}), ControllerParams())
        self.assertEqual(ControllerParams.from_mapping(None), ControllerParams())
        self.assertEqual(ControllerParams.from_mapping({"velocity": None}), ControllerParams())

    def test_from_mapping_parses_attribute_strings(self) -> None:
        p = ControllerParams.from_mapping({"alpha": "7.5", "delta": " 0.1 ", "velocity": "5"})
        self.assertEqual((p.alpha, p.delta, p.velocity), (7.5, 0.1, 5.0))

    def test_from_mapping_ignores_unknown_keys(self) -> None:
        p = ControllerParams.from_mapping({"min_speed": "3.0", "bias_gain": 1})
        self.assertEqual(p, ControllerParams())

    def test_from_mapping_keeps_base(self) -> None:
        base = ControllerParams(min_speed=1.0)
        p = ControllerParams.from_mapping({"velocity": 4}, base=base)
        self.assertEqual(p.min_speed, 1.0)
        self.assertEqual(p.velocity, 4.0)

    def test_rejects_garbage(self) -> None:
        for bad in ({"velocity": "fast"}, {"alpha": True}, {"delta": [1]}, {"velocity": "nan"}):
            with self.assertRaises(ConfigurationError, msg=repr(bad)):
                ControllerParams.from_mapping(bad)

    def test_rejects_out_of_range(self) -> None:
        with self.assertRaises(ConfigurationError):
            ControllerParams(velocity=-1.0)
        with self.assertRaises(ConfigurationError):
            ControllerParams(min_speed=-0.1)
        with self.assertRaises(ConfigurationError):
            ControllerParams(alpha=270.0)
        with self.assertRaises(ConfigurationError):
            ControllerParams(bias_gain=-1.0)
        with self.assertRaises(ConfigurationError):
            ControllerParams(velocity=float("inf"))

    def test_configuration_error_is_value_error(self) -> None:
        with self.assertRaises(ValueError):
            ControllerParams.from_mapping({"velocity": "-3"})

    def test_frozen(self) -> None:
        p = ControllerParams()
        with self.assertRaises(AttributeError):
            p.velocity = 9.0  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
