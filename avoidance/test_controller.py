#!/usr/bin/env python3
"""
Tests for the controller's collaborator wiring.
"""

from __future__ import annotations

import unittest
from typing import List, Tuple

from avoidance.controller import ObstacleAvoidanceController
from avoidance.errors import CollaboratorError
from avoidance.params import ControllerParams
from avoidance.types import SensorReading, WheelCommand


class FakeProximity:
    """Reading source replaying a fixed script, one snapshot per call."""

    def __init__(self, script: List[List[SensorReading]]) -> None:
        self.script = list(script)
        self.calls = 0

    def __call__(self) -> List[SensorReading]:
        self.calls += 1
        return self.script.pop(0)


class FakeWheels:
    def __init__(self) -> None:
        self.commands: List[Tuple[float, float]] = []

    def __call__(self, left: float, right: float) -> None:
        self.commands.append((left, right))


class ControllerTests(unittest.TestCase):
    def test_step_reads_once_and_dispatches_once(self) -> None:
        sensors = FakeProximity([[SensorReading.from_degrees(0.05, 90.0)]])
        wheels = FakeWheels()
        ctrl = ObstacleAvoidanceController(sensors, wheels)

        cmd = ctrl.control_step()

        self.assertEqual(sensors.calls, 1)
        self.assertEqual(len(wheels.commands), 1)
        self.assertEqual(wheels.commands[0], (cmd.left, cmd.right))
        self.assertAlmostEqual(cmd.left, 3.5)
        self.assertAlmostEqual(cmd.right, 1.5)
        self.assertIs(ctrl.last_command, cmd)

    def test_each_cycle_uses_only_its_own_snapshot(self) -> None:
        head_on = [SensorReading.from_degrees(1.0, 0.0)]
        sensors = FakeProximity([head_on, [], head_on])
        wheels = FakeWheels()
        ctrl = ObstacleAvoidanceController(sensors, wheels, ControllerParams())

        first = ctrl.control_step()
        clear = ctrl.control_step()
        again = ctrl.control_step()

        self.assertEqual(clear, WheelCommand(2.5, 2.5))
        self.assertEqual(first, again)

    def test_two_robots_are_isolated(self) -> None:
        a_wheels, b_wheels = FakeWheels(), FakeWheels()
        a = ObstacleAvoidanceController(
            FakeProximity([[SensorReading.from_degrees(1.0, 90.0)]]), a_wheels, name="A",
        )
        b = ObstacleAvoidanceController(
            FakeProximity([[]]), b_wheels, ControllerParams(velocity=4.0), name="B",
        )
        a.control_step()
        b.control_step()
        self.assertEqual(b_wheels.commands, [(4.0, 4.0)])
        self.assertNotEqual(a_wheels.commands[0][0], a_wheels.commands[0][1])

    def test_missing_collaborators_are_fatal(self) -> None:
        with self.assertRaises(CollaboratorError):
            ObstacleAvoidanceController(None, FakeWheels())  # type: ignore[arg-type]
        with self.assertRaises(CollaboratorError):
            ObstacleAvoidanceController(FakeProximity([]), "wheels")  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
