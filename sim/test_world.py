#!/usr/bin/env python3
"""
World-level tests: tick ordering, overlap resolution, replay, bridge and
experiment telemetry.
"""

from __future__ import annotations

import math
import os
import tempfile
import time
import unittest

import numpy as np
import pandas as pd

from avoidance.controller import ObstacleAvoidanceController
from avoidance.params import ControllerParams
from avoidance.types import SensorReading
from sim.arena import Arena, Cylinder, random_arena
from sim.experiment import TELEMETRY_COLUMNS, per_robot_summary, run_experiment, summarize, to_csv
from sim.sim_bridge import SimBridge
from sim.world import World


def _empty_world(*cylinders: Cylinder, half_size: float = 2.0) -> World:
    return World(num_robots=0, arena=Arena(half_size=half_size, cylinders=tuple(cylinders)))


class WorldTests(unittest.TestCase):
    def test_open_space_cruises_straight(self) -> None:
        world = _empty_world()
        robot = world.add_robot("FB_A", 0.0, 0.0, 0.0)
        world.tick(dt=0.1)
        self.assertEqual((robot.left, robot.right), (2.5, 2.5))
        self.assertAlmostEqual(robot.x, 0.0025)
        self.assertAlmostEqual(robot.y, 0.0)

    def test_cylinder_ahead_commits_to_a_turn(self) -> None:
        world = _empty_world(Cylinder(0.185, 0.0, 0.05))
        robot = world.add_robot("FB_A", 0.0, 0.0, 0.0)
        world.tick(dt=0.1)
        self.assertTrue(robot.controller.last_terms.frontal)
        self.assertGreater(abs(robot.left - robot.right), 5.0)
        self.assertEqual(min(robot.left, robot.right), 0.5)
        self.assertNotEqual(robot.theta, 0.0)

    def test_all_robots_sense_before_any_moves(self) -> None:
        world = _empty_world()
        a = world.add_robot("FB_A", 0.0, 0.0, 0.0)
        b = world.add_robot("FB_B", 0.26, 0.0, math.pi)
        centres = np.array([[a.x, a.y]])
        radii = np.array([a.radius])
        expected = b.ring.scan(b.x, b.y, b.theta, world.arena.half_size, centres, radii)

        world.tick(dt=0.5)

        np.testing.assert_allclose(b.last_values, expected)
        self.assertGreater(b.last_values.max(), 0.0)

    def test_overlap_with_cylinder_is_resolved_and_counted(self) -> None:
        world = _empty_world(Cylinder(0.185, 0.0, 0.05))
        robot = world.add_robot("FB_A", 0.1, 0.0, 0.0)
        world.tick(dt=0.1)
        self.assertGreaterEqual(world.collisions, 1)
        self.assertGreaterEqual(math.hypot(robot.x - 0.185, robot.y), 0.135 - 1e-9)

    def test_robots_stay_inside_and_above_floor(self) -> None:
        world = World(num_robots=4, num_obstacles=8, seed=3)
        for _ in range(300):
            world.tick(dt=0.1)
            for robot in world.robots:
                lim = world.arena.half_size - robot.radius + 1e-9
                self.assertLessEqual(abs(robot.x), lim)
                self.assertLessEqual(abs(robot.y), lim)
                self.assertGreaterEqual(robot.left, 0.5)
                self.assertGreaterEqual(robot.right, 0.5)
        self.assertGreater(world.stats()["mean_distance_m"], 0.0)

    def test_seeded_runs_replay(self) -> None:
        def run() -> list:
            world = World(num_robots=3, num_obstacles=6, seed=21)
            for _ in range(80):
                world.tick(dt=0.1)
            return [(r.x, r.y, r.theta) for r in world.robots]

        self.assertEqual(run(), run())

    def test_reset_restores_initial_state(self) -> None:
        world = World(num_robots=2, num_obstacles=4, seed=9)
        start = [(r.x, r.y, r.theta) for r in world.robots]
        for _ in range(20):
            world.tick(dt=0.1)
        world.reset()
        self.assertEqual(world.tick_count, 0)
        self.assertEqual([(r.x, r.y, r.theta) for r in world.robots], start)

    def test_random_arena_keeps_centre_clear(self) -> None:
        arena = random_arena(count=10, seed=2)
        self.assertTrue(arena.is_free(0.0, 0.0, 0.2))
        for i, c in enumerate(arena.cylinders):
            for other in arena.cylinders[i + 1:]:
                self.assertGreater(math.hypot(c.x - other.x, c.y - other.y), c.radius + other.radius)

    def test_cylinder_push_out_never_crosses_a_wall(self) -> None:
        world = _empty_world(Cylinder(1.3, 0.0, 0.15), half_size=1.5)
        robot = world.add_robot("FB_A", 1.40, 0.0, 0.0)
        world.tick(dt=0.1)
        lim = world.arena.half_size - robot.radius + 1e-9
        self.assertLessEqual(abs(robot.x), lim)
        self.assertLessEqual(abs(robot.y), lim)
        self.assertGreaterEqual(math.hypot(robot.x - 1.3, robot.y), 0.15 + robot.radius - 1e-9)

    def test_max_ticks_finishes(self) -> None:
        world = World(num_robots=1, num_obstacles=0, seed=1, max_ticks=3)
        while not world.is_finished():
            world.tick(dt=0.1)
        self.assertEqual(world.tick_count, 3)


class ActuatorTests(unittest.TestCase):
    def test_drive_clips_what_the_controller_commands(self) -> None:
        world = _empty_world()
        robot = world.add_robot("FB_A", 0.0, 0.0, 0.0)
        controller = ObstacleAvoidanceController(
            read_sensors=lambda: [SensorReading(1.0, 0.0)],
            set_wheels=robot.set_wheel_velocities,
        )
        controller.control_step()
        self.assertEqual(controller.last_command, (0.5, 117.5))
        self.assertEqual((robot.left, robot.right), (0.5, 30.0))

    def test_negative_speeds_clip_symmetrically(self) -> None:
        robot = _empty_world().add_robot("FB_A", 0.0, 0.0, 0.0)
        robot.set_wheel_velocities(-50.0, -10.0)
        self.assertEqual((robot.left, robot.right), (-30.0, -10.0))


class SimBridgeTests(unittest.TestCase):
    def test_step_publishes_snapshot(self) -> None:
        bridge = SimBridge(robot_count=2, obstacle_count=3, random_seed=5)
        self.assertEqual(bridge.get_stats()["tick"], 0)
        bridge.step()
        robots = bridge.get_robots()
        self.assertEqual(len(robots), 2)
        self.assertEqual(bridge.get_stats()["tick"], 1)
        for key in ("x", "y", "theta", "left", "right", "brake", "steer", "sensors"):
            self.assertIn(key, robots[0])
        self.assertEqual(len(bridge.get_arena()["cylinders"]), 3)

    def test_reset_clears_ticks(self) -> None:
        bridge = SimBridge(robot_count=1, obstacle_count=0, random_seed=5)
        bridge.step()
        bridge.reset()
        self.assertEqual(bridge.get_stats()["tick"], 0)

    def test_thread_lifecycle(self) -> None:
        bridge = SimBridge(tick_rate_hz=200.0, robot_count=1, obstacle_count=0,
                           random_seed=1, max_ticks=5)
        bridge.start()
        try:
            for _ in range(200):
                if bridge.is_finished():
                    break
                time.sleep(0.01)
        finally:
            bridge.stop()
        self.assertTrue(bridge.is_finished())
        self.assertEqual(bridge.get_stats()["tick"], 5)

    def test_step_stops_at_max_ticks(self) -> None:
        bridge = SimBridge(robot_count=1, obstacle_count=0, random_seed=5, max_ticks=2)
        for _ in range(4):
            bridge.step()
        self.assertEqual(bridge.get_stats()["tick"], 2)

    def test_tick_error_is_logged_and_loop_continues(self) -> None:
        bridge = SimBridge(tick_rate_hz=200.0, robot_count=1, obstacle_count=0,
                           random_seed=1, max_ticks=3)
        world = bridge._world
        real_tick = world.tick
        calls = []

        def flaky_tick(dt: float) -> None:
            calls.append(dt)
            if len(calls) == 1:
                raise RuntimeError("sensor glitch")
            real_tick(dt)

        world.tick = flaky_tick
        with self.assertLogs("sim_bridge", "ERROR") as captured:
            bridge.start()
            try:
                _wait_until(bridge.is_finished)
            finally:
                bridge.stop()
        self.assertIn("tick error", captured.output[0])
        self.assertEqual(bridge.get_stats()["tick"], 3)
        self.assertEqual(len(calls), 4)

    def test_paused_bridge_does_not_advance(self) -> None:
        bridge = SimBridge(tick_rate_hz=200.0, robot_count=1, obstacle_count=0, random_seed=1)
        bridge.set_paused(True)
        bridge.start()
        try:
            time.sleep(0.1)
            self.assertEqual(bridge.get_stats()["tick"], 0)
            bridge.set_paused(False)
            _wait_until(lambda: bridge.get_stats()["tick"] > 0)
        finally:
            bridge.stop()
        self.assertGreater(bridge.get_stats()["tick"], 0)


class ExperimentTests(unittest.TestCase):
    def test_telemetry_shape_and_summary(self) -> None:
        df = run_experiment(ticks=25, robot_count=2, obstacle_count=4, seed=8)
        self.assertEqual(list(df.columns), TELEMETRY_COLUMNS)
        self.assertEqual(len(df), 50)

        summary = summarize(df)
        self.assertEqual(summary["ticks"], 25)
        self.assertEqual(summary["robots"], 2)
        self.assertGreaterEqual(summary["min_wheel_speed"], 0.5)
        self.assertGreater(summary["mean_speed_mps"], 0.0)
        self.assertTrue(0.0 <= summary["frontal_fraction"] <= 1.0)

        per_robot = per_robot_summary(df)
        self.assertEqual(sorted(per_robot.index), ["FB_0", "FB_1"])

    def test_params_reach_every_robot(self) -> None:
        df = run_experiment(
            ticks=1,
            world=_world_with_one_robot(ControllerParams(velocity=4.0)),
        )
        self.assertEqual(df.loc[0, "left"], 4.0)

    def test_empty_run(self) -> None:
        df = run_experiment(ticks=0, robot_count=1, obstacle_count=0, seed=1)
        self.assertTrue(df.empty)
        self.assertEqual(summarize(df)["ticks"], 0)

    def test_csv_export(self) -> None:
        df = run_experiment(ticks=3, robot_count=1, obstacle_count=0, seed=2)
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "telemetry.csv")
            to_csv(df, path)
            back = pd.read_csv(path)
        self.assertEqual(len(back), 3)
        self.assertEqual(list(back.columns), TELEMETRY_COLUMNS)


def _wait_until(predicate, timeout: float = 2.0) -> None:
    deadline = time.monotonic() + timeout
    while not predicate() and time.monotonic() < deadline:
        time.sleep(0.01)


def _world_with_one_robot(params: ControllerParams) -> World:
    world = World(num_robots=0, params=params, arena=Arena(half_size=2.0))
    world.add_robot("FB_0", 0.0, 0.0, 0.0)
    return world


if __name__ == "__main__":
    unittest.main()
