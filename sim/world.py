#!/usr/bin/env python3
"""
sim/world.py
============
Foot-bot arena world.

This module manages a flat list of :class:`~sim.robot.FootBot` entities in
a static :class:`~sim.arena.Arena`.  The :class:`World` class owns the tick
loop, body-overlap resolution, spawn logic and run counters.

Every tick is split in two phases so no robot ever senses a neighbour's
future pose: first every robot runs its control step against the current
poses, then every robot moves.
"""

from __future__ import annotations

import logging
import math
import random
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from avoidance.params import ControllerParams
from sim.arena import Arena, random_arena
from sim.proximity import SensorRingSpec
from sim.robot import FootBot, RobotSpec

log = logging.getLogger("world")


class World:
    """Arena, robots and the two-phase tick.

    Parameters
    ----------
    num_robots : int
        Robots to spawn.
    num_obstacles : int
        Cylinders placed by :func:`~sim.arena.random_arena` when *arena*
        is not given.
    seed : int or None
        Seed for arena layout, spawn poses and sensor noise.
    params : ControllerParams or None
        Controller tuning shared by every robot (immutable, so sharing is
        safe).
    arena : Arena or None
        Fixed layout; overrides *num_obstacles*.
    robot_spec, ring_spec : optional
        Body / sensor geometry.
    max_ticks : int or None
        :meth:`is_finished` turns true after this many ticks.
    """

    def __init__(
        self,
        num_robots: int = 4,
        num_obstacles: int = 8,
        seed: Optional[int] = None,
        params: Optional[ControllerParams] = None,
        arena: Optional[Arena] = None,
        robot_spec: Optional[RobotSpec] = None,
        ring_spec: Optional[SensorRingSpec] = None,
        max_ticks: Optional[int] = None,
    ) -> None:
        self.num_robots = num_robots
        self.num_obstacles = num_obstacles
        self.seed = seed
        self.params = params or ControllerParams()
        self.robot_spec = robot_spec or RobotSpec()
        self.ring_spec = ring_spec
        self.max_ticks = max_ticks
        self._fixed_arena = arena

        self.arena: Arena = Arena()
        self.robots: List[FootBot] = []
        self.tick_count = 0
        self.elapsed_s = 0.0
        self.collisions = 0
        self.reset()

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    def reset(self) -> None:
        """Rebuild arena and robots from the seed so the run replays."""
        self.arena = self._fixed_arena or random_arena(
            count=self.num_obstacles, seed=self.seed,
        )
        self.robots = []
        self.tick_count = 0
        self.elapsed_s = 0.0
        self.collisions = 0
        rng = random.Random(self.seed)
        for i in range(self.num_robots):
            x, y = self._free_spot(rng)
            self.add_robot(f"FB_{i}", x, y, rng.uniform(-math.pi, math.pi))
        log.info(
            "World reset: %d robots, %d cylinders, seed=%s",
            len(self.robots), len(self.arena.cylinders), self.seed,
        )

    def add_robot(self, robot_id: str, x: float, y: float, theta: float) -> FootBot:
        robot = FootBot(
            robot_id, x, y, theta,
            world=self,
            params=self.params,
            spec=self.robot_spec,
            ring_spec=self.ring_spec,
            color_index=len(self.robots),
            seed=None if self.seed is None else self.seed + len(self.robots),
        )
        self.robots.append(robot)
        return robot

    def _free_spot(self, rng: random.Random, attempts: int = 1000) -> Tuple[float, float]:
        clearance = self.robot_spec.body_radius_m + 0.05
        lim = self.arena.half_size - clearance
        for _ in range(attempts):
            x, y = rng.uniform(-lim, lim), rng.uniform(-lim, lim)
            if not self.arena.is_free(x, y, clearance):
                continue
            if any(math.hypot(x - r.x, y - r.y) < r.radius + clearance for r in self.robots):
                continue
            return x, y
        raise RuntimeError("No collision-free spawn position left in the arena")

    def is_finished(self) -> bool:
        return self.max_ticks is not None and self.tick_count >= self.max_ticks

    # ── Sensing ───────────────────────────────────────────────────────────────

    def obstacles_seen_by(self, robot: FootBot) -> Tuple[np.ndarray, np.ndarray]:
        """Cylinders plus every *other* robot body, as ray-cast circles."""
        centres, radii = self.arena.obstacle_arrays()
        others = [r for r in self.robots if r is not robot]
        if not others:
            return centres, radii
        oc = np.array([(r.x, r.y) for r in others], dtype=float)
        orad = np.array([r.radius for r in others], dtype=float)
        return np.vstack([centres, oc]), np.concatenate([radii, orad])

    # ── Tick ──────────────────────────────────────────────────────────────────

    def tick(self, dt: float) -> None:
        """Sense-and-decide for all robots, then move all robots."""
        for robot in self.robots:
            robot.control_step()
        for robot in self.robots:
            robot.integrate(dt)
        self._resolve_overlaps()
        self.tick_count += 1
        self.elapsed_s += dt

    def _resolve_overlaps(self) -> None:
        """Push bodies apart, clamp inside the walls, then push out of cylinders.

        A cylinder push-out that would cross a wall slides the robot along
        that wall instead, so neither constraint undoes the other.
        """
        for i, a in enumerate(self.robots):
            for b in self.robots[i + 1:]:
                dx, dy = b.x - a.x, b.y - a.y
                d = math.hypot(dx, dy)
                overlap = a.radius + b.radius - d
                if overlap > 0.0:
                    nx, ny = (dx / d, dy / d) if d > 1e-9 else (1.0, 0.0)
                    a.x -= nx * overlap * 0.5
                    a.y -= ny * overlap * 0.5
                    b.x += nx * overlap * 0.5
                    b.y += ny * overlap * 0.5
                    self._count_collision(f"{a.id}/{b.id}", "robot")

        h = self.arena.half_size
        for robot in self.robots:
            lim = h - robot.radius
            if abs(robot.x) > lim or abs(robot.y) > lim:
                robot.x = min(max(robot.x, -lim), lim)
                robot.y = min(max(robot.y, -lim), lim)
                self._count_collision(robot.id, "wall")
            for c in self.arena.cylinders:
                if math.hypot(robot.x - c.x, robot.y - c.y) < c.radius + robot.radius:
                    robot.x, robot.y = _push_out(robot.x, robot.y, c.x, c.y, c.radius + robot.radius, lim)
                    self._count_collision(robot.id, "cylinder")

    def _count_collision(self, who: str, what: str) -> None:
        self.collisions += 1
        log.debug("tick=%d contact %s with %s", self.tick_count, who, what)

    # ── Queries ───────────────────────────────────────────────────────────────

    def robot(self, robot_id: str) -> Optional[FootBot]:
        robot_id = robot_id.upper()
        return next((r for r in self.robots if r.id == robot_id), None)

    def stats(self) -> Dict[str, Any]:
        n = max(1, len(self.robots))
        return {
            "tick": self.tick_count,
            "elapsed_s": self.elapsed_s,
            "collisions": self.collisions,
            "mean_speed_mps": sum(r.forward_speed_mps for r in self.robots) / n,
            "mean_distance_m": sum(r.odometer_m for r in self.robots) / n,
        }


def _push_out(
    x: float, y: float, cx: float, cy: float, reach: float, lim: float,
) -> Tuple[float, float]:
    """Nearest point at distance *reach* from (cx, cy) that stays within ±lim."""
    dx, dy = x - cx, y - cy
    d = math.hypot(dx, dy)
    nx, ny = (dx / d, dy / d) if d > 1e-9 else (1.0, 0.0)
    px, py = cx + nx * reach, cy + ny * reach
    if abs(px) > lim:
        px = math.copysign(lim, px)
        rest = reach * reach - (px - cx) ** 2
        if rest > 0.0:
            py = cy + math.copysign(math.sqrt(rest), dy if dy != 0.0 else 1.0)
    if abs(py) > lim:
        py = math.copysign(lim, py)
        rest = reach * reach - (py - cy) ** 2
        if rest > 0.0:
            px = cx + math.copysign(math.sqrt(rest), dx if dx != 0.0 else 1.0)
    return min(max(px, -lim), lim), min(max(py, -lim), lim)
