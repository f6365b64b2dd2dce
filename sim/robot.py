#!/usr/bin/env python3
"""
sim/robot.py
============
A single foot-bot.  Each robot:
  - owns its pose and last wheel command
  - owns a proximity ring (sensor collaborator) and a wheel actuator
  - runs its own :class:`~avoidance.controller.ObstacleAvoidanceController`
  - exposes a render / telemetry dict for the UI and the experiment runner
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

import numpy as np

from avoidance.controller import ObstacleAvoidanceController
from avoidance.params import ControllerParams
from avoidance.types import SensorReading, WheelCommand
from sim.physics import CM_PER_M, integrate_drive
from sim.proximity import ProximitySensorRing, SensorRingSpec

if TYPE_CHECKING:
    from sim.world import World

# UI colour palette
ROBOT_COLORS: Tuple[Tuple[int, int, int], ...] = (
    ( 86, 168, 255),
    (255,  88,  88),
    (100, 226, 170),
    (246, 191,  90),
    (180, 120, 255),
    (255, 160, 100),
)


@dataclass(frozen=True)
class RobotSpec:
    """Body and drive geometry of a foot-bot."""

    body_radius_m: float = 0.085
    axle_m: float = 0.14
    max_wheel_speed_cms: float = 30.0
    """Actuator-side clipping; the controller itself has no upper bound."""


class FootBot:
    """
    One differential-drive robot.

    Parameters
    ----------
    robot_id : str
        Unique identifier, e.g. ``"FB_0"``.
    x, y, theta : float
        Starting pose (metres, radians; origin = arena centre).
    world : World
        Environment queried by the proximity ring.
    params : ControllerParams or None
        Controller tuning.
    spec : RobotSpec or None
    ring_spec : SensorRingSpec or None
    color_index : int
        Index into :data:`ROBOT_COLORS`.
    seed : int or None
        Sensor-noise seed.
    """

    def __init__(
        self,
        robot_id: str,
        x: float,
        y: float,
        theta: float,
        world: "World",
        params: Optional[ControllerParams] = None,
        spec: Optional[RobotSpec] = None,
        ring_spec: Optional[SensorRingSpec] = None,
        color_index: int = 0,
        seed: Optional[int] = None,
    ) -> None:
        self.id = robot_id.upper()
        self.x = x
        self.y = y
        self.theta = theta
        self.spec = spec or RobotSpec()
        self.color = ROBOT_COLORS[color_index % len(ROBOT_COLORS)]
        self._world = world

        ring_spec = ring_spec or SensorRingSpec(body_radius_m=self.spec.body_radius_m)
        self.ring = ProximitySensorRing(ring_spec, seed=seed)
        self.last_values: np.ndarray = np.zeros(ring_spec.count)

        self.left = 0.0
        self.right = 0.0
        self.odometer_m = 0.0

        self.controller = ObstacleAvoidanceController(
            read_sensors=self.get_readings,
            set_wheels=self.set_wheel_velocities,
            params=params,
            name=self.id,
        )

    # ── Collaborators ─────────────────────────────────────────────────────────

    def get_readings(self) -> List[SensorReading]:
        """Sensor collaborator: scan the world as it stands this tick."""
        centres, radii = self._world.obstacles_seen_by(self)
        self.last_values = self.ring.scan(
            self.x, self.y, self.theta, self._world.arena.half_size, centres, radii,
        )
        return self.ring.readings(self.last_values)

    def set_wheel_velocities(self, left: float, right: float) -> None:
        """Actuator collaborator: the drive clips to its own maximum."""
        lim = self.spec.max_wheel_speed_cms
        self.left = min(max(left, -lim), lim)
        self.right = min(max(right, -lim), lim)

    # ── Physics ───────────────────────────────────────────────────────────────

    def control_step(self) -> WheelCommand:
        return self.controller.control_step()

    def integrate(self, dt: float) -> None:
        """Advance the pose with the last dispatched wheel speeds."""
        self.x, self.y, self.theta = integrate_drive(
            self.x, self.y, self.theta, self.left, self.right, self.spec.axle_m, dt,
        )
        self.odometer_m += self.forward_speed_mps * dt

    @property
    def forward_speed_mps(self) -> float:
        return 0.5 * (self.left + self.right) / CM_PER_M

    @property
    def radius(self) -> float:
        return self.spec.body_radius_m

    # ── Serialisation ─────────────────────────────────────────────────────────

    def as_dict(self) -> Dict[str, Any]:
        """Render / telemetry dict (plain floats, safe to hand to another thread)."""
        ctrl = self.controller
        return {
            "id":          self.id,
            "x":           self.x,
            "y":           self.y,
            "theta":       self.theta,
            "radius":      self.radius,
            "left":        self.left,
            "right":       self.right,
            "speed":       self.forward_speed_mps,
            "odometer":    self.odometer_m,
            "brake":       ctrl.last_terms.brake,
            "steer":       ctrl.last_terms.steer,
            "bias":        ctrl.last_terms.bias,
            "resultant":   (ctrl.last_resultant.length, ctrl.last_resultant.angle),
            "sensors":     [
                (float(b), float(v)) for b, v in zip(self.ring.bearings, self.last_values)
            ],
            "sensor_range": self.ring.spec.range_m,
            "color":       self.color,
        }

    def __repr__(self) -> str:
        return (
            f"FootBot({self.id}, x={self.x:.3f}, y={self.y:.3f}, "
            f"theta={math.degrees(self.theta):.1f}°)"
        )
