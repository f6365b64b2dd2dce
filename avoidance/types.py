#!/usr/bin/env python3
"""
avoidance/types.py
==================
Transient value objects recomputed on every control cycle.

Angles are radians, counter-clockwise positive, measured from the robot's
forward axis.  Wheel speeds are in cm/s.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple, Sequence


@dataclass(frozen=True)
class SensorReading:
    """One proximity sensor sample.

    Attributes
    ----------
    intensity : float
        Normalised detection strength, 0 means nothing detected.
    bearing : float
        Fixed mounting angle of the sensor (radians).
    """

    intensity: float
    bearing: float

    @classmethod
    def from_degrees(cls, intensity: float, bearing_deg: float) -> "SensorReading":
        return cls(float(intensity), math.radians(bearing_deg))


ReadingSet = Sequence[SensorReading]


@dataclass(frozen=True)
class ResultantVector:
    """Mean of all readings expressed as 2D vectors (robot frame)."""

    x: float = 0.0
    y: float = 0.0

    @property
    def angle(self) -> float:
        """Obstacle bearing estimate in ``(-pi, pi]``; 0 for the zero vector."""
        a = math.atan2(self.y, self.x)
        # atan2 yields -pi for (-x, -0.0)
        if a <= -math.pi:
            return math.pi
        return a

    @property
    def length(self) -> float:
        """Obstacle intensity estimate."""
        return math.hypot(self.x, self.y)


@dataclass(frozen=True)
class SteeringTerms:
    """Intermediate scalars of one cycle.

    ``steer`` already includes ``bias``; ``bias`` is kept separately so
    telemetry can tell when the frontal symmetry breaker fired.
    """

    brake: float = 0.0
    steer: float = 0.0
    bias: float = 0.0

    @property
    def frontal(self) -> bool:
        return self.bias != 0.0


class WheelCommand(NamedTuple):
    """Left / right wheel velocities handed to the actuator."""

    left: float
    right: float

    def as_dict(self) -> dict:
        return {"left": self.left, "right": self.right}
