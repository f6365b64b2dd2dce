#!/usr/bin/env python3
"""
sim/proximity.py
================
Simulated foot-bot proximity ring, the sensor collaborator of
:class:`avoidance.controller.ObstacleAvoidanceController`.

Twenty-four infrared sensors are spaced evenly around the body, the first
half a spacing off the forward axis so that the front is seen by a
symmetric pair.  Each sensor casts a short ray outward from the body edge;
a hit at distance ``d`` (metres) reads ``exp(-d)``, no hit reads 0.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from avoidance.types import SensorReading
from sim.physics import ray_box_distances, ray_circle_distances


@dataclass(frozen=True)
class SensorRingSpec:
    """Geometry of the proximity ring."""

    count: int = 24
    body_radius_m: float = 0.085
    range_m: float = 0.1
    noise_std: float = 0.0
    """Gaussian noise added to non-zero readings, then clipped to [0, 1]."""

    @property
    def bearings(self) -> np.ndarray:
        spacing = 2.0 * math.pi / self.count
        b = spacing * 0.5 + spacing * np.arange(self.count)
        # Express in (-pi, pi] so readings carry conventional bearings.
        return np.where(b > math.pi, b - 2.0 * math.pi, b)


class ProximitySensorRing:
    """Ray-casting proximity ring bound to one robot.

    Parameters
    ----------
    spec : SensorRingSpec or None
    seed : int or None
        Seed for the noise generator (only used when ``noise_std > 0``).
    """

    def __init__(self, spec: Optional[SensorRingSpec] = None, seed: Optional[int] = None) -> None:
        self.spec = spec or SensorRingSpec()
        self._bearings = self.spec.bearings
        self._rng = np.random.default_rng(seed)

    @property
    def bearings(self) -> np.ndarray:
        return self._bearings

    def scan(
        self,
        x: float,
        y: float,
        theta: float,
        half_size: float,
        centres: np.ndarray,
        radii: np.ndarray,
    ) -> np.ndarray:
        """Raw intensities, one per sensor, for a robot at ``(x, y, theta)``.

        *centres* / *radii* describe every circular obstacle visible to
        this robot (cylinders and other robot bodies).
        """
        spec = self.spec
        world_angles = theta + self._bearings
        dirs = np.stack([np.cos(world_angles), np.sin(world_angles)], axis=1)
        origins = np.array([x, y]) + dirs * spec.body_radius_m

        dist = np.minimum(
            ray_circle_distances(origins, dirs, centres, radii),
            ray_box_distances(origins, dirs, half_size),
        )
        hit = dist <= spec.range_m
        values = np.where(hit, np.exp(-np.where(hit, dist, 0.0)), 0.0)
        if spec.noise_std > 0.0:
            noise = self._rng.normal(0.0, spec.noise_std, size=values.shape)
            values = np.where(hit, np.clip(values + noise, 0.0, 1.0), 0.0)
        return values

    def readings(self, values: np.ndarray) -> List[SensorReading]:
        """Pair raw intensities with the fixed sensor bearings."""
        return [
            SensorReading(float(v), float(b))
            for v, b in zip(values, self._bearings)
        ]
