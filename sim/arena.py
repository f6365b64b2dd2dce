#!/usr/bin/env python3
"""
sim/arena.py
============
Static environment: a square walled arena scattered with cylinders,
the layout of the classic foot-bot "diffusion" experiment.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

log = logging.getLogger("arena")


@dataclass(frozen=True)
class Cylinder:
    x: float
    y: float
    radius: float


@dataclass(frozen=True)
class Arena:
    """Walls at ``±half_size`` on both axes plus fixed cylinders.

    Attributes
    ----------
    half_size : float
        Half the side length of the square arena (metres).
    cylinders : tuple of Cylinder
    """

    half_size: float = 1.5
    cylinders: Tuple[Cylinder, ...] = field(default_factory=tuple)

    def obstacle_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """``(centres (M, 2), radii (M,))`` for ray casting."""
        if not self.cylinders:
            return np.zeros((0, 2)), np.zeros(0)
        centres = np.array([(c.x, c.y) for c in self.cylinders], dtype=float)
        radii = np.array([c.radius for c in self.cylinders], dtype=float)
        return centres, radii

    def is_free(self, x: float, y: float, clearance: float) -> bool:
        """True if a disc of radius *clearance* at *(x, y)* touches nothing."""
        lim = self.half_size - clearance
        if abs(x) > lim or abs(y) > lim:
            return False
        return all(
            math.hypot(x - c.x, y - c.y) >= c.radius + clearance
            for c in self.cylinders
        )

    def as_dict(self) -> Dict[str, Any]:
        return {
            "half_size": self.half_size,
            "cylinders": [(c.x, c.y, c.radius) for c in self.cylinders],
        }


def random_arena(
    count: int = 8,
    half_size: float = 1.5,
    radius: float = 0.15,
    spawn_clearance: float = 0.4,
    seed: Optional[int] = None,
    max_attempts: int = 500,
) -> Arena:
    """Scatter *count* non-overlapping cylinders.

    The centre disc of radius *spawn_clearance* is kept free so robots
    always have somewhere to start.  If the arena is too crowded fewer
    cylinders are placed and a warning is logged.
    """
    rng = random.Random(seed)
    placed: List[Cylinder] = []
    margin = radius + 0.05
    attempts = 0
    while len(placed) < count and attempts < max_attempts:
        attempts += 1
        x = rng.uniform(-half_size + margin, half_size - margin)
        y = rng.uniform(-half_size + margin, half_size - margin)
        if math.hypot(x, y) < spawn_clearance + radius:
            continue
        if any(math.hypot(x - c.x, y - c.y) < c.radius + radius + 0.1 for c in placed):
            continue
        placed.append(Cylinder(x, y, radius))
    if len(placed) < count:
        log.warning("Placed only %d/%d cylinders", len(placed), count)
    return Arena(half_size=half_size, cylinders=tuple(placed))
