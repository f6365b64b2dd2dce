#!/usr/bin/env python3
"""
sim/physics.py
==============
Low-level kinematics and ray-casting helpers used by :mod:`sim.world` and
:mod:`sim.proximity`.

Keeping these in a separate module avoids circular imports and makes unit
testing straightforward.  Lengths are metres; wheel speeds arrive in cm/s.
"""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np

CM_PER_M = 100.0


def wrap_angle(angle: float) -> float:
    """Normalise *angle* (radians) into ``(-pi, pi]``."""
    a = math.fmod(angle + math.pi, 2.0 * math.pi)
    if a <= 0.0:
        a += 2.0 * math.pi
    return a - math.pi


def integrate_drive(
    x: float,
    y: float,
    theta: float,
    left_cms: float,
    right_cms: float,
    axle_m: float,
    dt: float,
) -> Tuple[float, float, float]:
    """Advance a differential-drive pose by *dt* seconds.

    Integrates exactly along the circular arc implied by constant wheel
    speeds, falling back to a straight segment when they are equal.

    Parameters
    ----------
    x, y, theta : float
        Current pose (metres, radians).
    left_cms, right_cms : float
        Wheel linear velocities in cm/s.
    axle_m : float
        Distance between the two wheels.
    dt : float
        Step length in seconds.

    Returns
    -------
    tuple
        ``(x, y, theta)`` after the step, theta wrapped.
    """
    vl = left_cms / CM_PER_M
    vr = right_cms / CM_PER_M
    v = 0.5 * (vl + vr)
    w = (vr - vl) / axle_m
    if abs(w) < 1e-9:
        return x + v * math.cos(theta) * dt, y + v * math.sin(theta) * dt, theta
    r = v / w
    new_theta = theta + w * dt
    nx = x + r * (math.sin(new_theta) - math.sin(theta))
    ny = y - r * (math.cos(new_theta) - math.cos(theta))
    return nx, ny, wrap_angle(new_theta)


def ray_circle_distances(
    origins: np.ndarray,
    dirs: np.ndarray,
    centres: np.ndarray,
    radii: np.ndarray,
) -> np.ndarray:
    """Distance along each ray to the nearest circle, ``inf`` when none.

    Parameters
    ----------
    origins, dirs : ndarray, shape (N, 2)
        Ray start points and *unit* directions.
    centres : ndarray, shape (M, 2)
    radii : ndarray, shape (M,)

    A ray starting inside a circle reports distance 0.
    """
    n = origins.shape[0]
    if centres.size == 0:
        return np.full(n, np.inf)
    f = origins[:, None, :] - centres[None, :, :]            # (N, M, 2)
    b = np.einsum("nmk,nk->nm", f, dirs)                      # f·d
    c = np.einsum("nmk,nmk->nm", f, f) - radii[None, :] ** 2  # |f|² - r²
    disc = b * b - c
    with np.errstate(invalid="ignore"):
        t = -b - np.sqrt(disc)
    t = np.where((disc >= 0.0) & (t >= 0.0), t, np.inf)
    t = np.where(c <= 0.0, 0.0, t)
    return t.min(axis=1)


def ray_box_distances(origins: np.ndarray, dirs: np.ndarray, half_size: float) -> np.ndarray:
    """Distance along each ray to the inside of the square ``[-h, h]²``."""
    with np.errstate(divide="ignore", invalid="ignore"):
        wall = np.where(dirs > 0.0, half_size, -half_size)
        t = (wall - origins) / dirs
    t = np.where(dirs == 0.0, np.inf, t)
    return np.clip(t.min(axis=1), 0.0, None)
