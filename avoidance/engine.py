#!/usr/bin/env python3
"""
avoidance/engine.py
===================
Obstacle fusion and steering, executed once per control cycle.

Inspired by Braitenberg vehicles: every proximity reading is a vector
(magnitude = intensity, angle = sensor bearing); their mean estimates where
the obstacle is and how strong it is.  From that single vector we derive

* a braking term, maximal for an obstacle dead ahead and negative (a push
  forward) for one behind,
* a steering term turning away from laterally sensed obstacles,
* a symmetry-breaking bias inside the frontal cone, where symmetric
  activation would otherwise cancel the steering term and drive the robot
  straight into the obstacle.

The functions here are pure: no logging, no module state, the same
``(readings, params)`` always yields the same command.
"""

from __future__ import annotations

import math
from typing import Tuple

from .params import ControllerParams
from .types import ReadingSet, ResultantVector, SteeringTerms, WheelCommand


def fuse_readings(readings: ReadingSet) -> ResultantVector:
    """Arithmetic mean of the readings as 2D vectors.

    An empty set yields the zero vector ("no obstacle").
    """
    n = len(readings)
    if n == 0:
        return ResultantVector()
    sx = 0.0
    sy = 0.0
    for r in readings:
        sx += r.intensity * math.cos(r.bearing)
        sy += r.intensity * math.sin(r.bearing)
    return ResultantVector(sx / n, sy / n)


def steering_terms(resultant: ResultantVector, params: ControllerParams) -> SteeringTerms:
    """Derive brake / steer (bias included) from the resultant vector."""
    angle = resultant.angle
    value = resultant.length

    brake = math.cos(angle) * value * params.brake_gain
    steer = -math.sin(angle) * value * params.steer_gain

    bias = 0.0
    if abs(angle) < params.frontal_cone:
        # A perfectly centred obstacle (angle == 0) takes the positive branch.
        bias = -value * params.bias_gain if angle > 0.0 else value * params.bias_gain
        steer += bias

    return SteeringTerms(brake=brake, steer=steer, bias=bias)


def wheel_command(terms: SteeringTerms, params: ControllerParams) -> WheelCommand:
    """Combine the terms with the nominal speed and apply the floor clamp."""
    left = params.velocity - terms.brake - terms.steer
    right = params.velocity - terms.brake + terms.steer
    return WheelCommand(max(left, params.min_speed), max(right, params.min_speed))


def explain_wheel_command(
    readings: ReadingSet,
    params: ControllerParams,
) -> Tuple[ResultantVector, SteeringTerms, WheelCommand]:
    """Same as :func:`compute_wheel_command`, also returning the intermediates."""
    resultant = fuse_readings(readings)
    terms = steering_terms(resultant, params)
    return resultant, terms, wheel_command(terms, params)


def compute_wheel_command(readings: ReadingSet, params: ControllerParams) -> WheelCommand:
    """One control cycle: readings in, clamped wheel velocities out."""
    return explain_wheel_command(readings, params)[2]
