#!/usr/bin/env python3
"""
avoidance/controller.py
=======================
Binds :mod:`avoidance.engine` to its two boundary collaborators:

* a sensor source ``() -> Sequence[SensorReading]``,
* a wheel actuator ``(left, right) -> None``.

Each robot owns one controller.  :meth:`ObstacleAvoidanceController.control_step`
is the per-tick entry point a host calls.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Optional

from .engine import explain_wheel_command
from .errors import CollaboratorError
from .params import ControllerParams
from .types import ReadingSet, ResultantVector, SteeringTerms, WheelCommand

log = logging.getLogger("controller")

ReadingSource = Callable[[], ReadingSet]
WheelActuator = Callable[[float, float], None]


class ObstacleAvoidanceController:
    """
    Reactive, memoryless obstacle-avoidance controller.

    Parameters
    ----------
    read_sensors : callable
        Returns the current cycle's proximity readings.
    set_wheels : callable
        Receives the clamped ``(left, right)`` wheel velocities.
    params : ControllerParams or None
        Tuning constants; defaults when omitted.
    name : str
        Label used in log lines.

    Raises
    ------
    CollaboratorError
        If either collaborator is missing or not callable.
    """

    def __init__(
        self,
        read_sensors: ReadingSource,
        set_wheels: WheelActuator,
        params: Optional[ControllerParams] = None,
        name: str = "footbot",
    ) -> None:
        if not callable(read_sensors):
            raise CollaboratorError(f"{name}: proximity sensor unavailable")
        if not callable(set_wheels):
            raise CollaboratorError(f"{name}: differential steering actuator unavailable")
        self.params = params or ControllerParams()
        self.name = name
        self._read_sensors = read_sensors
        self._set_wheels = set_wheels

        # Display only; never read back by the computation.
        self.last_resultant: ResultantVector = ResultantVector()
        self.last_terms: SteeringTerms = SteeringTerms()
        self.last_command = WheelCommand(self.params.velocity, self.params.velocity)

        log.info("%s initialised: %s", name, self.params)

    def control_step(self) -> WheelCommand:
        """Read sensors once, compute, dispatch once, return the command."""
        readings = self._read_sensors()
        resultant, terms, command = explain_wheel_command(readings, self.params)
        self._set_wheels(command.left, command.right)

        self.last_resultant = resultant
        self.last_terms = terms
        self.last_command = command
        log.debug(
            "%s  |v|=%.3f  ang=%.1f°  brake=%.2f  steer=%.2f  → L=%.2f R=%.2f",
            self.name, resultant.length, math.degrees(resultant.angle),
            terms.brake, terms.steer, command.left, command.right,
        )
        return command
