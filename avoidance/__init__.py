"""
avoidance — Reactive obstacle avoidance core
============================================

Modules
-------
types
    :class:`SensorReading`, :class:`ResultantVector`, :class:`SteeringTerms`,
    :class:`WheelCommand` value objects.
params
    :class:`ControllerParams` immutable tuning constants.
engine
    Stateless fusion-and-steering computation.
controller
    :class:`ObstacleAvoidanceController` binding the engine to a sensor
    source and a wheel actuator.
errors
    Configuration / collaborator exceptions.
"""

from .errors import AvoidanceError, CollaboratorError, ConfigurationError
from .types import ResultantVector, SensorReading, SteeringTerms, WheelCommand
from .params import ControllerParams
from .engine import (
    compute_wheel_command,
    explain_wheel_command,
    fuse_readings,
    steering_terms,
)
from .controller import ObstacleAvoidanceController

__all__ = [
    "AvoidanceError",
    "CollaboratorError",
    "ConfigurationError",
    "ResultantVector",
    "SensorReading",
    "SteeringTerms",
    "WheelCommand",
    "ControllerParams",
    "compute_wheel_command",
    "explain_wheel_command",
    "fuse_readings",
    "steering_terms",
    "ObstacleAvoidanceController",
]
