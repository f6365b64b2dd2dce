"""
avoidance/errors.py
===================
Exceptions raised at construction time.  The per-cycle computation itself
never raises on numeric input.
"""


class AvoidanceError(Exception):
    """Base class for every error raised by the :mod:`avoidance` package."""


class ConfigurationError(AvoidanceError, ValueError):
    """A controller parameter is missing a usable value or is out of range."""


class CollaboratorError(AvoidanceError, RuntimeError):
    """The sensor source or wheel actuator could not be acquired."""
