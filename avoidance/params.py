#!/usr/bin/env python3
"""
avoidance/params.py
===================
Tunable controller constants.  Everything lives in the frozen
:class:`ControllerParams` dataclass so that several robots in one process
can share or swap parameter sets without touching code, and the engine
stays a pure function of ``(readings, params)``.

Only ``alpha``, ``delta`` and ``velocity`` are read from named parameters
(:meth:`ControllerParams.from_mapping`); the gains and the wheel-speed floor
are fixed defaults that callers may override in code.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional, Tuple

from .errors import ConfigurationError

DEFAULT_ALPHA_DEG: float = 10.0
DEFAULT_DELTA: float = 0.5
DEFAULT_VELOCITY: float = 2.5
MIN_WHEEL_SPEED: float = 0.5

# Named parameters accepted from an experiment description / env / API.
NAMED_PARAMS: Tuple[str, ...] = ("alpha", "delta", "velocity")


@dataclass(frozen=True)
class ControllerParams:
    """Immutable bag of every controller tunable."""

    alpha: float = DEFAULT_ALPHA_DEG
    """Half-width (degrees) of the go-straight tolerance.  Not used by the
    braking / steering formulas; kept as a tunable."""

    delta: float = DEFAULT_DELTA
    """Reserved threshold, currently unused."""

    velocity: float = DEFAULT_VELOCITY
    """Nominal forward wheel speed (cm/s) for both wheels."""

    min_speed: float = MIN_WHEEL_SPEED
    """Hard floor for any wheel command."""

    # ── Gains ─────────────────────────────────────────────────────────────
    brake_gain: float = 5.0
    steer_gain: float = 20.0
    bias_gain: float = 120.0

    frontal_cone_deg: float = 40.0
    """Half-width of the cone in which the symmetry-breaking bias fires."""

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(
                    f"{f.name} must be a number, got {value!r}"
                )
            if not math.isfinite(value):
                raise ConfigurationError(f"{f.name} must be finite, got {value!r}")
        if self.velocity < 0.0:
            raise ConfigurationError(f"velocity must be >= 0, got {self.velocity}")
        if self.min_speed < 0.0:
            raise ConfigurationError(f"min_speed must be >= 0, got {self.min_speed}")
        if not 0.0 <= self.alpha <= 180.0:
            raise ConfigurationError(f"alpha must be within [0, 180], got {self.alpha}")
        if not 0.0 <= self.frontal_cone_deg <= 180.0:
            raise ConfigurationError(
                f"frontal_cone_deg must be within [0, 180], got {self.frontal_cone_deg}"
            )
        for name in ("brake_gain", "steer_gain", "bias_gain"):
            if getattr(self, name) < 0.0:
                raise ConfigurationError(f"{name} must be >= 0, got {getattr(self, name)}")

    # ── Derived ───────────────────────────────────────────────────────────

    @property
    def go_straight_range(self) -> Tuple[float, float]:
        """``(-alpha, +alpha)`` in radians."""
        a = math.radians(self.alpha)
        return (-a, a)

    @property
    def frontal_cone(self) -> float:
        return math.radians(self.frontal_cone_deg)

    # ── Loading ───────────────────────────────────────────────────────────

    @classmethod
    def from_mapping(
        cls,
        values: Optional[Mapping[str, Any]] = None,
        base: Optional["ControllerParams"] = None,
    ) -> "ControllerParams":
        """Build params from named values, keeping defaults for absent keys.

        Values may be numbers or numeric strings (attributes of an
        experiment description).  ``None`` counts as absent.  Keys other
        than ``alpha``, ``delta`` and ``velocity`` are ignored.

        Raises
        ------
        ConfigurationError
            A present value is not a number, or the result is out of range.
        """
        base = base or cls()
        overrides: Dict[str, float] = {}
        for key in NAMED_PARAMS:
            raw = (values or {}).get(key)
            if raw is None:
                continue
            overrides[key] = _parse_float(key, raw)
        return replace(base, **overrides)

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def _parse_float(name: str, raw: Any) -> float:
    if isinstance(raw, bool):
        raise ConfigurationError(f"{name}: expected a number, got {raw!r}")
    if isinstance(raw, str):
        raw = raw.strip()
    try:
        return float(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{name}: expected a number, got {raw!r}") from None
