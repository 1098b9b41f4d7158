"""
Closed-form model of uniformly accelerated motion.

x(t) = x0 + v0 (t - t0) + 1/2 a (t - t0)^2
v(t) = v0 + a (t - t0)

Before the start time t0 the object holds its initial position and velocity.
Every other module evaluates motion through this one.
"""

import math
from dataclasses import dataclass, fields
from typing import Any, Dict, Tuple

import numpy as np

from motionlab.core.signals import MOTION_FIELDS
from motionlab.errors import InvalidParameterEdit


def _finite(name: str, value: Any) -> float:
    """Coerce to float, rejecting NaN, inf and non-numeric input."""
    if isinstance(value, bool):
        raise InvalidParameterEdit(name, value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidParameterEdit(name, value) from None
    if not math.isfinite(number):
        raise InvalidParameterEdit(name, value)
    return number


@dataclass(frozen=True)
class MotionParameters:
    """Initial conditions of a run: position x0 [m], velocity v0 [m/s], acceleration a [m/s²], start time t0 [s]."""

    x0: float = MOTION_FIELDS[0].default
    v0: float = MOTION_FIELDS[1].default
    a: float = MOTION_FIELDS[2].default
    t0: float = MOTION_FIELDS[3].default

    def __post_init__(self) -> None:
        for name in self.names():
            object.__setattr__(self, name, _finite(name, getattr(self, name)))

    @classmethod
    def names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def create(cls, **values: Any) -> "MotionParameters":
        """Build validated parameters; missing fields take their defaults."""
        unknown = set(values) - set(cls.names())
        if unknown:
            name = sorted(unknown)[0]
            raise InvalidParameterEdit(name, values[name])
        return cls(**values)

    def replace(self, **changes: Any) -> "MotionParameters":
        """Copy with some fields changed; invalid values raise and leave self untouched."""
        merged = self.to_dict()
        merged.update(changes)
        return MotionParameters.create(**merged)

    def to_dict(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in self.names()}


@dataclass(frozen=True)
class MotionState:
    """Instantaneous position [m], velocity [m/s] and whether motion has begun."""

    x: float
    v: float
    started: bool


def evaluate(t: float, x0: float, v0: float, t0: float, a: float) -> MotionState:
    """Position and velocity at simulation time t."""
    dt = t - t0
    if dt < 0:
        return MotionState(x=x0, v=v0, started=False)
    x = x0 + v0 * dt + 0.5 * a * dt * dt
    v = v0 + a * dt
    return MotionState(x=x, v=v, started=True)


def evaluate_params(t: float, params: MotionParameters) -> MotionState:
    """evaluate() with a MotionParameters bundle."""
    return evaluate(t, params.x0, params.v0, params.t0, params.a)


def evaluate_many(times: np.ndarray, params: MotionParameters) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Vectorized evaluate() over an array of times.

    Returns:
        (x, v, started) arrays with the same shape as times. Element-wise
        identical to calling evaluate() on each time.
    """
    t = np.asarray(times, dtype=float)
    dt = t - params.t0
    started = dt >= 0
    dt_run = np.where(started, dt, 0.0)
    x = np.where(started, params.x0 + params.v0 * dt_run + 0.5 * params.a * dt_run * dt_run, params.x0)
    v = np.where(started, params.v0 + params.a * dt_run, params.v0)
    return x, v, started
