"""Core: clock state machine, configuration and sample series container."""

from motionlab.core.signals import MOTION_FIELDS, SERIES_FIELDS, ParameterSpec
from motionlab.core.config import ClockConfig
from motionlab.core.history import SamplePoint, SampleSeries
from motionlab.core.clock import (
    ClockPhase,
    ClockSnapshot,
    ClockState,
    ControlHints,
    SimulationClock,
    advance,
)

__all__ = [
    "ParameterSpec",
    "MOTION_FIELDS",
    "SERIES_FIELDS",
    "ClockConfig",
    "SamplePoint",
    "SampleSeries",
    "ClockPhase",
    "ClockState",
    "ClockSnapshot",
    "ControlHints",
    "SimulationClock",
    "advance",
]
