"""Timers driving the simulation clock."""

from motionlab.runtime.schedulers import (
    AsyncioScheduler,
    ManualScheduler,
    MatplotlibScheduler,
    Scheduler,
    TimerHandle,
)

__all__ = [
    "Scheduler",
    "TimerHandle",
    "ManualScheduler",
    "AsyncioScheduler",
    "MatplotlibScheduler",
]
