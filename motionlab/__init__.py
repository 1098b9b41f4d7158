"""
MotionLab: interactive demo of uniformly accelerated motion
(simulation clock + sample series + optional matplotlib dashboard).
"""

__version__ = "0.1.0"

from motionlab.core.clock import SimulationClock
from motionlab.core.config import ClockConfig
from motionlab.physics.motion import MotionParameters, MotionState, evaluate

__all__ = [
    "__version__",
    "SimulationClock",
    "ClockConfig",
    "MotionParameters",
    "MotionState",
    "evaluate",
]
