"""
Physics of the demo: closed-form uniformly accelerated motion.

  - motion: MotionParameters, MotionState, evaluate / evaluate_many
"""

from motionlab.physics.motion import (
    MotionParameters,
    MotionState,
    evaluate,
    evaluate_many,
    evaluate_params,
)

__all__ = [
    "MotionParameters",
    "MotionState",
    "evaluate",
    "evaluate_params",
    "evaluate_many",
]
