"""
Sample series builder: regenerates the full (t, x, v) series for [0, elapsed].

The series is a pure projection of (elapsed, parameters). It is rebuilt from
scratch on every tick and never patched, so resets and parameter edits can
not leave stale points behind.
"""

import math
from typing import Optional

import numpy as np

from motionlab.core.config import ClockConfig
from motionlab.core.history import SampleSeries
from motionlab.errors import InvalidClockConfig
from motionlab.physics.motion import MotionParameters, evaluate_many

# Absorbs float error in elapsed / step so that e.g. 0.6 / 0.2 counts 3 full steps
_GRID_EPS = 1e-9


class SeriesBuilder:
    """Builds sample series at a fixed sampling step and display precision."""

    def __init__(self, sampling_step: float = 0.2, decimals: int = 2) -> None:
        if not (math.isfinite(sampling_step) and sampling_step > 0):
            raise InvalidClockConfig(f"sampling_step must be positive, got {sampling_step!r}")
        if sampling_step < 2 * 10 ** (-decimals):
            raise InvalidClockConfig(
                f"sampling_step {sampling_step} is too fine for {decimals} display decimals"
            )
        self.sampling_step = float(sampling_step)
        self.decimals = int(decimals)

    @classmethod
    def from_config(cls, config: ClockConfig) -> "SeriesBuilder":
        return cls(sampling_step=config.sampling_step, decimals=config.decimals)

    def sample_times(self, elapsed: float) -> np.ndarray:
        """
        Times 0, step, 2*step, ... <= elapsed, terminated by elapsed itself.

        If the last grid time shows the same as elapsed at display precision
        it is replaced by elapsed rather than followed by a duplicate. The
        origin t=0 is never replaced, so the series always covers [0, elapsed].
        """
        elapsed = float(elapsed)
        if not math.isfinite(elapsed) or elapsed < 0:
            raise ValueError(f"elapsed must be a finite non-negative time, got {elapsed!r}")
        n = int(math.floor(elapsed / self.sampling_step + _GRID_EPS)) + 1
        grid = np.minimum(np.arange(n, dtype=float) * self.sampling_step, elapsed)
        if grid[-1] == elapsed:
            return grid
        if n > 1 and np.round(grid[-1], self.decimals) == np.round(elapsed, self.decimals):
            grid[-1] = elapsed
            return grid
        return np.append(grid, elapsed)

    def build(self, elapsed: float, params: MotionParameters) -> SampleSeries:
        """Full series for one elapsed time. Identical inputs give identical output."""
        t = self.sample_times(elapsed)
        x, v, _ = evaluate_many(t, params)
        return SampleSeries(t, x, v, decimals=self.decimals)


def build_series(
    elapsed: float,
    x0: float,
    v0: float,
    t0: float,
    a: float,
    sampling_step: float = 0.2,
    decimals: int = 2,
    builder: Optional[SeriesBuilder] = None,
) -> SampleSeries:
    """Functional form of SeriesBuilder.build with loose parameters."""
    builder = builder or SeriesBuilder(sampling_step=sampling_step, decimals=decimals)
    params = MotionParameters(x0=x0, v0=v0, a=a, t0=t0)
    return builder.build(elapsed, params)
