"""Clock and sampling configuration."""

import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple

from motionlab.errors import InvalidClockConfig


@dataclass(frozen=True)
class ClockConfig:
    """
    Settings shared by the clock and the series builder.

    Args:
        max_duration: simulation horizon [s]; elapsed time never exceeds it.
        tick_interval_ms: nominal wall-clock period between ticks [ms].
        sampling_step: spacing of the sample series [s].
        speed_options: allowed speed multipliers, first one is the default.
        decimals: display precision of the sample series.
    """

    max_duration: float = 10.0
    tick_interval_ms: float = 50.0
    sampling_step: float = 0.2
    speed_options: Tuple[float, ...] = (1.0, 2.0)
    decimals: int = 2

    def __post_init__(self) -> None:
        for name in ("max_duration", "tick_interval_ms", "sampling_step"):
            value = getattr(self, name)
            if not (isinstance(value, (int, float)) and math.isfinite(value) and value > 0):
                raise InvalidClockConfig(f"{name} must be a positive finite number, got {value!r}")
        if not self.speed_options:
            raise InvalidClockConfig("speed_options must not be empty")
        for s in self.speed_options:
            if not (isinstance(s, (int, float)) and math.isfinite(s) and s > 0):
                raise InvalidClockConfig(f"speed multipliers must be positive, got {s!r}")
        if len(set(self.speed_options)) != len(self.speed_options):
            raise InvalidClockConfig(f"duplicate speed multipliers in {list(self.speed_options)}")
        for name in ("max_duration", "tick_interval_ms", "sampling_step"):
            object.__setattr__(self, name, float(getattr(self, name)))
        object.__setattr__(self, "speed_options", tuple(float(s) for s in self.speed_options))
        if not isinstance(self.decimals, int) or self.decimals < 0:
            raise InvalidClockConfig(f"decimals must be a non-negative int, got {self.decimals!r}")
        # Two grid points must never round to the same display time
        if self.sampling_step < 2 * 10 ** (-self.decimals):
            raise InvalidClockConfig(
                f"sampling_step {self.sampling_step} is too fine for {self.decimals} display decimals"
            )

    @property
    def default_speed(self) -> float:
        return self.speed_options[0]

    @property
    def tick_interval_s(self) -> float:
        return self.tick_interval_ms / 1000.0

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["speed_options"] = list(self.speed_options)
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClockConfig":
        """Build from a (possibly partial) dict; unknown keys are rejected."""
        known = set(cls.__dataclass_fields__)
        unknown = set(data) - known
        if unknown:
            raise InvalidClockConfig(f"unknown clock settings: {sorted(unknown)}")
        return cls(**data)
