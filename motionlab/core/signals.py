"""Standardized description of the editable parameters and plotted quantities (name, unit, default)."""

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class ParameterSpec:
    """Specification of a scalar quantity: name, unit, default value, display label."""

    name: str
    unit: str = ""
    default: float = 0.0
    label: str = ""
    description: str = ""

    def display_label(self) -> str:
        """Label with unit, e.g. 'Initial velocity (v0) [m/s]'."""
        text = self.label or self.name
        return f"{text} [{self.unit}]" if self.unit else text


# Initial conditions the user can edit, in display order
MOTION_FIELDS: Tuple[ParameterSpec, ...] = (
    ParameterSpec("x0", "m", 0.0, "Initial position (x0)", "position at the start time"),
    ParameterSpec("v0", "m/s", 5.0, "Initial velocity (v0)", "velocity at the start time"),
    ParameterSpec("a", "m/s²", 1.0, "Acceleration (a)", "constant acceleration"),
    ParameterSpec("t0", "s", 0.0, "Start time (t0)", "simulation time at which motion begins"),
)

# Columns of a sample series
SERIES_FIELDS: Tuple[ParameterSpec, ...] = (
    ParameterSpec("t", "s", label="Time t"),
    ParameterSpec("x", "m", label="Position x"),
    ParameterSpec("v", "m/s", label="Velocity v"),
)


def field_by_name(fields: Tuple[ParameterSpec, ...] = MOTION_FIELDS) -> Dict[str, ParameterSpec]:
    """Index a tuple of specs by name."""
    return {f.name: f for f in fields}
