"""Exceptions raised by MotionLab for rejected input."""


class MotionLabError(Exception):
    """Base class for all MotionLab errors."""


class InvalidParameterEdit(MotionLabError, ValueError):
    """A motion parameter edit was rejected (non-finite value or unknown name)."""

    def __init__(self, name: str, value: object) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Invalid value for parameter '{name}': {value!r}")


class InvalidSpeedMultiplier(MotionLabError, ValueError):
    """The requested speed multiplier is not one of the allowed options."""

    def __init__(self, value: object, options: tuple) -> None:
        self.value = value
        self.options = options
        super().__init__(f"Speed multiplier {value!r} not in {list(options)}")


class InvalidClockConfig(MotionLabError, ValueError):
    """The clock configuration is inconsistent."""
