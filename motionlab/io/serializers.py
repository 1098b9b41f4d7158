"""Save and load configurations and scenarios (motion parameters + clock settings) as JSON."""

import json
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import numpy as np

from motionlab.core.config import ClockConfig
from motionlab.physics.motion import MotionParameters


def _convert(d: Any) -> Any:
    """Convert numpy values (recursively) to plain Python for JSON."""
    if isinstance(d, np.ndarray):
        return d.tolist()
    if isinstance(d, dict):
        return {k: _convert(v) for k, v in d.items()}
    if isinstance(d, (list, tuple)):
        return [_convert(x) for x in d]
    if isinstance(d, (np.floating, np.integer)):
        return float(d) if isinstance(d, np.floating) else int(d)
    return d


def save_config(config: Dict[str, Any], path: Union[str, Path]) -> None:
    """
    Save a configuration (dict) to JSON.
    Numpy arrays are converted to lists.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(_convert(config), f, indent=2, ensure_ascii=False)


def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """Load a configuration from JSON."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def scenario_to_dict(params: MotionParameters, config: ClockConfig) -> Dict[str, Any]:
    return {"parameters": params.to_dict(), "clock": config.to_dict()}


def scenario_from_dict(data: Dict[str, Any]) -> Tuple[MotionParameters, ClockConfig]:
    """
    Parse {"parameters": {...}, "clock": {...}}; both sections are optional.

    Raises:
        InvalidParameterEdit: non-finite or unknown parameter.
        InvalidClockConfig: invalid or unknown clock setting.
        ValueError: unknown top-level section.
    """
    unknown = set(data) - {"parameters", "clock"}
    if unknown:
        raise ValueError(f"unknown scenario sections: {sorted(unknown)}")
    params = MotionParameters.create(**data.get("parameters", {}))
    config = ClockConfig.from_dict(data.get("clock", {}))
    return params, config


def save_scenario(params: MotionParameters, config: ClockConfig, path: Union[str, Path]) -> None:
    save_config(scenario_to_dict(params, config), path)


def load_scenario(path: Union[str, Path]) -> Tuple[MotionParameters, ClockConfig]:
    """Load a scenario JSON file written by save_scenario (or by hand)."""
    return scenario_from_dict(load_config(path))
