"""Tests for JSON configuration and scenario files."""

import json

import numpy as np
import pytest

from motionlab.core import ClockConfig
from motionlab.errors import InvalidClockConfig, InvalidParameterEdit
from motionlab.io import load_config, load_scenario, save_config, save_scenario
from motionlab.physics import MotionParameters


def test_save_config_converts_numpy(tmp_path) -> None:
    path = tmp_path / "nested" / "cfg.json"
    save_config({"a": np.array([1.0, 2.0]), "b": np.float64(0.5), "c": {"d": np.int64(3)}}, path)
    assert load_config(path) == {"a": [1.0, 2.0], "b": 0.5, "c": {"d": 3}}


def test_scenario_file(tmp_path) -> None:
    path = tmp_path / "scenario.json"
    params = MotionParameters(x0=-1.0, v0=2.0, a=-0.25, t0=1.5)
    config = ClockConfig(max_duration=6.0, speed_options=(1.0, 2.0, 4.0))
    save_scenario(params, config, path)
    loaded_params, loaded_config = load_scenario(path)
    assert loaded_params == params
    assert loaded_config == config


def test_partial_scenario_uses_defaults(tmp_path) -> None:
    path = tmp_path / "scenario.json"
    path.write_text(json.dumps({"parameters": {"a": 2}}), encoding="utf-8")
    params, config = load_scenario(path)
    assert params == MotionParameters(a=2.0)
    assert config == ClockConfig()


@pytest.mark.parametrize(
    "data, error",
    [
        ({"parameters": {"jerk": 1}}, InvalidParameterEdit),
        ({"parameters": {"v0": "fast"}}, InvalidParameterEdit),
        ({"clock": {"max_duration": -1}}, InvalidClockConfig),
        ({"clock": {"fps": 60}}, InvalidClockConfig),
        ({"clock": {"speed_options": []}}, InvalidClockConfig),
        ({"state": {}}, ValueError),
    ],
)
def test_invalid_scenarios(tmp_path, data, error) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    with pytest.raises(error):
        load_scenario(path)
