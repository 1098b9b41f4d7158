"""Tests for the track scale and car placement."""

import pytest

from motionlab.simulation import build_series, compute_track_layout


def test_minimum_track_length() -> None:
    series = build_series(0.0, x0=0.0, v0=5.0, t0=0.0, a=1.0)
    layout = compute_track_layout(series, current_x=0.0, x0=0.0)
    assert layout.track_length == 30.0
    assert layout.car_percent == 5.0
    assert layout.start_percent == 0.0
    assert len(layout.mark_percents) == 6
    assert layout.mark_percents[0] == pytest.approx(100.0 / 6.0)
    assert layout.mark_percents[-1] == pytest.approx(100.0)


def test_track_grows_with_furthest_position() -> None:
    series = build_series(10.0, x0=0.0, v0=5.0, t0=0.0, a=1.0)
    layout = compute_track_layout(series, current_x=100.0, x0=0.0)
    assert layout.track_length == pytest.approx(110.0)
    assert layout.car_percent == pytest.approx(100.0 / 110.0 * 100.0)
    assert len(layout.mark_percents) == 22


def test_track_uses_raw_values() -> None:
    series = build_series(1.0, x0=25.004, v0=0.0, t0=0.0, a=0.0)
    layout = compute_track_layout(series, current_x=25.004, x0=25.004)
    assert layout.track_length == pytest.approx(35.004)


def test_car_is_clamped() -> None:
    series = build_series(2.0, x0=0.0, v0=-5.0, t0=0.0, a=0.0)
    low = compute_track_layout(series, current_x=-10.0, x0=0.0)
    assert low.car_percent == 5.0
    assert low.track_length == 30.0
    high = compute_track_layout(series, current_x=1000.0, x0=0.0)
    assert high.car_percent == 95.0
