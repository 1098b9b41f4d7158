"""Track scale and car placement for the animated track view, in percent of the track length."""

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from motionlab.core.history import SampleSeries

MIN_TRACK_LENGTH = 30.0  # m
TRACK_MARGIN = 10.0  # m beyond the furthest sample
MARK_SPACING = 5.0  # m between tick marks
CAR_MIN_PERCENT = 5.0
CAR_MAX_PERCENT = 95.0


@dataclass(frozen=True)
class TrackLayout:
    """Where to draw things on a track that spans [0, track_length] metres."""

    track_length: float
    car_percent: float
    start_percent: float
    mark_percents: Tuple[float, ...]


def compute_track_layout(series: SampleSeries, current_x: float, x0: float) -> TrackLayout:
    """
    Scale the track to the furthest position reached so far.

    Uses the raw (unrounded) series values. The car is kept inside
    [CAR_MIN_PERCENT, CAR_MAX_PERCENT] so it never leaves the view.
    """
    max_x = max(0.0, float(np.max(series.x))) if len(series) else 0.0
    track_length = max(MIN_TRACK_LENGTH, max_x + TRACK_MARGIN)
    car = current_x / track_length * 100.0
    car = min(CAR_MAX_PERCENT, max(CAR_MIN_PERCENT, car))
    n_marks = int(math.floor(track_length / MARK_SPACING))
    marks = tuple((i + 1) * MARK_SPACING / track_length * 100.0 for i in range(n_marks))
    return TrackLayout(
        track_length=track_length,
        car_percent=car,
        start_percent=x0 / track_length * 100.0,
        mark_percents=marks,
    )
