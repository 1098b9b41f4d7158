"""
Simulation: sample series, track layout and plotting of a run.

The matplotlib dashboard lives in motionlab.simulation.dashboard and is
imported explicitly (it needs matplotlib at import time).
"""

from motionlab.simulation.series import SeriesBuilder, build_series
from motionlab.simulation.track import TrackLayout, compute_track_layout
from motionlab.simulation._utils import plot_series, save_series_plot

__all__ = [
    "SeriesBuilder",
    "build_series",
    "TrackLayout",
    "compute_track_layout",
    "plot_series",
    "save_series_plot",
]
