"""
Plotting utilities: position and velocity against time.

Functions accept a SampleSeries or raw arrays (t, x, v). Matplotlib is
optional; if not installed, functions raise ImportError.
"""

from pathlib import Path
from typing import Any, Optional, Sequence, Tuple, Union

import numpy as np

from motionlab.core.history import SampleSeries
from motionlab.core.signals import SERIES_FIELDS

POSITION_COLOR = "#3b82f6"
VELOCITY_COLOR = "#10b981"


def _get_series_arrays(
    series: Optional[SampleSeries] = None,
    t: Optional[np.ndarray] = None,
    x: Optional[np.ndarray] = None,
    v: Optional[np.ndarray] = None,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Resolve (t, x, v) from a series or from raw arrays (rounded display values for a series)."""
    if series is not None:
        d = series.to_dict(rounded=True)
        return d["t"], d["x"], d["v"]
    if t is not None and x is not None and v is not None:
        return np.asarray(t, dtype=float).ravel(), np.asarray(x, dtype=float).ravel(), np.asarray(v, dtype=float).ravel()
    raise ValueError("Provide either series= or (t=, x=, v=).")


def style_time_axis(ax: Any, quantity: str, max_duration: Optional[float] = None) -> None:
    """Labels, grid and x-limits for a chart of one series quantity ('x' or 'v') vs time."""
    specs = {s.name: s for s in SERIES_FIELDS}
    t_spec, q_spec = specs["t"], specs[quantity]
    ax.set_xlabel(t_spec.display_label())
    ax.set_ylabel(q_spec.display_label())
    ax.set_title(f"{q_spec.label}({t_spec.name})")
    ax.grid(True, alpha=0.3, linestyle="--")
    if max_duration is not None:
        ax.set_xlim(0.0, max_duration)


def plot_series(
    series: Optional[SampleSeries] = None,
    t: Optional[np.ndarray] = None,
    x: Optional[np.ndarray] = None,
    v: Optional[np.ndarray] = None,
    axes: Optional[Sequence[Any]] = None,
    max_duration: Optional[float] = None,
    title: str = "Uniformly accelerated motion",
    **kwargs: Any,
) -> Any:
    """
    Plot position x(t) and velocity v(t), one subplot each.

    Args:
        series: SampleSeries (rounded display values are plotted).
        t, x, v: optional raw arrays if series is not used.
        axes: two matplotlib axes (if None, creates a new figure).
        max_duration: if given, fixes the time axis to [0, max_duration].
        title: figure title.
        **kwargs: passed to ax.plot().

    Returns:
        matplotlib figure.
    """
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError("matplotlib is required for plot_series.")
    tt, xx, vv = _get_series_arrays(series=series, t=t, x=x, v=v)
    if axes is None:
        fig, axes = plt.subplots(1, 2, figsize=(11, 4))
    else:
        fig = axes[0].figure
    ax_x, ax_v = axes[0], axes[1]
    ax_x.plot(tt, xx, color=POSITION_COLOR, linewidth=2, **kwargs)
    ax_v.plot(tt, vv, color=VELOCITY_COLOR, linewidth=2, **kwargs)
    style_time_axis(ax_x, "x", max_duration)
    style_time_axis(ax_v, "v", max_duration)
    if title:
        fig.suptitle(title)
    fig.tight_layout()
    return fig


def save_series_plot(series: SampleSeries, path: Union[str, Path], max_duration: Optional[float] = None) -> Path:
    """Render plot_series to an image file and close the figure."""
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError("matplotlib is required for save_series_plot.")
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig = plot_series(series, max_duration=max_duration)
    fig.savefig(path, dpi=120)
    plt.close(fig)
    return path
