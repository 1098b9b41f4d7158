"""
Matplotlib dashboard: parameter inputs, play/pause/reset/speed buttons,
the car on its track and live x(t), v(t) charts.

The dashboard only reads the clock and sends it commands; every redraw is
triggered by a clock notification.
"""

import logging
from functools import partial
from typing import Any, Dict, List, Optional

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle
from matplotlib.widgets import Button, TextBox

from motionlab.core.clock import SimulationClock
from motionlab.core.config import ClockConfig
from motionlab.core.signals import MOTION_FIELDS
from motionlab.errors import InvalidParameterEdit
from motionlab.physics.motion import MotionParameters
from motionlab.runtime.schedulers import MatplotlibScheduler
from motionlab.simulation._utils import POSITION_COLOR, VELOCITY_COLOR, style_time_axis
from motionlab.simulation.track import compute_track_layout

logger = logging.getLogger(__name__)

PLAY_LABELS = {"start": "Start", "resume": "Resume", "pause": "Pause"}
CAR_WIDTH = 4.0  # percent of the track
BUTTON_COLOR = "0.85"
BUTTON_DISABLED_COLOR = "0.95"


class MotionDashboard:
    """
    Interactive figure bound to one SimulationClock.

    If no clock is given, one is created with a MatplotlibScheduler on this
    figure's canvas, so ticks run inside the GUI event loop.
    """

    def __init__(
        self,
        clock: Optional[SimulationClock] = None,
        params: Optional[MotionParameters] = None,
        config: Optional[ClockConfig] = None,
        figure: Optional[Any] = None,
    ) -> None:
        self.fig = figure if figure is not None else plt.figure(figsize=(12, 8))
        if clock is None:
            clock = SimulationClock(params=params, config=config, scheduler=MatplotlibScheduler(self.fig.canvas))
        self.clock = clock
        self._syncing = False
        self._mark_artists: List[Any] = []
        self._build_inputs()
        self._build_buttons()
        self._build_track()
        self._build_charts()
        self._unsubscribe = self.clock.subscribe(self._on_clock)
        self.fig.canvas.mpl_connect("close_event", lambda _event: self.close())
        self.refresh()

    # --- layout ---

    def _build_inputs(self) -> None:
        self.text_boxes: Dict[str, TextBox] = {}
        self._synced_params = self.clock.params
        width = 0.16
        for i, spec in enumerate(MOTION_FIELDS):
            ax = self.fig.add_axes([0.12 + i * 0.22, 0.91, width, 0.045])
            box = TextBox(ax, f"{spec.name} [{spec.unit}] ", initial=f"{getattr(self.clock.params, spec.name):g}")
            box.on_submit(partial(self._on_edit, spec.name))
            self.text_boxes[spec.name] = box

    def _build_buttons(self) -> None:
        self.play_button = Button(self.fig.add_axes([0.30, 0.83, 0.12, 0.05]), "Start", color=BUTTON_COLOR)
        self.reset_button = Button(self.fig.add_axes([0.44, 0.83, 0.12, 0.05]), "Reset", color=BUTTON_COLOR)
        self.speed_button = Button(self.fig.add_axes([0.58, 0.83, 0.12, 0.05]), "2x", color=BUTTON_COLOR)
        self.play_button.on_clicked(lambda _event: self.clock.toggle())
        self.reset_button.on_clicked(lambda _event: self.clock.reset())
        self.speed_button.on_clicked(lambda _event: self.clock.toggle_speed())
        self.status_text = self.fig.text(0.5, 0.785, "", ha="center", family="monospace")

    def _build_track(self) -> None:
        ax = self.fig.add_axes([0.06, 0.62, 0.88, 0.12])
        ax.set_xlim(0.0, 100.0)
        ax.set_ylim(0.0, 1.0)
        ax.set_xticks([])
        ax.set_yticks([])
        ax.set_facecolor("#d1d5db")
        ax.add_patch(Rectangle((0.0, 0.0), 100.0, 0.2, color="#9ca3af"))
        self.car = Rectangle((0.0, 0.3), CAR_WIDTH, 0.4, color="#dc2626")
        ax.add_patch(self.car)
        self.start_line = ax.axvline(0.0, ymin=0.0, ymax=0.2, color="black", linewidth=1.5)
        self.track_label = ax.text(100.0, -0.15, "", ha="right", va="top", fontsize=8, transform=ax.transData)
        self.ax_track = ax

    def _build_charts(self) -> None:
        max_duration = self.clock.max_duration
        self.ax_x = self.fig.add_axes([0.06, 0.08, 0.40, 0.42])
        self.ax_v = self.fig.add_axes([0.56, 0.08, 0.40, 0.42])
        (self.line_x,) = self.ax_x.plot([], [], color=POSITION_COLOR, linewidth=2)
        (self.line_v,) = self.ax_v.plot([], [], color=VELOCITY_COLOR, linewidth=2)
        style_time_axis(self.ax_x, "x", max_duration)
        style_time_axis(self.ax_v, "v", max_duration)

    # --- events ---

    def _on_edit(self, name: str, text: str) -> None:
        if self._syncing:
            return
        try:
            self.clock.edit_parameter(name, text)
        except InvalidParameterEdit as exc:
            logger.warning("%s; keeping previous value", exc)
            self._sync_text_boxes(force=True)

    def _on_clock(self, _clock: SimulationClock) -> None:
        self.refresh()

    def _sync_text_boxes(self, force: bool = False) -> None:
        # Ticks leave the parameters alone; rewriting the boxes then would discard unsubmitted typing
        if not force and self.clock.params == self._synced_params:
            return
        self._synced_params = self.clock.params
        self._syncing = True
        try:
            for name, box in self.text_boxes.items():
                value = f"{getattr(self.clock.params, name):g}"
                if box.text != value:
                    box.set_val(value)
        finally:
            self._syncing = False

    # --- drawing ---

    def refresh(self) -> None:
        """Redraw everything from the clock's current state."""
        snap = self.clock.snapshot()
        series = snap.series

        t, x, v = series.get("t", rounded=True), series.get("x", rounded=True), series.get("v", rounded=True)
        self.line_x.set_data(t, x)
        self.line_v.set_data(t, v)
        for ax in (self.ax_x, self.ax_v):
            ax.relim()
            ax.autoscale_view(scalex=False)

        layout = compute_track_layout(series, snap.motion.x, snap.params.x0)
        self.car.set_x(layout.car_percent - CAR_WIDTH / 2)
        self.start_line.set_xdata([layout.start_percent, layout.start_percent])
        for artist in self._mark_artists:
            artist.remove()
        self._mark_artists = [
            self.ax_track.axvline(p, ymin=0.0, ymax=0.2, color="#1f2937", alpha=0.5, linewidth=1)
            for p in layout.mark_percents
        ]
        self.track_label.set_text(f"track length {layout.track_length:.2f} m")

        controls = snap.controls
        self.play_button.label.set_text(PLAY_LABELS[controls.play_action])
        self.play_button.color = BUTTON_COLOR if controls.play_enabled else BUTTON_DISABLED_COLOR
        self.speed_button.label.set_text(f"{controls.next_speed:g}x")

        status = (
            f"t = {snap.state.elapsed:.2f} s / {snap.state.max_duration:g} s   "
            f"x = {snap.motion.x:.2f} m   v = {snap.motion.v:.2f} m/s"
        )
        if controls.waiting_for_start:
            status += "   (waiting for t0)"
        self.status_text.set_text(status)
        self._sync_text_boxes()
        self.fig.canvas.draw_idle()

    def show(self) -> None:
        plt.show()

    def close(self) -> None:
        """Detach from the clock and cancel its timer."""
        self._unsubscribe()
        self.clock.close()
