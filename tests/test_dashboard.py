"""Tests for the matplotlib dashboard and plotting helpers (Agg backend, virtual timer)."""

import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from motionlab.core import SimulationClock  # noqa: E402
from motionlab.physics import MotionParameters  # noqa: E402
from motionlab.runtime import ManualScheduler  # noqa: E402
from motionlab.simulation import build_series, plot_series, save_series_plot  # noqa: E402
from motionlab.simulation.dashboard import MotionDashboard  # noqa: E402


@pytest.fixture
def setup():
    scheduler = ManualScheduler()
    clock = SimulationClock(params=MotionParameters(t0=1.0), scheduler=scheduler)
    dashboard = MotionDashboard(clock=clock)
    yield dashboard, clock, scheduler
    plt.close(dashboard.fig)


def test_initial_view(setup) -> None:
    dashboard, clock, _ = setup
    assert dashboard.play_button.label.get_text() == "Start"
    assert dashboard.speed_button.label.get_text() == "2x"
    assert "t = 0.00 s / 10 s" in dashboard.status_text.get_text()
    assert "waiting for t0" in dashboard.status_text.get_text()
    assert len(dashboard.line_x.get_xdata()) == 1


def test_redraws_on_ticks(setup) -> None:
    dashboard, clock, scheduler = setup
    dashboard.play_button._observers.process("clicked", None)
    assert clock.running
    assert dashboard.play_button.label.get_text() == "Pause"
    scheduler.advance(2.0)
    text = dashboard.status_text.get_text()
    assert "t = 2.00 s" in text
    assert "waiting for t0" not in text
    assert len(dashboard.line_v.get_xdata()) == len(clock.series)


def test_pause_reset_and_speed_buttons(setup) -> None:
    dashboard, clock, scheduler = setup
    clock.start()
    scheduler.advance(1.0)
    clock.toggle()
    assert dashboard.play_button.label.get_text() == "Resume"
    dashboard.speed_button._observers.process("clicked", None)
    assert clock.speed_multiplier == 2.0
    assert dashboard.speed_button.label.get_text() == "1x"
    dashboard.reset_button._observers.process("clicked", None)
    assert clock.elapsed == 0.0
    assert dashboard.play_button.label.get_text() == "Start"


def test_parameter_edit_through_text_box(setup) -> None:
    dashboard, clock, scheduler = setup
    clock.start()
    scheduler.advance(1.0)
    dashboard.text_boxes["a"].set_val("2.5")
    assert clock.params.a == 2.5
    assert clock.elapsed == 0.0
    assert not clock.running


def test_invalid_text_keeps_previous_value(setup) -> None:
    dashboard, clock, _ = setup
    dashboard.text_boxes["v0"].set_val("fast")
    assert clock.params.v0 == 5.0
    assert dashboard.text_boxes["v0"].text == "5"


def test_finished_disables_play(setup) -> None:
    dashboard, clock, scheduler = setup
    clock.start()
    scheduler.advance(11.0)
    assert dashboard.play_button.color == "0.95"
    assert "t = 10.00 s" in dashboard.status_text.get_text()


def test_close_cancels_timer(setup) -> None:
    dashboard, clock, scheduler = setup
    clock.start()
    dashboard.close()
    assert scheduler.active_timers == []
    assert not clock.running


def test_plot_series_and_save(tmp_path) -> None:
    series = build_series(3.0, x0=0.0, v0=5.0, t0=0.0, a=1.0)
    fig = plot_series(series, max_duration=10.0)
    ax_x, ax_v = fig.axes[0], fig.axes[1]
    assert ax_x.get_xlim() == (0.0, 10.0)
    assert len(ax_v.lines[0].get_xdata()) == len(series)
    plt.close(fig)
    path = save_series_plot(series, tmp_path / "series.png")
    assert path.exists()


def test_plot_series_requires_data() -> None:
    with pytest.raises(ValueError):
        plot_series()


def test_ticks_keep_unsubmitted_typing(setup) -> None:
    dashboard, clock, scheduler = setup
    clock.start()
    box = dashboard.text_boxes["x0"]
    box.text_disp.set_text("3")
    scheduler.fire()
    assert clock.running
    assert box.text == "3"
    assert clock.params.x0 == 0.0


def test_programmatic_edit_updates_text_boxes(setup) -> None:
    dashboard, clock, _ = setup
    clock.edit_parameter("v0", 7.0)
    assert dashboard.text_boxes["v0"].text == "7"
