"""Simulation clock: elapsed time, start/pause/reset, speed, and the timer that drives ticks."""

import logging
import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional, Union

from motionlab.core.config import ClockConfig
from motionlab.core.history import SampleSeries
from motionlab.errors import InvalidSpeedMultiplier
from motionlab.physics.motion import MotionParameters, MotionState, evaluate_params
from motionlab.runtime.schedulers import Scheduler, TimerHandle
from motionlab.simulation.series import SeriesBuilder

logger = logging.getLogger(__name__)

Listener = Callable[["SimulationClock"], None]

# Float sums of tick deltas land a few ulps short of the horizon
_HORIZON_TOL = 1e-9


class ClockPhase(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    FINISHED = "finished"


@dataclass(frozen=True)
class ClockState:
    """Committed clock state. elapsed is in [0, max_duration]."""

    elapsed: float = 0.0
    running: bool = False
    speed_multiplier: float = 1.0
    max_duration: float = 10.0

    @property
    def phase(self) -> ClockPhase:
        if self.running:
            return ClockPhase.RUNNING
        if self.elapsed >= self.max_duration:
            return ClockPhase.FINISHED
        if self.elapsed > 0:
            return ClockPhase.PAUSED
        return ClockPhase.IDLE


def advance(state: ClockState, real_delta_ms: float) -> ClockState:
    """
    One tick: elapsed += real_delta_ms / 1000 * speed_multiplier, clamped to max_duration.

    Reaching max_duration stops the clock in the same returned state.
    A stopped clock is returned unchanged; negative deltas do not move time back.
    """
    if not state.running:
        return state
    sim_delta = max(0.0, real_delta_ms) / 1000.0 * state.speed_multiplier
    elapsed = state.elapsed + sim_delta
    if elapsed >= state.max_duration or math.isclose(
        elapsed, state.max_duration, rel_tol=0.0, abs_tol=_HORIZON_TOL
    ):
        return replace(state, elapsed=state.max_duration, running=False)
    return replace(state, elapsed=elapsed)


@dataclass(frozen=True)
class ControlHints:
    """What the play/pause and speed controls should show for the current state."""

    play_action: str
    play_enabled: bool
    speed_multiplier: float
    next_speed: float
    waiting_for_start: bool


@dataclass(frozen=True)
class ClockSnapshot:
    """Everything a renderer needs for one frame."""

    state: ClockState
    params: MotionParameters
    motion: MotionState
    series: SampleSeries
    controls: ControlHints


class SimulationClock:
    """
    Owns the clock state and the motion parameters of one demo.

    Every change goes through a command (start, pause, toggle, tick, reset,
    set_speed, toggle_speed, edit_parameters, edit_parameter). After each
    committed change the current motion state and the full sample series
    are recomputed and listeners are notified.

    With a scheduler, entering RUNNING starts exactly one repeating timer at
    the nominal tick interval; leaving RUNNING cancels it. Without a
    scheduler the caller drives tick() itself.
    """

    def __init__(
        self,
        params: Optional[MotionParameters] = None,
        config: Optional[ClockConfig] = None,
        scheduler: Optional[Scheduler] = None,
    ) -> None:
        """
        Args:
            params: initial conditions (defaults from MOTION_FIELDS).
            config: horizon, tick interval, sampling step, speed options.
            scheduler: timer source; None = ticks driven manually.
        """
        self.config = config or ClockConfig()
        self._builder = SeriesBuilder.from_config(self.config)
        self._scheduler = scheduler
        self._timer: Optional[TimerHandle] = None
        self._listeners: List[Listener] = []
        self._params = params or MotionParameters()
        self._state = ClockState(
            speed_multiplier=self.config.default_speed,
            max_duration=self.config.max_duration,
        )
        self._motion = evaluate_params(0.0, self._params)
        self._series = self._builder.build(0.0, self._params)

    # --- queries ---

    @property
    def state(self) -> ClockState:
        return self._state

    @property
    def params(self) -> MotionParameters:
        return self._params

    @property
    def elapsed(self) -> float:
        return self._state.elapsed

    @property
    def running(self) -> bool:
        return self._state.running

    @property
    def speed_multiplier(self) -> float:
        return self._state.speed_multiplier

    @property
    def max_duration(self) -> float:
        return self._state.max_duration

    @property
    def phase(self) -> ClockPhase:
        return self._state.phase

    @property
    def motion(self) -> MotionState:
        """Motion state at the current elapsed time."""
        return self._motion

    @property
    def series(self) -> SampleSeries:
        """Sample series over [0, elapsed]."""
        return self._series

    @property
    def timer_active(self) -> bool:
        return self._timer is not None and self._timer.active

    @property
    def controls(self) -> ControlHints:
        s = self._state
        if s.running:
            action = "pause"
        elif s.elapsed > 0:
            action = "resume"
        else:
            action = "start"
        return ControlHints(
            play_action=action,
            play_enabled=s.elapsed < s.max_duration,
            speed_multiplier=s.speed_multiplier,
            next_speed=self._next_speed(),
            waiting_for_start=not self._motion.started,
        )

    def snapshot(self) -> ClockSnapshot:
        return ClockSnapshot(
            state=self._state,
            params=self._params,
            motion=self._motion,
            series=self._series,
            controls=self.controls,
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call listener(clock) after every committed change. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- commands ---

    def start(self) -> bool:
        """IDLE or PAUSED -> RUNNING. Returns False (no-op) when running or finished."""
        phase = self._state.phase
        if phase not in (ClockPhase.IDLE, ClockPhase.PAUSED):
            logger.debug("start ignored in phase %s", phase.value)
            return False
        self._commit(replace(self._state, running=True))
        logger.info("clock started at t=%.3fs (x%g)", self._state.elapsed, self._state.speed_multiplier)
        return True

    def pause(self) -> bool:
        """RUNNING -> PAUSED. Returns False (no-op) otherwise."""
        if not self._state.running:
            return False
        self._commit(replace(self._state, running=False))
        logger.info("clock paused at t=%.3fs", self._state.elapsed)
        return True

    def toggle(self) -> bool:
        """Pause when running, otherwise start. Returns True if the state changed."""
        return self.pause() if self._state.running else self.start()

    def tick(self, real_delta_ms: Optional[float] = None) -> ClockState:
        """
        Advance by real_delta_ms of wall-clock time (default: nominal tick interval).
        No-op unless running.
        """
        if not self._state.running:
            return self._state
        if real_delta_ms is None:
            real_delta_ms = self.config.tick_interval_ms
        new_state = advance(self._state, real_delta_ms)
        self._commit(new_state)
        logger.debug("tick -> t=%.3fs", new_state.elapsed)
        if new_state.phase is ClockPhase.FINISHED:
            logger.info("clock reached max duration %.3fs", new_state.max_duration)
        return self._state

    def reset(self) -> None:
        """Any phase -> IDLE (elapsed 0, stopped). Speed is kept."""
        self._commit(replace(self._state, elapsed=0.0, running=False))
        logger.info("clock reset")

    def set_speed(self, multiplier: float) -> None:
        """Select a speed multiplier from config.speed_options; applies from the next tick."""
        if multiplier not in self.config.speed_options:
            raise InvalidSpeedMultiplier(multiplier, self.config.speed_options)
        if multiplier == self._state.speed_multiplier:
            return
        self._commit(replace(self._state, speed_multiplier=float(multiplier)))
        logger.info("speed set to x%g", multiplier)

    def toggle_speed(self) -> float:
        """Switch to the next speed option (cyclic). Returns the new multiplier."""
        self.set_speed(self._next_speed())
        return self._state.speed_multiplier

    def edit_parameters(self, params: Union[MotionParameters, Mapping[str, Any]]) -> None:
        """
        Replace the initial conditions and go back to IDLE.

        A mapping may hold a subset of fields. Invalid values raise
        InvalidParameterEdit and leave parameters and clock untouched.
        """
        if isinstance(params, MotionParameters):
            new_params = params
        else:
            new_params = self._params.replace(**dict(params))
        self._commit(replace(self._state, elapsed=0.0, running=False), params=new_params)
        logger.info("parameters edited: %s", new_params.to_dict())

    def edit_parameter(self, name: str, value: Any) -> None:
        """Change one initial condition by name (x0, v0, a, t0)."""
        self.edit_parameters({name: value})

    def close(self) -> None:
        """Tear down: stop the clock and cancel its timer."""
        if self._state.running:
            self._commit(replace(self._state, running=False))
        self._cancel_timer()
        self._listeners.clear()

    # --- internals ---

    def _next_speed(self) -> float:
        options = self.config.speed_options
        try:
            i = options.index(self._state.speed_multiplier)
        except ValueError:
            return options[0]
        return options[(i + 1) % len(options)]

    def _commit(self, new_state: ClockState, params: Optional[MotionParameters] = None) -> None:
        was_running = self._state.running
        if not new_state.running:
            self._cancel_timer()
        self._state = new_state
        if params is not None:
            self._params = params
        self._motion = evaluate_params(new_state.elapsed, self._params)
        self._series = self._builder.build(new_state.elapsed, self._params)
        if new_state.running and not was_running:
            self._start_timer()
        for listener in list(self._listeners):
            listener(self)

    def _start_timer(self) -> None:
        self._cancel_timer()
        if self._scheduler is None:
            return
        self._timer = self._scheduler.schedule_repeating(self.config.tick_interval_s, self._on_timer)
        logger.debug("timer scheduled every %.0fms", self.config.tick_interval_ms)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
            logger.debug("timer cancelled")

    def _on_timer(self) -> None:
        try:
            self.tick()
        except Exception:
            # Never left RUNNING without a live timer
            logger.exception("tick failed at t=%.3fs, pausing", self._state.elapsed)
            self.pause()
            raise

    def __repr__(self) -> str:
        s = self._state
        return (
            f"SimulationClock(t={s.elapsed:.3f}s/{s.max_duration:g}s, "
            f"phase={s.phase.value}, speed=x{s.speed_multiplier:g})"
        )
