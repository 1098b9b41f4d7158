"""
Cancellable repeating timers that drive the simulation clock.

Interface: schedule_repeating(interval_s, callback) -> TimerHandle.
A handle fires callback() every interval_s seconds until cancel() is called.
Cancelling is final: a cancelled handle never fires again.

  - ManualScheduler: virtual time advanced explicitly (tests, headless runs)
  - AsyncioScheduler: one asyncio task per timer
  - MatplotlibScheduler: canvas timer of a matplotlib figure (GUI event loop)
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

Callback = Callable[[], Any]


class TimerHandle(ABC):
    """Handle of a scheduled repeating callback."""

    @abstractmethod
    def cancel(self) -> None:
        """Stop the timer. Idempotent."""

    @property
    @abstractmethod
    def active(self) -> bool:
        """True until cancel() is called."""


class Scheduler(ABC):
    """Factory of repeating timers."""

    @abstractmethod
    def schedule_repeating(self, interval_s: float, callback: Callback) -> TimerHandle:
        """Call callback() every interval_s seconds; the first call is one interval from now."""


class _ManualTimer(TimerHandle):
    def __init__(self, interval_s: float, callback: Callback, scheduled_at: float) -> None:
        self.interval_s = interval_s
        self.callback = callback
        self.scheduled_at = scheduled_at
        self.fired = 0
        self._active = True

    @property
    def next_due(self) -> float:
        # Multiplied, not accumulated, so long runs do not drift
        return self.scheduled_at + (self.fired + 1) * self.interval_s

    def cancel(self) -> None:
        self._active = False

    @property
    def active(self) -> bool:
        return self._active


class ManualScheduler(Scheduler):
    """
    Deterministic scheduler on a virtual clock: nothing fires until advance() is called.
    Same sequence of advance() calls -> same sequence of callbacks.
    """

    def __init__(self) -> None:
        self._now: float = 0.0
        self._timers: List[_ManualTimer] = []

    @property
    def now(self) -> float:
        """Virtual time in seconds."""
        return self._now

    @property
    def active_timers(self) -> List[TimerHandle]:
        return [t for t in self._timers if t.active]

    def schedule_repeating(self, interval_s: float, callback: Callback) -> TimerHandle:
        if interval_s <= 0:
            raise ValueError(f"interval must be positive, got {interval_s}")
        timer = _ManualTimer(interval_s, callback, self._now)
        self._timers.append(timer)
        return timer

    def advance(self, seconds: float) -> int:
        """
        Move virtual time forward, firing every due callback in time order.

        Callbacks may cancel or schedule timers; a timer scheduled during
        advance() fires only if its first due time is within the window.

        Returns:
            Number of callbacks fired.
        """
        target = self._now + seconds
        fired = 0
        while True:
            self._timers = [t for t in self._timers if t.active]
            due = [t for t in self._timers if t.next_due <= target + 1e-12]
            if not due:
                break
            timer = min(due, key=lambda t: t.next_due)
            self._now = max(self._now, timer.next_due)
            timer.fired += 1
            timer.callback()
            fired += 1
        self._now = target
        return fired

    def fire(self, n: int = 1) -> int:
        """Advance to the next n due callbacks. Returns how many actually fired."""
        fired = 0
        for _ in range(n):
            pending = self.active_timers
            if not pending:
                break
            next_due = min(t.next_due for t in pending)
            fired += self.advance(next_due - self._now)
        return fired


class AsyncioTimerHandle(TimerHandle):
    """Wraps the asyncio task running a repeating timer."""

    def __init__(self, task: "asyncio.Task[None]") -> None:
        self._task = task
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True
        self._task.cancel()

    @property
    def active(self) -> bool:
        return not self._cancelled and not self._task.done()

    @property
    def task(self) -> "asyncio.Task[None]":
        return self._task


class AsyncioScheduler(Scheduler):
    """
    Repeating timers as asyncio tasks. schedule_repeating() must be called
    with a running event loop (or with an explicit loop).
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def schedule_repeating(self, interval_s: float, callback: Callback) -> TimerHandle:
        if interval_s <= 0:
            raise ValueError(f"interval must be positive, got {interval_s}")
        loop = self._loop or asyncio.get_running_loop()
        handle: Optional[AsyncioTimerHandle] = None

        async def run() -> None:
            while True:
                await asyncio.sleep(interval_s)
                if handle is not None and handle._cancelled:
                    return
                callback()

        handle = AsyncioTimerHandle(loop.create_task(run()))
        return handle


class MatplotlibTimerHandle(TimerHandle):
    def __init__(self, timer: Any) -> None:
        self._timer = timer
        self._active = True

    def cancel(self) -> None:
        if self._active:
            self._active = False
            self._timer.stop()

    @property
    def active(self) -> bool:
        return self._active


class MatplotlibScheduler(Scheduler):
    """Repeating timers from a matplotlib canvas (fires inside the GUI event loop)."""

    def __init__(self, canvas: Any) -> None:
        """
        Args:
            canvas: matplotlib FigureCanvas (fig.canvas).
        """
        self._canvas = canvas

    def schedule_repeating(self, interval_s: float, callback: Callback) -> TimerHandle:
        if interval_s <= 0:
            raise ValueError(f"interval must be positive, got {interval_s}")
        timer = self._canvas.new_timer(interval=max(1, int(round(interval_s * 1000))))
        handle = MatplotlibTimerHandle(timer)

        def fire() -> None:
            if handle.active:
                callback()

        timer.add_callback(fire)
        timer.start()
        return handle
