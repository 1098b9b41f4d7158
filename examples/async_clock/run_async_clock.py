"""
Minimal example: the simulation clock driven by an asyncio timer, no GUI.

Runs at 2x speed until t = 4 s, pauses for half a second of wall-clock time,
resumes, and stops when the 10 s horizon is reached.
"""

import asyncio
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT))

from motionlab import MotionParameters, SimulationClock
from motionlab.runtime import AsyncioScheduler


async def main() -> None:
    clock = SimulationClock(
        params=MotionParameters(x0=0.0, v0=5.0, a=-0.5, t0=1.0),
        scheduler=AsyncioScheduler(),
    )
    finished = asyncio.Event()

    def on_change(c: SimulationClock) -> None:
        m = c.motion
        print(f"t={c.elapsed:5.2f}s  x={m.x:7.2f} m  v={m.v:6.2f} m/s  {c.phase.value}")
        if c.phase.value == "finished":
            finished.set()

    clock.subscribe(on_change)
    clock.set_speed(2)
    clock.start()
    while clock.elapsed < 4.0:
        await asyncio.sleep(0.05)
    clock.pause()
    await asyncio.sleep(0.5)
    clock.start()
    await finished.wait()

    series = clock.series
    print(f"{len(series)} samples, last point {series.last()}")
    clock.close()


if __name__ == "__main__":
    asyncio.run(main())
