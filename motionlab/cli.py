"""
Command line entry point.

Headless run (virtual timer, no GUI):
    motionlab --v0 5 --a 1 --until 2 --csv out/series.csv
Interactive dashboard:
    motionlab --dashboard
"""

import argparse
import logging
import sys
from typing import Dict, List, Optional, Tuple

from motionlab.core.clock import SimulationClock
from motionlab.core.config import ClockConfig
from motionlab.core.signals import MOTION_FIELDS
from motionlab.errors import MotionLabError
from motionlab.io.serializers import load_scenario, save_scenario
from motionlab.physics.motion import MotionParameters
from motionlab.runtime.schedulers import ManualScheduler

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="motionlab", description="Uniformly accelerated motion demo")
    parser.add_argument("--config", help="Scenario JSON with 'parameters' and 'clock' sections")
    for spec in MOTION_FIELDS:
        parser.add_argument(
            f"--{spec.name}",
            type=float,
            default=None,
            help=f"{spec.label} [{spec.unit}] (default {spec.default:g})",
        )
    parser.add_argument("--speed", type=float, default=None, help="Speed multiplier (one of the configured options)")
    parser.add_argument("--until", type=float, default=None, help="Pause at this simulation time [s] (default: run to the end)")
    parser.add_argument("--csv", help="Write the sample series to this CSV file")
    parser.add_argument("--plot", help="Save x(t), v(t) charts to this image file (requires matplotlib)")
    parser.add_argument("--table", action="store_true", help="Print every sample point")
    parser.add_argument("--save-scenario", help="Write the effective scenario to this JSON file")
    parser.add_argument("--dashboard", action="store_true", help="Open the interactive matplotlib dashboard")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def resolve_scenario(args: argparse.Namespace) -> Tuple[MotionParameters, ClockConfig]:
    """Scenario file (if any) overridden by explicit command line values."""
    if args.config:
        params, config = load_scenario(args.config)
    else:
        params, config = MotionParameters(), ClockConfig()
    overrides: Dict[str, float] = {
        spec.name: getattr(args, spec.name) for spec in MOTION_FIELDS if getattr(args, spec.name) is not None
    }
    if overrides:
        params = params.replace(**overrides)
    return params, config


def run_headless(clock: SimulationClock, scheduler: ManualScheduler, until: Optional[float] = None) -> None:
    """Play the clock on the virtual timer until it finishes or reaches `until`."""
    clock.start()
    while clock.running:
        if until is not None:
            remaining = until - clock.elapsed
            sim_step = clock.config.tick_interval_s * clock.speed_multiplier
            if remaining <= sim_step:
                # Land exactly on `until` with a shortened last tick
                if remaining > 0:
                    clock.tick(remaining * 1000.0 / clock.speed_multiplier)
                clock.pause()
                break
        if scheduler.fire() == 0:
            break


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        params, config = resolve_scenario(args)
    except (MotionLabError, OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.save_scenario:
        save_scenario(params, config, args.save_scenario)
        logger.info("scenario written to %s", args.save_scenario)

    if args.dashboard:
        from motionlab.simulation.dashboard import MotionDashboard

        dashboard = MotionDashboard(params=params, config=config)
        if args.speed is not None:
            try:
                dashboard.clock.set_speed(args.speed)
            except MotionLabError as exc:
                print(f"error: {exc}", file=sys.stderr)
                dashboard.close()
                return 2
        dashboard.show()
        return 0

    scheduler = ManualScheduler()
    clock = SimulationClock(params=params, config=config, scheduler=scheduler)
    try:
        if args.speed is not None:
            clock.set_speed(args.speed)
    except MotionLabError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    run_headless(clock, scheduler, until=args.until)

    series = clock.series
    motion = clock.motion
    if args.table:
        for p in series.points():
            print(f"{p.t:8.2f} {p.x:10.2f} {p.v:10.2f}")
    print(
        f"t = {clock.elapsed:.2f} s  x = {motion.x:.2f} m  v = {motion.v:.2f} m/s  "
        f"started = {motion.started}  samples = {len(series)}"
    )
    if args.csv:
        series.to_csv(args.csv)
        logger.info("series written to %s", args.csv)
    if args.plot:
        from motionlab.simulation._utils import save_series_plot

        save_series_plot(series, args.plot, max_duration=clock.max_duration)
        logger.info("plot written to %s", args.plot)
    clock.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
