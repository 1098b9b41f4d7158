"""
Interactive demo: a car accelerating along a track, with live x(t) and v(t) charts.
Edit x0, v0, a, t0 in the text boxes (Enter to apply), then press Start.
"""

import sys
from pathlib import Path

# Add repository root to the path
ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT))

try:
    import matplotlib  # noqa: F401
except ImportError:
    print("This example requires matplotlib: pip install matplotlib")
    sys.exit(1)

from motionlab import ClockConfig, MotionParameters
from motionlab.simulation.dashboard import MotionDashboard


def main() -> None:
    params = MotionParameters(x0=0.0, v0=5.0, a=1.0, t0=0.0)
    config = ClockConfig(max_duration=10.0, tick_interval_ms=50.0, sampling_step=0.2)
    dashboard = MotionDashboard(params=params, config=config)
    dashboard.show()


if __name__ == "__main__":
    main()
