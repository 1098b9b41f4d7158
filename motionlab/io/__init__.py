"""Input/output: JSON configuration and scenario files."""

from motionlab.io.serializers import load_config, load_scenario, save_config, save_scenario

__all__ = ["save_config", "load_config", "save_scenario", "load_scenario"]
