"""
Scenarios: overlay adjustments onto base assumptions, plus named presets.
"""

from .overlay import apply_scenario_overrides
from .presets import SCENARIO_PRESETS, get_scenario_preset

__all__ = [
    "apply_scenario_overrides",
    "SCENARIO_PRESETS",
    "get_scenario_preset",
]
