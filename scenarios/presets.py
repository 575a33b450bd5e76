"""
Named scenario presets for quick Base / Optimistic / Pessimistic comparisons.

Presets are plain ScenarioOverrides; CUSTOM scenarios carry their own
overrides and have no preset.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Union

from core.schema import ScenarioOverrides, ScenarioType

SCENARIO_PRESETS: Mapping[ScenarioType, ScenarioOverrides] = MappingProxyType({
    ScenarioType.BASE: ScenarioOverrides(),
    ScenarioType.OPTIMISTIC: ScenarioOverrides(
        customer_growth_multiplier=1.3,
        arpu_multiplier=1.1,
        churn_rate_adjustment=-0.01,
        expansion_revenue_rate_adjustment=0.02,
    ),
    ScenarioType.PESSIMISTIC: ScenarioOverrides(
        customer_growth_multiplier=0.7,
        arpu_multiplier=0.9,
        churn_rate_adjustment=0.02,
        fixed_costs_multiplier=1.1,
        salary_multiplier=1.05,
    ),
})


def get_scenario_preset(name: Union[ScenarioType, str]) -> ScenarioOverrides:
    """
    Return the overrides for a named preset.

    Parameters
    ----------
    name : ScenarioType or str
        One of "BASE", "OPTIMISTIC", "PESSIMISTIC" (case-insensitive).
    """
    available = [s.value for s in SCENARIO_PRESETS]
    try:
        key = ScenarioType(name.upper() if isinstance(name, str) else name)
    except ValueError:
        raise KeyError(f"Unknown scenario '{name}'. Available: {available}") from None
    if key not in SCENARIO_PRESETS:
        raise KeyError(f"No preset for scenario '{key.value}'. Available: {available}")
    return SCENARIO_PRESETS[key]
