"""
Scenario overlay: turns a base AssumptionSet plus ScenarioOverrides into the
effective assumptions for one run.

Only the fields that are constant across the horizon are folded in here
(ARPU, churn, expansion, gross margin, fixed and variable costs). Growth
multiplier, hiring delay, salary multiplier and custom monthly overrides are
month-dependent and are read by the calculation helpers each month.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, Optional

from core.schema import AssumptionSet, ScenarioOverrides
from core.utils import clamp


def apply_scenario_overrides(
    assumptions: AssumptionSet,
    overrides: Optional[ScenarioOverrides] = None,
) -> AssumptionSet:
    """
    Return the effective AssumptionSet for a scenario.

    The input is never mutated. Fields without a matching override keep their
    base value exactly; churn is clamped to [0, 1] only when an adjustment is
    applied.
    """
    if overrides is None:
        return assumptions

    changes: Dict[str, Any] = {}

    if overrides.arpu_multiplier is not None:
        changes["arpu"] = assumptions.arpu * overrides.arpu_multiplier

    if overrides.churn_rate_adjustment is not None:
        changes["churn_rate"] = clamp(
            assumptions.churn_rate + overrides.churn_rate_adjustment, 0.0, 1.0
        )

    if overrides.expansion_revenue_rate_adjustment is not None:
        changes["expansion_revenue_rate"] = (
            assumptions.expansion_revenue_rate + overrides.expansion_revenue_rate_adjustment
        )

    if overrides.gross_margin_adjustment is not None:
        changes["gross_margin_percent"] = (
            assumptions.gross_margin_percent + overrides.gross_margin_adjustment
        )

    if overrides.fixed_costs_multiplier is not None:
        changes["fixed_costs_per_month"] = (
            assumptions.fixed_costs_per_month * overrides.fixed_costs_multiplier
        )

    if overrides.variable_cost_multiplier is not None:
        changes["variable_cost_percent_of_revenue"] = (
            assumptions.variable_cost_percent_of_revenue * overrides.variable_cost_multiplier
        )

    return replace(assumptions, **changes)
