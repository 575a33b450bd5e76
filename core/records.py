"""
Projection outputs: one immutable record per simulated month plus the
summary derived from the full sequence.

None is used wherever a ratio is undefined ("infinite" runway or LTV), so
consumers never do arithmetic on a float infinity.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple

from .schema import ScenarioType


@dataclass(frozen=True)
class MonthlyProjection:
    """Result of simulating one month."""
    month_index: int
    month: str  # YYYY-MM

    # Cash
    starting_cash: float
    ending_cash: float
    net_burn: float
    runway_months: Optional[float]  # None when break-even or profitable

    # Customers
    new_customers: float
    churned_customers: float
    active_customers: float

    # Revenue
    mrr: float
    revenue: float

    # Costs
    cogs: float
    gross_profit: float
    salary_costs: float
    fixed_costs: float
    variable_costs: float
    total_opex: float

    headcount: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ProjectionSummary:
    """Headline metrics reduced from a complete projection sequence."""
    scenario_name: ScenarioType

    starting_mrr: float
    ending_mrr: float
    mrr_growth_percent: float

    # Burn
    peak_burn: float
    peak_burn_month: str
    avg_monthly_burn: float

    # Cash
    starting_cash: float
    ending_cash: float
    total_cash_burned: float
    zero_cash_month: Optional[str]
    min_runway: Optional[float]

    total_revenue: float

    starting_headcount: int
    ending_headcount: int

    # Unit economics
    ltv: Optional[float]
    cac_payback_months: int

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["scenario_name"] = self.scenario_name.value
        return out


@dataclass(frozen=True)
class ScenarioResult:
    projections: Tuple[MonthlyProjection, ...]
    summary: ProjectionSummary

    @property
    def months(self) -> int:
        return len(self.projections)
