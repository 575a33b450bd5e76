"""
Deterministic monthly calculation helpers: customers, revenue, costs, runway
and unit economics.

Every function is pure: inputs in, values out, no shared state. The runner
calls them once per month and threads cash / active customers forward.

Undefined ratios (LTV with zero churn, LTV:CAC with zero CAC, burn multiple
with zero net-new ARR) return None rather than a float infinity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from core.schema import AssumptionSet, HiringPlanItem, ScenarioOverrides


@dataclass(frozen=True)
class CustomerCounts:
    new_customers: float
    churned_customers: float
    active_customers: float


@dataclass(frozen=True)
class RevenueBreakdown:
    mrr: float
    revenue: float


@dataclass(frozen=True)
class CostBreakdown:
    cogs: float
    gross_profit: float
    salary_costs: float
    fixed_costs: float
    variable_costs: float
    total_opex: float


def _hiring_delay(overrides: Optional[ScenarioOverrides]) -> int:
    if overrides is None or overrides.hiring_delay_months is None:
        return 0
    return int(overrides.hiring_delay_months)


def active_hires(
    month_index: int,
    hiring_plan: Iterable[HiringPlanItem],
    overrides: Optional[ScenarioOverrides] = None,
) -> List[HiringPlanItem]:
    """Hiring-plan items on payroll in month_index (no attrition once hired)."""
    cutoff = month_index - _hiring_delay(overrides)
    return [item for item in hiring_plan if item.month_offset <= cutoff]


def calculate_active_customers(
    previous_active: float,
    assumptions: AssumptionSet,
    month_index: int,
    overrides: Optional[ScenarioOverrides] = None,
) -> CustomerCounts:
    """
    Customer roll-forward for one month.

    new     = expected new customers x growth multiplier, unless a custom
              monthly override pins the value for this month
    churned = previous_active x churn_rate
    active  = max(0, previous_active + new - churned)
    """
    new_customers = float(assumptions.expected_new_customers_per_month)

    if overrides is not None:
        if overrides.customer_growth_multiplier is not None:
            new_customers *= overrides.customer_growth_multiplier
        custom = overrides.monthly_override(month_index)
        if custom is not None and custom.new_customers is not None:
            new_customers = float(custom.new_customers)

    churned = previous_active * assumptions.churn_rate
    active = max(0.0, previous_active + new_customers - churned)

    return CustomerCounts(
        new_customers=new_customers,
        churned_customers=churned,
        active_customers=active,
    )


def calculate_revenue(active_customers: float, assumptions: AssumptionSet) -> RevenueBreakdown:
    """MRR = active x ARPU x (1 + expansion). Revenue is recognized as MRR."""
    base_mrr = active_customers * assumptions.arpu
    expansion = base_mrr * assumptions.expansion_revenue_rate
    mrr = base_mrr + expansion
    return RevenueBreakdown(mrr=mrr, revenue=mrr)


def calculate_costs(
    revenue: float,
    month_index: int,
    hiring_plan: Iterable[HiringPlanItem],
    assumptions: AssumptionSet,
    overrides: Optional[ScenarioOverrides] = None,
) -> CostBreakdown:
    """
    Operating cost stack for one month.

    COGS follows gross margin, variable costs follow revenue, fixed costs come
    from the assumptions (or an exact custom override for this month), and
    salaries sum every hire active after the scenario hiring delay.
    """
    cogs = revenue * (1.0 - assumptions.gross_margin_percent / 100.0)
    gross_profit = revenue - cogs

    variable_costs = revenue * assumptions.variable_cost_percent_of_revenue

    fixed_costs = float(assumptions.fixed_costs_per_month)
    salary_multiplier = 1.0
    if overrides is not None:
        custom = overrides.monthly_override(month_index)
        if custom is not None and custom.fixed_costs is not None:
            fixed_costs = float(custom.fixed_costs)
        if overrides.salary_multiplier is not None:
            salary_multiplier = overrides.salary_multiplier

    salary_costs = 0.0
    for item in active_hires(month_index, hiring_plan, overrides):
        salary_costs += item.count * item.monthly_salary_per_head * salary_multiplier

    total_opex = cogs + variable_costs + fixed_costs + salary_costs

    return CostBreakdown(
        cogs=cogs,
        gross_profit=gross_profit,
        salary_costs=salary_costs,
        fixed_costs=fixed_costs,
        variable_costs=variable_costs,
        total_opex=total_opex,
    )


def calculate_headcount(
    month_index: int,
    hiring_plan: Iterable[HiringPlanItem],
    overrides: Optional[ScenarioOverrides] = None,
) -> int:
    return sum(item.count for item in active_hires(month_index, hiring_plan, overrides))


def calculate_runway(current_cash: float, monthly_burn: float) -> Optional[float]:
    """
    Months of cash left at the current burn.

    0 when cash is already exhausted, None when burn <= 0 (break-even or
    profitable, runway is unbounded).
    """
    if current_cash <= 0:
        return 0.0
    if monthly_burn <= 0:
        return None
    return current_cash / monthly_burn


def calculate_cac(sales_and_marketing_costs: float, new_customers: float) -> float:
    if new_customers == 0:
        return 0.0
    return sales_and_marketing_costs / new_customers


def calculate_ltv(arpu: float, churn_rate: float) -> Optional[float]:
    if churn_rate == 0:
        return None
    return arpu / churn_rate


def calculate_ltv_to_cac(ltv: Optional[float], cac: float) -> Optional[float]:
    if ltv is None or cac == 0:
        return None
    return ltv / cac


def calculate_burn_multiple(net_burn: float, net_new_arr: float) -> Optional[float]:
    """Net burn per dollar of net-new ARR; None when no ARR was added."""
    if net_new_arr == 0:
        return None
    return net_burn / net_new_arr
