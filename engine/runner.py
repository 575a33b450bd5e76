"""
Projection runner: drives the month-by-month simulation.

Flow for one scenario:
  1. Fold constant scenario adjustments into effective assumptions (once).
  2. Seed cash from the company and active customers from starting MRR / ARPU.
  3. For every month in the horizon: customers → revenue → costs → burn →
     runway → headcount, then roll cash and customers forward.
  4. Reduce the sequence into a ProjectionSummary.

The loop always runs the full horizon, including months after cash is
exhausted. Each month depends on the previous one, so months run
sequentially; separate scenarios share no state and can run independently.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, List, Mapping, Optional, Union

from core.config import ProjectionConfig
from core.records import MonthlyProjection, ScenarioResult
from core.schema import (
    AssumptionSet,
    CompanyState,
    FinancialModelInput,
    ScenarioOverrides,
    ScenarioType,
)
from core.utils import add_months
from reporting.summary import summarize_projections
from scenarios.overlay import apply_scenario_overrides

from .calculations import (
    calculate_active_customers,
    calculate_costs,
    calculate_headcount,
    calculate_revenue,
    calculate_runway,
)

logger = logging.getLogger(__name__)


def implied_starting_customers(company: CompanyState, assumptions: AssumptionSet) -> float:
    """
    Customer count implied by starting MRR at the base (pre-scenario) ARPU.

    Starting MRR was earned at today's price, so scenario ARPU multipliers do
    not change how many customers the company starts with.
    """
    if assumptions.arpu > 0:
        return company.starting_mrr / assumptions.arpu
    return 0.0


def project_months(model_input: FinancialModelInput) -> List[MonthlyProjection]:
    """
    Simulate every month of the horizon and return the ordered records.

    The returned list always has exactly assumptions.months entries.
    """
    company = model_input.company
    base = model_input.assumptions
    hiring_plan = tuple(model_input.hiring_plan)
    overrides = model_input.scenario_overrides

    effective = apply_scenario_overrides(base, overrides)

    cash = float(company.starting_cash)
    active = implied_starting_customers(company, base)

    projections: List[MonthlyProjection] = []
    for month_index in range(base.months):
        month = add_months(base.start_month, month_index)

        customers = calculate_active_customers(active, effective, month_index, overrides)
        rev = calculate_revenue(customers.active_customers, effective)
        costs = calculate_costs(rev.revenue, month_index, hiring_plan, effective, overrides)

        net_burn = costs.total_opex - rev.revenue
        ending_cash = cash - net_burn

        projections.append(MonthlyProjection(
            month_index=month_index,
            month=month,
            starting_cash=cash,
            ending_cash=ending_cash,
            net_burn=net_burn,
            runway_months=calculate_runway(ending_cash, net_burn),
            new_customers=customers.new_customers,
            churned_customers=customers.churned_customers,
            active_customers=customers.active_customers,
            mrr=rev.mrr,
            revenue=rev.revenue,
            cogs=costs.cogs,
            gross_profit=costs.gross_profit,
            salary_costs=costs.salary_costs,
            fixed_costs=costs.fixed_costs,
            variable_costs=costs.variable_costs,
            total_opex=costs.total_opex,
            headcount=calculate_headcount(month_index, hiring_plan, overrides),
        ))

        if cash > 0 >= ending_cash:
            logger.info("Cash exhausted in %s (month %d) for %s", month, month_index, company.name)

        cash = ending_cash
        active = customers.active_customers

    return projections


def run_scenario(
    model_input: FinancialModelInput,
    *,
    scenario_name: Optional[ScenarioType] = None,
    config: ProjectionConfig = ProjectionConfig(),
) -> ScenarioResult:
    """
    Run one scenario end to end.

    Parameters
    ----------
    model_input : FinancialModelInput
        Company, base assumptions, hiring plan and optional scenario overrides.
    scenario_name : ScenarioType, optional
        Label carried into the summary. Defaults to config.default_scenario.
    config : ProjectionConfig
        Engine settings; only default_scenario is read here.

    Returns
    -------
    ScenarioResult with the monthly projections and their summary. The
    summary reads churn and payback from the base assumptions.
    """
    if scenario_name is None:
        scenario_name = config.default_scenario
    logger.debug(
        "Running %s scenario for %s: %d months from %s",
        scenario_name.value,
        model_input.company.name,
        model_input.assumptions.months,
        model_input.assumptions.start_month,
    )
    projections = project_months(model_input)
    summary = summarize_projections(
        projections, model_input.assumptions, scenario_name=scenario_name
    )
    result = ScenarioResult(projections=tuple(projections), summary=summary)
    logger.debug("%s scenario produced %d months", scenario_name.value, result.months)
    return result


def run_scenarios(
    model_input: FinancialModelInput,
    scenarios: Mapping[Union[ScenarioType, str], Optional[ScenarioOverrides]],
) -> Dict[str, ScenarioResult]:
    """
    Run several override sets against the same company, assumptions and plan.

    Any scenario_overrides already on model_input are replaced by each entry
    of `scenarios`. String keys match ScenarioType values case-insensitively
    and anything else is labelled CUSTOM in its summary. Results keep the
    order of `scenarios`.
    """
    results: Dict[str, ScenarioResult] = {}
    for name, overrides in scenarios.items():
        key = name.value if isinstance(name, ScenarioType) else str(name)
        try:
            scenario_type = ScenarioType(key.upper())
        except ValueError:
            scenario_type = ScenarioType.CUSTOM
        results[key] = run_scenario(
            replace(model_input, scenario_overrides=overrides),
            scenario_name=scenario_type,
        )
    return results
