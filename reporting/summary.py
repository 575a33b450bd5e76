"""
Reduce a monthly projection sequence into headline metrics.

  peak burn      → largest positive net burn (falls back to the last month)
  average burn   → mean over burning months only
  zero-cash      → first month whose ending cash is <= 0
  minimum runway → smallest finite monthly runway
  LTV            → mean MRR / base churn rate (None when churn is zero)
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from core.config import ProjectionConfig
from core.records import MonthlyProjection, ProjectionSummary
from core.schema import AssumptionSet, ScenarioType


def summarize_projections(
    projections: Sequence[MonthlyProjection],
    assumptions: AssumptionSet,
    *,
    scenario_name: Optional[ScenarioType] = None,
    config: ProjectionConfig = ProjectionConfig(),
) -> ProjectionSummary:
    """
    Build the ProjectionSummary for a completed run.

    Parameters
    ----------
    projections : sequence of MonthlyProjection
        Full, chronologically ordered output of the runner. Must be non-empty.
    assumptions : AssumptionSet
        The BASE (un-overridden) assumptions; churn rate and payback period
        are read from here.
    scenario_name : ScenarioType, optional
        Label carried into the summary. Defaults to config.default_scenario.
    config : ProjectionConfig
        Engine settings.
    """
    if len(projections) == 0:
        raise ValueError("Cannot generate summary from empty projections.")
    if scenario_name is None:
        scenario_name = config.default_scenario

    first = projections[0]
    last = projections[-1]

    burning = [p for p in projections if p.net_burn > 0]

    # max() keeps the earliest month on ties
    peak = max(burning, key=lambda p: p.net_burn) if burning else last

    burns = np.array([p.net_burn for p in burning], dtype=float)
    avg_monthly_burn = float(burns.mean()) if burns.size > 0 else 0.0
    total_cash_burned = float(burns.sum()) if burns.size > 0 else 0.0

    zero_cash_month = next((p.month for p in projections if p.ending_cash <= 0), None)

    runways = [p.runway_months for p in projections if p.runway_months is not None]
    min_runway = float(min(runways)) if runways else None

    if first.mrr > 0:
        mrr_growth = (last.mrr - first.mrr) / first.mrr * 100.0
    else:
        mrr_growth = 0.0

    mrr = np.array([p.mrr for p in projections], dtype=float)
    ltv = float(mrr.mean()) / assumptions.churn_rate if assumptions.churn_rate > 0 else None

    return ProjectionSummary(
        scenario_name=scenario_name,
        starting_mrr=first.mrr,
        ending_mrr=last.mrr,
        mrr_growth_percent=mrr_growth,
        peak_burn=peak.net_burn,
        peak_burn_month=peak.month,
        avg_monthly_burn=avg_monthly_burn,
        starting_cash=first.starting_cash,
        ending_cash=last.ending_cash,
        total_cash_burned=total_cash_burned,
        zero_cash_month=zero_cash_month,
        min_runway=min_runway,
        total_revenue=float(sum(p.revenue for p in projections)),
        starting_headcount=first.headcount,
        ending_headcount=last.headcount,
        ltv=ltv,
        cac_payback_months=assumptions.payback_period_months,
    )
