"""
Tabular views of projection output for exporters and notebooks.
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

import pandas as pd

from core.records import MonthlyProjection, ProjectionSummary, ScenarioResult
from core.schema import PROJECTION_COLUMNS
from core.utils import format_currency, format_percentage


def projections_to_dataframe(projections: Sequence[MonthlyProjection]) -> pd.DataFrame:
    """One row per month in PROJECTION_COLUMNS order; undefined runway is NaN."""
    df = pd.DataFrame([p.to_dict() for p in projections], columns=list(PROJECTION_COLUMNS))
    df["runway_months"] = pd.to_numeric(df["runway_months"], errors="coerce")
    return df


def _months(value: Optional[float]) -> str:
    return "N/A" if value is None else f"{value:.1f}"


def summary_to_dataframe(summary: ProjectionSummary, *, currency: str = "USD") -> pd.DataFrame:
    """Display-friendly Metric / Value table for a summary."""
    def money(v: float) -> str:
        return format_currency(v, currency)

    rows = [
        {"Metric": "Scenario", "Value": summary.scenario_name.value},
        {"Metric": "Starting MRR", "Value": money(summary.starting_mrr)},
        {"Metric": "Ending MRR", "Value": money(summary.ending_mrr)},
        {"Metric": "MRR Growth", "Value": format_percentage(summary.mrr_growth_percent)},
        {"Metric": "Starting Cash", "Value": money(summary.starting_cash)},
        {"Metric": "Ending Cash", "Value": money(summary.ending_cash)},
        {"Metric": "Total Cash Burned", "Value": money(summary.total_cash_burned)},
        {"Metric": "Peak Monthly Burn", "Value": money(summary.peak_burn)},
        {"Metric": "Peak Burn Month", "Value": summary.peak_burn_month},
        {"Metric": "Avg Monthly Burn", "Value": money(summary.avg_monthly_burn)},
        {"Metric": "Zero Cash Month", "Value": summary.zero_cash_month or "N/A"},
        {"Metric": "Min Runway (months)", "Value": _months(summary.min_runway)},
        {"Metric": "Total Revenue", "Value": money(summary.total_revenue)},
        {"Metric": "Starting Headcount", "Value": str(summary.starting_headcount)},
        {"Metric": "Ending Headcount", "Value": str(summary.ending_headcount)},
        {"Metric": "LTV", "Value": "N/A" if summary.ltv is None else money(summary.ltv)},
        {"Metric": "CAC Payback (months)", "Value": str(summary.cac_payback_months)},
    ]
    return pd.DataFrame(rows)


def compare_scenarios(results: Mapping[str, ScenarioResult]) -> pd.DataFrame:
    """
    Side-by-side headline metrics, one row per scenario (in mapping order).

    Numeric columns stay numeric; undefined values are NaN / None.
    """
    rows = []
    for name, result in results.items():
        s = result.summary
        rows.append({
            "scenario": name,
            "ending_mrr": s.ending_mrr,
            "mrr_growth_percent": s.mrr_growth_percent,
            "ending_cash": s.ending_cash,
            "total_cash_burned": s.total_cash_burned,
            "peak_burn": s.peak_burn,
            "zero_cash_month": s.zero_cash_month,
            "min_runway": s.min_runway,
            "ending_headcount": s.ending_headcount,
            "ltv": s.ltv,
        })
    df = pd.DataFrame(rows)
    if not df.empty:
        for col in ["min_runway", "ltv"]:
            df[col] = pd.to_numeric(df[col], errors="coerce")
    return df
