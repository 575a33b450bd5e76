"""
Engine configuration.
Benchmark cutoffs used by the sanity checker live in SanityThresholds.
"""

from __future__ import annotations

from dataclasses import dataclass

from .schema import ScenarioType


@dataclass(frozen=True)
class ProjectionConfig:
    # horizon bounds accepted by the input schemas
    min_months: int = 1
    max_months: int = 60

    default_scenario: ScenarioType = ScenarioType.BASE


@dataclass(frozen=True)
class SanityThresholds:
    """Heuristic SaaS cutoffs. Monthly rates, months, and percent (0..100)."""

    high_churn_rate: float = 0.15
    low_arpu: float = 10.0

    min_ltv_to_cac: float = 3.0
    max_payback_months: int = 24

    min_gross_margin_percent: float = 50.0

    # estimated runway in months
    critical_runway_months: float = 6.0
    warning_runway_months: float = 12.0
