"""
Core package: domain types, configuration, and shared month/number utilities.
No business logic lives here.
"""

from .schema import (
    PROJECTION_COLUMNS,
    AssumptionSet,
    CompanySector,
    CompanyStage,
    CompanyState,
    Department,
    FinancialModelInput,
    HiringPlanItem,
    MonthlyOverride,
    PricingModel,
    ScenarioOverrides,
    ScenarioType,
)
from .records import MonthlyProjection, ProjectionSummary, ScenarioResult
from .config import ProjectionConfig, SanityThresholds
from .utils import add_months, format_month, month_difference, parse_month

__all__ = [
    "PROJECTION_COLUMNS",
    "AssumptionSet",
    "CompanySector",
    "CompanyStage",
    "CompanyState",
    "Department",
    "FinancialModelInput",
    "HiringPlanItem",
    "MonthlyOverride",
    "PricingModel",
    "ScenarioOverrides",
    "ScenarioType",
    "MonthlyProjection",
    "ProjectionSummary",
    "ScenarioResult",
    "ProjectionConfig",
    "SanityThresholds",
    "add_months",
    "format_month",
    "month_difference",
    "parse_month",
]
