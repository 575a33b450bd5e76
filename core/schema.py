"""
Domain types for the projection engine.

Inputs (company, assumptions, hiring plan, scenario overrides) are immutable
value objects. The engine never mutates them; scenario overlays produce new
instances via dataclasses.replace().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class CompanyStage(str, Enum):
    PRE_SEED = "PRE_SEED"
    SEED = "SEED"
    SERIES_A = "SERIES_A"
    SERIES_B = "SERIES_B"
    GROWTH = "GROWTH"


class CompanySector(str, Enum):
    SAAS = "SAAS"
    FINTECH = "FINTECH"
    MARKETPLACE = "MARKETPLACE"
    ECOMMERCE = "ECOMMERCE"
    HEALTHTECH = "HEALTHTECH"
    OTHER = "OTHER"


class PricingModel(str, Enum):
    SUBSCRIPTION = "SUBSCRIPTION"
    USAGE_BASED = "USAGE_BASED"
    FREEMIUM = "FREEMIUM"
    TRANSACTIONAL = "TRANSACTIONAL"
    HYBRID = "HYBRID"


class Department(str, Enum):
    ENGINEERING = "ENGINEERING"
    PRODUCT = "PRODUCT"
    SALES = "SALES"
    MARKETING = "MARKETING"
    CUSTOMER_SUCCESS = "CUSTOMER_SUCCESS"
    OPERATIONS = "OPERATIONS"
    G_AND_A = "G_AND_A"


class ScenarioType(str, Enum):
    BASE = "BASE"
    OPTIMISTIC = "OPTIMISTIC"
    PESSIMISTIC = "PESSIMISTIC"
    CUSTOM = "CUSTOM"


@dataclass(frozen=True)
class CompanyState:
    """Starting position of the company at the first projected month."""
    name: str
    stage: CompanyStage
    sector: CompanySector
    country: str
    currency: str
    starting_cash: float
    starting_mrr: float
    current_headcount: int


@dataclass(frozen=True)
class AssumptionSet:
    """
    Growth and cost assumptions for one modeling exercise.

    Rates are fractions in [0, 1] except gross_margin_percent, which is 0..100.
    """
    name: str
    start_month: str  # YYYY-MM
    months: int
    pricing_model: PricingModel

    # Revenue
    arpu: float
    expected_new_customers_per_month: float
    expansion_revenue_rate: float
    churn_rate: float

    # Acquisition
    cac: float
    payback_period_months: int

    # Costs
    gross_margin_percent: float
    fixed_costs_per_month: float
    variable_cost_percent_of_revenue: float


@dataclass(frozen=True)
class HiringPlanItem:
    """A batch of hires; active from month_offset until the end of the horizon."""
    month_offset: int
    role_name: str
    count: int
    monthly_salary_per_head: float
    department: Department


@dataclass(frozen=True)
class MonthlyOverride:
    """Exact values for a single month; None means use the formula."""
    month_offset: int
    new_customers: Optional[float] = None
    fixed_costs: Optional[float] = None


@dataclass(frozen=True)
class ScenarioOverrides:
    """
    Adjustments layered onto an AssumptionSet. Every field is optional; an
    absent field leaves the base value untouched.

    Multipliers scale, adjustments add. customer_growth_multiplier,
    hiring_delay_months, salary_multiplier and custom_monthly_overrides are
    read per month by the engine instead of being folded into the
    effective assumptions.
    """

    # Growth
    customer_growth_multiplier: Optional[float] = None

    # Revenue
    arpu_multiplier: Optional[float] = None
    churn_rate_adjustment: Optional[float] = None
    expansion_revenue_rate_adjustment: Optional[float] = None

    # Costs
    gross_margin_adjustment: Optional[float] = None
    fixed_costs_multiplier: Optional[float] = None
    variable_cost_multiplier: Optional[float] = None

    # Hiring
    hiring_delay_months: Optional[int] = None
    salary_multiplier: Optional[float] = None

    custom_monthly_overrides: Tuple[MonthlyOverride, ...] = field(default_factory=tuple)

    def monthly_override(self, month_index: int) -> Optional[MonthlyOverride]:
        """First custom override registered for month_index, if any."""
        for override in self.custom_monthly_overrides:
            if override.month_offset == month_index:
                return override
        return None


@dataclass(frozen=True)
class FinancialModelInput:
    """Everything one simulation run needs."""
    company: CompanyState
    assumptions: AssumptionSet
    hiring_plan: Tuple[HiringPlanItem, ...] = ()
    scenario_overrides: Optional[ScenarioOverrides] = None


# Column order for tabular views of monthly projections.
PROJECTION_COLUMNS: Tuple[str, ...] = (
    "month",
    "month_index",
    "starting_cash",
    "ending_cash",
    "net_burn",
    "runway_months",
    "new_customers",
    "churned_customers",
    "active_customers",
    "mrr",
    "revenue",
    "cogs",
    "gross_profit",
    "salary_costs",
    "fixed_costs",
    "variable_costs",
    "total_opex",
    "headcount",
)
