"""
Input schemas: structural validation of payloads before they reach the engine.

The engine assumes bounds are already enforced; these pydantic models are
where that happens. Field names accept both snake_case and the camelCase used
by API payloads (startingCash, churnRate, customMonthlyOverrides, ...).
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from core.config import ProjectionConfig
from core.schema import (
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
)

_CONFIG = ProjectionConfig()


class _InputModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )


class CompanySchema(_InputModel):
    name: str = Field(..., min_length=1, max_length=100)
    stage: CompanyStage
    sector: CompanySector
    country: str = Field(..., min_length=2, max_length=2)
    currency: str = Field(..., min_length=3, max_length=3)
    starting_cash: float = Field(..., ge=0)
    starting_mrr: float = Field(..., ge=0, alias="startingMRR")
    current_headcount: int = Field(..., ge=0)

    def to_domain(self) -> CompanyState:
        return CompanyState(**self.model_dump())


class AssumptionSetSchema(_InputModel):
    name: str = Field(..., min_length=1, max_length=100)
    start_month: str = Field(..., pattern=r"^\d{4}-(0[1-9]|1[0-2])$")
    months: int = Field(..., ge=_CONFIG.min_months, le=_CONFIG.max_months)
    pricing_model: PricingModel

    arpu: float = Field(..., ge=0)
    expected_new_customers_per_month: float = Field(..., ge=0)
    expansion_revenue_rate: float = Field(..., ge=0, le=1)
    churn_rate: float = Field(..., ge=0, le=1)

    cac: float = Field(..., ge=0)
    payback_period_months: int = Field(..., ge=0)

    gross_margin_percent: float = Field(..., ge=0, le=100)
    fixed_costs_per_month: float = Field(..., ge=0)
    variable_cost_percent_of_revenue: float = Field(..., ge=0, le=1)

    def to_domain(self) -> AssumptionSet:
        return AssumptionSet(**self.model_dump())


class HiringPlanItemSchema(_InputModel):
    month_offset: int = Field(..., ge=0)
    role_name: str = Field(..., min_length=1, max_length=100)
    count: int = Field(..., ge=1)
    monthly_salary_per_head: float = Field(..., ge=0)
    department: Department

    def to_domain(self) -> HiringPlanItem:
        return HiringPlanItem(**self.model_dump())


class MonthlyOverrideSchema(_InputModel):
    month_offset: int
    new_customers: Optional[float] = None
    fixed_costs: Optional[float] = None


class ScenarioOverridesSchema(_InputModel):
    customer_growth_multiplier: Optional[float] = None
    arpu_multiplier: Optional[float] = None
    churn_rate_adjustment: Optional[float] = None
    expansion_revenue_rate_adjustment: Optional[float] = None
    gross_margin_adjustment: Optional[float] = None
    fixed_costs_multiplier: Optional[float] = None
    variable_cost_multiplier: Optional[float] = None
    hiring_delay_months: Optional[int] = None
    salary_multiplier: Optional[float] = None
    custom_monthly_overrides: List[MonthlyOverrideSchema] = Field(default_factory=list)

    def to_domain(self) -> ScenarioOverrides:
        data = self.model_dump(exclude={"custom_monthly_overrides"})
        monthly = tuple(MonthlyOverride(**o.model_dump()) for o in self.custom_monthly_overrides)
        return ScenarioOverrides(custom_monthly_overrides=monthly, **data)


class ModelInputSchema(_InputModel):
    company: CompanySchema
    assumptions: AssumptionSetSchema
    hiring_plan: List[HiringPlanItemSchema] = Field(default_factory=list)
    scenario_overrides: Optional[ScenarioOverridesSchema] = None

    def to_model_input(self) -> FinancialModelInput:
        return FinancialModelInput(
            company=self.company.to_domain(),
            assumptions=self.assumptions.to_domain(),
            hiring_plan=tuple(item.to_domain() for item in self.hiring_plan),
            scenario_overrides=(
                self.scenario_overrides.to_domain() if self.scenario_overrides is not None else None
            ),
        )
