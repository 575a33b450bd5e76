import pytest

from core.schema import (
    AssumptionSet,
    CompanySector,
    CompanyStage,
    CompanyState,
    Department,
    FinancialModelInput,
    HiringPlanItem,
    PricingModel,
)


@pytest.fixture
def company():
    return CompanyState(
        name="Acme Analytics",
        stage=CompanyStage.SEED,
        sector=CompanySector.SAAS,
        country="US",
        currency="USD",
        starting_cash=500_000.0,
        starting_mrr=10_000.0,
        current_headcount=3,
    )


@pytest.fixture
def assumptions():
    return AssumptionSet(
        name="Seed plan",
        start_month="2024-01",
        months=24,
        pricing_model=PricingModel.SUBSCRIPTION,
        arpu=100.0,
        expected_new_customers_per_month=10.0,
        expansion_revenue_rate=0.05,
        churn_rate=0.05,
        cac=500.0,
        payback_period_months=12,
        gross_margin_percent=80.0,
        fixed_costs_per_month=15_000.0,
        variable_cost_percent_of_revenue=0.1,
    )


@pytest.fixture
def hiring_plan():
    return (
        HiringPlanItem(
            month_offset=0,
            role_name="Engineer",
            count=3,
            monthly_salary_per_head=10_000.0,
            department=Department.ENGINEERING,
        ),
        HiringPlanItem(
            month_offset=6,
            role_name="Sales Rep",
            count=2,
            monthly_salary_per_head=8_000.0,
            department=Department.SALES,
        ),
    )


@pytest.fixture
def model_input(company, assumptions, hiring_plan):
    return FinancialModelInput(
        company=company,
        assumptions=assumptions,
        hiring_plan=hiring_plan,
    )
