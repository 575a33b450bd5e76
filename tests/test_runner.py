from dataclasses import replace

import pytest

from core.config import ProjectionConfig
from core.schema import (
    Department,
    FinancialModelInput,
    HiringPlanItem,
    MonthlyOverride,
    ScenarioOverrides,
    ScenarioType,
)
from engine.runner import implied_starting_customers, project_months, run_scenario, run_scenarios
from scenarios.presets import SCENARIO_PRESETS, get_scenario_preset


def test_reference_scenario_month_zero(model_input):
    result = run_scenario(model_input)
    m0 = result.projections[0]

    assert implied_starting_customers(model_input.company, model_input.assumptions) == 100.0
    assert m0.month == "2024-01"
    assert m0.month_index == 0
    assert m0.starting_cash == 500_000.0
    # 100 implied customers + 10 new - 5 churned
    assert m0.active_customers == pytest.approx(105.0)
    assert m0.mrr == pytest.approx(105 * 100 * 1.05)
    assert m0.revenue == m0.mrr
    assert m0.salary_costs == pytest.approx(30_000.0)
    assert m0.headcount == 3

    expected_opex = m0.mrr * 0.2 + m0.mrr * 0.1 + 15_000 + 30_000
    assert m0.total_opex == pytest.approx(expected_opex)
    assert m0.net_burn == pytest.approx(expected_opex - m0.mrr)
    assert m0.ending_cash == pytest.approx(500_000 - m0.net_burn)
    assert m0.runway_months == pytest.approx(m0.ending_cash / m0.net_burn)


def test_reference_scenario_sales_hires_start_in_month_six(model_input):
    projections = run_scenario(model_input).projections
    assert projections[5].salary_costs == pytest.approx(30_000.0)
    assert projections[6].salary_costs == pytest.approx(46_000.0)
    assert projections[6].headcount == 5
    assert projections[6].month == "2024-07"


def test_length_matches_horizon(model_input):
    for months in (1, 6, 24, 60):
        mi = replace(model_input, assumptions=replace(model_input.assumptions, months=months))
        assert len(run_scenario(mi).projections) == months


def test_month_labels_are_consecutive(model_input):
    projections = run_scenario(model_input).projections
    assert projections[11].month == "2024-12"
    assert projections[12].month == "2025-01"
    assert projections[-1].month == "2025-12"


def test_cash_threads_month_to_month(model_input):
    projections = run_scenario(model_input).projections
    for prev, cur in zip(projections, projections[1:]):
        assert cur.starting_cash == prev.ending_cash
        assert cur.month_index == prev.month_index + 1


def test_deterministic(model_input):
    assert run_scenario(model_input) == run_scenario(model_input)


def test_empty_overrides_match_no_overrides(model_input):
    with_empty = replace(model_input, scenario_overrides=ScenarioOverrides())
    assert run_scenario(with_empty) == run_scenario(model_input)


def test_active_customers_never_negative(model_input):
    harsh = replace(
        model_input,
        assumptions=replace(model_input.assumptions, churn_rate=1.0, expected_new_customers_per_month=0),
    )
    for p in run_scenario(harsh).projections:
        assert p.active_customers >= 0


def test_runway_sentinels(model_input):
    # starts profitable, then cash is drained by a large month-5 fixed cost
    overrides = ScenarioOverrides(
        custom_monthly_overrides=(MonthlyOverride(month_offset=5, fixed_costs=5_000_000),),
    )
    mi = FinancialModelInput(
        company=replace(model_input.company, starting_mrr=200_000.0),
        assumptions=model_input.assumptions,
        hiring_plan=(),
        scenario_overrides=overrides,
    )
    projections = run_scenario(mi).projections

    assert projections[0].net_burn < 0
    assert projections[0].runway_months is None
    for p in projections:
        if p.ending_cash <= 0:
            assert p.runway_months == 0
        elif p.net_burn <= 0:
            assert p.runway_months is None
        else:
            assert p.runway_months == pytest.approx(p.ending_cash / p.net_burn)
    assert projections[5].ending_cash <= 0
    assert projections[5].runway_months == 0


def test_runs_full_horizon_after_cash_runs_out(model_input):
    broke = replace(model_input, company=replace(model_input.company, starting_cash=10_000.0))
    result = run_scenario(broke)
    assert len(result.projections) == 24
    assert result.summary.zero_cash_month == "2024-01"
    assert all(p.ending_cash < 0 for p in result.projections)


def test_headcount_monotonic_without_delay(model_input):
    plan = model_input.hiring_plan + (
        HiringPlanItem(3, "Designer", 1, 7_000.0, Department.PRODUCT),
        HiringPlanItem(12, "CSM", 2, 6_000.0, Department.CUSTOMER_SUCCESS),
    )
    projections = run_scenario(replace(model_input, hiring_plan=plan)).projections
    headcounts = [p.headcount for p in projections]
    assert headcounts == sorted(headcounts)
    assert headcounts[0] == 3
    assert headcounts[-1] == 8


def test_custom_fixed_costs_override_month_three(model_input):
    overrides = ScenarioOverrides(
        custom_monthly_overrides=(MonthlyOverride(month_offset=3, fixed_costs=0),),
    )
    projections = run_scenario(replace(model_input, scenario_overrides=overrides)).projections
    assert projections[3].fixed_costs == 0
    assert projections[2].fixed_costs == 15_000.0
    assert projections[4].fixed_costs == 15_000.0


def test_fixed_costs_multiplier_does_not_touch_custom_override(model_input):
    overrides = ScenarioOverrides(
        fixed_costs_multiplier=2.0,
        custom_monthly_overrides=(MonthlyOverride(month_offset=1, fixed_costs=1_000),),
    )
    projections = run_scenario(replace(model_input, scenario_overrides=overrides)).projections
    assert projections[0].fixed_costs == pytest.approx(30_000.0)
    assert projections[1].fixed_costs == 1_000.0


def test_starting_customers_use_base_arpu(model_input):
    overrides = ScenarioOverrides(arpu_multiplier=2.0)
    projections = run_scenario(replace(model_input, scenario_overrides=overrides)).projections
    # 100 customers derived from base ARPU; revenue priced at the scenario ARPU
    assert projections[0].active_customers == pytest.approx(105.0)
    assert projections[0].mrr == pytest.approx(105 * 200 * 1.05)


def test_zero_arpu_starts_with_no_customers(model_input):
    free = replace(model_input, assumptions=replace(model_input.assumptions, arpu=0.0))
    assert implied_starting_customers(free.company, free.assumptions) == 0.0
    m0 = project_months(free)[0]
    assert m0.active_customers == pytest.approx(10.0)
    assert m0.mrr == 0.0


def test_summary_uses_base_assumptions(model_input):
    overrides = ScenarioOverrides(churn_rate_adjustment=0.05)
    result = run_scenario(replace(model_input, scenario_overrides=overrides))
    mean_mrr = sum(p.mrr for p in result.projections) / len(result.projections)
    assert result.summary.ltv == pytest.approx(mean_mrr / 0.05)
    assert result.summary.cac_payback_months == 12


def test_run_scenarios(model_input):
    results = run_scenarios(model_input, {
        ScenarioType.BASE: None,
        ScenarioType.OPTIMISTIC: SCENARIO_PRESETS[ScenarioType.OPTIMISTIC],
        ScenarioType.PESSIMISTIC: SCENARIO_PRESETS[ScenarioType.PESSIMISTIC],
        "Hiring freeze": ScenarioOverrides(hiring_delay_months=60),
    })

    assert list(results) == ["BASE", "OPTIMISTIC", "PESSIMISTIC", "Hiring freeze"]
    assert results["BASE"] == run_scenario(model_input)
    assert results["OPTIMISTIC"].summary.scenario_name == ScenarioType.OPTIMISTIC
    assert results["Hiring freeze"].summary.scenario_name == ScenarioType.CUSTOM
    assert results["Hiring freeze"].summary.ending_headcount == 0

    base_mrr = results["BASE"].summary.ending_mrr
    assert results["OPTIMISTIC"].summary.ending_mrr > base_mrr
    assert results["PESSIMISTIC"].summary.ending_mrr < base_mrr


def test_run_scenarios_matches_string_keys_case_insensitively(model_input):
    results = run_scenarios(model_input, {
        "optimistic": get_scenario_preset("optimistic"),
        "Pessimistic": get_scenario_preset("pessimistic"),
    })

    assert list(results) == ["optimistic", "Pessimistic"]
    assert results["optimistic"].summary.scenario_name == ScenarioType.OPTIMISTIC
    assert results["Pessimistic"].summary.scenario_name == ScenarioType.PESSIMISTIC


def test_run_scenario_label_defaults_from_config(model_input):
    assert run_scenario(model_input).summary.scenario_name == ScenarioType.BASE

    config = ProjectionConfig(default_scenario=ScenarioType.CUSTOM)
    result = run_scenario(model_input, config=config)
    assert result.summary.scenario_name == ScenarioType.CUSTOM

    explicit = run_scenario(model_input, scenario_name=ScenarioType.PESSIMISTIC, config=config)
    assert explicit.summary.scenario_name == ScenarioType.PESSIMISTIC


def test_scenario_result_months(model_input):
    result = run_scenario(model_input)
    assert result.months == model_input.assumptions.months == len(result.projections)
