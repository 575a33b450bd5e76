from dataclasses import replace

import pandas as pd

from core.schema import PROJECTION_COLUMNS, ScenarioType
from engine.runner import run_scenario, run_scenarios
from reporting.tables import compare_scenarios, projections_to_dataframe, summary_to_dataframe
from scenarios.presets import SCENARIO_PRESETS


def test_projections_to_dataframe(model_input):
    result = run_scenario(model_input)
    df = projections_to_dataframe(result.projections)

    assert list(df.columns) == list(PROJECTION_COLUMNS)
    assert len(df) == 24
    assert df.loc[6, "salary_costs"] == 46_000.0
    assert df["month"].iloc[-1] == "2025-12"


def test_undefined_runway_becomes_nan(model_input):
    rich = replace(model_input, company=replace(model_input.company, starting_mrr=500_000.0))
    df = projections_to_dataframe(run_scenario(rich).projections)
    assert df["runway_months"].isna().all()


def test_summary_table(model_input):
    funded = replace(
        model_input,
        company=replace(model_input.company, starting_cash=5_000_000.0),
        assumptions=replace(model_input.assumptions, churn_rate=0.0),
    )
    table = summary_to_dataframe(run_scenario(funded).summary)
    values = dict(zip(table["Metric"], table["Value"]))

    assert values["Scenario"] == "BASE"
    assert values["Starting Cash"] == "$5,000,000"
    assert values["LTV"] == "N/A"
    assert values["Zero Cash Month"] == "N/A"
    assert values["CAC Payback (months)"] == "12"


def test_compare_scenarios(model_input):
    results = run_scenarios(model_input, {
        ScenarioType.BASE: None,
        ScenarioType.PESSIMISTIC: SCENARIO_PRESETS[ScenarioType.PESSIMISTIC],
    })
    df = compare_scenarios(results)

    assert list(df["scenario"]) == ["BASE", "PESSIMISTIC"]
    assert df.loc[0, "ending_mrr"] > df.loc[1, "ending_mrr"]
    assert pd.api.types.is_float_dtype(df["ltv"])


def test_compare_scenarios_empty():
    assert compare_scenarios({}).empty
