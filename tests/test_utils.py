from datetime import datetime

import numpy as np
import pandas as pd
import pytest

from core.utils import (
    add_months,
    clamp,
    format_currency,
    format_month,
    format_number,
    format_percentage,
    month_difference,
    parse_month,
    percentage_change,
    require_columns,
    round_half_away,
)


def test_add_months_within_year():
    assert add_months("2024-01", 0) == "2024-01"
    assert add_months("2024-01", 5) == "2024-06"


def test_add_months_crosses_year_boundary():
    assert add_months("2024-11", 3) == "2025-02"
    assert add_months("2024-01", 24) == "2026-01"


def test_add_months_negative():
    assert add_months("2024-02", -3) == "2023-11"


def test_parse_and_format_month():
    d = parse_month("2024-07")
    assert d == datetime(2024, 7, 1)
    assert format_month(d) == "2024-07"


@pytest.mark.parametrize("bad", ["2024-13", "2024-1", "24-01", "2024/01", "", None])
def test_parse_month_rejects_malformed_labels(bad):
    with pytest.raises(ValueError):
        parse_month(bad)


def test_add_months_rejects_single_digit_month():
    with pytest.raises(ValueError):
        add_months("2024-1", 0)


def test_require_columns():
    df = pd.DataFrame({"a": [1], "b": [2]})
    require_columns(df, ["a", "b"])
    with pytest.raises(ValueError, match=r"Missing required columns: \['c'\]"):
        require_columns(df, ["a", "c"])


def test_month_difference():
    assert month_difference("2024-01", "2025-03") == 14
    assert month_difference("2025-03", "2024-01") == -14
    assert month_difference("2024-05", "2024-05") == 0


def test_format_currency():
    assert format_currency(12500) == "$12,500"
    assert format_currency(-1234.6) == "-$1,235"
    assert format_currency(999, "EUR") == "€999"
    assert format_currency(1500, compact=True) == "$1.5K"
    assert format_currency(2_300_000, compact=True) == "$2.3M"
    assert format_currency(-2_300_000, "GBP", compact=True) == "-£2.3M"
    assert format_currency(500, "CHF") == "CHF 500"


def test_format_number_and_percentage():
    assert format_number(42) == "42"
    assert format_number(1500) == "1.5K"
    assert format_number(-2_500_000) == "-2.5M"
    assert format_percentage(12.345) == "12.3%"
    assert format_percentage(5, decimals=0) == "5%"


def test_percentage_change():
    assert percentage_change(100, 150) == pytest.approx(50.0)
    assert percentage_change(200, 100) == pytest.approx(-50.0)
    assert percentage_change(0, 10) == 100.0
    assert percentage_change(0, 0) == 0.0


def test_clamp():
    assert clamp(1.4, 0, 1) == 1
    assert clamp(-0.2, 0, 1) == 0
    assert clamp(0.3, 0, 1) == 0.3


def test_round_half_away_from_zero():
    assert round_half_away(2.5, 0) == 3.0
    assert round_half_away(-2.5, 0) == -3.0
    assert round_half_away(1.005 * 1000, 0) == 1005.0
    np.testing.assert_allclose(round_half_away([0.125, -0.125], 2), [0.13, -0.13])
