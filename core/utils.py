from __future__ import annotations

import re
from datetime import datetime
from typing import Iterable

import numpy as np
import pandas as pd
from dateutil.relativedelta import relativedelta

_MONTH_FORMAT = "%Y-%m"
_MONTH_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")

_CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "CAD": "CA$",
}


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def parse_month(label: str) -> datetime:
    """Parse a YYYY-MM label into the first day of that month."""
    if not isinstance(label, str) or not _MONTH_RE.fullmatch(label):
        raise ValueError(f"Invalid month label {label!r}; expected YYYY-MM")
    return datetime.strptime(label, _MONTH_FORMAT)


def format_month(date: datetime) -> str:
    return date.strftime(_MONTH_FORMAT)


def add_months(start_month: str, months_to_add: int) -> str:
    """Calendar month arithmetic on YYYY-MM labels ("2024-11" + 3 -> "2025-02")."""
    return format_month(parse_month(start_month) + relativedelta(months=months_to_add))


def month_difference(start: str, end: str) -> int:
    """Whole months from start to end (negative if end precedes start)."""
    s = parse_month(start)
    e = parse_month(end)
    return (e.year - s.year) * 12 + (e.month - s.month)


def clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


def round_half_away(x, decimals: int = 2):
    """Round half away from zero (vectorized); 2.345 -> 2.35, -2.345 -> -2.35."""
    m = 10 ** decimals
    arr = np.asarray(x, dtype=float)
    out = np.sign(arr) * (np.floor(np.abs(arr) * m + 0.5) / m)
    if out.ndim == 0:
        return float(out)
    return out


def percentage_change(old_value: float, new_value: float) -> float:
    if old_value == 0:
        return 100.0 if new_value > 0 else 0.0
    return (new_value - old_value) / old_value * 100.0


def _compact(abs_value: float) -> str:
    if abs_value >= 1_000_000:
        return f"{abs_value / 1_000_000:.1f}M"
    return f"{abs_value / 1_000:.1f}K"


def format_currency(amount: float, currency: str = "USD", compact: bool = False) -> str:
    """
    Whole-unit currency string: 12500 -> "$12,500", compact -> "$12.5K".
    Unknown currency codes are rendered as a "XXX " prefix.
    """
    symbol = _CURRENCY_SYMBOLS.get(currency.upper(), f"{currency.upper()} ")
    sign = "-" if amount < 0 else ""
    abs_amount = abs(amount)
    if compact and abs_amount >= 1000:
        return f"{sign}{symbol}{_compact(abs_amount)}"
    whole = int(round_half_away(abs_amount, 0))
    if whole == 0:
        sign = ""
    return f"{sign}{symbol}{whole:,}"


def format_percentage(value: float, decimals: int = 1) -> str:
    return f"{value:.{decimals}f}%"


def format_number(num: float) -> str:
    """Large numbers with K/M suffix: 1500 -> "1.5K", 42 -> "42"."""
    sign = "-" if num < 0 else ""
    abs_num = abs(num)
    if abs_num >= 1000:
        return f"{sign}{_compact(abs_num)}"
    return f"{sign}{abs_num:.0f}"
