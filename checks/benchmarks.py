"""
Stage-keyed SaaS benchmark ranges for the key unit-economics inputs.

A static lookup: stages without their own tier fall back to SEED.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Union

from core.schema import CompanyStage


@dataclass(frozen=True)
class BenchmarkRange:
    min: float
    max: float
    target: float

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


@dataclass(frozen=True)
class StageBenchmarks:
    churn_rate: BenchmarkRange      # monthly, fraction
    gross_margin: BenchmarkRange    # percent
    ltv_to_cac: BenchmarkRange
    payback_months: BenchmarkRange


DEFAULT_STAGE = CompanyStage.SEED

STAGE_BENCHMARKS: Mapping[CompanyStage, StageBenchmarks] = MappingProxyType({
    CompanyStage.PRE_SEED: StageBenchmarks(
        churn_rate=BenchmarkRange(min=0.03, max=0.10, target=0.05),
        gross_margin=BenchmarkRange(min=60, max=85, target=75),
        ltv_to_cac=BenchmarkRange(min=2, max=5, target=3),
        payback_months=BenchmarkRange(min=6, max=18, target=12),
    ),
    CompanyStage.SEED: StageBenchmarks(
        churn_rate=BenchmarkRange(min=0.02, max=0.07, target=0.04),
        gross_margin=BenchmarkRange(min=65, max=85, target=78),
        ltv_to_cac=BenchmarkRange(min=3, max=6, target=4),
        payback_months=BenchmarkRange(min=6, max=15, target=10),
    ),
    CompanyStage.SERIES_A: StageBenchmarks(
        churn_rate=BenchmarkRange(min=0.01, max=0.05, target=0.03),
        gross_margin=BenchmarkRange(min=70, max=90, target=80),
        ltv_to_cac=BenchmarkRange(min=3, max=7, target=5),
        payback_months=BenchmarkRange(min=6, max=12, target=9),
    ),
})


def get_benchmarks(stage: Union[CompanyStage, str]) -> StageBenchmarks:
    """
    Return benchmark ranges for a company stage.

    Unknown or untiered stages (e.g. SERIES_B, GROWTH) get the SEED tier.
    """
    try:
        key = CompanyStage(stage.upper() if isinstance(stage, str) else stage)
    except ValueError:
        return STAGE_BENCHMARKS[DEFAULT_STAGE]
    return STAGE_BENCHMARKS.get(key, STAGE_BENCHMARKS[DEFAULT_STAGE])
