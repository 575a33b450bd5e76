"""
Checks: heuristic sanity validation of assumptions and stage benchmarks.
"""

from .benchmarks import BenchmarkRange, StageBenchmarks, get_benchmarks
from .sanity import SanityCheckResult, SanityWarning, Severity, run_sanity_checks

__all__ = [
    "BenchmarkRange",
    "StageBenchmarks",
    "get_benchmarks",
    "SanityCheckResult",
    "SanityWarning",
    "Severity",
    "run_sanity_checks",
]
