"""
Reporting: summary aggregation and tabular views of projection output.
"""

from .summary import summarize_projections
from .tables import compare_scenarios, projections_to_dataframe, summary_to_dataframe

__all__ = [
    "summarize_projections",
    "compare_scenarios",
    "projections_to_dataframe",
    "summary_to_dataframe",
]
