"""
Projection engine: pure monthly calculations and the scenario runner.
"""

from .runner import implied_starting_customers, project_months, run_scenario, run_scenarios

__all__ = [
    "implied_starting_customers",
    "project_months",
    "run_scenario",
    "run_scenarios",
]
