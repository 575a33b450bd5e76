"""
Data preparation: schema validation of raw inputs and file loaders.
"""

from .loader import load_hiring_plan_csv, load_model_input, parse_model_input
from .schemas import (
    AssumptionSetSchema,
    CompanySchema,
    HiringPlanItemSchema,
    ModelInputSchema,
    ScenarioOverridesSchema,
)

__all__ = [
    "load_hiring_plan_csv",
    "load_model_input",
    "parse_model_input",
    "AssumptionSetSchema",
    "CompanySchema",
    "HiringPlanItemSchema",
    "ModelInputSchema",
    "ScenarioOverridesSchema",
]
