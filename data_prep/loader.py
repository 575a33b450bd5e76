from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import pandas as pd

from core.schema import FinancialModelInput, HiringPlanItem
from core.utils import require_columns

from .schemas import HiringPlanItemSchema, ModelInputSchema

logger = logging.getLogger(__name__)

HIRING_PLAN_COLUMNS = (
    "month_offset",
    "role_name",
    "count",
    "monthly_salary_per_head",
    "department",
)


def parse_model_input(payload: Dict[str, Any]) -> FinancialModelInput:
    """Validate a decoded payload (camelCase or snake_case keys) into engine input."""
    return ModelInputSchema.model_validate(payload).to_model_input()


def load_model_input(path: Union[str, Path]) -> FinancialModelInput:
    """
    Load a JSON document holding company, assumptions, hiring plan and
    optional scenario overrides.
    """
    raw = Path(path).read_text(encoding="utf-8")
    model_input = ModelInputSchema.model_validate(json.loads(raw)).to_model_input()
    logger.info(
        "Loaded model input for %s from %s (%d hiring plan items)",
        model_input.company.name, path, len(model_input.hiring_plan),
    )
    return model_input


def load_hiring_plan_csv(path: Union[str, Path]) -> List[HiringPlanItem]:
    """
    Load a hiring plan from CSV. Expected columns: month_offset, role_name,
    count, monthly_salary_per_head, department. Rows are returned sorted by
    month_offset.
    """
    df = pd.read_csv(path)
    require_columns(df, HIRING_PLAN_COLUMNS)

    df = df.sort_values("month_offset", kind="stable")
    items = [
        HiringPlanItemSchema.model_validate(row).to_domain()
        for row in df[list(HIRING_PLAN_COLUMNS)].to_dict(orient="records")
    ]
    logger.debug("Loaded %d hiring plan items from %s", len(items), path)
    return items
