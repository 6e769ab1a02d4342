"""Stage Plan Validator

Checks collaborator-authored stage lists before they reach the evaluator
"""

import math
from typing import Any

from libs.shared.src.constants.strategy_thresholds import STAGE_PLAN_SUM_TOLERANCE
from libs.shared.src.dtos.token.exit_stage_dto import ExitStageDTO
from libs.shared.src.errors.invalid_stage_plan_error import InvalidStagePlanError


def validate_stage_plan(
    raw_stages: Any, require_full_allocation: bool = True
) -> list[ExitStageDTO]:
    """
    Validate and normalize a stage list

    Args:
        raw_stages: Stage list as returned by the collaborator
        require_full_allocation: Percentages must sum to 100 (± tolerance);
            otherwise they must not exceed 100

    Returns:
        list[ExitStageDTO]: Stages with float fields

    Raises:
        InvalidStagePlanError: The list is malformed
    """
    if not isinstance(raw_stages, list):
        raise InvalidStagePlanError("'stages' must be a list")

    stages: list[ExitStageDTO] = []
    for index, raw in enumerate(raw_stages):
        if not isinstance(raw, dict):
            raise InvalidStagePlanError(f"stage {index} is not an object")

        percentage = _number(raw.get("percentage"), f"stage {index} percentage")
        multiplier = _number(raw.get("multiplier"), f"stage {index} multiplier")

        if percentage <= 0 or percentage > 100:
            raise InvalidStagePlanError(
                f"stage {index} percentage {percentage} is outside (0, 100]"
            )
        if multiplier <= 0:
            raise InvalidStagePlanError(
                f"stage {index} multiplier {multiplier} must be positive"
            )

        stages.append({"percentage": percentage, "multiplier": multiplier})

    total = sum(s["percentage"] for s in stages)
    if require_full_allocation:
        if not stages:
            raise InvalidStagePlanError("plan has no stages")
        if abs(total - 100) > STAGE_PLAN_SUM_TOLERANCE:
            raise InvalidStagePlanError(f"percentages sum to {total:.2f}, not 100")
    elif total > 100 + STAGE_PLAN_SUM_TOLERANCE:
        raise InvalidStagePlanError(f"percentages sum to {total:.2f}, over 100")

    return stages


def _number(value: Any, field: str) -> float:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidStagePlanError(f"{field} is not numeric")
    if not math.isfinite(value):
        raise InvalidStagePlanError(f"{field} is not finite")
    return float(value)
