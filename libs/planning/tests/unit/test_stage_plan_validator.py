"""Stage Plan Validator Unit Tests"""

import math

import pytest

from libs.planning.src.domain.services.stage_plan_validator import (
    validate_stage_plan,
)
from libs.shared.src.errors.invalid_stage_plan_error import InvalidStagePlanError


class TestValidateStagePlan:
    """Collaborator-authored stage lists"""

    def test_valid_plan_normalized_to_float(self) -> None:
        stages = validate_stage_plan(
            [{"percentage": 40, "multiplier": 2}, {"percentage": 60, "multiplier": 5}]
        )

        assert stages == [
            {"percentage": 40.0, "multiplier": 2.0},
            {"percentage": 60.0, "multiplier": 5.0},
        ]
        assert all(isinstance(s["percentage"], float) for s in stages)

    def test_sum_within_tolerance(self) -> None:
        stages = validate_stage_plan(
            [{"percentage": 33.33, "multiplier": 2}] * 3
        )

        assert len(stages) == 3

    @pytest.mark.parametrize(
        "raw",
        [
            None,
            "stages",
            {"percentage": 100, "multiplier": 2},
            [],
            ["stage"],
            [{"percentage": "50", "multiplier": 2}, {"percentage": 50, "multiplier": 2}],
            [{"percentage": 100, "multiplier": True}],
            [{"percentage": 100}],
            [{"percentage": 100, "multiplier": math.inf}],
            [{"percentage": math.nan, "multiplier": 2}],
            [{"percentage": 0, "multiplier": 2}, {"percentage": 100, "multiplier": 2}],
            [{"percentage": 101, "multiplier": 2}],
            [{"percentage": 100, "multiplier": 0}],
            [{"percentage": 100, "multiplier": -1}],
            [{"percentage": 50, "multiplier": 2}, {"percentage": 40, "multiplier": 3}],
        ],
    )
    def test_invalid_plan_rejected(self, raw) -> None:
        with pytest.raises(InvalidStagePlanError):
            validate_stage_plan(raw)

    def test_partial_allocation_allowed(self) -> None:
        """Moon-style plans may hold a remainder"""
        stages = validate_stage_plan(
            [{"percentage": 25, "multiplier": 5}], require_full_allocation=False
        )

        assert stages == [{"percentage": 25.0, "multiplier": 5.0}]

    def test_partial_allocation_empty(self) -> None:
        assert validate_stage_plan([], require_full_allocation=False) == []

    def test_partial_allocation_over_100(self) -> None:
        with pytest.raises(InvalidStagePlanError):
            validate_stage_plan(
                [{"percentage": 60, "multiplier": 2}, {"percentage": 60, "multiplier": 3}],
                require_full_allocation=False,
            )

    def test_error_code(self) -> None:
        with pytest.raises(InvalidStagePlanError) as exc_info:
            validate_stage_plan("nope")

        assert exc_info.value.code == "INVALID_STAGE_PLAN"
