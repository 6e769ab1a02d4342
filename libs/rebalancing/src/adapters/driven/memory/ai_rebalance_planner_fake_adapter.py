"""AI Rebalance Planner Fake Adapter"""

from typing import Any

from libs.rebalancing.src.ports.ai_rebalance_planner_port import (
    AiRebalancePlannerPort,
)
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO
from libs.shared.src.enums.rebalance_goal import RebalanceGoal


class AiRebalancePlannerFakeAdapter(AiRebalancePlannerPort):
    """Returns a canned plan"""

    def __init__(self) -> None:
        self._plan: Any = {"sells": [], "buy": None, "rationale": "Hold."}
        self._error: Exception | None = None
        self.calls: list[RebalanceGoal] = []

    def set_plan(self, plan: Any) -> None:
        self._plan = plan

    def set_error(self, error: Exception) -> None:
        self._error = error

    def generate_rebalance_plan(
        self, tokens: list[TokenSnapshotDTO], goal: RebalanceGoal
    ) -> dict[str, Any]:
        self.calls.append(goal)
        if self._error is not None:
            raise self._error
        return self._plan
