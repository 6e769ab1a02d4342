"""AI Rebalance Planner Port"""

from typing import Any, Protocol, runtime_checkable

from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO
from libs.shared.src.enums.rebalance_goal import RebalanceGoal


@runtime_checkable
class AiRebalancePlannerPort(Protocol):
    """AI Rebalance Planner Port

    Authors up to three sells and one buy for a goal. Output is untrusted
    and is validated before use.
    """

    def generate_rebalance_plan(
        self, tokens: list[TokenSnapshotDTO], goal: RebalanceGoal
    ) -> dict[str, Any]:
        """Generate a rebalance plan

        Args:
            tokens: Portfolio holdings (at least two)
            goal: Primary rebalancing goal

        Returns:
            dict: {"sells": [{"symbol", "percentage"}], "buy": {"symbol"} | None,
                "rationale": str}
        """
        ...
