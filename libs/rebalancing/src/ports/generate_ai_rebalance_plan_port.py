"""Generate AI Rebalance Plan Driving Port"""

from typing import Protocol

from libs.shared.src.dtos.rebalancing.ai_rebalance_plan_dto import AiRebalancePlanDTO
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO
from libs.shared.src.enums.rebalance_goal import RebalanceGoal


class GenerateAiRebalancePlanPort(Protocol):
    """Generate an AI-authored rebalance plan

    CLI Entry: exit-planner ai_rebalance
    """

    def execute(
        self, tokens: list[TokenSnapshotDTO], goal: RebalanceGoal
    ) -> AiRebalancePlanDTO:
        """
        Generate and validate a plan

        Returns:
            AiRebalancePlanDTO: Up to three sells, one buy and a rationale
        """
        ...
