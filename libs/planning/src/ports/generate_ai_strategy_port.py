"""Generate AI Strategy Driving Port"""

from typing import Protocol

from libs.shared.src.dtos.strategy.ai_strategy_result_dto import AiStrategyResultDTO
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO
from libs.shared.src.enums.risk_tolerance import RiskTolerance


class GenerateAiStrategyPort(Protocol):
    """Generate an AI-authored exit plan

    CLI Entry: exit-planner ai_strategy
    """

    def execute(
        self,
        token: TokenSnapshotDTO,
        desired_profit: float,
        risk_tolerance: RiskTolerance = RiskTolerance.MODERATE,
    ) -> AiStrategyResultDTO:
        """
        Generate and validate stages

        Returns:
            AiStrategyResultDTO: stages summing to 100 and an optional warning
        """
        ...
