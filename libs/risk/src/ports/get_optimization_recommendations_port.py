"""Get Optimization Recommendations Driving Port"""

from typing import Protocol

from libs.shared.src.dtos.risk.optimization_plan_dto import (
    OptimizationRecommendationsDTO,
)
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO


class GetOptimizationRecommendationsPort(Protocol):
    """Get optimization recommendations

    CLI Entry: exit-planner optimize
    """

    def execute(
        self, tokens: list[TokenSnapshotDTO]
    ) -> OptimizationRecommendationsDTO:
        """
        Build the named allocation plans

        Raises:
            EmptyPortfolioError: No tokens
        """
        ...
