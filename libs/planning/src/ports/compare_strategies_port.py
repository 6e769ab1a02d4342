"""Compare Strategies Driving Port"""

from typing import Protocol

from libs.shared.src.dtos.strategy.strategy_comparison_dto import (
    TokenComparisonDTO,
)
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO


class CompareStrategiesPort(Protocol):
    """Compare each token's exit strategy with selling all at target

    CLI Entry: exit-planner compare
    """

    def execute(self, tokens: list[TokenSnapshotDTO]) -> list[TokenComparisonDTO]:
        """
        Compare strategies

        Returns:
            list[TokenComparisonDTO]: One comparison per token
        """
        ...
