"""Compare Strategies Query

Implements CompareStrategiesPort Driving Port
"""

import logging

from injector import inject

from libs.planning.src.domain.services.strategy_comparator import compare_strategies
from libs.planning.src.ports.compare_strategies_port import CompareStrategiesPort
from libs.shared.src.dtos.strategy.strategy_comparison_dto import (
    TokenComparisonDTO,
)
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO
from libs.shared.src.enums.strategy_winner import StrategyWinner


class CompareStrategiesQuery(CompareStrategiesPort):
    """Compare every token's exit strategy with selling all at target"""

    @inject
    def __init__(self) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)

    def execute(self, tokens: list[TokenSnapshotDTO]) -> list[TokenComparisonDTO]:
        """Run the comparison per token"""
        results: list[TokenComparisonDTO] = []
        for token in tokens:
            comparison = compare_strategies(token)
            results.append(
                {"symbol": token.get("symbol", ""), "comparison": comparison}
            )

        beaten = sum(
            1 for r in results if r["comparison"]["winner"] == StrategyWinner.ALL_AT_ONCE
        )
        self._logger.info(
            f"Compared {len(results)} tokens, {beaten} beaten by selling all at target"
        )
        return results
