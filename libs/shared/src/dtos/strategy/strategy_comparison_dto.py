"""Strategy Comparison DTO"""

from typing import TypedDict

from libs.shared.src.dtos.strategy.strategy_result_dto import StrategyResultDTO
from libs.shared.src.enums.strategy_winner import StrategyWinner


class StrategyComparisonDTO(TypedDict):
    """Selected strategy vs. selling everything at target"""

    selected: StrategyResultDTO
    benchmark: StrategyResultDTO
    winner: StrategyWinner
    difference: float
    difference_percentage: float


class TokenComparisonDTO(TypedDict):
    """Comparison labelled with its token"""

    symbol: str
    comparison: StrategyComparisonDTO
