"""Strategy Result DTO"""

from typing import NotRequired, TypedDict


class StageResultDTO(TypedDict):
    """Realized outcome of one exit stage"""

    percentage: float
    multiplier: float
    amount: float
    price: float
    value: float


class StrategyResultDTO(TypedDict):
    """Outcome of evaluating one exit strategy for one token"""

    current_value: float
    target_price: float
    growth_multiplier: float
    total_exit_value: float
    profit: float
    profit_percentage: float
    remaining_amount: float
    profit_stages: NotRequired[list[StageResultDTO]]
