"""AI Rebalance Plan DTO"""

from typing import NotRequired, TypedDict


class PlannedSellDTO(TypedDict):
    """Sell a percentage of one holding"""

    symbol: str
    percentage: float
    rationale: NotRequired[str]


class PlannedBuyDTO(TypedDict):
    """Token to buy with the proceeds"""

    symbol: str
    rationale: NotRequired[str]


class AiRebalancePlanDTO(TypedDict):
    """Validated AI-authored rebalance plan"""

    sells: list[PlannedSellDTO]
    buy: PlannedBuyDTO | None
    rationale: str
