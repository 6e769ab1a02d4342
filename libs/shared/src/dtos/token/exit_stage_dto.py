"""Exit Stage DTO"""

from typing import TypedDict


class ExitStageDTO(TypedDict):
    """Partial-sell instruction

    multiplier is relative to entry price: exit price = entry_price × multiplier
    """

    percentage: float
    multiplier: float
