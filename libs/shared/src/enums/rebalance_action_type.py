"""Rebalance Action Type Enum"""

from enum import Enum


class RebalanceActionType(Enum):
    """Rebalance action direction"""

    BUY = "BUY"
    SELL = "SELL"
