"""Strategy Winner Enum"""

from enum import Enum


class StrategyWinner(Enum):
    """Winner of a strategy comparison"""

    SELECTED = "selected"
    ALL_AT_ONCE = "allAtOnce"
