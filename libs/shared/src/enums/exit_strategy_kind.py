"""Exit Strategy Kind Enum

Closed set of exit strategies a holding can be assigned
"""

from enum import Enum


class ExitStrategyKind(Enum):
    """Exit strategy kind"""

    TARGET_ONLY = "targetMC"  # Sell 100% at target market cap
    LADDER = "ladder"
    CONSERVATIVE = "conservative"
    MOON_OR_BUST = "moonOrBust"
    PROGRESSIVE = "progressive"
    KELLY = "kelly"
    AI_CUSTOM = "ai"  # Stages authored by the AI planner
    USER_CUSTOM = "custom"  # Stages authored by the user
