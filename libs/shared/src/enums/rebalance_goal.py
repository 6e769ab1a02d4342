"""Rebalance Goal Enum"""

from enum import Enum


class RebalanceGoal(Enum):
    """Primary goal of an AI rebalance plan"""

    PROFIT = "Take Profits: Secure gains from tokens that are near their target or have performed well."
    RISK = "Reduce Risk: Trim oversized positions to diversify and protect the portfolio from a single asset's volatility."
    ACCELERATE = "Accelerate Growth: Move capital from underperforming assets to those with higher potential."
