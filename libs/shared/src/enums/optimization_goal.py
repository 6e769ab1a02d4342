"""Optimization Goal Enum"""

from enum import Enum


class OptimizationGoal(Enum):
    """Allocation goal of an optimization plan"""

    MINIMIZE_RISK = "minimize_risk"
    MAXIMIZE_SHARPE = "maximize_sharpe"
    MAXIMIZE_RETURN = "maximize_return"
    RISK_PARITY = "risk_parity"
    MOMENTUM = "momentum"
