"""Risk Tolerance Enum"""

from enum import Enum


class RiskTolerance(Enum):
    """Risk tolerance for AI-authored exit plans"""

    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"
