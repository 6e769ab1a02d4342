"""Risk Settings DTO"""

from typing import TypedDict


class RiskSettingsDTO(TypedDict):
    """Explicit configuration threaded into risk analytics"""

    risk_free_rate: float
    market_return: float
    beta: float
    tracking_error: float
    annualization_factor: int
    var_confidence: float
