"""Performance Analytics DTO"""

from typing import TypedDict


class PerformanceAnalyticsDTO(TypedDict):
    """Performance Analytics"""

    total_return: float
    annualized_return: float
    volatility: float
    sharpe_ratio: float
    sortino_ratio: float
    max_drawdown: float
    calmar_ratio: float
    win_rate: float
    profit_factor: float
    alpha: float
    beta: float
    tracking_error: float
    information_ratio: float
