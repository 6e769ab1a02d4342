"""Risk Metrics DTO"""

from typing import TypedDict

# symbol -> symbol -> correlation
CorrelationMatrix = dict[str, dict[str, float]]


class RiskMetricsDTO(TypedDict):
    """Snapshot-derived portfolio risk metrics"""

    sharpe_ratio: float
    sortino_ratio: float
    max_drawdown: float
    volatility: float
    var_95: float
    cvar_95: float
    parametric_var_95: float
    beta: float
    alpha: float
    correlation: float
    correlation_matrix: CorrelationMatrix
    concentration_risk: float
