"""Portfolio Heatmap DTO"""

from typing import TypedDict

from libs.shared.src.dtos.risk.risk_metrics_dto import CorrelationMatrix


class PortfolioHeatmapDTO(TypedDict):
    """Per-token risk and return contributions (percent)"""

    correlations: CorrelationMatrix
    risk_contribution: dict[str, float]
    return_contribution: dict[str, float]
    concentration_risk: float
