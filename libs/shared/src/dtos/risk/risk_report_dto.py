"""Risk Report DTO"""

from typing import TypedDict

from libs.shared.src.dtos.risk.performance_analytics_dto import (
    PerformanceAnalyticsDTO,
)
from libs.shared.src.dtos.risk.portfolio_heatmap_dto import PortfolioHeatmapDTO
from libs.shared.src.dtos.risk.risk_metrics_dto import RiskMetricsDTO


class RiskReportDTO(TypedDict):
    """Risk Report"""

    metrics: RiskMetricsDTO
    performance: PerformanceAnalyticsDTO
    heatmap: PortfolioHeatmapDTO
