"""Get Risk Report Query

Implements GetRiskReportPort Driving Port
"""

import logging

from injector import inject

from libs.risk.src.domain.services.performance_analytics_calculator import (
    build_portfolio_heatmap,
    compute_performance_analytics,
)
from libs.risk.src.domain.services.risk_metrics_calculator import (
    compute_risk_metrics,
)
from libs.risk.src.ports.get_risk_report_port import GetRiskReportPort
from libs.shared.src.dtos.risk.risk_report_dto import RiskReportDTO
from libs.shared.src.dtos.risk.risk_settings_dto import RiskSettingsDTO
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO


class GetRiskReportQuery(GetRiskReportPort):
    """Risk metrics, performance analytics and heatmap"""

    @inject
    def __init__(self, settings: RiskSettingsDTO) -> None:
        self._settings = settings
        self._logger = logging.getLogger(self.__class__.__name__)

    def execute(self, tokens: list[TokenSnapshotDTO]) -> RiskReportDTO:
        metrics = compute_risk_metrics(tokens, self._settings)

        self._logger.info(
            f"Risk report for {len(tokens)} tokens: "
            f"volatility {metrics['volatility']:.4f}, "
            f"concentration {metrics['concentration_risk']:.1f}%"
        )

        return {
            "metrics": metrics,
            "performance": compute_performance_analytics(tokens, self._settings),
            "heatmap": build_portfolio_heatmap(tokens),
        }
