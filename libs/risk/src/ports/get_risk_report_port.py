"""Get Risk Report Driving Port"""

from typing import Protocol

from libs.shared.src.dtos.risk.risk_report_dto import RiskReportDTO
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO


class GetRiskReportPort(Protocol):
    """Get risk report

    CLI Entry: exit-planner risk
    """

    def execute(self, tokens: list[TokenSnapshotDTO]) -> RiskReportDTO:
        """
        Build the risk report

        Returns:
            RiskReportDTO: Risk metrics, performance analytics and heatmap
        """
        ...
