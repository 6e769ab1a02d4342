"""Get Cash-Flow Projection Query

Implements GetCashFlowProjectionPort Driving Port
"""

import logging

from injector import inject

from libs.portfolio.src.domain.services.projection_engine import (
    bucket_projected_exits,
    get_bucket_size,
    project_cash_flow,
)
from libs.portfolio.src.ports.get_cash_flow_projection_port import (
    GetCashFlowProjectionPort,
)
from libs.shared.src.domain.services.token_metrics import portfolio_value
from libs.shared.src.dtos.portfolio.projected_exit_dto import CashFlowProjectionDTO
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO


class GetCashFlowProjectionQuery(GetCashFlowProjectionPort):
    """Projected exit cash flows and their histogram buckets"""

    @inject
    def __init__(self) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)

    def execute(self, tokens: list[TokenSnapshotDTO]) -> CashFlowProjectionDTO:
        portfolio_total = portfolio_value(tokens)
        exits = project_cash_flow(tokens)
        buckets = bucket_projected_exits(exits, portfolio_total)

        self._logger.info(
            f"Projected {len(exits)} exits into {len(buckets)} buckets"
        )

        return {
            "portfolio_total": portfolio_total,
            "bucket_size": get_bucket_size(portfolio_total),
            "projected_exits": exits,
            "buckets": buckets,
        }
