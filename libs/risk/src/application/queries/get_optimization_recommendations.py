"""Get Optimization Recommendations Query

Implements GetOptimizationRecommendationsPort Driving Port
"""

import logging

from injector import inject

from libs.risk.src.domain.services.allocation_optimizer import (
    get_optimization_recommendations,
)
from libs.risk.src.ports.get_optimization_recommendations_port import (
    GetOptimizationRecommendationsPort,
)
from libs.shared.src.dtos.risk.optimization_plan_dto import (
    OptimizationRecommendationsDTO,
)
from libs.shared.src.dtos.risk.risk_settings_dto import RiskSettingsDTO
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO


class GetOptimizationRecommendationsQuery(GetOptimizationRecommendationsPort):
    """Conservative, balanced, aggressive and risk-parity plans"""

    @inject
    def __init__(self, settings: RiskSettingsDTO) -> None:
        self._settings = settings
        self._logger = logging.getLogger(self.__class__.__name__)

    def execute(
        self, tokens: list[TokenSnapshotDTO]
    ) -> OptimizationRecommendationsDTO:
        recommendations = get_optimization_recommendations(tokens, self._settings)

        for name, plan in recommendations.items():
            actions = plan["rebalance_actions"]
            self._logger.info(
                f"{name}: {len(actions['sells'])} sells, "
                f"{len(actions['buys'])} buys"
            )

        return recommendations
