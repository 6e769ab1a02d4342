"""Generate AI Strategy Query

Implements GenerateAiStrategyPort Driving Port
"""

import logging

from injector import inject

from libs.planning.src.domain.services.stage_plan_validator import (
    validate_stage_plan,
)
from libs.planning.src.ports.ai_strategy_planner_port import AiStrategyPlannerPort
from libs.planning.src.ports.generate_ai_strategy_port import GenerateAiStrategyPort
from libs.shared.src.dtos.strategy.ai_strategy_result_dto import AiStrategyResultDTO
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO
from libs.shared.src.enums.risk_tolerance import RiskTolerance
from libs.shared.src.errors.ai_planning_error import AiPlanningError
from libs.shared.src.errors.domain_error import DomainError
from libs.shared.src.errors.invalid_stage_plan_error import InvalidStagePlanError

MISSING_DATA_WARNING = "Missing critical token data for AI analysis."


class GenerateAiStrategyQuery(GenerateAiStrategyPort):
    """Generate an AI-authored exit plan"""

    @inject
    def __init__(self, planner: AiStrategyPlannerPort) -> None:
        """Initialize Query

        Args:
            planner: AI strategy planner (injected by DI)
        """
        self._logger = logging.getLogger(self.__class__.__name__)
        self._planner = planner

    def execute(
        self,
        token: TokenSnapshotDTO,
        desired_profit: float,
        risk_tolerance: RiskTolerance = RiskTolerance.MODERATE,
    ) -> AiStrategyResultDTO:
        """Generate and validate an exit plan

        Raises:
            InvalidStagePlanError: The planner returned a malformed plan
            AiPlanningError: The planner failed
        """
        if not self._has_required_data(token, desired_profit):
            return {"stages": [], "warning": MISSING_DATA_WARNING}

        try:
            response = self._planner.generate_stages(
                token, desired_profit, risk_tolerance
            )
        except DomainError:
            raise
        except Exception as e:
            self._logger.error(
                f"AI strategy generation failed for {token.get('symbol')}: {e}"
            )
            raise AiPlanningError("generate a strategy", str(e)) from e

        if not isinstance(response, dict):
            raise InvalidStagePlanError("response is not an object")

        stages = validate_stage_plan(response.get("stages"))
        warning = response.get("warning")

        return {
            "stages": stages,
            "warning": warning if isinstance(warning, str) and warning else None,
        }

    @staticmethod
    def _has_required_data(token: TokenSnapshotDTO, desired_profit: float) -> bool:
        amount = token.get("amount") or 0
        entry_price = token.get("entry_price") or 0
        return (
            amount * entry_price > 0
            and desired_profit > 0
            and (token.get("market_cap") or 0) > 0
            and (token.get("target_market_cap") or 0) > 0
            and (token.get("price") or 0) > 0
            and entry_price > 0
        )
