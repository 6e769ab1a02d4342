"""Generate AI Rebalance Plan Query

Implements GenerateAiRebalancePlanPort Driving Port
"""

import logging

from injector import inject

from libs.rebalancing.src.domain.services.rebalance_plan_validator import (
    validate_rebalance_plan,
)
from libs.rebalancing.src.ports.ai_rebalance_planner_port import (
    AiRebalancePlannerPort,
)
from libs.rebalancing.src.ports.generate_ai_rebalance_plan_port import (
    GenerateAiRebalancePlanPort,
)
from libs.shared.src.constants.rebalance_thresholds import MIN_TOKENS_FOR_REBALANCE
from libs.shared.src.dtos.rebalancing.ai_rebalance_plan_dto import AiRebalancePlanDTO
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO
from libs.shared.src.enums.rebalance_goal import RebalanceGoal
from libs.shared.src.errors.ai_planning_error import AiPlanningError
from libs.shared.src.errors.domain_error import DomainError

TOO_FEW_ASSETS_RATIONALE = "Rebalancing requires at least two assets."


class GenerateAiRebalancePlanQuery(GenerateAiRebalancePlanPort):
    """Generate an AI-authored rebalance plan"""

    @inject
    def __init__(self, planner: AiRebalancePlannerPort) -> None:
        """Initialize Query

        Args:
            planner: AI rebalance planner (injected by DI)
        """
        self._logger = logging.getLogger(self.__class__.__name__)
        self._planner = planner

    def execute(
        self, tokens: list[TokenSnapshotDTO], goal: RebalanceGoal
    ) -> AiRebalancePlanDTO:
        """Generate and validate a plan

        Raises:
            InvalidRebalancePlanError: The planner returned a malformed plan
            AiPlanningError: The planner failed
        """
        if len(tokens) < MIN_TOKENS_FOR_REBALANCE:
            return {"sells": [], "buy": None, "rationale": TOO_FEW_ASSETS_RATIONALE}

        try:
            raw_plan = self._planner.generate_rebalance_plan(tokens, goal)
        except DomainError:
            raise
        except Exception as e:
            self._logger.error(f"AI rebalance planning failed ({goal.name}): {e}")
            raise AiPlanningError("generate a rebalancing plan", str(e)) from e

        plan = validate_rebalance_plan(raw_plan, tokens)
        self._logger.info(
            f"AI plan for {goal.name}: {len(plan['sells'])} sells, "
            f"buy {plan['buy']['symbol'] if plan['buy'] else 'none'}"
        )
        return plan
