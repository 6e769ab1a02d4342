"""AI Strategy Planner Fake Adapter

Returns canned planner responses, for tests
"""

from typing import Any

from libs.planning.src.ports.ai_strategy_planner_port import AiStrategyPlannerPort
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO
from libs.shared.src.enums.risk_tolerance import RiskTolerance


class AiStrategyPlannerFakeAdapter(AiStrategyPlannerPort):
    """AI Strategy Planner Fake Adapter"""

    def __init__(self) -> None:
        self._response: Any = {
            "stages": [
                {"percentage": 25, "multiplier": 2.5},
                {"percentage": 25, "multiplier": 5.0},
                {"percentage": 25, "multiplier": 7.5},
                {"percentage": 25, "multiplier": 10.0},
            ]
        }
        self._error: Exception | None = None
        self.calls: list[tuple[str | None, float, RiskTolerance]] = []

    def set_response(self, response: Any) -> None:
        """Set planner response (test use)"""
        self._response = response

    def set_error(self, error: Exception) -> None:
        """Make the planner fail (test use)"""
        self._error = error

    def generate_stages(
        self,
        token: TokenSnapshotDTO,
        desired_profit: float,
        risk_tolerance: RiskTolerance,
    ) -> dict[str, Any]:
        self.calls.append((token.get("symbol"), desired_profit, risk_tolerance))
        if self._error is not None:
            raise self._error
        return self._response
