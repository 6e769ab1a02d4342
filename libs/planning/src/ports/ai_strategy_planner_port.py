"""AI Strategy Planner Port"""

from typing import Any, Protocol, runtime_checkable

from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO
from libs.shared.src.enums.risk_tolerance import RiskTolerance


@runtime_checkable
class AiStrategyPlannerPort(Protocol):
    """AI Strategy Planner Port

    Authors a staged exit plan for a token. Output is untrusted and is
    validated before use.
    """

    def generate_stages(
        self,
        token: TokenSnapshotDTO,
        desired_profit: float,
        risk_tolerance: RiskTolerance,
    ) -> dict[str, Any]:
        """Generate exit stages

        Args:
            token: Token snapshot
            desired_profit: Profit goal in USD
            risk_tolerance: Risk tolerance

        Returns:
            dict: {"stages": [{"percentage", "multiplier"}, ...], "warning"?: str}
        """
        ...
