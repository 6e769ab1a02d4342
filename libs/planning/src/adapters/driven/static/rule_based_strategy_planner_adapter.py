"""Rule-Based Strategy Planner Adapter

Offline stand-in for the LLM planner: spreads sells between entry and
target price, more and lower stages for lower risk tolerance
"""

from typing import Any

from libs.planning.src.ports.ai_strategy_planner_port import AiStrategyPlannerPort
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO
from libs.shared.src.enums.risk_tolerance import RiskTolerance

# (stage count, curve exponent): higher exponent keeps early stages lower
_PROFILES = {
    RiskTolerance.CONSERVATIVE: (5, 1.5),
    RiskTolerance.MODERATE: (4, 1.0),
    RiskTolerance.AGGRESSIVE: (3, 0.75),
}


class RuleBasedStrategyPlannerAdapter(AiStrategyPlannerPort):
    """Deterministic exit planner"""

    def generate_stages(
        self,
        token: TokenSnapshotDTO,
        desired_profit: float,
        risk_tolerance: RiskTolerance,
    ) -> dict[str, Any]:
        amount = token.get("amount") or 0
        price = token.get("price") or 0
        entry_price = token.get("entry_price") or 0
        market_cap = token.get("market_cap") or 0
        target_market_cap = token.get("target_market_cap") or 0

        target_price = price * target_market_cap / market_cap
        max_multiplier = target_price / entry_price
        max_profit = amount * (target_price - entry_price)

        warning = None
        if desired_profit > max_profit:
            warning = (
                f"Desired profit of ${desired_profit:,.2f} exceeds the maximum "
                f"potential profit of ${max_profit:,.2f} at the target market cap."
            )

        if max_multiplier <= 1:
            return {
                "stages": [{"percentage": 100, "multiplier": max_multiplier}],
                "warning": warning,
            }

        count, exponent = _PROFILES[risk_tolerance]
        base = round(100 / count, 2)
        stages = []
        for i in range(1, count + 1):
            multiplier = 1 + (max_multiplier - 1) * (i / count) ** exponent
            stages.append({"percentage": base, "multiplier": round(multiplier, 4)})
        # Last stage absorbs rounding
        stages[-1]["percentage"] = round(100 - base * (count - 1), 2)

        return {"stages": stages, "warning": warning}
