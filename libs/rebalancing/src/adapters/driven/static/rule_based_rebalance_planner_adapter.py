"""Rule-Based Rebalance Planner Adapter

Offline stand-in for the LLM planner built on the rebalance advisor:
trims a fixed share of each candidate in the goal's bucket into the
advisor's buy candidate
"""

from typing import Any

from libs.rebalancing.src.domain.services.rebalance_advisor import advise_rebalance
from libs.rebalancing.src.ports.ai_rebalance_planner_port import (
    AiRebalancePlannerPort,
)
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO
from libs.shared.src.enums.rebalance_goal import RebalanceGoal

SELL_PERCENTAGE = 25

_GOAL_BUCKETS = {
    RebalanceGoal.PROFIT: "profit_candidates",
    RebalanceGoal.RISK: "risk_candidates",
    RebalanceGoal.ACCELERATE: "underperform_candidates",
}

_GOAL_REASONS = {
    RebalanceGoal.PROFIT: "near its target market cap",
    RebalanceGoal.RISK: "oversized position",
    RebalanceGoal.ACCELERATE: "underperforming relative to its potential",
}


class RuleBasedRebalancePlannerAdapter(AiRebalancePlannerPort):
    """Deterministic rebalance planner"""

    def generate_rebalance_plan(
        self, tokens: list[TokenSnapshotDTO], goal: RebalanceGoal
    ) -> dict[str, Any]:
        candidates = advise_rebalance(tokens)
        bucket = candidates[_GOAL_BUCKETS[goal]]

        if not bucket:
            return {
                "sells": [],
                "buy": None,
                "rationale": "No holdings currently match this goal; hold positions.",
            }

        sells = [
            {
                "symbol": c["symbol"],
                "percentage": SELL_PERCENTAGE,
                "rationale": _GOAL_REASONS[goal],
            }
            for c in bucket
        ]

        buy = None
        buy_candidate = candidates["buy_candidate"]
        sold = {c["symbol"] for c in bucket}
        if buy_candidate is not None and buy_candidate["symbol"] not in sold:
            buy = {
                "symbol": buy_candidate["symbol"],
                "rationale": (
                    f"{buy_candidate['potential_multiplier']:.1f}x potential"
                ),
            }

        sold_list = ", ".join(s["symbol"] for s in sells)
        rationale = f"Trim {SELL_PERCENTAGE}% of {sold_list}"
        if buy:
            rationale += f" and rotate into {buy['symbol']}."
        else:
            rationale += " and hold the proceeds."
        return {"sells": sells, "buy": buy, "rationale": rationale}
