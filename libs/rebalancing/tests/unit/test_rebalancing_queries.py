"""Rebalancing Query Unit Tests"""

import pytest

from libs.rebalancing.src.adapters.driven.memory.ai_rebalance_planner_fake_adapter import (
    AiRebalancePlannerFakeAdapter,
)
from libs.rebalancing.src.adapters.driven.static.rule_based_rebalance_planner_adapter import (
    RuleBasedRebalancePlannerAdapter,
)
from libs.rebalancing.src.application.queries.advise_rebalance import (
    AdviseRebalanceQuery,
)
from libs.rebalancing.src.application.queries.generate_ai_rebalance_plan import (
    TOO_FEW_ASSETS_RATIONALE,
    GenerateAiRebalancePlanQuery,
)
from libs.shared.src.enums.conviction import Conviction
from libs.shared.src.enums.rebalance_goal import RebalanceGoal
from libs.shared.src.errors.ai_planning_error import AiPlanningError
from libs.shared.src.errors.invalid_rebalance_plan_error import (
    InvalidRebalancePlanError,
)


@pytest.fixture
def planner() -> AiRebalancePlannerFakeAdapter:
    return AiRebalancePlannerFakeAdapter()


class TestAdviseRebalance:
    """Candidates plus rotation"""

    def test_combines_candidates_and_rotation(self, holding) -> None:
        tokens = [holding("WHALE", value=600), holding("REST", value=400)]

        advice = AdviseRebalanceQuery().execute(tokens)

        assert [c["symbol"] for c in advice["candidates"]["risk_candidates"]] == [
            "WHALE"
        ]
        assert advice["rotation"]["strategy"] == "smart_rotation"

    def test_empty(self) -> None:
        advice = AdviseRebalanceQuery().execute([])

        assert advice["candidates"]["buy_candidate"] is None
        assert advice["rotation"]["is_balanced"] is True


class TestGenerateAiRebalancePlan:
    """AI rebalance plan generation"""

    def test_too_few_assets(self, planner, holding) -> None:
        query = GenerateAiRebalancePlanQuery(planner=planner)

        plan = query.execute([holding("ONLY")], RebalanceGoal.PROFIT)

        assert plan == {"sells": [], "buy": None, "rationale": TOO_FEW_ASSETS_RATIONALE}
        assert planner.calls == []

    def test_validates_planner_output(self, planner, holding) -> None:
        planner.set_plan(
            {
                "sells": [{"symbol": "A", "percentage": 20}],
                "buy": {"symbol": "B"},
                "rationale": "Rotate.",
            }
        )
        query = GenerateAiRebalancePlanQuery(planner=planner)

        plan = query.execute([holding("A"), holding("B")], RebalanceGoal.ACCELERATE)

        assert plan["sells"] == [{"symbol": "A", "percentage": 20.0}]
        assert planner.calls == [RebalanceGoal.ACCELERATE]

    def test_missing_rationale(self, planner, holding) -> None:
        planner.set_plan({"sells": []})
        query = GenerateAiRebalancePlanQuery(planner=planner)

        with pytest.raises(InvalidRebalancePlanError):
            query.execute([holding("A"), holding("B")], RebalanceGoal.RISK)

    def test_planner_failure_wrapped(self, planner, holding) -> None:
        planner.set_error(RuntimeError("quota exceeded"))
        query = GenerateAiRebalancePlanQuery(planner=planner)

        with pytest.raises(AiPlanningError) as exc_info:
            query.execute([holding("A"), holding("B")], RebalanceGoal.RISK)

        assert exc_info.value.code == "AI_PLANNING_FAILED"
        assert isinstance(exc_info.value.__cause__, RuntimeError)


class TestRuleBasedRebalancePlanner:
    """Offline planner output passes validation"""

    def test_profit_goal(self, holding) -> None:
        tokens = [
            holding("NEAR", potential=1 / 0.85, conviction=Conviction.LOW),
            holding("FAR", potential=20),
            holding("MID", potential=5),
        ]
        query = GenerateAiRebalancePlanQuery(planner=RuleBasedRebalancePlannerAdapter())

        plan = query.execute(tokens, RebalanceGoal.PROFIT)

        assert plan["sells"] == [
            {
                "symbol": "NEAR",
                "percentage": 25.0,
                "rationale": "near its target market cap",
            }
        ]
        assert plan["buy"]["symbol"] == "FAR"
        assert plan["rationale"] == "Trim 25% of NEAR and rotate into FAR."

    def test_no_matching_holdings(self, holding) -> None:
        tokens = [holding("A"), holding("B"), holding("C")]
        query = GenerateAiRebalancePlanQuery(planner=RuleBasedRebalancePlannerAdapter())

        plan = query.execute(tokens, RebalanceGoal.RISK)

        assert plan["sells"] == []
        assert plan["buy"] is None
