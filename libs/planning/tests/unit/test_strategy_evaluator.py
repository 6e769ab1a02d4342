"""Strategy Evaluator Unit Tests"""

import pytest

from libs.planning.src.domain.services.stage_generator import fixed_stages
from libs.planning.src.domain.services.strategy_evaluator import evaluate_strategy
from libs.shared.src.enums.exit_strategy_kind import ExitStrategyKind


class TestAllAtTarget:
    """Sell 100% at target"""

    def test_total_exit_value_is_amount_times_target_price(self, base_token) -> None:
        """Without stages the whole position exits at target"""
        result = evaluate_strategy(base_token)

        assert result["target_price"] == pytest.approx(40)
        assert result["total_exit_value"] == pytest.approx(100 * 40)
        assert result["profit"] == pytest.approx(4000 - 100)
        assert result["profit_percentage"] == pytest.approx(3900)
        assert "profit_stages" not in result

    def test_empty_stage_list_is_benchmark(self, base_token) -> None:
        """An empty list behaves like no stages"""
        result = evaluate_strategy(base_token, [])

        assert result["total_exit_value"] == pytest.approx(4000)
        assert "profit_stages" not in result

    def test_growth_multiplier(self, base_token) -> None:
        """growth multiplier = target market cap / market cap"""
        result = evaluate_strategy(base_token)

        assert result["growth_multiplier"] == pytest.approx(20)
        assert result["current_value"] == pytest.approx(200)


class TestStagedExit:
    """Staged exits"""

    def test_ladder_example(self, base_token) -> None:
        """25% @ 2x, 4x, 8x, 16x all below the $40 target"""
        stages = fixed_stages(ExitStrategyKind.LADDER)
        result = evaluate_strategy(base_token, stages)

        assert result["total_exit_value"] == pytest.approx(750)
        assert len(result["profit_stages"]) == 4
        assert result["profit_stages"][3]["price"] == pytest.approx(16)

    def test_stage_prices_capped_at_target(self, base_token) -> None:
        """Target $6: the 8x and 16x stages clamp to $6"""
        token = {**base_token, "target_market_cap": 6_000_000}
        result = evaluate_strategy(token, fixed_stages(ExitStrategyKind.LADDER))

        assert result["total_exit_value"] == pytest.approx(450)
        prices = [s["price"] for s in result["profit_stages"]]
        assert prices == pytest.approx([2, 4, 6, 6])

    def test_capped_stage_multiplier_rewritten(self, base_token) -> None:
        """A capped stage reports target_price / entry_price"""
        token = {**base_token, "target_market_cap": 6_000_000}
        result = evaluate_strategy(token, fixed_stages(ExitStrategyKind.LADDER))

        assert result["profit_stages"][2]["multiplier"] == pytest.approx(6)
        assert result["profit_stages"][3]["multiplier"] == pytest.approx(6)
        assert result["profit_stages"][1]["multiplier"] == pytest.approx(4)

    def test_input_stages_not_mutated(self, base_token) -> None:
        """Capping works on copies"""
        token = {**base_token, "target_market_cap": 6_000_000}
        stages = [{"percentage": 50, "multiplier": 16}]
        evaluate_strategy(token, stages)

        assert stages == [{"percentage": 50, "multiplier": 16}]

    def test_moon_or_bust_remainder_sold_at_target(self, base_token) -> None:
        """25% @ 5x, 25% @ 10x, 50% held to $40"""
        stages = fixed_stages(ExitStrategyKind.MOON_OR_BUST)
        result = evaluate_strategy(base_token, stages)

        assert result["total_exit_value"] == pytest.approx(2375)
        assert len(result["profit_stages"]) == 2
        assert result["remaining_amount"] == pytest.approx(50)

    def test_stage_amounts_plus_remainder_equal_amount(self, base_token) -> None:
        """Every unit is accounted for"""
        for kind in (
            ExitStrategyKind.LADDER,
            ExitStrategyKind.CONSERVATIVE,
            ExitStrategyKind.MOON_OR_BUST,
        ):
            result = evaluate_strategy(base_token, fixed_stages(kind))
            sold = sum(s["amount"] for s in result["profit_stages"])

            assert sold + result["remaining_amount"] == pytest.approx(
                100, abs=1e-5
            )

    def test_overselling_stage_skipped(self, base_token) -> None:
        """A stage that would sell more than is left is dropped"""
        stages = [
            {"percentage": 80, "multiplier": 2},
            {"percentage": 50, "multiplier": 4},
            {"percentage": 20, "multiplier": 8},
        ]
        result = evaluate_strategy(base_token, stages)

        assert [s["percentage"] for s in result["profit_stages"]] == [80, 20]
        assert result["total_exit_value"] == pytest.approx(80 * 2 + 20 * 8)

    def test_rounding_residue_not_sold(self, base_token) -> None:
        """Thirds summing to 99.99999...% leave no remainder exit"""
        third = 100 / 3
        stages = [{"percentage": third, "multiplier": 2}] * 3
        result = evaluate_strategy(base_token, stages)

        assert result["total_exit_value"] == pytest.approx(200)


class TestDegradedInput:
    """Missing market data degrades instead of raising"""

    def test_zero_investment(self, base_token) -> None:
        """entry 0 and amount 0 → all zero"""
        token = {**base_token, "entry_price": 0, "amount": 0}
        result = evaluate_strategy(token, fixed_stages(ExitStrategyKind.LADDER))

        assert result["total_exit_value"] == 0
        assert result["profit"] == 0
        assert result["profit_percentage"] == 0

    def test_missing_market_cap(self, base_token) -> None:
        """No market cap → current value only, multiplier 1"""
        token = {**base_token, "market_cap": 0}
        result = evaluate_strategy(token)

        assert result["growth_multiplier"] == 1
        assert result["total_exit_value"] == pytest.approx(200)
        assert result["target_price"] == pytest.approx(2)
        assert result["profit"] == pytest.approx(100)
        assert result["profit_percentage"] == pytest.approx(100)

    def test_none_token(self) -> None:
        """None is treated as an empty snapshot"""
        result = evaluate_strategy(None)

        assert result["total_exit_value"] == 0
        assert result["growth_multiplier"] == 1
