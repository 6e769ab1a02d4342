"""Portfolio Aggregator Unit Tests"""

import pytest

from libs.portfolio.src.domain.services.portfolio_aggregator import (
    aggregate_portfolio,
)
from libs.shared.src.enums.exit_strategy_kind import ExitStrategyKind


class TestAggregatePortfolio:
    """Totals under each selected strategy"""

    def test_empty_portfolio(self) -> None:
        totals = aggregate_portfolio([])

        assert totals == {
            "total": 0,
            "target": 0,
            "growth_multiplier": 0,
            "growth_percentage": 0,
            "highest_potential_token": None,
        }

    def test_target_uses_selected_strategy(self, base_token, make_token) -> None:
        """4000 (target only) + 850 (progressive) over $300"""
        progressive = make_token(symbol="PROG", exit_strategy=ExitStrategyKind.PROGRESSIVE)

        totals = aggregate_portfolio([base_token, progressive])

        assert totals["total"] == pytest.approx(300)
        assert totals["target"] == pytest.approx(4850)
        assert totals["growth_multiplier"] == pytest.approx(4850 / 300)
        assert totals["growth_percentage"] == pytest.approx((4850 / 300 - 1) * 100)

    def test_highest_potential_ignores_strategy(self, base_token, make_token) -> None:
        """20x beats 10x even though the 10x token is staged"""
        staged = make_token(symbol="LAD", exit_strategy=ExitStrategyKind.LADDER)

        totals = aggregate_portfolio([staged, base_token])

        assert totals["highest_potential_token"] is base_token

    def test_highest_potential_skips_missing_market_cap(self, make_token) -> None:
        token = make_token(market_cap=0)

        assert aggregate_portfolio([token])["highest_potential_token"] is None

    def test_zero_value_portfolio(self, make_token) -> None:
        token = make_token(amount=0)
        totals = aggregate_portfolio([token])

        assert totals["growth_multiplier"] == 0
        assert totals["growth_percentage"] == 0
