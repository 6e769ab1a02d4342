"""Performance Analytics Calculator Unit Tests"""

import math

import pytest

from libs.risk.src.domain.services.performance_analytics_calculator import (
    build_portfolio_heatmap,
    compute_performance_analytics,
    profit_factor,
    win_rate,
)
from libs.risk.src.domain.services.risk_metrics_calculator import (
    default_risk_settings,
)
from libs.shared.src.enums.conviction import Conviction


class TestComputePerformanceAnalytics:
    """Performance figures"""

    def test_mixed_portfolio(self, make_token) -> None:
        tokens = [
            make_token(symbol="A", price=2),
            make_token(symbol="B", price=0.5),
            make_token(symbol="C", price=1),
            make_token(symbol="D", price=1.5),
        ]

        analytics = compute_performance_analytics(tokens, default_risk_settings())

        assert analytics["total_return"] == pytest.approx(0.25)
        assert analytics["annualized_return"] == pytest.approx(63)
        assert analytics["sharpe_ratio"] == pytest.approx(
            (63 - 0.02) / math.sqrt(0.3125)
        )
        assert analytics["calmar_ratio"] == pytest.approx(126)
        assert analytics["win_rate"] == pytest.approx(0.5)
        assert analytics["profit_factor"] == pytest.approx(3)
        assert analytics["alpha"] == pytest.approx(62.9)
        assert analytics["tracking_error"] == 0.15
        assert analytics["information_ratio"] == pytest.approx(1.0)

    def test_empty_portfolio(self) -> None:
        analytics = compute_performance_analytics([], default_risk_settings())

        assert analytics["total_return"] == 0
        assert analytics["annualized_return"] == 0
        assert analytics["calmar_ratio"] == 0
        assert analytics["win_rate"] == 0
        assert analytics["profit_factor"] == 0

    def test_annualization_factor_is_configurable(self, make_token) -> None:
        settings = default_risk_settings()
        settings["annualization_factor"] = 365

        analytics = compute_performance_analytics(
            [make_token(price=1.1)], settings
        )

        assert analytics["annualized_return"] == pytest.approx(36.5)


class TestReturnRatios:
    def test_win_rate(self) -> None:
        assert win_rate([0.1, -0.2, 0, 0.3]) == pytest.approx(0.5)

    def test_profit_factor_without_losses(self) -> None:
        assert profit_factor([0.1, 0.2]) == 0


class TestBuildPortfolioHeatmap:
    """Risk and return contributions"""

    def test_contributions(self, make_token) -> None:
        tokens = [
            make_token(symbol="A", price=2),
            make_token(symbol="B", conviction=Conviction.HIGH),
        ]

        heatmap = build_portfolio_heatmap(tokens)

        assert heatmap["risk_contribution"] == pytest.approx(
            {"A": 200 / 3, "B": 100 / 3}
        )
        assert heatmap["return_contribution"] == pytest.approx({"A": 200, "B": 0})
        assert heatmap["concentration_risk"] == pytest.approx(200 / 3)
        assert set(heatmap["correlations"]) == {"A", "B"}

    def test_losing_portfolio_has_no_return_contribution(self, make_token) -> None:
        tokens = [make_token(symbol="A", price=0.5), make_token(symbol="B")]

        heatmap = build_portfolio_heatmap(tokens)

        assert heatmap["return_contribution"] == {"A": 0, "B": 0}

    def test_empty(self) -> None:
        heatmap = build_portfolio_heatmap([])

        assert heatmap == {
            "correlations": {},
            "risk_contribution": {},
            "return_contribution": {},
            "concentration_risk": 0,
        }
