"""Risk Metrics Calculator Unit Tests"""

import math

import pytest

from libs.risk.src.domain.services.risk_metrics_calculator import (
    average_correlation,
    compute_risk_metrics,
    concentration_risk,
    conditional_value_at_risk,
    correlation_matrix,
    default_risk_settings,
    max_drawdown,
    parametric_value_at_risk,
    portfolio_return,
    sortino_ratio,
    token_risk,
    value_at_risk,
    volatility,
)
from libs.shared.src.enums.conviction import Conviction


@pytest.fixture
def mixed_tokens(make_token):
    """returns 1.0, -0.5, 0, 0.5; values 200/50/100/150"""
    return [
        make_token(symbol="A", price=2),
        make_token(symbol="B", price=0.5),
        make_token(symbol="C", price=1),
        make_token(symbol="D", price=1.5),
    ]


class TestComputeRiskMetrics:
    """Portfolio-level metrics"""

    def test_mixed_portfolio(self, mixed_tokens) -> None:
        metrics = compute_risk_metrics(mixed_tokens, default_risk_settings())
        vol = math.sqrt(0.3125)

        assert metrics["volatility"] == pytest.approx(vol)
        assert metrics["sharpe_ratio"] == pytest.approx((0.25 - 0.02) / vol)
        assert metrics["sortino_ratio"] == 0
        assert metrics["max_drawdown"] == pytest.approx(0.5)
        assert metrics["var_95"] == pytest.approx(-0.5)
        assert metrics["cvar_95"] == pytest.approx(-0.5)
        assert metrics["parametric_var_95"] == pytest.approx(
            0.25 - 1.6448536 * vol, rel=1e-6
        )
        assert metrics["beta"] == 1.0
        assert metrics["alpha"] == pytest.approx(0.15)
        assert metrics["concentration_risk"] == pytest.approx(40)
        assert set(metrics["correlation_matrix"]) == {"A", "B", "C", "D"}

    def test_risk_free_rate_is_configurable(self, mixed_tokens) -> None:
        settings = default_risk_settings()
        settings["risk_free_rate"] = 0.05

        metrics = compute_risk_metrics(mixed_tokens, settings)

        assert metrics["sharpe_ratio"] == pytest.approx(0.2 / math.sqrt(0.3125))
        assert metrics["alpha"] == pytest.approx(0.25 - (0.05 + 0.05))

    def test_empty_portfolio(self) -> None:
        metrics = compute_risk_metrics([], default_risk_settings())

        assert metrics["volatility"] == 0
        assert metrics["sharpe_ratio"] == 0
        assert metrics["var_95"] == 0
        assert metrics["correlation_matrix"] == {}
        assert metrics["correlation"] == 0
        assert metrics["concentration_risk"] == 0

    def test_identical_returns_have_zero_sharpe(self, make_token) -> None:
        tokens = [make_token(symbol="A", price=2), make_token(symbol="B", price=2)]

        metrics = compute_risk_metrics(tokens, default_risk_settings())

        assert metrics["volatility"] == 0
        assert metrics["sharpe_ratio"] == 0


class TestReturnStatistics:
    def test_portfolio_return_without_cost_basis(self, make_token) -> None:
        assert portfolio_return([make_token(entry_price=0)]) == 0

    def test_volatility_is_population_stdev(self) -> None:
        assert volatility([1.0, 3.0]) == pytest.approx(1.0)

    def test_sortino_uses_downside_deviation(self) -> None:
        assert sortino_ratio([-0.5, -0.1, 0.6], 0.02) == pytest.approx(-0.1)

    def test_max_drawdown_walk(self) -> None:
        assert max_drawdown([0.5, -0.2, -0.5, 1.0]) == pytest.approx(0.6)

    def test_max_drawdown_only_gains(self) -> None:
        assert max_drawdown([0.1, 0.2]) == 0


class TestTailRisk:
    """VaR / CVaR"""

    def test_var_uses_floor_index(self) -> None:
        returns = [i / 100 for i in range(20)]

        assert value_at_risk(returns, 0.95) == pytest.approx(0.01)
        assert conditional_value_at_risk(returns, 0.95) == pytest.approx(0.005)

    def test_var_single_return(self) -> None:
        assert value_at_risk([-0.3]) == pytest.approx(-0.3)

    def test_empty_returns(self) -> None:
        assert value_at_risk([]) == 0
        assert conditional_value_at_risk([]) == 0
        assert parametric_value_at_risk([]) == 0

    def test_parametric_var_without_dispersion(self) -> None:
        assert parametric_value_at_risk([0.1, 0.1]) == pytest.approx(0.1)


class TestCorrelationMatrix:
    """Deterministic feature correlation"""

    def test_symmetric_bounded_unit_diagonal(self, make_token) -> None:
        tokens = [
            make_token(symbol="A", price=2, percent_change_24h=12),
            make_token(
                symbol="B", price=0.8, market_cap=5_000_000,
                conviction=Conviction.HIGH,
            ),
            make_token(symbol="C", price=1.1, percent_change_24h=-4),
        ]

        matrix = correlation_matrix(tokens)

        for a in matrix:
            assert matrix[a][a] == 1.0
            for b in matrix:
                assert matrix[a][b] == pytest.approx(matrix[b][a])
                assert -1.0 <= matrix[a][b] <= 1.0
        assert correlation_matrix(tokens) == matrix

    def test_identical_tokens_are_uncorrelated(self, make_token) -> None:
        tokens = [make_token(symbol="A"), make_token(symbol="B")]

        matrix = correlation_matrix(tokens)

        assert matrix["A"]["B"] == 0
        assert matrix["A"]["A"] == 1.0

    def test_repeated_symbol_keeps_unit_diagonal(self, make_token) -> None:
        tokens = [
            make_token(symbol="A", price=2, percent_change_24h=12),
            make_token(symbol="A", price=0.5),
            make_token(symbol="B", price=1.1, percent_change_24h=-4),
            make_token(symbol="C", market_cap=5_000_000, conviction=Conviction.HIGH),
        ]

        matrix = correlation_matrix(tokens)

        assert list(matrix) == ["A", "B", "C"]
        for a in matrix:
            assert matrix[a][a] == 1.0
            for b in matrix:
                assert matrix[a][b] == pytest.approx(matrix[b][a])

    def test_single_symbol_repeated(self, make_token) -> None:
        tokens = [make_token(symbol="A", price=2), make_token(symbol="A")]

        assert correlation_matrix(tokens) == {"A": {"A": 1.0}}

    def test_single_token(self, make_token) -> None:
        assert correlation_matrix([make_token(symbol="A")]) == {"A": {"A": 1.0}}

    def test_average_correlation(self) -> None:
        matrix = {
            "A": {"A": 1.0, "B": 0.2, "C": -0.4},
            "B": {"A": 0.2, "B": 1.0, "C": 0.5},
            "C": {"A": -0.4, "B": 0.5, "C": 1.0},
        }

        assert average_correlation(matrix) == pytest.approx(0.1)


class TestConcentrationAndTokenRisk:
    def test_hhi_dominates_when_spread(self, make_token) -> None:
        tokens = [make_token(symbol=s) for s in ("A", "B")]

        assert concentration_risk(tokens) == pytest.approx(50)

    def test_single_token_is_fully_concentrated(self, make_token) -> None:
        assert concentration_risk([make_token()]) == pytest.approx(100)

    @pytest.mark.parametrize(
        "market_cap, conviction, expected",
        [
            (1_000_000, Conviction.MEDIUM, 0.2),
            (2_000_000_000, Conviction.LOW, 0.15),
            (0, Conviction.HIGH, 0.1),
        ],
    )
    def test_token_risk(self, make_token, market_cap, conviction, expected) -> None:
        token = make_token(market_cap=market_cap, conviction=conviction)

        assert token_risk(token) == pytest.approx(expected)
