"""Portfolio Health Checker Unit Tests"""

from libs.portfolio.src.domain.services.portfolio_health_checker import (
    check_portfolio_health,
)


class TestPortfolioHealth:
    """Health score penalties"""

    def test_empty_portfolio_scores_zero(self) -> None:
        health = check_portfolio_health([])

        assert health["score"] == 0
        assert health["issues"]

    def test_balanced_portfolio(self, make_token) -> None:
        tokens = [make_token(symbol="A"), make_token(symbol="B")]

        health = check_portfolio_health(tokens)

        assert health == {"score": 100, "issues": [], "suggestions": []}

    def test_single_token_also_concentrated(self, make_token) -> None:
        """-30 single token, -15 for a 100% weight"""
        health = check_portfolio_health([make_token()])

        assert health["score"] == 55
        assert len(health["issues"]) == 2

    def test_missing_entry_price(self, make_token) -> None:
        tokens = [make_token(symbol="A", entry_price=0), make_token(symbol="B")]

        assert check_portfolio_health(tokens)["score"] == 80

    def test_concentration(self, make_token) -> None:
        tokens = [make_token(symbol="A", amount=700), make_token(symbol="B", amount=300)]

        health = check_portfolio_health(tokens)

        assert health["score"] == 85
        assert "70.0%" in health["issues"][0]
