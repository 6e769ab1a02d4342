"""Portfolio Query Unit Tests"""

import pytest

from libs.portfolio.src.application.queries.get_cash_flow_projection import (
    GetCashFlowProjectionQuery,
)
from libs.portfolio.src.application.queries.get_portfolio_summary import (
    GetPortfolioSummaryQuery,
)


class TestGetPortfolioSummary:
    """Summary composition"""

    def test_summary(self, base_token, make_token) -> None:
        tokens = [base_token, make_token(symbol="SECOND")]

        summary = GetPortfolioSummaryQuery().execute(tokens)

        assert summary["token_count"] == 2
        assert summary["totals"]["total"] == pytest.approx(300)
        assert summary["top_opportunities"][0]["symbol"] == "MOCK"
        assert 0 <= summary["health"]["score"] <= 100

    def test_empty(self) -> None:
        summary = GetPortfolioSummaryQuery().execute([])

        assert summary["token_count"] == 0
        assert summary["top_opportunities"] == []
        assert summary["health"]["score"] == 0


class TestGetCashFlowProjection:
    """Projection composition"""

    def test_projection(self, base_token) -> None:
        projection = GetCashFlowProjectionQuery().execute([base_token])

        assert projection["portfolio_total"] == pytest.approx(200)
        assert projection["bucket_size"] == 2_500
        assert len(projection["projected_exits"]) == 1
        assert projection["buckets"][0]["portfolio_value"] == 2_500
        assert projection["buckets"][0]["label"] == "~$2.50K"

    def test_empty(self) -> None:
        projection = GetCashFlowProjectionQuery().execute([])

        assert projection["projected_exits"] == []
        assert projection["buckets"] == []
        assert projection["bucket_size"] == 5_000
