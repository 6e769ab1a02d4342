"""Performance Analytics Calculator

Return and risk-adjusted performance from token snapshots,
plus the per-token heatmap of risk and return contributions.
"""

import numpy as np

from libs.risk.src.domain.services.risk_metrics_calculator import (
    alpha,
    concentration_risk,
    correlation_matrix,
    max_drawdown,
    portfolio_return,
    sharpe_ratio,
    sortino_ratio,
    token_returns,
    token_risk,
    volatility,
)
from libs.shared.src.domain.services.token_metrics import token_return
from libs.shared.src.dtos.risk.performance_analytics_dto import (
    PerformanceAnalyticsDTO,
)
from libs.shared.src.dtos.risk.portfolio_heatmap_dto import PortfolioHeatmapDTO
from libs.shared.src.dtos.risk.risk_settings_dto import RiskSettingsDTO
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO


def annualized_return(returns: list[float], annualization_factor: int) -> float:
    """Mean return scaled by the annualization factor"""
    if len(returns) == 0:
        return 0.0
    return float(np.mean(returns)) * annualization_factor


def win_rate(returns: list[float]) -> float:
    """Share of positive returns"""
    if len(returns) == 0:
        return 0.0
    return sum(1 for r in returns if r > 0) / len(returns)


def profit_factor(returns: list[float]) -> float:
    """Sum of gains over absolute sum of losses, 0 without losses"""
    gains = sum(r for r in returns if r > 0)
    losses = abs(sum(r for r in returns if r < 0))
    if losses <= 0:
        return 0.0
    return gains / losses


def compute_performance_analytics(
    tokens: list[TokenSnapshotDTO], settings: RiskSettingsDTO
) -> PerformanceAnalyticsDTO:
    """
    Performance analytics

    Sharpe here is computed on the annualized return, unlike the risk
    metrics which use the plain portfolio return.

    Args:
        tokens: Token snapshots
        settings: Risk-free rate, market assumptions, annualization factor

    Returns:
        PerformanceAnalyticsDTO: Return, ratio and benchmark figures
    """
    returns = token_returns(tokens)
    rf = settings["risk_free_rate"]
    total = portfolio_return(tokens)
    annualized = annualized_return(returns, settings["annualization_factor"])
    vol = volatility(returns)
    drawdown = max_drawdown(returns)
    tracking_error = settings["tracking_error"]

    return {
        "total_return": total,
        "annualized_return": annualized,
        "volatility": vol,
        "sharpe_ratio": sharpe_ratio(annualized, vol, rf),
        "sortino_ratio": sortino_ratio(returns, rf),
        "max_drawdown": drawdown,
        "calmar_ratio": annualized / drawdown if drawdown > 0 else 0.0,
        "win_rate": win_rate(returns),
        "profit_factor": profit_factor(returns),
        "alpha": alpha(annualized, settings),
        "beta": settings["beta"],
        "tracking_error": tracking_error,
        "information_ratio": (
            alpha(total, settings) / tracking_error if tracking_error > 0 else 0.0
        ),
    }


def build_portfolio_heatmap(tokens: list[TokenSnapshotDTO]) -> PortfolioHeatmapDTO:
    """
    Per-token risk and return contributions

    Risk contribution is each token's heuristic risk over the sum of all
    token risks. Return contribution is each token's return over the
    portfolio return, 0 while the portfolio is not in profit.
    """
    total_risk = sum(token_risk(t) for t in tokens)
    total_return = portfolio_return(tokens)

    risk_contribution: dict[str, float] = {}
    return_contribution: dict[str, float] = {}
    for token in tokens:
        symbol = token.get("symbol") or ""
        risk_contribution[symbol] = (
            token_risk(token) / total_risk * 100 if total_risk > 0 else 0.0
        )
        return_contribution[symbol] = (
            token_return(token) / total_return * 100 if total_return > 0 else 0.0
        )

    return {
        "correlations": correlation_matrix(tokens),
        "risk_contribution": risk_contribution,
        "return_contribution": return_contribution,
        "concentration_risk": concentration_risk(tokens),
    }
