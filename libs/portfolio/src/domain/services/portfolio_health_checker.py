"""Portfolio Health Checker

Heuristic 0-100 score with issues and suggestions
"""

from libs.shared.src.constants.rebalance_thresholds import (
    HEALTH_CONCENTRATION_PENALTY,
    HEALTH_MAX_WEIGHT_PCT,
    HEALTH_MISSING_ENTRY_PENALTY,
    HEALTH_SINGLE_TOKEN_PENALTY,
)
from libs.shared.src.domain.services.token_metrics import portfolio_value, token_value
from libs.shared.src.dtos.portfolio.portfolio_health_dto import PortfolioHealthDTO
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO


def check_portfolio_health(tokens: list[TokenSnapshotDTO]) -> PortfolioHealthDTO:
    """
    Score diversification and data completeness

    Args:
        tokens: Token snapshots

    Returns:
        PortfolioHealthDTO: score (0 for an empty portfolio), issues, suggestions
    """
    if not tokens:
        return {
            "score": 0,
            "issues": ["No tokens in portfolio"],
            "suggestions": ["Add tokens to start tracking"],
        }

    score = 100
    issues: list[str] = []
    suggestions: list[str] = []

    if len(tokens) == 1:
        score -= HEALTH_SINGLE_TOKEN_PENALTY
        issues.append("Portfolio holds a single token")
        suggestions.append("Diversify across more tokens to reduce risk")

    if any((t.get("entry_price") or 0) <= 0 for t in tokens):
        score -= HEALTH_MISSING_ENTRY_PENALTY
        issues.append("Some tokens are missing entry prices")
        suggestions.append("Add entry prices to track profit and loss")

    total = portfolio_value(tokens)
    if total > 0:
        max_weight_pct = max(token_value(t) for t in tokens) / total * 100
        if max_weight_pct > HEALTH_MAX_WEIGHT_PCT:
            score -= HEALTH_CONCENTRATION_PENALTY
            issues.append(f"One token is {max_weight_pct:.1f}% of the portfolio")
            suggestions.append("Reduce the largest position to limit concentration")

    return {"score": max(0, score), "issues": issues, "suggestions": suggestions}
