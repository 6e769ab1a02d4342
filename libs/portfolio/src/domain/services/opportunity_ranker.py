"""Opportunity Ranker"""

from libs.shared.src.domain.services.token_metrics import potential_multiplier
from libs.shared.src.dtos.portfolio.top_opportunity_dto import TopOpportunityDTO
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO


def rank_opportunities(
    tokens: list[TokenSnapshotDTO], limit: int = 5
) -> list[TopOpportunityDTO]:
    """Tokens with the most room to grow, by raw potential multiplier"""
    ranked: list[TopOpportunityDTO] = [
        {
            "token": token,
            "symbol": token.get("symbol", ""),
            "potential_multiplier": potential_multiplier(token),
        }
        for token in tokens
        if (token.get("market_cap") or 0) > 0
        and (token.get("target_market_cap") or 0) > 0
    ]
    ranked.sort(key=lambda o: o["potential_multiplier"], reverse=True)
    return ranked[:limit]
