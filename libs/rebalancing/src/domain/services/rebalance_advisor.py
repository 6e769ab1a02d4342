"""Rebalance Advisor

Heuristic sell buckets and a single buy candidate.

A token is placed in at most one sell bucket. Buckets claim tokens in the
order profit taking → underperformance → risk, each capped at three.
"""

import logging

from libs.shared.src.constants.rebalance_thresholds import (
    BUY_CONVICTION_WEIGHTS,
    CONCENTRATION_WEIGHT_THRESHOLD,
    MAX_CANDIDATES_PER_BUCKET,
    MIN_TOKEN_VALUE,
    MIN_TOKENS_FOR_REBALANCE,
    PROFIT_TAKING_THRESHOLDS,
    UNDERPERFORM_SELL_WEIGHTS,
)
from libs.shared.src.domain.services.token_metrics import (
    conviction_of,
    pnl_ratio,
    potential_multiplier,
    progress_to_target,
    token_value,
)
from libs.shared.src.dtos.rebalancing.rebalance_candidate_dto import (
    RebalanceCandidateDTO,
    RebalanceCandidatesDTO,
)
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO

logger = logging.getLogger(__name__)


def advise_rebalance(tokens: list[TokenSnapshotDTO]) -> RebalanceCandidatesDTO:
    """
    Select rebalance candidates

    Args:
        tokens: Token snapshots

    Returns:
        RebalanceCandidatesDTO: Empty buckets and no buy candidate when fewer
            than two tokens are worth more than $1
    """
    eligible = [t for t in tokens if token_value(t) > MIN_TOKEN_VALUE]
    total = sum(token_value(t) for t in eligible)

    if len(eligible) < MIN_TOKENS_FOR_REBALANCE or total <= 0:
        logger.debug(f"Only {len(eligible)} tokens above the noise floor")
        return empty_candidates()

    stats = [_candidate(t, total) for t in eligible]
    claimed: set[int] = set()

    profit = _claim(
        [
            (i, {**c, "score": c["progress"] - _profit_threshold(c)})
            for i, c in enumerate(stats)
            if c["progress"] >= _profit_threshold(c)
        ],
        claimed,
    )
    underperform = _claim(
        [
            (i, {**c, "score": _underperform_score(c)})
            for i, c in enumerate(stats)
            if c["pnl_ratio"] < 0
        ],
        claimed,
    )
    risk = _claim(
        [
            (i, {**c, "score": c["portfolio_weight"]})
            for i, c in enumerate(stats)
            if c["portfolio_weight"] > CONCENTRATION_WEIGHT_THRESHOLD
        ],
        claimed,
    )

    return {
        "profit_candidates": profit,
        "risk_candidates": risk,
        "underperform_candidates": underperform,
        "buy_candidate": _buy_candidate(stats, claimed),
    }


def empty_candidates() -> RebalanceCandidatesDTO:
    return {
        "profit_candidates": [],
        "risk_candidates": [],
        "underperform_candidates": [],
        "buy_candidate": None,
    }


def _candidate(token: TokenSnapshotDTO, total: float) -> RebalanceCandidateDTO:
    value = token_value(token)
    return {
        "token": token,
        "symbol": token.get("symbol", ""),
        "value": value,
        "portfolio_weight": value / total,
        "progress": progress_to_target(token),
        "pnl_ratio": pnl_ratio(token),
        "potential_multiplier": potential_multiplier(token),
        "conviction": conviction_of(token),
        "score": 0.0,
    }


def _profit_threshold(candidate: RebalanceCandidateDTO) -> float:
    return PROFIT_TAKING_THRESHOLDS[candidate["conviction"].name]


def _underperform_score(candidate: RebalanceCandidateDTO) -> float:
    # No market data: rank by raw loss
    potential = candidate["potential_multiplier"] or 1.0
    weight = UNDERPERFORM_SELL_WEIGHTS[candidate["conviction"].name]
    return (-candidate["pnl_ratio"] / potential) * weight


def _claim(
    scored: list[tuple[int, RebalanceCandidateDTO]], claimed: set[int]
) -> list[RebalanceCandidateDTO]:
    """Top unclaimed candidates by score; marks them claimed"""
    ranked = sorted(
        (item for item in scored if item[0] not in claimed),
        key=lambda item: item[1]["score"],
        reverse=True,
    )[:MAX_CANDIDATES_PER_BUCKET]
    claimed.update(i for i, _ in ranked)
    return [c for _, c in ranked]


def _buy_candidate(
    stats: list[RebalanceCandidateDTO], claimed: set[int]
) -> RebalanceCandidateDTO | None:
    scored = [
        (
            i,
            {
                **c,
                "score": c["potential_multiplier"]
                * BUY_CONVICTION_WEIGHTS[c["conviction"].name],
            },
        )
        for i, c in enumerate(stats)
    ]
    scored = [item for item in scored if item[1]["score"] > 0]
    if not scored:
        return None

    scored.sort(key=lambda item: item[1]["score"], reverse=True)
    for i, candidate in scored:
        if i not in claimed:
            return candidate
    # Every scorer is already a sell candidate
    return scored[0][1]
