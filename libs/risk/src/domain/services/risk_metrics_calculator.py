"""Risk Metrics Calculator

Snapshot-derived risk metrics. Each token contributes one return,
(current value - entry value) / entry value, so the "series" is
cross-sectional rather than historical.
"""

import math

import numpy as np
from scipy import stats

from libs.shared.src.constants.risk_settings import (
    ANNUALIZATION_FACTOR,
    CONVICTION_RISK,
    DEFAULT_BETA,
    MARKET_CAP_RISK_REFERENCE,
    MARKET_RETURN,
    RISK_FREE_RATE,
    TRACKING_ERROR,
    VAR_CONFIDENCE,
)
from libs.shared.src.domain.services.token_metrics import (
    conviction_of,
    entry_value,
    portfolio_value,
    potential_multiplier,
    token_return,
    token_value,
)
from libs.shared.src.dtos.risk.risk_metrics_dto import (
    CorrelationMatrix,
    RiskMetricsDTO,
)
from libs.shared.src.dtos.risk.risk_settings_dto import RiskSettingsDTO
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO


def default_risk_settings() -> RiskSettingsDTO:
    return {
        "risk_free_rate": RISK_FREE_RATE,
        "market_return": MARKET_RETURN,
        "beta": DEFAULT_BETA,
        "tracking_error": TRACKING_ERROR,
        "annualization_factor": ANNUALIZATION_FACTOR,
        "var_confidence": VAR_CONFIDENCE,
    }


def token_returns(tokens: list[TokenSnapshotDTO]) -> list[float]:
    return [token_return(t) for t in tokens]


def portfolio_return(tokens: list[TokenSnapshotDTO]) -> float:
    """(total value - total cost) / total cost, 0 without a cost basis"""
    cost = sum(entry_value(t) for t in tokens)
    if cost <= 0:
        return 0.0
    return (portfolio_value(tokens) - cost) / cost


def volatility(returns: list[float]) -> float:
    """Population standard deviation"""
    if len(returns) == 0:
        return 0.0
    return float(np.std(returns))


def sharpe_ratio(base_return: float, vol: float, risk_free_rate: float) -> float:
    if vol <= 0:
        return 0.0
    return (base_return - risk_free_rate) / vol


def sortino_ratio(returns: list[float], risk_free_rate: float) -> float:
    """
    Mean excess return over downside deviation

    Downside deviation is the population stdev of the negative returns only,
    so fewer than two losers (or identical losers) gives 0.
    """
    if len(returns) == 0:
        return 0.0
    downside = volatility([r for r in returns if r < 0])
    if downside <= 0:
        return 0.0
    return (float(np.mean(returns)) - risk_free_rate) / downside


def max_drawdown(returns: list[float]) -> float:
    """
    Largest peak-to-trough fall of the compounded return walk

    Returns:
        float: Drawdown as a fraction of the peak (0 to 1)
    """
    worst = 0.0
    peak = 0.0
    cumulative = 1.0
    for r in returns:
        cumulative *= 1 + r
        peak = max(peak, cumulative)
        if peak <= 0:
            continue
        worst = max(worst, (peak - cumulative) / peak)
    return worst


def value_at_risk(returns: list[float], confidence: float = VAR_CONFIDENCE) -> float:
    """
    Historical VaR

    The return at index floor((1 - confidence) × n) of the ascending sort.

    Returns:
        float: VaR (negative means loss), 0 for no returns
    """
    if len(returns) == 0:
        return 0.0
    ordered = sorted(returns)
    index = math.floor((1 - confidence) * len(ordered))
    return float(ordered[min(index, len(ordered) - 1)])


def conditional_value_at_risk(
    returns: list[float], confidence: float = VAR_CONFIDENCE
) -> float:
    """Expected shortfall: mean of the returns at or below VaR"""
    if len(returns) == 0:
        return 0.0
    var = value_at_risk(returns, confidence)
    tail = [r for r in returns if r <= var]
    return float(np.mean(tail))


def parametric_value_at_risk(
    returns: list[float], confidence: float = VAR_CONFIDENCE
) -> float:
    """Normal VaR: mean + stdev × z(1 - confidence)"""
    if len(returns) == 0:
        return 0.0
    z_alpha = stats.norm.ppf(1 - confidence)
    return float(np.mean(returns) + volatility(returns) * z_alpha)


def alpha(base_return: float, settings: RiskSettingsDTO) -> float:
    """Jensen's alpha against the configured market return"""
    rf = settings["risk_free_rate"]
    return base_return - (rf + settings["beta"] * (settings["market_return"] - rf))


def token_risk(token: TokenSnapshotDTO) -> float:
    """
    Heuristic per-token risk

    Market cap risk (1 at or below the reference cap, shrinking above it)
    scaled by conviction risk.
    """
    market_cap = token.get("market_cap") or 0
    market_cap_risk = (
        min(1.0, MARKET_CAP_RISK_REFERENCE / market_cap) if market_cap > 0 else 1.0
    )
    return market_cap_risk * CONVICTION_RISK[conviction_of(token).name]


def current_weights(tokens: list[TokenSnapshotDTO]) -> dict[str, float]:
    """symbol -> percentage of portfolio value"""
    total = portfolio_value(tokens)
    weights: dict[str, float] = {}
    for token in tokens:
        symbol = token.get("symbol") or ""
        share = token_value(token) / total * 100 if total > 0 else 0.0
        weights[symbol] = weights.get(symbol, 0.0) + share
    return weights


def concentration_risk(tokens: list[TokenSnapshotDTO]) -> float:
    """max(largest weight, HHI × 100), in percent"""
    weights = list(current_weights(tokens).values())
    if len(weights) == 0:
        return 0.0
    hhi = sum((w / 100) ** 2 for w in weights)
    return max(max(weights), hhi * 100)


def _feature_matrix(tokens: list[TokenSnapshotDTO]) -> np.ndarray:
    rows = [
        [
            token_return(t),
            (t.get("percent_change_24h") or 0) / 100,
            math.log1p(potential_multiplier(t)),
            CONVICTION_RISK[conviction_of(t).name],
        ]
        for t in tokens
    ]
    features = np.asarray(rows, dtype=float)

    # Z-score each feature across tokens; constant features carry no signal
    std = features.std(axis=0)
    centered = features - features.mean(axis=0)
    return np.divide(
        centered, std, out=np.zeros_like(centered), where=std > 0
    )


def correlation_matrix(tokens: list[TokenSnapshotDTO]) -> CorrelationMatrix:
    """
    Deterministic token-to-token correlation

    Each token is described by its standardized snapshot features
    (return, 24h change, log potential, conviction risk); rows are
    correlated with numpy.corrcoef. Tokens sharing a symbol are averaged
    into one row. Undefined entries become 0 and the diagonal is 1.

    Args:
        tokens: Token snapshots

    Returns:
        CorrelationMatrix: symbol -> symbol -> correlation
    """
    labels = [t.get("symbol") or "" for t in tokens]
    symbols = list(dict.fromkeys(labels))
    if len(symbols) == 0:
        return {}
    if len(symbols) == 1:
        return {symbols[0]: {symbols[0]: 1.0}}

    features = _feature_matrix(tokens)
    rows = np.array(
        [
            features[[i for i, label in enumerate(labels) if label == symbol]].mean(
                axis=0
            )
            for symbol in symbols
        ]
    )

    with np.errstate(invalid="ignore", divide="ignore"):
        corr = np.corrcoef(rows)
    corr = np.nan_to_num(corr, nan=0.0)
    np.fill_diagonal(corr, 1.0)

    return {
        a: {b: float(corr[i, j]) for j, b in enumerate(symbols)}
        for i, a in enumerate(symbols)
    }


def average_correlation(matrix: CorrelationMatrix) -> float:
    """Mean of the off-diagonal upper triangle, 0 below two tokens"""
    symbols = list(matrix)
    pairs = [
        matrix[a].get(b, 0.0)
        for i, a in enumerate(symbols)
        for b in symbols[i + 1 :]
    ]
    if len(pairs) == 0:
        return 0.0
    return float(np.mean(pairs))


def compute_risk_metrics(
    tokens: list[TokenSnapshotDTO], settings: RiskSettingsDTO
) -> RiskMetricsDTO:
    """
    Portfolio risk metrics from token snapshots

    Args:
        tokens: Token snapshots
        settings: Risk-free rate, market assumptions and VaR confidence

    Returns:
        RiskMetricsDTO: Ratios, tail risk, correlation and concentration
    """
    returns = token_returns(tokens)
    vol = volatility(returns)
    base_return = portfolio_return(tokens)
    confidence = settings["var_confidence"]
    matrix = correlation_matrix(tokens)

    return {
        "sharpe_ratio": sharpe_ratio(base_return, vol, settings["risk_free_rate"]),
        "sortino_ratio": sortino_ratio(returns, settings["risk_free_rate"]),
        "max_drawdown": max_drawdown(returns),
        "volatility": vol,
        "var_95": value_at_risk(returns, confidence),
        "cvar_95": conditional_value_at_risk(returns, confidence),
        "parametric_var_95": parametric_value_at_risk(returns, confidence),
        "beta": settings["beta"],
        "alpha": alpha(base_return, settings),
        "correlation": average_correlation(matrix),
        "correlation_matrix": matrix,
        "concentration_risk": concentration_risk(tokens),
    }
