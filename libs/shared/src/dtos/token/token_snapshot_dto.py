"""Token Snapshot DTO

Point-in-time record of one holding
"""

from typing import TypedDict

from libs.shared.src.dtos.token.exit_stage_dto import ExitStageDTO
from libs.shared.src.enums.conviction import Conviction
from libs.shared.src.enums.exit_strategy_kind import ExitStrategyKind


class TokenSnapshotDTO(TypedDict, total=False):
    """Token Snapshot

    Created and edited by the surrounding application; read-only to the engine.
    Missing numeric fields are treated as 0.
    """

    id: str
    symbol: str
    name: str
    chain: str
    pair_address: str
    amount: float
    price: float
    entry_price: float
    market_cap: float
    target_market_cap: float
    exit_strategy: ExitStrategyKind
    conviction: Conviction
    custom_exit_stages: list[ExitStageDTO] | None
    image_url: str | None
    percent_change_24h: float
