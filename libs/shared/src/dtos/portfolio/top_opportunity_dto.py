"""Top Opportunity DTO"""

from typing import TypedDict

from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO


class TopOpportunityDTO(TypedDict):
    """Token ranked by raw potential multiplier"""

    token: TokenSnapshotDTO
    symbol: str
    potential_multiplier: float
