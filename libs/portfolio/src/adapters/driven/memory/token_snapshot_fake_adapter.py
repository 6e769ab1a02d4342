"""Token Snapshot Fake Adapter"""

from libs.portfolio.src.ports.token_snapshot_provider_port import (
    TokenSnapshotProviderPort,
)
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO


class TokenSnapshotFakeAdapter(TokenSnapshotProviderPort):
    """In-memory token snapshots"""

    def __init__(self, tokens: list[TokenSnapshotDTO] | None = None) -> None:
        self._tokens = list(tokens or [])

    def set_tokens(self, tokens: list[TokenSnapshotDTO]) -> None:
        self._tokens = list(tokens)

    def get_tokens(self) -> list[TokenSnapshotDTO]:
        return list(self._tokens)

    def save_tokens(self, tokens: list[TokenSnapshotDTO]) -> None:
        self._tokens = list(tokens)
