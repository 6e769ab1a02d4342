"""Token Snapshot Provider Port"""

from typing import Protocol

from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO


class TokenSnapshotProviderPort(Protocol):
    """Token Snapshot Provider Port

    Supplies the holdings the engine analyses
    """

    def get_tokens(self) -> list[TokenSnapshotDTO]:
        """Get token snapshots

        Returns:
            list[TokenSnapshotDTO]: Holdings, empty if none are stored
        """
        ...

    def save_tokens(self, tokens: list[TokenSnapshotDTO]) -> None:
        """Replace stored snapshots

        Args:
            tokens: Holdings to store
        """
        ...
