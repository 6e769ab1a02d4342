"""Refresh Snapshots Driving Port"""

from typing import Protocol

from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO


class RefreshSnapshotsPort(Protocol):
    """Refresh snapshots with latest market data

    CLI Entry: exit-planner refresh
    """

    def execute(self, tokens: list[TokenSnapshotDTO]) -> list[TokenSnapshotDTO]:
        """
        Apply latest quotes

        Returns:
            list[TokenSnapshotDTO]: New snapshots; inputs are not modified
        """
        ...
