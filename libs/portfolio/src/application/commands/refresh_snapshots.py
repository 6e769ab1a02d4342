"""Refresh Snapshots Command

Implements RefreshSnapshotsPort Driving Port
"""

import logging

from injector import inject

from libs.portfolio.src.ports.market_data_provider_port import MarketDataProviderPort
from libs.portfolio.src.ports.refresh_snapshots_port import RefreshSnapshotsPort
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO


class RefreshSnapshotsCommand(RefreshSnapshotsPort):
    """Merge latest market quotes into token snapshots"""

    @inject
    def __init__(self, market_data: MarketDataProviderPort) -> None:
        """Initialize Command

        Args:
            market_data: Market data provider (injected by DI)
        """
        self._logger = logging.getLogger(self.__class__.__name__)
        self._market_data = market_data

    def execute(self, tokens: list[TokenSnapshotDTO]) -> list[TokenSnapshotDTO]:
        """
        Apply quotes per pair address

        Tokens without a pair address, without a quote, or whose lookup
        fails are returned unchanged (as copies).
        """
        refreshed: list[TokenSnapshotDTO] = []
        updated = 0

        for token in tokens:
            snapshot: TokenSnapshotDTO = {**token}
            pair_address = token.get("pair_address")
            chain = token.get("chain")

            if pair_address and chain:
                try:
                    quote = self._market_data.get_quote(chain, pair_address)
                except Exception as e:
                    self._logger.warning(
                        f"Quote for {token.get('symbol')} unavailable: {e}"
                    )
                    quote = None

                if quote:
                    snapshot["price"] = quote["price"]
                    snapshot["market_cap"] = quote["market_cap"]
                    snapshot["percent_change_24h"] = quote["percent_change_24h"]
                    if quote.get("image_url"):
                        snapshot["image_url"] = quote["image_url"]
                    updated += 1

            refreshed.append(snapshot)

        self._logger.info(f"Refreshed {updated}/{len(tokens)} tokens")
        return refreshed
