"""
Portfolio Context Lifecycle Management

Provides dependency injection for portfolio analytics use cases
Follows P&A architecture: Driving Port → Application Service
"""

import logging
import os

from injector import Injector, Module, provider, singleton

# Driving Ports
from libs.portfolio.src.ports.get_portfolio_summary_port import (
    GetPortfolioSummaryPort,
)
from libs.portfolio.src.ports.get_cash_flow_projection_port import (
    GetCashFlowProjectionPort,
)
from libs.portfolio.src.ports.refresh_snapshots_port import RefreshSnapshotsPort

# Application Services
from libs.portfolio.src.application.queries.get_portfolio_summary import (
    GetPortfolioSummaryQuery,
)
from libs.portfolio.src.application.queries.get_cash_flow_projection import (
    GetCashFlowProjectionQuery,
)
from libs.portfolio.src.application.commands.refresh_snapshots import (
    RefreshSnapshotsCommand,
)

# Driven Ports
from libs.portfolio.src.ports.token_snapshot_provider_port import (
    TokenSnapshotProviderPort,
)
from libs.portfolio.src.ports.market_data_provider_port import MarketDataProviderPort

# Driven Adapters
from libs.portfolio.src.adapters.driven.file.token_snapshot_file_adapter import (
    TokenSnapshotFileAdapter,
)
from libs.portfolio.src.adapters.driven.dexscreener.dexscreener_market_data_adapter import (
    DexScreenerMarketDataAdapter,
)

DEFAULT_PORTFOLIO_PATH = "data/portfolio.json"


class PortfolioModule(Module):
    """Portfolio dependency injection module"""

    @singleton
    @provider
    def provide_get_portfolio_summary(self) -> GetPortfolioSummaryPort:
        return GetPortfolioSummaryQuery()

    @singleton
    @provider
    def provide_get_cash_flow_projection(self) -> GetCashFlowProjectionPort:
        return GetCashFlowProjectionQuery()

    @singleton
    @provider
    def provide_refresh_snapshots(
        self, market_data: MarketDataProviderPort
    ) -> RefreshSnapshotsPort:
        return RefreshSnapshotsCommand(market_data=market_data)

    # ============================================
    # Driven Ports → Adapters
    # ============================================

    @singleton
    @provider
    def provide_token_snapshot_provider(self) -> TokenSnapshotProviderPort:
        path = os.getenv("EXIT_PLANNER_PORTFOLIO_PATH", DEFAULT_PORTFOLIO_PATH)
        return TokenSnapshotFileAdapter(file_path=path)

    @singleton
    @provider
    def provide_market_data_provider(self) -> MarketDataProviderPort:
        return DexScreenerMarketDataAdapter()


_injector: Injector | None = None


def startup() -> Injector:
    """Start dependency injection container"""
    global _injector
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    _injector = Injector([PortfolioModule()])
    return _injector


def shutdown() -> None:
    """Shutdown and release resources"""
    global _injector
    _injector = None


def get_injector() -> Injector:
    """Get dependency injection container"""
    if _injector is None:
        raise RuntimeError("Injector not initialized. Call startup() first.")
    return _injector


# Alias for libs composition
configure = PortfolioModule()
