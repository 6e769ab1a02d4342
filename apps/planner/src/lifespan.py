"""Planner App Lifecycle Management

Apps-level DI configuration composing the libs' capabilities
"""

import logging

from injector import Injector

# Libs Modules
from libs.planning.src.lifespan import PlanningModule
from libs.portfolio.src.lifespan import PortfolioModule
from libs.rebalancing.src.lifespan import RebalancingModule
from libs.risk.src.lifespan import RiskModule

_injector: Injector | None = None


def startup() -> Injector:
    """Start the DI container with every context module"""
    global _injector

    # Silence per-request connection logs
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    _injector = Injector(
        [
            PlanningModule(),
            PortfolioModule(),
            RebalancingModule(),
            RiskModule(),
        ]
    )
    return _injector


def shutdown() -> None:
    """Shutdown and release resources"""
    global _injector
    _injector = None


def get_injector() -> Injector:
    """Get the DI container, starting it on first use"""
    global _injector
    if _injector is None:
        startup()
    return _injector
