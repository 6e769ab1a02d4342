"""
Rebalancing Context Lifecycle Management

Provides dependency injection for rebalancing use cases
Follows P&A architecture: Driving Port → Application Service
"""

import logging

from injector import Injector, Module, provider, singleton

# Driving Ports
from libs.rebalancing.src.ports.advise_rebalance_port import AdviseRebalancePort
from libs.rebalancing.src.ports.generate_ai_rebalance_plan_port import (
    GenerateAiRebalancePlanPort,
)

# Application Services
from libs.rebalancing.src.application.queries.advise_rebalance import (
    AdviseRebalanceQuery,
)
from libs.rebalancing.src.application.queries.generate_ai_rebalance_plan import (
    GenerateAiRebalancePlanQuery,
)

# Driven Ports
from libs.rebalancing.src.ports.ai_rebalance_planner_port import (
    AiRebalancePlannerPort,
)
from libs.rebalancing.src.adapters.driven.static.rule_based_rebalance_planner_adapter import (
    RuleBasedRebalancePlannerAdapter,
)


class RebalancingModule(Module):
    """Rebalancing dependency injection module"""

    @singleton
    @provider
    def provide_advise_rebalance(self) -> AdviseRebalancePort:
        return AdviseRebalanceQuery()

    @singleton
    @provider
    def provide_generate_ai_rebalance_plan(
        self, planner: AiRebalancePlannerPort
    ) -> GenerateAiRebalancePlanPort:
        return GenerateAiRebalancePlanQuery(planner=planner)

    # ============================================
    # Driven Ports → Adapters
    # ============================================

    @singleton
    @provider
    def provide_ai_rebalance_planner(self) -> AiRebalancePlannerPort:
        return RuleBasedRebalancePlannerAdapter()


_injector: Injector | None = None


def startup() -> Injector:
    """Start dependency injection container"""
    global _injector
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    _injector = Injector([RebalancingModule()])
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
configure = RebalancingModule()
