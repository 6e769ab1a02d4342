"""
Planning Context Lifecycle Management

Provides dependency injection for exit strategy use cases
Follows P&A architecture: Driving Port → Application Service
"""

import logging

from injector import Injector, Module, provider, singleton

# Driving Ports
from libs.planning.src.ports.compare_strategies_port import CompareStrategiesPort
from libs.planning.src.ports.generate_ai_strategy_port import GenerateAiStrategyPort

# Application Services
from libs.planning.src.application.queries.compare_strategies import (
    CompareStrategiesQuery,
)
from libs.planning.src.application.queries.generate_ai_strategy import (
    GenerateAiStrategyQuery,
)

# Driven Ports
from libs.planning.src.ports.ai_strategy_planner_port import AiStrategyPlannerPort
from libs.planning.src.adapters.driven.static.rule_based_strategy_planner_adapter import (
    RuleBasedStrategyPlannerAdapter,
)


class PlanningModule(Module):
    """Planning dependency injection module"""

    @singleton
    @provider
    def provide_compare_strategies(self) -> CompareStrategiesPort:
        return CompareStrategiesQuery()

    @singleton
    @provider
    def provide_generate_ai_strategy(
        self, planner: AiStrategyPlannerPort
    ) -> GenerateAiStrategyPort:
        return GenerateAiStrategyQuery(planner=planner)

    # ============================================
    # Driven Ports → Adapters
    # ============================================

    @singleton
    @provider
    def provide_ai_strategy_planner(self) -> AiStrategyPlannerPort:
        return RuleBasedStrategyPlannerAdapter()


_injector: Injector | None = None


def startup() -> Injector:
    """Start dependency injection container"""
    global _injector
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    _injector = Injector([PlanningModule()])
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
configure = PlanningModule()
