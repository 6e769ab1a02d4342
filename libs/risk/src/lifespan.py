"""
Risk Context Lifecycle Management

Provides dependency injection for risk analytics use cases
Follows P&A architecture: Driving Port → Application Service
"""

import logging
import os

from injector import Injector, Module, provider, singleton

# Driving Ports
from libs.risk.src.ports.get_risk_report_port import GetRiskReportPort
from libs.risk.src.ports.get_optimization_recommendations_port import (
    GetOptimizationRecommendationsPort,
)

# Application Services
from libs.risk.src.application.queries.get_risk_report import GetRiskReportQuery
from libs.risk.src.application.queries.get_optimization_recommendations import (
    GetOptimizationRecommendationsQuery,
)

from libs.risk.src.domain.services.risk_metrics_calculator import (
    default_risk_settings,
)
from libs.shared.src.dtos.risk.risk_settings_dto import RiskSettingsDTO


def load_risk_settings() -> RiskSettingsDTO:
    """Defaults, with the risk-free rate overridable from the environment"""
    settings = default_risk_settings()
    risk_free_rate = os.getenv("EXIT_PLANNER_RISK_FREE_RATE")
    if risk_free_rate:
        settings["risk_free_rate"] = float(risk_free_rate)
    return settings


class RiskModule(Module):
    """Risk dependency injection module"""

    @singleton
    @provider
    def provide_risk_settings(self) -> RiskSettingsDTO:
        return load_risk_settings()

    @singleton
    @provider
    def provide_get_risk_report(self, settings: RiskSettingsDTO) -> GetRiskReportPort:
        return GetRiskReportQuery(settings=settings)

    @singleton
    @provider
    def provide_get_optimization_recommendations(
        self, settings: RiskSettingsDTO
    ) -> GetOptimizationRecommendationsPort:
        return GetOptimizationRecommendationsQuery(settings=settings)


_injector: Injector | None = None


def startup() -> Injector:
    """Start dependency injection container"""
    global _injector
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    _injector = Injector([RiskModule()])
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
configure = RiskModule()
