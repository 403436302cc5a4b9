"""
HyperSynergy — Process-wide Coordinator

init_coordinator() builds the coordinator once and returns it; the module
global only caches that handle. The convenience functions below resolve it
on every call and raise NotInitialisedError before init.
"""

from __future__ import annotations

import threading

from hypersynergy.config import CoordinatorConfig
from hypersynergy.systems.coordinator.errors import (
    AlreadyInitialisedError,
    NotInitialisedError,
)
from hypersynergy.systems.coordinator.service import HypergraphCoordinator
from hypersynergy.systems.coordinator.types import ModuleAudit, PerformanceMetrics

# Global instance (initialised by the host application)
_coordinator: HypergraphCoordinator | None = None
_init_lock = threading.Lock()


def init_coordinator(config: CoordinatorConfig | None = None) -> HypergraphCoordinator:
    """Initialise the global hypergraph coordinator. Succeeds at most once."""
    global _coordinator
    with _init_lock:
        if _coordinator is not None:
            raise AlreadyInitialisedError("Hypergraph coordinator already initialised")
        _coordinator = HypergraphCoordinator(config)
        return _coordinator


def get_coordinator() -> HypergraphCoordinator:
    """Get the global hypergraph coordinator."""
    coordinator = _coordinator
    if coordinator is None:
        raise NotInitialisedError("Hypergraph coordinator not initialised")
    return coordinator


def register_module(module_name: str) -> None:
    get_coordinator().register_module(module_name)


def establish_connection(module_a: str, module_b: str, strength: float) -> None:
    get_coordinator().establish_connection(module_a, module_b, strength)


def record_activity(module_name: str, operation_type: str, duration_s: float) -> None:
    get_coordinator().record_activity(module_name, operation_type, duration_s)


def record_error(module_name: str, error: str) -> None:
    get_coordinator().record_error(module_name, error)


def audit_core_modules() -> list[ModuleAudit]:
    return get_coordinator().audit_core_modules()


def get_performance_metrics() -> PerformanceMetrics:
    return get_coordinator().get_performance_metrics()


def generate_health_report() -> str:
    return get_coordinator().generate_health_report()
