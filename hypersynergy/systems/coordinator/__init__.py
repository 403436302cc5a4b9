"""
HyperSynergy — Hypergraph Coordinator

Module registry, synergy graph, rolling performance metrics and health
audits for the subsystems of a host application.
"""

from hypersynergy.systems.coordinator.errors import (
    AlreadyInitialisedError,
    NotInitialisedError,
    SynergyError,
)
from hypersynergy.systems.coordinator.report import render_health_report
from hypersynergy.systems.coordinator.runtime import (
    audit_core_modules,
    establish_connection,
    generate_health_report,
    get_coordinator,
    get_performance_metrics,
    init_coordinator,
    record_activity,
    record_error,
    register_module,
)
from hypersynergy.systems.coordinator.service import HypergraphCoordinator
from hypersynergy.systems.coordinator.types import (
    ModuleAudit,
    ModuleMetrics,
    ModuleStatus,
    PerformanceMetrics,
)

__all__ = [
    # Service
    "HypergraphCoordinator",
    # Process-wide instance
    "init_coordinator",
    "get_coordinator",
    "register_module",
    "establish_connection",
    "record_activity",
    "record_error",
    "audit_core_modules",
    "get_performance_metrics",
    "generate_health_report",
    # Rendering
    "render_health_report",
    # Errors
    "SynergyError",
    "NotInitialisedError",
    "AlreadyInitialisedError",
    # Types
    "ModuleAudit",
    "ModuleMetrics",
    "ModuleStatus",
    "PerformanceMetrics",
]
