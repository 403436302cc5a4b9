"""
HyperSynergy — Coordinator Scoring

Pure functions over registry and matrix snapshots. Callers hold the
appropriate read locks; nothing here acquires one.

  synergy_score        — 0.5 * connectivity + 0.5 * mean edge strength
  synergy_coefficient  — mean synergy score across the registry
  memory_efficiency    — 1 / (1 + bytes-per-message / 1000)
  assess_module        — status classification plus advisory probes
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from hypersynergy.config import CoordinatorConfig
from hypersynergy.systems.coordinator.types import (
    DEFAULT_LOAD_FACTOR,
    LOAD_FACTORS,
    ModuleMetrics,
    ModuleStatus,
)

SynergyMatrix = Mapping[tuple[str, str], float]

# Weight of each component in the synergy score
_W_CONNECTIVITY: float = 0.5
_W_STRENGTH: float = 0.5


def load_factor(operation_type: str) -> float:
    """Cognitive weight of one operation type."""
    return LOAD_FACTORS.get(operation_type, DEFAULT_LOAD_FACTOR)


def synergy_score(
    module_name: str,
    registry: Mapping[str, ModuleMetrics],
    matrix: SynergyMatrix,
) -> float:
    """
    Blend of how many peers a module reaches and how strongly.

    A lone module scores 1.0. Unknown modules score 0.0. Connections with no
    matrix entry count towards connectivity but add no strength.
    """
    metrics = registry.get(module_name)
    if metrics is None:
        return 0.0

    max_connections = len(registry) - 1
    if max_connections == 0:
        return 1.0

    connection_count = len(metrics.active_connections)
    total_strength = sum(
        matrix.get((module_name, peer), 0.0)
        for peer in metrics.active_connections
    )
    average_strength = total_strength / connection_count if connection_count > 0 else 0.0
    connectivity = connection_count / max_connections

    return _W_CONNECTIVITY * connectivity + _W_STRENGTH * average_strength


def synergy_coefficient(
    registry: Mapping[str, ModuleMetrics],
    matrix: SynergyMatrix,
) -> float:
    """Mean synergy score, 0.0 for an empty registry."""
    if not registry:
        return 0.0
    total = sum(synergy_score(name, registry, matrix) for name in registry)
    return total / len(registry)


def memory_efficiency(records: Iterable[ModuleMetrics]) -> float:
    total_memory = 0
    total_messages = 0
    for record in records:
        total_memory += record.memory_usage
        total_messages += record.message_count

    if total_messages == 0:
        return 1.0
    return 1.0 / (1.0 + (total_memory / total_messages) / 1000.0)


def assess_module(
    metrics: ModuleMetrics,
    score: float,
    now: float,
    config: CoordinatorConfig,
) -> tuple[ModuleStatus, list[str], list[str]]:
    """
    Classify one module. First matching rule wins:

      1. error_count > critical_error_threshold  → CRITICAL
      2. no active connections                   → DISCONNECTED
      3. score < warning_synergy_threshold       → WARNING
      4. otherwise                               → HEALTHY

    Staleness and cognitive-load probes append issues without changing the
    status.
    """
    issues: list[str] = []
    recommendations: list[str] = []

    if metrics.error_count > config.critical_error_threshold:
        status = ModuleStatus.CRITICAL
        issues.append("High error count detected")
        recommendations.append("Review error handling and add circuit breakers")
    elif not metrics.active_connections:
        status = ModuleStatus.DISCONNECTED
        issues.append("Module appears disconnected")
        recommendations.append("Establish connections with related modules")
    elif score < config.warning_synergy_threshold:
        status = ModuleStatus.WARNING
        issues.append("Low synergy score")
        recommendations.append("Improve inter-module communication patterns")
    else:
        status = ModuleStatus.HEALTHY

    if now - metrics.last_activity > config.stale_activity_seconds:
        issues.append("No recent activity")
        recommendations.append("Verify module is active and responding")

    if metrics.cognitive_load > config.cognitive_load_threshold:
        issues.append("High cognitive load")
        recommendations.append("Consider load balancing or resource optimization")

    return status, issues, recommendations
