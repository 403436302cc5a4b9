"""
HyperSynergy — Hypergraph Coordinator

Tracks the named subsystems ("modules") of a host application, the weighted
undirected graph of relationships between them, and rolling performance
metrics. Audits classify every module's health and feed the reinforcement
layer.

Four independently guarded structures, each behind its own reader-writer
lock. Locks are always taken in this order to rule out deadlock:

  registry → matrix → metrics → history

Lifecycle:
  register_module()       — add (or reset) a module record
  establish_connection()  — add a symmetric weighted edge
  record_activity()       — count work, update cognitive load and latency
  record_error()          — count an error, log it
  audit_core_modules()    — classify every module, append to history
  get_performance_metrics() — snapshot with derived indicators

All operations are synchronous, never raise for unknown module names, and
are safe to call from any thread.
"""

from __future__ import annotations

import time
from collections import OrderedDict
from collections.abc import Callable
from typing import Any

import structlog

from hypersynergy.config import CoordinatorConfig
from hypersynergy.core.rwlock import ReadWriteLock
from hypersynergy.systems.coordinator.report import render_health_report
from hypersynergy.systems.coordinator.scoring import (
    assess_module,
    load_factor,
    memory_efficiency,
    synergy_coefficient,
    synergy_score,
)
from hypersynergy.systems.coordinator.types import (
    ModuleAudit,
    ModuleMetrics,
    ModuleStatus,
    PerformanceMetrics,
)

logger = structlog.get_logger("hypersynergy.systems.coordinator.service")


class HypergraphCoordinator:
    """
    Registry, synergy matrix, performance metrics and audit history for the
    host application's modules.

    The synergy matrix stores every edge twice, ``(a, b)`` and ``(b, a)``,
    with the same strength.
    """

    def __init__(
        self,
        config: CoordinatorConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._config = config or CoordinatorConfig()
        self._clock = clock
        self._logger = logger.bind(component="hypergraph_coordinator")

        # Insertion-ordered so audits come out in registration order
        self._registry: OrderedDict[str, ModuleMetrics] = OrderedDict()
        self._matrix: dict[tuple[str, str], float] = {}
        self._metrics = PerformanceMetrics()
        self._history: list[ModuleAudit] = []

        self._registry_lock = ReadWriteLock("registry")
        self._matrix_lock = ReadWriteLock("synergy_matrix")
        self._metrics_lock = ReadWriteLock("performance_metrics")
        self._history_lock = ReadWriteLock("audit_history")

        # Metrics
        self._total_audits: int = 0
        self._total_errors: int = 0

    @property
    def config(self) -> CoordinatorConfig:
        return self._config

    # ─── Registration ────────────────────────────────────────────────

    def register_module(self, module_name: str) -> None:
        """
        Register a module for tracking.

        Re-registering an existing name replaces its record with a fresh one,
        so its counters and connection set start over. Its position in the
        registry order is kept.
        """
        record = ModuleMetrics(name=module_name, last_activity=self._clock())
        with self._registry_lock.write_lock():
            self._registry[module_name] = record
        self._logger.info("module_registered", module_name=module_name)

    def set_memory_usage(self, module_name: str, memory_bytes: int) -> None:
        """External probe hook for a module's memory footprint."""
        if memory_bytes < 0:
            raise ValueError(f"memory_bytes must be non-negative, got {memory_bytes}")
        with self._registry_lock.write_lock():
            record = self._registry.get(module_name)
            if record is not None:
                record.memory_usage = memory_bytes

    # ─── Graph ───────────────────────────────────────────────────────

    def establish_connection(self, module_a: str, module_b: str, strength: float) -> None:
        """
        Connect two modules with a symmetric edge of the given strength.

        Either endpoint may be unregistered: its connection set is simply not
        touched, while both matrix entries are still written.
        """
        with self._registry_lock.write_lock(), self._matrix_lock.write_lock():
            metrics_a = self._registry.get(module_a)
            if metrics_a is not None:
                metrics_a.active_connections.add(module_b)
            metrics_b = self._registry.get(module_b)
            if metrics_b is not None:
                metrics_b.active_connections.add(module_a)

            self._matrix[(module_a, module_b)] = strength
            self._matrix[(module_b, module_a)] = strength

        self._logger.debug(
            "connection_established",
            module_a=module_a,
            module_b=module_b,
            strength=round(strength, 2),
        )

    def get_connection_strength(self, module_a: str, module_b: str) -> float | None:
        with self._matrix_lock.read_lock():
            return self._matrix.get((module_a, module_b))

    # ─── Recording ───────────────────────────────────────────────────

    def record_activity(self, module_name: str, operation_type: str, duration_s: float) -> None:
        """
        Record one operation of ``duration_s`` seconds on a module.

        Global metrics move even when the module is unknown.
        """
        now = self._clock()
        factor = load_factor(operation_type)

        with self._registry_lock.write_lock():
            record = self._registry.get(module_name)
            if record is not None:
                record.record_activity(
                    factor,
                    duration_s,
                    now,
                    decay=self._config.cognitive_load_decay,
                )

        alpha = self._config.response_time_alpha
        with self._metrics_lock.write_lock():
            self._metrics.total_operations += 1
            self._metrics.average_response_time = (
                self._metrics.average_response_time * (1 - alpha) + duration_s * alpha
            )

        self._logger.debug(
            "activity_recorded",
            module_name=module_name,
            operation_type=operation_type,
            duration_ms=round(duration_s * 1000.0, 3),
            registered=record is not None,
        )

    def record_error(self, module_name: str, error: str) -> None:
        """Count an error against a module. This is a sink, it never raises."""
        with self._registry_lock.write_lock():
            record = self._registry.get(module_name)
            if record is not None:
                record.record_error()
                self._total_errors += 1

        self._logger.warning(
            "module_error",
            module_name=module_name,
            error=error,
            registered=record is not None,
        )

    # ─── Audit ───────────────────────────────────────────────────────

    def audit_core_modules(self) -> list[ModuleAudit]:
        """
        Classify every registered module, in registration order, and append
        the results to the audit history.
        """
        now = self._clock()
        audits: list[ModuleAudit] = []

        with self._registry_lock.read_lock(), self._matrix_lock.read_lock():
            for module_name, metrics in self._registry.items():
                score = synergy_score(module_name, self._registry, self._matrix)
                status, issues, recommendations = assess_module(
                    metrics, score, now, self._config,
                )
                audits.append(ModuleAudit(
                    module_name=module_name,
                    status=status,
                    synergy_score=score,
                    connection_count=len(metrics.active_connections),
                    issues=issues,
                    recommendations=recommendations,
                ))

        limit = self._config.audit_history_limit
        trim = self._config.audit_history_trim
        with self._history_lock.write_lock():
            self._history.extend(audits)
            before = len(self._history)
            # Bulk drops repeat until the bound holds, however large the audit
            while len(self._history) > limit:
                del self._history[:trim]
            history_len = len(self._history)
            self._total_audits += 1

        if history_len < before:
            self._logger.debug(
                "audit_history_trimmed",
                dropped=before - history_len,
                remaining=history_len,
            )

        self._logger.info(
            "audit_completed",
            modules=len(audits),
            critical=sum(1 for a in audits if a.status == ModuleStatus.CRITICAL),
            disconnected=sum(1 for a in audits if a.status == ModuleStatus.DISCONNECTED),
        )
        return audits

    def generate_health_report(self) -> str:
        """Run an audit and render the human-readable health report."""
        audits = self.audit_core_modules()
        metrics = self.get_performance_metrics()
        return render_health_report(audits, metrics)

    # ─── State ───────────────────────────────────────────────────────

    def get_performance_metrics(self) -> PerformanceMetrics:
        """Snapshot with live synergy coefficient and memory efficiency."""
        with (
            self._registry_lock.read_lock(),
            self._matrix_lock.read_lock(),
            self._metrics_lock.read_lock(),
        ):
            return PerformanceMetrics(
                total_operations=self._metrics.total_operations,
                average_response_time=self._metrics.average_response_time,
                memory_efficiency=memory_efficiency(self._registry.values()),
                synergy_coefficient=synergy_coefficient(self._registry, self._matrix),
            )

    def get_module(self, module_name: str) -> ModuleMetrics | None:
        """Detached copy of a module record, or None."""
        with self._registry_lock.read_lock():
            record = self._registry.get(module_name)
            return record.model_copy(deep=True) if record is not None else None

    @property
    def module_names(self) -> list[str]:
        with self._registry_lock.read_lock():
            return list(self._registry.keys())

    @property
    def audit_history(self) -> list[ModuleAudit]:
        with self._history_lock.read_lock():
            return list(self._history)

    @property
    def stats(self) -> dict[str, Any]:
        metrics = self.get_performance_metrics()
        with self._registry_lock.read_lock(), self._matrix_lock.read_lock():
            modules = len(self._registry)
            total_errors = self._total_errors
            # Both directions are stored for every edge
            edges = len({frozenset(pair) for pair in self._matrix})
        with self._history_lock.read_lock():
            history_len = len(self._history)
            total_audits = self._total_audits
        return {
            "modules": modules,
            "edges": edges,
            "total_operations": metrics.total_operations,
            "total_errors": total_errors,
            "average_response_time_ms": round(metrics.average_response_time_ms, 3),
            "memory_efficiency": round(metrics.memory_efficiency, 4),
            "synergy_coefficient": round(metrics.synergy_coefficient, 4),
            "total_audits": total_audits,
            "audit_history_len": history_len,
        }
