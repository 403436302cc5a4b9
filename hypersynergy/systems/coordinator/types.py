"""
HyperSynergy — Coordinator Type Definitions

Data types for the module registry, the synergy graph, per-module audits
and process-wide performance metrics.
"""

from __future__ import annotations

import enum
import time
from datetime import datetime

from pydantic import Field

from hypersynergy.primitives.common import Identified, SynergyBaseModel, utc_now

# ─── Cognitive Load ───────────────────────────────────────────────────

# Per-operation weight applied to the duration of each recorded activity
LOAD_FACTORS: dict[str, float] = {
    "llm_completion": 0.8,
    "embedding": 0.5,
    "session_management": 0.3,
    "rag_query": 0.6,
    "hypergraph_update": 0.9,
}

DEFAULT_LOAD_FACTOR: float = 0.4


# ─── Module Status ────────────────────────────────────────────────────


class ModuleStatus(enum.StrEnum):
    """Audit classification of a tracked module."""

    HEALTHY = "healthy"
    WARNING = "warning"
    CRITICAL = "critical"
    DISCONNECTED = "disconnected"


# ─── Registry ─────────────────────────────────────────────────────────


class ModuleMetrics(SynergyBaseModel):
    """
    Coordinator's internal per-module record.

    Counters only ever grow. ``last_activity`` is a monotonic clock reading
    (seconds), not wall-clock time.
    """

    name: str
    active_connections: set[str] = Field(default_factory=set)
    message_count: int = 0
    error_count: int = 0
    last_activity: float = Field(default_factory=time.monotonic)
    # Written by external probes only
    memory_usage: int = 0
    # Leaky integrator over load_factor * duration
    cognitive_load: float = 0.0

    def record_activity(
        self,
        load_factor: float,
        duration_s: float,
        now: float,
        decay: float = 0.9,
    ) -> None:
        """Record one unit of work."""
        self.message_count += 1
        self.last_activity = now
        self.cognitive_load = (
            self.cognitive_load * decay + load_factor * duration_s * (1 - decay)
        )

    def record_error(self) -> None:
        self.error_count += 1


# ─── Audit ────────────────────────────────────────────────────────────


class ModuleAudit(Identified):
    """Snapshot of one module's classification at audit time."""

    module_name: str
    status: ModuleStatus
    synergy_score: float
    connection_count: int
    checked_at: datetime = Field(default_factory=utc_now)
    issues: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


# ─── Performance ──────────────────────────────────────────────────────


class PerformanceMetrics(SynergyBaseModel):
    """
    Process-wide performance indicators.

    ``total_operations`` and ``average_response_time`` are maintained on every
    recorded activity; ``memory_efficiency`` and ``synergy_coefficient`` are
    derived when a snapshot is read.
    """

    total_operations: int = 0
    # Seconds, EWMA over recorded activity durations
    average_response_time: float = 0.0
    memory_efficiency: float = 0.0
    synergy_coefficient: float = 0.0

    @property
    def average_response_time_ms(self) -> float:
        return self.average_response_time * 1000.0
