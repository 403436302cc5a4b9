"""
HyperSynergy — Health Report Rendering

Turns an audit run plus a metrics snapshot into a plain-text report.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from hypersynergy.systems.coordinator.types import (
    ModuleAudit,
    ModuleStatus,
    PerformanceMetrics,
)

_STATUS_MARKERS: dict[ModuleStatus, str] = {
    ModuleStatus.HEALTHY: "[ OK ]",
    ModuleStatus.WARNING: "[WARN]",
    ModuleStatus.CRITICAL: "[CRIT]",
    ModuleStatus.DISCONNECTED: "[DISC]",
}


def render_health_report(
    audits: Sequence[ModuleAudit],
    metrics: PerformanceMetrics,
) -> str:
    """Return a human-readable health report."""
    counts = Counter(audit.status for audit in audits)

    lines = [
        "━━━ Hypergraph Synergy Report ━━━",
        "",
        "Performance Metrics:",
        f"  Total Operations: {metrics.total_operations:,}",
        f"  Average Response Time: {metrics.average_response_time_ms:.2f}ms",
        f"  Memory Efficiency: {metrics.memory_efficiency * 100:.2f}%",
        f"  Synergy Coefficient: {metrics.synergy_coefficient * 100:.2f}%",
        "",
        "Module Status Summary:",
    ]
    for status in ModuleStatus:
        lines.append(f"  {status.value.capitalize()}: {counts.get(status, 0)}")

    lines += ["", "Detailed Module Analysis:"]
    for audit in audits:
        lines.append("")
        lines.append(
            f"{_STATUS_MARKERS[audit.status]} {audit.module_name} "
            f"(Synergy: {audit.synergy_score * 100:.2f}%, "
            f"Connections: {audit.connection_count})"
        )
        if audit.issues:
            lines.append("  Issues:")
            lines.extend(f"    • {issue}" for issue in audit.issues)
        if audit.recommendations:
            lines.append("  Recommendations:")
            lines.extend(f"    → {rec}" for rec in audit.recommendations)

    return "\n".join(lines) + "\n"
