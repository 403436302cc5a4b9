"""Unit tests for health report rendering."""

from __future__ import annotations

from hypersynergy.systems.coordinator.report import render_health_report
from hypersynergy.systems.coordinator.types import (
    ModuleAudit,
    ModuleStatus,
    PerformanceMetrics,
)


def _audit(name: str, status: ModuleStatus, **kwargs) -> ModuleAudit:
    defaults = {"synergy_score": 0.9, "connection_count": 1}
    defaults.update(kwargs)
    return ModuleAudit(module_name=name, status=status, **defaults)


def test_empty_report_has_all_sections():
    report = render_health_report([], PerformanceMetrics(memory_efficiency=1.0))
    assert "Hypergraph Synergy Report" in report
    assert "Performance Metrics:" in report
    assert "Module Status Summary:" in report
    assert "Detailed Module Analysis:" in report
    assert "Memory Efficiency: 100.00%" in report
    for label in ("Healthy: 0", "Warning: 0", "Critical: 0", "Disconnected: 0"):
        assert label in report


def test_metrics_block_units():
    metrics = PerformanceMetrics(
        total_operations=1234,
        average_response_time=0.0425,
        memory_efficiency=0.5,
        synergy_coefficient=0.875,
    )
    report = render_health_report([], metrics)
    assert "Total Operations: 1,234" in report
    assert "Average Response Time: 42.50ms" in report
    assert "Memory Efficiency: 50.00%" in report
    assert "Synergy Coefficient: 87.50%" in report


def test_status_counts_and_module_sections():
    audits = [
        _audit("client", ModuleStatus.HEALTHY),
        _audit("rag", ModuleStatus.HEALTHY),
        _audit(
            "session",
            ModuleStatus.CRITICAL,
            synergy_score=0.25,
            connection_count=0,
            issues=["High error count detected"],
            recommendations=["Review error handling and add circuit breakers"],
        ),
    ]
    report = render_health_report(audits, PerformanceMetrics())

    assert "Healthy: 2" in report
    assert "Critical: 1" in report
    assert "[CRIT] session (Synergy: 25.00%, Connections: 0)" in report
    assert "• High error count detected" in report
    assert "→ Review error handling and add circuit breakers" in report
    assert "[ OK ] client (Synergy: 90.00%, Connections: 1)" in report


def test_healthy_module_has_no_issue_block():
    report = render_health_report([_audit("a", ModuleStatus.HEALTHY)], PerformanceMetrics())
    assert "Issues:" not in report
    assert "Recommendations:" not in report
