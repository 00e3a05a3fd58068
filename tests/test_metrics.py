"""
Unit tests for the in-memory invocation metrics collector.
"""

import pytest

from rbd_bridge.monitoring.metrics import InMemoryMetricsCollector, ToolMetrics


class TestInMemoryMetricsCollector:
    """Tests for InMemoryMetricsCollector."""

    def test_empty_snapshot(self):
        assert InMemoryMetricsCollector().snapshot() == {}

    def test_counts_and_average(self):
        collector = InMemoryMetricsCollector()
        collector.record_invocation("rbd", "success", 10.0)
        collector.record_invocation("rbd", "failed", 30.0)
        collector.record_invocation("rados", "success", 5.0)

        snapshot = collector.snapshot()

        assert snapshot["rbd"] == {
            "total": 2,
            "success": 1,
            "not_found": 0,
            "failed": 1,
            "avg_duration_ms": 20.0,
        }
        assert snapshot["rados"]["total"] == 1

    def test_unknown_outcome(self):
        with pytest.raises(ValueError):
            InMemoryMetricsCollector().record_invocation("rbd", "maybe")

    def test_reset(self):
        collector = InMemoryMetricsCollector()
        collector.record_invocation("rbd", "not_found")

        collector.reset()

        assert collector.snapshot() == {}


class TestToolMetrics:
    """Tests for the ToolMetrics snapshot type."""

    def test_defaults(self):
        assert ToolMetrics().to_dict()["total"] == 0
