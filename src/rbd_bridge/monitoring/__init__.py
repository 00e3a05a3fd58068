"""
Monitoring utilities for rbd-bridge.
"""

from rbd_bridge.monitoring.metrics import InMemoryMetricsCollector, ToolMetrics

__all__ = [
    "InMemoryMetricsCollector",
    "ToolMetrics",
]
