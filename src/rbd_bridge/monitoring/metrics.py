"""
In-memory metrics collector for rbd-bridge.

This module keeps lightweight invocation counters without external dependencies.
"""

from dataclasses import dataclass
from threading import Lock
from typing import Any, Dict

OUTCOMES = ("success", "not_found", "failed")


@dataclass(frozen=True)
class ToolMetrics:
    """Immutable view of invocation counters for one tool."""

    total: int = 0
    success: int = 0
    not_found: int = 0
    failed: int = 0
    avg_duration_ms: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Return the counters as a plain dictionary."""
        return {
            "total": self.total,
            "success": self.success,
            "not_found": self.not_found,
            "failed": self.failed,
            "avg_duration_ms": self.avg_duration_ms,
        }


class InMemoryMetricsCollector:
    """
    Simple in-memory metrics collector.

    Counts external tool invocations by outcome.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._counts: Dict[str, Dict[str, int]] = {}
        self._durations: Dict[str, float] = {}

    def record_invocation(self, tool: str, outcome: str, duration_ms: float = 0.0) -> None:
        """Record one finished invocation of ``tool``."""
        if outcome not in OUTCOMES:
            raise ValueError(f"Unknown outcome: {outcome}")
        with self._lock:
            counts = self._counts.setdefault(tool, dict.fromkeys(OUTCOMES, 0))
            counts[outcome] += 1
            self._durations[tool] = self._durations.get(tool, 0.0) + duration_ms

    def snapshot(self) -> Dict[str, Dict[str, Any]]:
        """Compute and return current counters keyed by tool name."""
        with self._lock:
            counts = {tool: dict(c) for tool, c in self._counts.items()}
            durations = dict(self._durations)

        result = {}
        for tool, c in counts.items():
            total = sum(c.values())
            result[tool] = ToolMetrics(
                total=total,
                success=c["success"],
                not_found=c["not_found"],
                failed=c["failed"],
                avg_duration_ms=round(durations[tool] / total, 2) if total else 0.0,
            ).to_dict()
        return result

    def reset(self) -> None:
        """Reset all collected metrics."""
        with self._lock:
            self._counts.clear()
            self._durations.clear()
