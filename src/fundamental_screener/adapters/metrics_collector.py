"""
In-Memory Metrics Collector.

A thread-safe metrics collector that keeps every sample in memory.
Worker threads record per-candidate timings concurrently.
"""

from __future__ import annotations

from datetime import datetime
from threading import Lock
from typing import Any, Dict, List, Optional


class InMemoryMetricsCollector:
    """Simple in-memory metrics collector."""

    def __init__(self) -> None:
        self._metrics: Dict[str, List[Dict[str, Any]]] = {}
        self._lock = Lock()

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._record(name, "timing", duration_seconds, tags)

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._record(name, "count", value, tags)

    def record_gauge(
        self,
        name: str,
        value: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._record(name, "gauge", value, tags)

    def get_values(
        self,
        name: str,
        tags: Optional[Dict[str, str]] = None,
    ) -> List[float]:
        """Raw values of a metric, optionally only samples carrying ``tags``."""
        with self._lock:
            entries = list(self._metrics.get(name, []))
        if tags:
            entries = [
                e for e in entries if all(e["tags"].get(k) == v for k, v in tags.items())
            ]
        return [e["value"] for e in entries]

    def get_metrics(self) -> Dict[str, Any]:
        """Summary per metric: sample count, total, min, max and last value."""
        with self._lock:
            summary = {}
            for name, entries in self._metrics.items():
                if not entries:
                    continue
                values = [e["value"] for e in entries]
                summary[name] = {
                    "type": entries[-1]["type"],
                    "count": len(values),
                    "total": sum(values),
                    "min": min(values),
                    "max": max(values),
                    "last": values[-1],
                }
            return summary

    def clear(self) -> None:
        with self._lock:
            self._metrics.clear()

    def _record(
        self,
        name: str,
        metric_type: str,
        value: float,
        tags: Optional[Dict[str, str]],
    ) -> None:
        entry = {
            "type": metric_type,
            "value": value,
            "tags": dict(tags or {}),
            "timestamp": datetime.now().isoformat(),
        }
        with self._lock:
            self._metrics.setdefault(name, []).append(entry)
