"""
Metrics Collector Protocol.

Defines the interface for operational metrics of a screening run:
timings (histograms), counts (counters) and gauges (current values).

Design Notes:
    - Non-blocking metric recording, callable from worker threads
    - Tag/label support for dimensionality
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class MetricsCollector(Protocol):
    """Abstract interface for metrics collection."""

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        ...

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        ...

    def record_gauge(
        self,
        name: str,
        value: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        ...

    def get_metrics(self) -> Dict[str, Any]:
        """Return a summary of everything recorded so far."""
        ...
