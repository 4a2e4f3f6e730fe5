"""
Observability Manager - Structured Logging, Metrics, and Correlation IDs.

Provides:
    - Structured JSON or console logging via structlog
    - Correlation ID propagation across worker threads
    - Metrics recording

Design Notes:
    - Implements both the AuditLogger and MetricsCollector protocols,
      so one instance can be injected for both into the screener
    - Events and metrics are stored under a lock; workers log concurrently
    - The correlation id is passed explicitly into events emitted from
      worker threads, since contextvars are not inherited by pool threads
"""

from __future__ import annotations

import logging
import threading
import uuid
from contextvars import ContextVar
from datetime import datetime
from typing import Any, Dict, List, Optional

import structlog

from fundamental_screener.domain.entities import Candidate, EnrichedStockRecord

_correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> Optional[str]:
    """Get current correlation ID from context."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set correlation ID in context."""
    _correlation_id.set(correlation_id)


class ObservabilityManager:
    """
    Unified observability: structured events and metrics.

    Every event is rendered through structlog and also kept in memory
    so it can be inspected after a run.
    """

    def __init__(
        self,
        service_name: str = "fundamental_screener",
        use_json: bool = True,
        log_level: int = logging.INFO,
    ) -> None:
        """
        Initialize observability manager.

        Args:
            service_name: Service name for log entries
            use_json: Render JSON lines instead of the console format
            log_level: Minimum level for rendered events
        """
        self.service_name = service_name
        self.use_json = use_json
        self.log_level = log_level
        self._metrics: Dict[str, List[Dict[str, Any]]] = {}
        self._events: List[Dict[str, Any]] = []
        self._lock = threading.Lock()
        self._run_correlation_id: Optional[str] = None

        self._configure_structlog()
        self._logger = structlog.get_logger(service_name)

    def _configure_structlog(self) -> None:
        processors = [
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]

        if self.use_json:
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer())

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(self.log_level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(),
            cache_logger_on_first_use=False,
        )

    def set_correlation_id(self, correlation_id: str) -> None:
        """
        Set correlation ID for the current run.

        Args:
            correlation_id: Unique ID for request tracing
        """
        set_correlation_id(correlation_id)
        self._run_correlation_id = correlation_id
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=correlation_id)

    def generate_correlation_id(self) -> str:
        """Generate and set a new correlation ID."""
        correlation_id = str(uuid.uuid4())
        self.set_correlation_id(correlation_id)
        return correlation_id

    def log_event(
        self,
        event_type: str,
        data: Optional[Dict[str, Any]] = None,
        level: str = "info",
    ) -> None:
        """
        Log a structured event.

        Args:
            event_type: Type of event (e.g., "run_start", "candidate_rejected")
            data: Additional event data
            level: Log level (debug, info, warning, error)
        """
        event_data = {
            "event_type": event_type,
            "timestamp": datetime.now().isoformat(),
            "correlation_id": get_correlation_id() or self._run_correlation_id,
            **(data or {}),
        }

        with self._lock:
            self._events.append(event_data)

        log_method = getattr(self._logger, level.lower(), self._logger.info)
        log_method(event_type, **{k: v for k, v in event_data.items() if k != "event_type"})

    def record_metric(
        self,
        name: str,
        value: float,
        tags: Optional[Dict[str, str]] = None,
        metric_type: str = "gauge",
    ) -> None:
        metric_entry = {
            "timestamp": datetime.now().isoformat(),
            "value": value,
            "tags": tags or {},
            "type": metric_type,
            "correlation_id": get_correlation_id() or self._run_correlation_id,
        }

        with self._lock:
            self._metrics.setdefault(name, []).append(metric_entry)

    def get_trace_context(self) -> Dict[str, Any]:
        """Current correlation id and service info."""
        return {
            "correlation_id": get_correlation_id() or self._run_correlation_id,
            "service_name": self.service_name,
            "timestamp": datetime.now().isoformat(),
        }

    def get_metrics(self) -> Dict[str, List[Dict[str, Any]]]:
        """Get all recorded metrics."""
        with self._lock:
            return {name: list(entries) for name, entries in self._metrics.items()}

    def get_events(self, event_type: Optional[str] = None) -> List[Dict[str, Any]]:
        """Get recorded events, optionally of one type only."""
        with self._lock:
            events = list(self._events)
        if event_type:
            events = [e for e in events if e["event_type"] == event_type]
        return events

    def clear(self) -> None:
        """Clear all recorded metrics and events."""
        with self._lock:
            self._metrics.clear()
            self._events.clear()

    # =========================================================================
    # AuditLogger Protocol
    # =========================================================================

    def log_run_start(
        self,
        candidate_count: int,
        worker_count: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.log_event(
            "run_start",
            {
                "candidate_count": candidate_count,
                "worker_count": worker_count,
                **(metadata or {}),
            },
        )

    def log_run_end(
        self,
        selected_count: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.log_event(
            "run_end",
            {
                "selected_count": selected_count,
                "duration_seconds": duration_seconds,
                **(metadata or {}),
            },
        )

    def log_candidate_rejected(
        self,
        record: EnrichedStockRecord,
        defects: List[str],
    ) -> None:
        self.log_event(
            "candidate_rejected",
            {
                "secucode": record.secucode,
                "name": record.name,
                "defects": list(defects),
            },
        )

    def log_candidate_failed(
        self,
        candidate: Candidate,
        stage: str,
        error: str,
    ) -> None:
        self.log_event(
            "candidate_failed",
            {
                "secucode": candidate.secucode,
                "name": candidate.name,
                "stage": stage,
                "error": error,
            },
            level="error",
        )

    # =========================================================================
    # MetricsCollector Protocol
    # =========================================================================

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict] = None,
    ) -> None:
        self.record_metric(name, duration_seconds, tags, metric_type="histogram")

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict] = None,
    ) -> None:
        self.record_metric(name, float(value), tags, metric_type="counter")

    def record_gauge(
        self,
        name: str,
        value: float,
        tags: Optional[Dict] = None,
    ) -> None:
        self.record_metric(name, value, tags, metric_type="gauge")
