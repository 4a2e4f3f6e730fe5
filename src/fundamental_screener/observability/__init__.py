"""
Observability Package - Structured Logging and Metrics.

    - ObservabilityManager: structlog events with correlation IDs; usable
      as both AuditLogger and MetricsCollector for the screener

Design Principles:
    - Structured JSON logging via structlog
    - Correlation ID propagation for end-to-end tracing
"""

from fundamental_screener.observability.observability_manager import (
    ObservabilityManager,
    get_correlation_id,
    set_correlation_id,
)

__all__ = [
    "ObservabilityManager",
    "get_correlation_id",
    "set_correlation_id",
]
