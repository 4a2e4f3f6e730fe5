"""
Audit Logger Protocol.

Defines the interface for the audit trail of a screening run: run
boundaries, rejected candidates with their defects, and candidates that
could not be evaluated.

Design Notes:
    - Called from worker threads; implementations must be thread-safe
    - Correlation ID propagation for tracing
    - No side effects on screening logic
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fundamental_screener.domain.entities import Candidate, EnrichedStockRecord


@runtime_checkable
class AuditLogger(Protocol):
    """Abstract interface for audit logging."""

    def set_correlation_id(self, correlation_id: str) -> None:
        """Set correlation ID for subsequent log entries."""
        ...

    def log_run_start(
        self,
        candidate_count: int,
        worker_count: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log the start of a screening run."""
        ...

    def log_run_end(
        self,
        selected_count: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log the end of a screening run."""
        ...

    def log_candidate_rejected(
        self,
        record: EnrichedStockRecord,
        defects: List[str],
    ) -> None:
        """Log a candidate that failed one or more fundamental rules."""
        ...

    def log_candidate_failed(
        self,
        candidate: Candidate,
        stage: str,
        error: str,
    ) -> None:
        """
        Log a candidate that could not be evaluated.

        Args:
            candidate: The candidate
            stage: "enrich" or "evaluate"
            error: Human-readable cause
        """
        ...
