"""
Console Audit Logger.

A simple audit logger that prints screening events to the console.
"""

from __future__ import annotations

import threading
from datetime import datetime
from typing import Any, Dict, List, Optional

from fundamental_screener.domain.entities import Candidate, EnrichedStockRecord


class ConsoleAuditLogger:
    """Simple console-based audit logger."""

    def __init__(self, verbose: bool = True) -> None:
        """
        Initialize console logger.

        Args:
            verbose: If True, log every candidate. If False, only run summaries.
        """
        self._verbose = verbose
        self._correlation_id: Optional[str] = None
        self._lock = threading.Lock()

    def set_correlation_id(self, correlation_id: str) -> None:
        """Set correlation ID for subsequent log entries."""
        self._correlation_id = correlation_id

    def log_run_start(
        self,
        candidate_count: int,
        worker_count: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._log(
            "INFO",
            f"Screening {candidate_count} candidates with {worker_count} workers",
        )

    def log_run_end(
        self,
        selected_count: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        summary = ""
        if metadata:
            summary = " " + ", ".join(f"{k}={v}" for k, v in metadata.items())
        self._log(
            "INFO",
            f"Selected {selected_count} stocks ({duration_seconds:.3f}s){summary}",
        )

    def log_candidate_rejected(
        self,
        record: EnrichedStockRecord,
        defects: List[str],
    ) -> None:
        if self._verbose:
            self._log(
                "INFO",
                f"{record.name} {record.secucode} has some defects: {'; '.join(defects)}",
            )

    def log_candidate_failed(
        self,
        candidate: Candidate,
        stage: str,
        error: str,
    ) -> None:
        self._log("ERROR", f"{candidate.name} {candidate.secucode} failed in {stage}: {error}")

    def _log(self, level: str, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        corr_id = self._correlation_id[:8] if self._correlation_id else "--------"
        # One lock so lines from concurrent workers do not interleave
        with self._lock:
            print(f"[{timestamp}] [{corr_id}] [{level:5}] {message}")
