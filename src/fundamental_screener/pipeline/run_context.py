"""
Run Context - Cooperative Cancellation for a Screening Run.

The RunContext is handed to every collaborator call of a run. It carries
the correlation id and a cancellation signal that long-running calls are
expected to poll (``raise_if_cancelled``) or sleep on (``wait``).

Design Notes:
    - Cancellation is cooperative, never preemptive
    - A deadline is equivalent to a cancel once it passes
    - Thread-safe: backed by threading.Event
"""

from __future__ import annotations

import threading
import time
import uuid
from typing import Optional

from fundamental_screener.domain.exceptions import ScreeningCancelled


class RunContext:
    """Cancellable context shared by all tasks of one screening run."""

    def __init__(
        self,
        correlation_id: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
    ) -> None:
        """
        Initialize run context.

        Args:
            correlation_id: Identifier for tracing (generated if omitted)
            timeout_seconds: Optional deadline relative to now
        """
        self.correlation_id = correlation_id or str(uuid.uuid4())
        self._cancelled = threading.Event()
        self._deadline = (
            time.monotonic() + timeout_seconds if timeout_seconds is not None else None
        )
        self._reason: Optional[str] = None

    def cancel(self, reason: str = "cancelled") -> None:
        """Signal cancellation to every holder of this context."""
        if not self._cancelled.is_set():
            self._reason = reason
            self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        if self._cancelled.is_set():
            return True
        if self._deadline is not None and time.monotonic() >= self._deadline:
            self.cancel("deadline exceeded")
            return True
        return False

    @property
    def reason(self) -> Optional[str]:
        return self._reason

    def remaining(self) -> Optional[float]:
        """Seconds until the deadline, or None when there is none."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def raise_if_cancelled(self) -> None:
        """Raise ScreeningCancelled if the run has been cancelled."""
        if self.cancelled:
            raise ScreeningCancelled(self._reason or "cancelled")

    def wait(self, seconds: float) -> bool:
        """
        Sleep up to ``seconds`` unless cancelled first.

        Returns:
            True if the context was cancelled, False if the full time elapsed
        """
        remaining = self.remaining()
        if remaining is not None and remaining < seconds:
            if not self._cancelled.wait(remaining):
                self.cancel("deadline exceeded")
            return True
        if self._cancelled.wait(seconds):
            return True
        return self.cancelled

    def __repr__(self) -> str:
        return f"RunContext(correlation_id={self.correlation_id!r}, cancelled={self.cancelled})"
