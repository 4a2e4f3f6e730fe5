"""
Error Handler - Retry with Exponential Backoff.

Wraps the candidate fetch, the one call whose failure is fatal to a
screening run. Per-candidate work is never retried.

Design Notes:
    - Configurable retry attempts and backoff
    - Backoff sleeps are interruptible by the run context
    - The last error is chained to RetryExhausted
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional, TypeVar

from fundamental_screener.config.models import RetrySettings

if TYPE_CHECKING:
    from fundamental_screener.pipeline.run_context import RunContext

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryExhausted(Exception):
    """Raised when all retry attempts are exhausted."""
    pass


@dataclass
class RetryConfig:
    """Configuration for retry logic."""
    max_attempts: int = 3
    base_delay_seconds: float = 1.0
    max_delay_seconds: float = 30.0
    exponential_base: float = 2.0
    retryable_exceptions: tuple = (Exception,)

    @classmethod
    def from_settings(cls, settings: RetrySettings) -> "RetryConfig":
        return cls(
            max_attempts=settings.max_attempts,
            base_delay_seconds=settings.base_delay_seconds,
            max_delay_seconds=settings.max_delay_seconds,
        )


class ErrorHandler:
    """Retries a callable with exponential backoff."""

    def __init__(self, retry_config: Optional[RetryConfig] = None) -> None:
        self.retry_config = retry_config or RetryConfig()

    def retry(
        self,
        func: Callable[[], T],
        operation_name: str = "operation",
        context: Optional["RunContext"] = None,
    ) -> T:
        """
        Execute function with retry and exponential backoff.

        Args:
            func: Function to execute
            operation_name: Name for logging
            context: Run context; once cancelled, no further attempt is made

        Returns:
            Result of successful execution

        Raises:
            RetryExhausted: When all attempts fail
        """
        last_exception: Optional[Exception] = None
        attempts = 0

        for attempt in range(1, self.retry_config.max_attempts + 1):
            attempts = attempt
            try:
                result = func()
                if attempt > 1:
                    logger.info(f"{operation_name} succeeded on attempt {attempt}")
                return result

            except self.retry_config.retryable_exceptions as e:
                last_exception = e
                if attempt == self.retry_config.max_attempts:
                    logger.error(f"{operation_name} failed after {attempt} attempts: {e}")
                    break

                delay = self._calculate_delay(attempt)
                logger.warning(
                    f"{operation_name} failed (attempt {attempt}/{self.retry_config.max_attempts}), "
                    f"retrying in {delay:.2f}s: {e}"
                )
                if self._sleep(delay, context):
                    logger.warning(f"{operation_name} retry aborted: run cancelled")
                    break

        raise RetryExhausted(
            f"{operation_name} failed after {attempts} attempts"
        ) from last_exception

    def _calculate_delay(self, attempt: int) -> float:
        """Calculate delay with exponential backoff."""
        delay = self.retry_config.base_delay_seconds * (
            self.retry_config.exponential_base ** (attempt - 1)
        )
        return min(delay, self.retry_config.max_delay_seconds)

    def _sleep(self, seconds: float, context: Optional["RunContext"]) -> bool:
        """Sleep between attempts; True if the run was cancelled meanwhile."""
        if context is not None:
            return context.wait(seconds)
        time.sleep(seconds)
        return False
