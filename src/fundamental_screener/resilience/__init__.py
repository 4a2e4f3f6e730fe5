"""
Resilience Package - Error Handling and Fault Tolerance.

This package provides the retry policy for the candidate fetch:
    - ErrorHandler: Retry with exponential backoff
    - RetryExhausted: Raised once every attempt has failed

Per-candidate fault isolation lives in the screener itself.
"""

from fundamental_screener.resilience.error_handler import (
    ErrorHandler,
    RetryConfig,
    RetryExhausted,
)

__all__ = ["ErrorHandler", "RetryConfig", "RetryExhausted"]
