"""
Domain Exceptions.

Only ``CandidateSourceError`` (and anything the candidate source raises)
crosses the screener boundary. The others are absorbed per candidate.
"""

from __future__ import annotations

from typing import Optional


class ScreenerError(Exception):
    """Base class for screener errors."""


class CandidateSourceError(ScreenerError):
    """Raised when the upstream candidate list cannot be fetched."""


class EnrichmentError(ScreenerError):
    """Raised when a candidate's financial history cannot be built."""

    def __init__(self, message: str, secucode: Optional[str] = None) -> None:
        super().__init__(message)
        self.secucode = secucode
        self.message = message


class ScreeningCancelled(ScreenerError):
    """Raised by collaborators that observe a cancelled run context."""
