"""
Candidate Source Protocol.

Defines the interface for the upstream data source that returns the
pre-filtered candidate list for a filter configuration. A failure here
aborts the whole screening run.

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - The filter configuration is passed by value and never mutated
    - Implementations should observe cancellation through the run context
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fundamental_screener.config.models import FilterConfig
    from fundamental_screener.domain.entities import Candidate
    from fundamental_screener.pipeline.run_context import RunContext


@runtime_checkable
class CandidateSource(Protocol):
    """Abstract interface for the candidate list provider."""

    def fetch_candidates(
        self,
        context: RunContext,
        filter_config: FilterConfig,
    ) -> List[Candidate]:
        """
        Fetch the candidates that satisfy the pre-filter.

        Args:
            context: Run context carrying cancellation and correlation id
            filter_config: Pre-filter thresholds

        Returns:
            Candidates in upstream order

        Raises:
            Exception: Any error is fatal to the screening run
        """
        ...
