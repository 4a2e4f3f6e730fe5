"""
Enricher and Rule Evaluator Protocols.

The enricher turns one candidate into an EnrichedStockRecord by fetching
its historical financial series. The rule evaluator is a pure function of
one record returning its defects; an empty list means the record passes.

Both are called once per candidate from worker threads, so implementations
must be safe to call concurrently.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fundamental_screener.domain.entities import Candidate, EnrichedStockRecord
    from fundamental_screener.pipeline.run_context import RunContext


@runtime_checkable
class Enricher(Protocol):
    """Builds the enriched record for one candidate."""

    def build_record(
        self,
        context: RunContext,
        candidate: Candidate,
    ) -> EnrichedStockRecord:
        """
        Fetch the historical financials of a candidate.

        Raises:
            Exception: Any error excludes only this candidate
        """
        ...


@runtime_checkable
class RuleEvaluator(Protocol):
    """Decides pass/fail for one enriched record."""

    def evaluate(
        self,
        context: RunContext,
        record: EnrichedStockRecord,
    ) -> List[str]:
        """Return human-readable defects; empty list means the record passes."""
        ...
