"""
Result Collection and Result Assembler.

The ResultCollection is the only mutable state shared by the screening
tasks. It is append-only and every mutation happens under one lock.
``rank_by_roe`` turns the collected records into the final ordering.
"""

from __future__ import annotations

import logging
import threading
from collections import Counter
from typing import Dict, List, Optional, Sequence, Set, Tuple

from fundamental_screener.domain.entities import EnrichedStockRecord
from fundamental_screener.domain.value_objects import (
    CandidateOutcome,
    CandidateReport,
    FailuresDict,
    RejectionsDict,
)

logger = logging.getLogger(__name__)

# (candidate input index, record)
IndexedRecord = Tuple[int, EnrichedStockRecord]


class ResultCollection:
    """Thread-safe, append-only store for the outcome of a screening run."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._passed: List[IndexedRecord] = []
        self._reports: List[Tuple[int, CandidateReport]] = []
        self._outcomes: Counter = Counter()
        self._rejections: RejectionsDict = {}
        self._failures: FailuresDict = {}
        self._seen: Set[str] = set()

    def add(
        self,
        index: int,
        report: CandidateReport,
        record: Optional[EnrichedStockRecord] = None,
    ) -> None:
        """
        Record the outcome of one candidate.

        Args:
            index: Position of the candidate in the input sequence
            report: Outcome of the candidate
            record: Enriched record; required when the outcome is PASSED
        """
        if report.outcome == CandidateOutcome.PASSED:
            if record is None:
                raise ValueError(f"{report.secucode}: passed outcome without a record")
            if report.defects:
                raise ValueError(f"{report.secucode}: passed outcome with defects")

        with self._lock:
            if report.secucode in self._seen:
                logger.warning(
                    f"Duplicate secucode {report.secucode} at index {index}; "
                    f"rejections and failures keep only its latest entry"
                )
            self._seen.add(report.secucode)
            self._reports.append((index, report))
            self._outcomes[report.outcome.value] += 1
            if report.outcome == CandidateOutcome.PASSED:
                self._passed.append((index, record))
            elif report.outcome == CandidateOutcome.REJECTED:
                self._rejections[report.secucode] = list(report.defects)
            else:
                self._failures[report.secucode] = report.error or report.outcome.value

    def passed(self) -> List[IndexedRecord]:
        """Snapshot of the passing records in insertion order."""
        with self._lock:
            return list(self._passed)

    def reports(self) -> List[CandidateReport]:
        """Every report, ordered by candidate input index."""
        with self._lock:
            ordered = sorted(self._reports, key=lambda entry: entry[0])
        return [report for _, report in ordered]

    def outcomes(self) -> Dict[str, int]:
        """Count of candidates per outcome, every outcome present."""
        with self._lock:
            return {o.value: self._outcomes.get(o.value, 0) for o in CandidateOutcome}

    def rejections(self) -> RejectionsDict:
        with self._lock:
            return {k: list(v) for k, v in self._rejections.items()}

    def failures(self) -> FailuresDict:
        with self._lock:
            return dict(self._failures)

    @property
    def total(self) -> int:
        with self._lock:
            return sum(self._outcomes.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._passed)


def rank_by_roe(entries: Sequence[IndexedRecord]) -> List[EnrichedStockRecord]:
    """
    Order records by ROE, highest first.

    Ties keep the order of the original candidate list, so the result does
    not depend on which worker finished first.
    """
    ordered = sorted(entries, key=lambda entry: (-entry[1].roe, entry[0]))
    return [record for _, record in ordered]
