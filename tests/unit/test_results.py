"""
Unit Tests for ResultCollection and rank_by_roe.

Test Aspects Covered:
    ✅ Business Logic: Outcome bookkeeping, ROE ordering
    ✅ Concurrency: Parallel appends lose nothing
    ✅ Edge Cases: Equal ROE, empty collection, invalid reports, duplicate secucodes
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from fundamental_screener.domain.value_objects import CandidateOutcome, CandidateReport
from fundamental_screener.pipeline.results import ResultCollection, rank_by_roe
from tests.fixtures.fakes import make_candidate, make_record


def _passed(secucode: str) -> CandidateReport:
    return CandidateReport(secucode=secucode, outcome=CandidateOutcome.PASSED)


class TestResultCollection:
    """Test cases for ResultCollection."""

    def test_routes_each_outcome(self) -> None:
        """
        SCENARIO: One candidate per outcome
        EXPECTED: Passed records stored, rejections and failures indexed
        """
        # Arrange
        results = ResultCollection()
        record = make_record(make_candidate("600519.SH", roe=30.0))

        # Act
        results.add(0, _passed("600519.SH"), record)
        results.add(
            1,
            CandidateReport(
                secucode="000858.SZ",
                outcome=CandidateOutcome.REJECTED,
                defects=["debt ratio 75.00% above 60.00%"],
            ),
        )
        results.add(
            2,
            CandidateReport(
                secucode="000333.SZ",
                outcome=CandidateOutcome.FAILED,
                error="EnrichmentError: timeout",
            ),
        )
        results.add(3, CandidateReport(secucode="600036.SH", outcome=CandidateOutcome.FAULTED))

        # Assert
        assert results.passed() == [(0, record)]
        assert results.rejections() == {"000858.SZ": ["debt ratio 75.00% above 60.00%"]}
        assert results.failures() == {
            "000333.SZ": "EnrichmentError: timeout",
            "600036.SH": "faulted",
        }
        assert results.outcomes() == {"passed": 1, "rejected": 1, "failed": 1, "faulted": 1}
        assert results.total == 4
        assert len(results) == 1

    def test_empty_collection_reports_zero_outcomes(self) -> None:
        results = ResultCollection()
        assert results.outcomes() == {"passed": 0, "rejected": 0, "failed": 0, "faulted": 0}
        assert results.total == 0
        assert results.passed() == []

    def test_passed_without_record_rejected(self) -> None:
        with pytest.raises(ValueError, match="without a record"):
            ResultCollection().add(0, _passed("600519.SH"))

    def test_passed_with_defects_rejected(self) -> None:
        report = CandidateReport(
            secucode="600519.SH", outcome=CandidateOutcome.PASSED, defects=["x"]
        )
        record = make_record(make_candidate("600519.SH"))
        with pytest.raises(ValueError, match="with defects"):
            ResultCollection().add(0, report, record)

    def test_snapshots_are_copies(self) -> None:
        """
        SCENARIO: Caller mutates a returned snapshot
        EXPECTED: Collection state unchanged
        """
        # Arrange
        results = ResultCollection()
        results.add(
            0,
            CandidateReport(
                secucode="000858.SZ", outcome=CandidateOutcome.REJECTED, defects=["a"]
            ),
        )

        # Act
        results.rejections()["000858.SZ"].append("b")
        results.passed().append((9, None))

        # Assert
        assert results.rejections() == {"000858.SZ": ["a"]}
        assert results.passed() == []

    def test_concurrent_appends(self) -> None:
        """
        SCENARIO: 500 passing records added from 16 threads
        EXPECTED: All 500 stored exactly once
        """
        # Arrange
        results = ResultCollection()
        records = [
            make_record(make_candidate(f"{600000 + i}.SH", roe=float(i % 40)))
            for i in range(500)
        ]

        # Act
        with ThreadPoolExecutor(max_workers=16) as pool:
            for i, record in enumerate(records):
                pool.submit(results.add, i, _passed(record.secucode), record)

        # Assert
        stored = results.passed()
        assert len(stored) == 500
        assert sorted(i for i, _ in stored) == list(range(500))
        assert results.outcomes()["passed"] == 500

    def test_reports_ordered_by_input_index(self) -> None:
        """
        SCENARIO: Reports added out of input order
        EXPECTED: reports() returns them by candidate index
        """
        # Arrange
        results = ResultCollection()
        record = make_record(make_candidate("600519.SH"))

        # Act
        results.add(2, CandidateReport(secucode="600036.SH", outcome=CandidateOutcome.FAULTED))
        results.add(0, _passed("600519.SH"), record)
        results.add(
            1,
            CandidateReport(
                secucode="000858.SZ", outcome=CandidateOutcome.REJECTED, defects=["a"]
            ),
        )

        # Assert
        assert [r.secucode for r in results.reports()] == ["600519.SH", "000858.SZ", "600036.SH"]

    def test_duplicate_secucode_counted_twice_and_logged(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """
        SCENARIO: Same secucode rejected at two input positions
        EXPECTED: Both counted and reported; rejections keep the latest; warning logged
        """
        # Arrange
        results = ResultCollection()

        # Act
        with caplog.at_level(logging.WARNING, logger="fundamental_screener"):
            results.add(
                0,
                CandidateReport(
                    secucode="600519.SH", outcome=CandidateOutcome.REJECTED, defects=["first"]
                ),
            )
            results.add(
                1,
                CandidateReport(
                    secucode="600519.SH", outcome=CandidateOutcome.REJECTED, defects=["second"]
                ),
            )

        # Assert
        assert results.total == 2
        assert results.outcomes()["rejected"] == 2
        assert len(results.reports()) == 2
        assert results.rejections() == {"600519.SH": ["second"]}
        assert any("Duplicate secucode 600519.SH" in r.getMessage() for r in caplog.records)


class TestRankByRoe:
    """Test cases for rank_by_roe."""

    def test_descending_roe(self) -> None:
        # Arrange
        low = make_record(make_candidate("000001.SZ", roe=9.0))
        high = make_record(make_candidate("600519.SH", roe=30.5))
        mid = make_record(make_candidate("000858.SZ", roe=24.1))

        # Act
        ranked = rank_by_roe([(0, low), (1, high), (2, mid)])

        # Assert
        assert [r.secucode for r in ranked] == ["600519.SH", "000858.SZ", "000001.SZ"]

    def test_ties_follow_input_order(self) -> None:
        """
        SCENARIO: Equal ROE, entries collected in completion order
        EXPECTED: Ties ordered by candidate input index
        """
        # Arrange
        a = make_record(make_candidate("600001.SH", roe=15.0))
        b = make_record(make_candidate("600002.SH", roe=15.0))
        c = make_record(make_candidate("600003.SH", roe=15.0))

        # Act
        ranked = rank_by_roe([(2, c), (0, a), (1, b)])

        # Assert
        assert [r.secucode for r in ranked] == ["600001.SH", "600002.SH", "600003.SH"]

    def test_empty(self) -> None:
        assert rank_by_roe([]) == []
