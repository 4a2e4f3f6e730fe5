"""
Performance Benchmarks for the Fundamental Screener.

Benchmarks:
    - 1000 candidates (no latency) < 5 seconds
    - 200 candidates at 50ms enrichment latency with 64 workers < 2 seconds
      (a serial run would need 10 seconds)

Metrics tracked:
    - Total execution time
    - Peak number of tasks in flight
"""

from __future__ import annotations

import time

import pytest

from fundamental_screener.adapters.mock_enricher import MockEnricher
from fundamental_screener.adapters.mock_source import MockCandidateSource
from fundamental_screener.config.models import FilterConfig, ScreenerSettings
from fundamental_screener.pipeline.run_context import RunContext
from fundamental_screener.pipeline.screener import FundamentalScreener
from fundamental_screener.rules.checker import FundamentalChecker

OPEN_FILTER = FilterConfig(
    min_roe=0.0, exclude_growth_board=False, exclude_sci_tech_board=False
)


def _screener(size: int, latency: float = 0.0, workers: int = 64) -> FundamentalScreener:
    return FundamentalScreener(
        candidate_source=MockCandidateSource(seed=42, universe_size=size),
        enricher=MockEnricher(seed=42, latency_seconds=latency),
        rule_evaluator=FundamentalChecker(),
        settings=ScreenerSettings(max_worker_count=workers),
    )


class TestScreeningPerformance:
    """Performance benchmarks for the screener."""

    def test_1000_candidates_under_5_seconds(self) -> None:
        # Arrange
        screener = _screener(1000)

        # Act
        start = time.perf_counter()
        result = screener.run(RunContext(), OPEN_FILTER)
        duration = time.perf_counter() - start

        # Assert
        print(f"\n1000 candidates: {duration:.3f}s, selected {result.selected_count}")
        assert duration < 5.0, f"1000 candidates took {duration:.2f}s (limit: 5s)"
        assert result.candidate_count == 1000

    def test_latency_bound_run_scales_with_workers(self) -> None:
        """
        SCENARIO: Slow enrichment, 200 candidates, 64 workers
        EXPECTED: Wall time far below the serial sum, ceiling reached
        """
        # Arrange
        screener = _screener(200, latency=0.05)

        # Act
        start = time.perf_counter()
        result = screener.run(RunContext(), OPEN_FILTER)
        duration = time.perf_counter() - start

        # Assert
        print(f"\n200 candidates @50ms: {duration:.3f}s")
        assert duration < 2.0, f"200 candidates took {duration:.2f}s (limit: 2s)"
        assert result.metadata["peak_in_flight"] == 64

    @pytest.mark.slow
    def test_5000_candidates_under_10_seconds(self) -> None:
        # Arrange
        screener = _screener(5000)

        # Act
        start = time.perf_counter()
        result = screener.run(RunContext(), OPEN_FILTER)
        duration = time.perf_counter() - start

        # Assert
        assert duration < 10.0, f"5000 candidates took {duration:.2f}s (limit: 10s)"
        assert sum(result.outcomes.values()) == 5000
