"""
Mock Enricher.

Builds deterministic multi-year financial histories for candidates.
The history of a company depends only on the seed and its secucode, so
results do not change with the order in which workers call it.
"""

from __future__ import annotations

import random
import zlib
from typing import Iterable, List, Optional

from fundamental_screener.domain.entities import (
    AnnualFinancials,
    Candidate,
    EnrichedStockRecord,
    ValuationLevel,
)
from fundamental_screener.domain.exceptions import EnrichmentError
from fundamental_screener.pipeline.run_context import RunContext


class MockEnricher:
    """Fake enrichment service with failure and latency injection."""

    def __init__(
        self,
        seed: int = 42,
        years: int = 5,
        latency_seconds: float = 0.0,
        fail_symbols: Iterable[str] = (),
        fault_symbols: Iterable[str] = (),
        last_year: int = 2023,
    ) -> None:
        """
        Initialize mock enricher.

        Args:
            seed: Random seed for reproducibility
            years: Number of annual reports per company
            latency_seconds: Simulated network delay per call
            fail_symbols: Secucodes whose enrichment raises EnrichmentError
            fault_symbols: Secucodes whose enrichment raises RuntimeError
            last_year: Fiscal year of the most recent report
        """
        self._seed = seed
        self._years = years
        self._latency = latency_seconds
        self._fail_symbols = set(fail_symbols)
        self._fault_symbols = set(fault_symbols)
        self._last_year = last_year

    def build_record(
        self,
        context: RunContext,
        candidate: Candidate,
    ) -> EnrichedStockRecord:
        """Build the enriched record of one candidate."""
        if self._latency:
            context.wait(self._latency)
        context.raise_if_cancelled()

        if candidate.secucode in self._fail_symbols:
            raise EnrichmentError(
                f"financial data unavailable for {candidate.secucode}",
                secucode=candidate.secucode,
            )
        if candidate.secucode in self._fault_symbols:
            raise RuntimeError(f"corrupt payload for {candidate.secucode}")

        rng = random.Random(self._seed ^ zlib.crc32(candidate.secucode.encode()))
        return EnrichedStockRecord(
            candidate=candidate,
            annual_reports=self._generate_reports(rng),
            valuation_level=rng.choice(list(ValuationLevel)),
            fair_price=self._fair_price(rng, candidate.price),
            pe=round(rng.uniform(5, 60), 2),
        )

    def _generate_reports(self, rng: random.Random) -> List[AnnualFinancials]:
        growing = rng.random() < 0.5
        roe = rng.uniform(5, 30)
        eps = rng.uniform(0.2, 5)
        revenue = rng.uniform(1e9, 1e11)
        net_profit = revenue * rng.uniform(0.05, 0.3)
        debt_ratio = rng.uniform(20, 80)

        reports = []
        first_year = self._last_year - self._years + 1
        for year in range(first_year, self._last_year + 1):
            step = rng.uniform(0.03, 0.2) if growing else rng.uniform(-0.15, 0.15)
            roe *= 1 + step
            eps *= 1 + step
            revenue *= 1 + step
            net_profit *= 1 + step
            reports.append(
                AnnualFinancials(
                    year=year,
                    roe=round(roe, 2),
                    eps=round(eps, 3),
                    revenue=round(revenue, 0),
                    net_profit=round(net_profit, 0),
                    debt_ratio=round(debt_ratio, 2),
                )
            )
        return reports

    @staticmethod
    def _fair_price(rng: random.Random, price: float) -> Optional[float]:
        if rng.random() < 0.1:
            return None
        return round(price * rng.uniform(0.7, 1.6), 2)
