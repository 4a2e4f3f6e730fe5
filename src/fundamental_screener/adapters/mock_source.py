"""
Mock Candidate Source.

A fake upstream data source for development and testing. Generates a
deterministic A-share universe and applies the FilterConfig to it the
way the real stock-selection service does server-side.
"""

from __future__ import annotations

import logging
import random
from datetime import date, timedelta
from typing import List, Optional

from fundamental_screener.config.models import FilterConfig
from fundamental_screener.domain.entities import Board, Candidate
from fundamental_screener.domain.exceptions import CandidateSourceError
from fundamental_screener.filters.candidate_filter import CandidateFilter
from fundamental_screener.pipeline.run_context import RunContext

logger = logging.getLogger(__name__)

# Reference date for listing ages, fixed so generated data is reproducible
MOCK_TODAY = date(2024, 12, 31)

INDUSTRIES = [
    "Liquor",
    "Banking",
    "Home Appliances",
    "Pharmaceuticals",
    "Semiconductors",
    "Insurance",
    "Automobiles",
    "Food Processing",
]


class MockCandidateSource:
    """Fake candidate source for development and testing."""

    # secucode, name, board, industry
    MOCK_STOCKS = [
        ("600519.SH", "Kweichow Moutai", Board.MAIN, "Liquor"),
        ("000858.SZ", "Wuliangye Yibin", Board.MAIN, "Liquor"),
        ("600036.SH", "China Merchants Bank", Board.MAIN, "Banking"),
        ("000333.SZ", "Midea Group", Board.MAIN, "Home Appliances"),
        ("000651.SZ", "Gree Electric", Board.MAIN, "Home Appliances"),
        ("600276.SH", "Jiangsu Hengrui", Board.MAIN, "Pharmaceuticals"),
        ("601318.SH", "Ping An Insurance", Board.MAIN, "Insurance"),
        ("300750.SZ", "CATL", Board.GROWTH, "Automobiles"),
        ("300760.SZ", "Mindray Medical", Board.GROWTH, "Pharmaceuticals"),
        ("688981.SH", "SMIC", Board.SCI_TECH, "Semiconductors"),
        ("688111.SH", "Kingsoft Office", Board.SCI_TECH, "Semiconductors"),
        ("603288.SH", "Foshan Haitian", Board.MAIN, "Food Processing"),
    ]

    def __init__(
        self,
        seed: int = 42,
        universe_size: Optional[int] = None,
        fail: bool = False,
        today: date = MOCK_TODAY,
    ) -> None:
        """
        Initialize mock source with random seed.

        Args:
            seed: Random seed for reproducibility
            universe_size: Total companies; extra synthetic ones are added
                after the named stocks when larger than the named list
            fail: If True, every fetch raises CandidateSourceError
            today: Reference date for listing ages
        """
        self._rng = random.Random(seed)
        self._fail = fail
        self._today = today
        self._universe = self._generate_universe(universe_size or len(self.MOCK_STOCKS))
        self.fetch_count = 0

    @property
    def universe(self) -> List[Candidate]:
        return list(self._universe)

    def fetch_candidates(
        self,
        context: RunContext,
        filter_config: FilterConfig,
    ) -> List[Candidate]:
        """Return the universe members passing the filter."""
        self.fetch_count += 1
        context.raise_if_cancelled()
        if self._fail:
            raise CandidateSourceError("mock candidate source unavailable")

        candidates = CandidateFilter(filter_config, today=self._today).apply(self._universe)
        logger.debug(
            f"Mock source returned {len(candidates)} of {len(self._universe)} companies"
        )
        return candidates

    def _generate_universe(self, size: int) -> List[Candidate]:
        entries = list(self.MOCK_STOCKS)
        for i in range(len(entries), size):
            code = 605000 + i if i % 2 == 0 else 2000 + i
            suffix = "SH" if i % 2 == 0 else "SZ"
            entries.append(
                (
                    f"{code:06d}.{suffix}",
                    f"Synthetic Co {i:04d}",
                    Board.MAIN,
                    self._rng.choice(INDUSTRIES),
                )
            )
        return [self._make_candidate(*entry) for entry in entries[:size]]

    def _make_candidate(
        self,
        secucode: str,
        name: str,
        board: Board,
        industry: str,
    ) -> Candidate:
        rng = self._rng
        return Candidate(
            secucode=secucode,
            name=name,
            market=secucode.split(".")[1],
            board=board,
            industry=industry,
            price=round(rng.uniform(5, 200), 2),
            roe=round(rng.uniform(2, 35), 2),
            total_market_cap=round(rng.uniform(5e9, 2e12), 0),
            listing_date=self._today - timedelta(days=rng.randint(400, 8000)),
            netprofit_yoy_ratio=round(rng.uniform(-20, 60), 2),
            toi_yoy_ratio=round(rng.uniform(-10, 50), 2),
            dividend_yield=round(rng.uniform(0, 6), 2),
            netprofit_growthrate_3y=round(rng.uniform(-10, 40), 2),
            income_growthrate_3y=round(rng.uniform(-5, 35), 2),
            pb_new_mrq=round(rng.uniform(0.5, 15), 2),
            predict_netprofit_ratio=round(rng.uniform(-5, 30), 2),
            predict_income_ratio=round(rng.uniform(-5, 30), 2),
        )
