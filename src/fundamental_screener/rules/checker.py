"""
Fundamental Checker.

Decides whether one enriched record is a "good company":
    - Latest ROE above the minimum
    - ROE increasing year over year when its average is below the threshold
    - EPS, revenue and net profit increasing year over year
    - Valuation low or medium
    - Price not above the fair price
    - Debt ratio below the ceiling

The checker is a pure function of the record. It returns every violated
rule instead of stopping at the first one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence

from fundamental_screener.config.models import CheckerConfig
from fundamental_screener.domain.entities import EnrichedStockRecord

if TYPE_CHECKING:
    from fundamental_screener.pipeline.run_context import RunContext


def is_strictly_increasing(values: Sequence[float]) -> bool:
    """True if every value is greater than the one before it."""
    return all(later > earlier for earlier, later in zip(values, values[1:]))


class FundamentalChecker:
    """Rule evaluator for the fundamental screen."""

    def __init__(self, config: Optional[CheckerConfig] = None) -> None:
        self.config = config or CheckerConfig()

    def evaluate(
        self,
        context: RunContext,
        record: EnrichedStockRecord,
    ) -> List[str]:
        """
        Check a record against every rule.

        Args:
            context: Run context (unused, part of the evaluator protocol)
            record: Enriched record to check

        Returns:
            Defect descriptions; empty when the record passes
        """
        defects: List[str] = []
        defects.extend(self._check_roe(record))
        defects.extend(self._check_trends(record))
        defects.extend(self._check_valuation(record))
        defects.extend(self._check_debt(record))
        return defects

    def _check_roe(self, record: EnrichedStockRecord) -> List[str]:
        cfg = self.config
        defects = []
        if record.roe < cfg.min_roe:
            defects.append(f"ROE {record.roe:.2f}% below {cfg.min_roe:.2f}%")

        reports = record.recent_reports(cfg.growth_years)
        if len(reports) < cfg.growth_years:
            defects.append(self._insufficient("ROE", len(reports)))
            return defects

        roes = [r.roe for r in reports]
        average = sum(roes) / len(roes)
        if average < cfg.roe_average_threshold and not is_strictly_increasing(roes):
            defects.append(
                f"ROE average {average:.2f}% below {cfg.roe_average_threshold:.2f}% "
                f"and not increasing: {self._fmt(roes)}"
            )
        return defects

    def _check_trends(self, record: EnrichedStockRecord) -> List[str]:
        reports = record.recent_reports(self.config.growth_years)
        if len(reports) < self.config.growth_years:
            return [
                self._insufficient(label, len(reports))
                for label in ("EPS", "revenue", "net profit")
            ]

        defects = []
        for label, values in (
            ("EPS", [r.eps for r in reports]),
            ("revenue", [r.revenue for r in reports]),
            ("net profit", [r.net_profit for r in reports]),
        ):
            if not is_strictly_increasing(values):
                defects.append(f"{label} not increasing: {self._fmt(values)}")
        return defects

    def _check_valuation(self, record: EnrichedStockRecord) -> List[str]:
        cfg = self.config
        defects = []
        if record.valuation_level.value not in cfg.allowed_valuation_levels:
            defects.append(f"valuation level {record.valuation_level.value} too high")

        if cfg.check_fair_price:
            price = record.candidate.price
            if record.fair_price is None:
                if cfg.require_fair_price:
                    defects.append("fair price unavailable")
            elif price > record.fair_price:
                defects.append(
                    f"price {price:.2f} above fair price {record.fair_price:.2f}"
                )
        return defects

    def _check_debt(self, record: EnrichedStockRecord) -> List[str]:
        latest = record.latest_report
        if latest is None:
            return ["debt ratio unavailable"]
        if latest.debt_ratio > self.config.max_debt_ratio:
            return [
                f"debt ratio {latest.debt_ratio:.2f}% above "
                f"{self.config.max_debt_ratio:.2f}%"
            ]
        return []

    def _insufficient(self, label: str, available: int) -> str:
        return (
            f"{label}: insufficient history: {available} of "
            f"{self.config.growth_years} years"
        )

    @staticmethod
    def _fmt(values: Sequence[float]) -> str:
        return " -> ".join(f"{v:g}" for v in values)
