"""
Candidate Filter Implementation.

Applies a FilterConfig to candidate base info, the way the upstream
stock-selection query does:
    - Board exclusions (growth board, sci-tech board)
    - Industry restriction
    - ROE, YoY and 3-year growth thresholds
    - Listing age
    - Valuation, market cap and price bounds

Numeric thresholds equal to 0.0 are treated as unset and skipped.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple

from fundamental_screener.config.models import FilterConfig
from fundamental_screener.domain.entities import Board, Candidate


class CandidateFilter:
    """Filter candidates by base-info thresholds."""

    def __init__(self, config: FilterConfig, today: Optional[date] = None) -> None:
        """
        Initialize with configuration.

        Args:
            config: Filter configuration
            today: Reference date for listing age (defaults to today)
        """
        self.config = config
        self.today = today or date.today()

    def apply(self, candidates: List[Candidate]) -> List[Candidate]:
        """Return the candidates passing every check, in input order."""
        return [c for c in candidates if self.check(c)[0]]

    def check(self, candidate: Candidate) -> Tuple[bool, str]:
        """Check one candidate; returns (passes, reason)."""
        cfg = self.config

        if cfg.exclude_growth_board and candidate.board == Board.GROWTH:
            return False, "growth board excluded"
        if cfg.exclude_sci_tech_board and candidate.board == Board.SCI_TECH:
            return False, "sci-tech board excluded"
        if cfg.industry and candidate.industry != cfg.industry:
            return False, f"industry={candidate.industry!r} != {cfg.industry!r}"

        for field_name, threshold in (
            ("roe", cfg.min_roe),
            ("netprofit_yoy_ratio", cfg.min_netprofit_yoy_ratio),
            ("toi_yoy_ratio", cfg.min_toi_yoy_ratio),
            ("dividend_yield", cfg.min_dividend_yield),
            ("netprofit_growthrate_3y", cfg.min_netprofit_growthrate_3y),
            ("income_growthrate_3y", cfg.min_income_growthrate_3y),
            ("pb_new_mrq", cfg.min_pb_new_mrq),
            ("predict_netprofit_ratio", cfg.min_predict_netprofit_ratio),
            ("predict_income_ratio", cfg.min_predict_income_ratio),
            ("total_market_cap", cfg.min_total_market_cap),
        ):
            reason = self._check_min(candidate, field_name, threshold)
            if reason:
                return False, reason

        listing_years = candidate.listing_years(self.today)
        if cfg.min_listing_yield_year and listing_years < cfg.min_listing_yield_year:
            return (
                False,
                f"listing_years={listing_years:.1f} < min={cfg.min_listing_yield_year}",
            )
        if cfg.listing_over_5y and listing_years < 5:
            return False, f"listing_years={listing_years:.1f} < 5"

        if cfg.min_price and candidate.price < cfg.min_price:
            return False, f"price={candidate.price} < min={cfg.min_price}"
        if cfg.max_price and candidate.price > cfg.max_price:
            return False, f"price={candidate.price} > max={cfg.max_price}"

        return True, ""

    @staticmethod
    def _check_min(candidate: Candidate, field_name: str, threshold: float) -> str:
        if not threshold:
            return ""
        value = getattr(candidate, field_name)
        if value is None:
            return f"{field_name} unavailable (min={threshold})"
        if value < threshold:
            return f"{field_name}={value} < min={threshold}"
        return ""
