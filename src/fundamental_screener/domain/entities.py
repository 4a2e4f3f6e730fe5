"""
Core Domain Entities.

This module defines the fundamental entities of the Fundamental Screener
domain: the candidate companies returned by the upstream source, their
multi-year financial history and the result of a screening run.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from fundamental_screener.config.models import FilterConfig
from fundamental_screener.domain.value_objects import CandidateReport


class Board(str, Enum):
    """Listing board of an A-share company."""

    MAIN = "MAIN"
    GROWTH = "GROWTH"  # ChiNext (CYB)
    SCI_TECH = "SCI_TECH"  # STAR market (KCB)
    BEIJING = "BEIJING"


class ValuationLevel(str, Enum):
    """Valuation assessment of a company relative to its peers."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    UNKNOWN = "UNKNOWN"


class Candidate(BaseModel):
    """Base information for one company as returned by the candidate source."""

    secucode: str = Field(..., description="Security code, e.g. 600519.SH")
    name: str = Field(..., description="Short security name")
    market: str = Field(..., description="Exchange code (SH, SZ, BJ)")
    board: Board = Field(default=Board.MAIN, description="Listing board")
    industry: str = Field(default="", description="Industry classification")
    price: float = Field(..., ge=0, description="Latest price")
    roe: float = Field(
        ..., allow_inf_nan=False, description="Latest weighted ROE in percent"
    )
    total_market_cap: float = Field(default=0.0, ge=0)
    listing_date: date = Field(..., description="Date of listing")
    netprofit_yoy_ratio: Optional[float] = Field(default=None, allow_inf_nan=False)
    toi_yoy_ratio: Optional[float] = Field(default=None, allow_inf_nan=False)
    dividend_yield: Optional[float] = Field(default=None, allow_inf_nan=False)
    netprofit_growthrate_3y: Optional[float] = Field(default=None, allow_inf_nan=False)
    income_growthrate_3y: Optional[float] = Field(default=None, allow_inf_nan=False)
    pb_new_mrq: Optional[float] = Field(default=None, allow_inf_nan=False)
    predict_netprofit_ratio: Optional[float] = Field(default=None, allow_inf_nan=False)
    predict_income_ratio: Optional[float] = Field(default=None, allow_inf_nan=False)

    model_config = {"frozen": True}

    def __hash__(self) -> int:
        return hash(self.secucode)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Candidate):
            return NotImplemented
        return self.secucode == other.secucode

    def listing_years(self, today: date) -> float:
        """Years elapsed since listing."""
        return (today - self.listing_date).days / 365.0


class AnnualFinancials(BaseModel):
    """Main financial indicators for one fiscal year."""

    year: int
    roe: float = Field(..., allow_inf_nan=False)
    eps: float = Field(..., allow_inf_nan=False)
    revenue: float = Field(..., allow_inf_nan=False)
    net_profit: float = Field(..., allow_inf_nan=False)
    debt_ratio: float = Field(
        ..., allow_inf_nan=False, description="Debt-to-asset ratio in percent"
    )

    model_config = {"frozen": True}


class EnrichedStockRecord(BaseModel):
    """A candidate together with its historical financial series."""

    candidate: Candidate
    annual_reports: List[AnnualFinancials] = Field(default_factory=list)
    valuation_level: ValuationLevel = ValuationLevel.UNKNOWN
    fair_price: Optional[float] = Field(default=None, ge=0)
    pe: Optional[float] = None

    model_config = {"frozen": True}

    @field_validator("annual_reports")
    @classmethod
    def _sort_by_year(cls, reports: List[AnnualFinancials]) -> List[AnnualFinancials]:
        return sorted(reports, key=lambda r: r.year)

    @property
    def secucode(self) -> str:
        return self.candidate.secucode

    @property
    def name(self) -> str:
        return self.candidate.name

    @property
    def roe(self) -> float:
        """Ranking key: latest weighted ROE reported with the base info."""
        return self.candidate.roe

    @property
    def latest_report(self) -> Optional[AnnualFinancials]:
        return self.annual_reports[-1] if self.annual_reports else None

    def recent_reports(self, years: int) -> List[AnnualFinancials]:
        """Return the most recent ``years`` reports in ascending year order."""
        return self.annual_reports[-years:] if years > 0 else []


class ScreeningResult(BaseModel):
    """
    Complete result of a screening run.

    ``rejections`` and ``failures`` are keyed by secucode and assume the
    source returns each company once. ``reports`` holds one entry per
    candidate in input order and always adds up to ``outcomes``.
    """

    correlation_id: str
    filter_config: FilterConfig
    candidate_count: int = 0
    stocks: List[EnrichedStockRecord] = Field(default_factory=list)
    outcomes: Dict[str, int] = Field(default_factory=dict)
    reports: List[CandidateReport] = Field(
        default_factory=list, description="One report per candidate, in input order"
    )
    rejections: Dict[str, List[str]] = Field(
        default_factory=dict, description="Secucode -> defects"
    )
    failures: Dict[str, str] = Field(
        default_factory=dict, description="Secucode -> failure cause"
    )
    metrics: Dict[str, Any] = Field(default_factory=dict)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @property
    def selected_count(self) -> int:
        return len(self.stocks)

    @property
    def selection_ratio(self) -> float:
        """Share of candidates that passed every rule."""
        if self.candidate_count == 0:
            return 0.0
        return len(self.stocks) / self.candidate_count
