"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, model_validator


class FilterConfig(BaseModel):
    """
    Pre-filter thresholds sent to the candidate source.

    Numeric thresholds left at 0.0 are not applied, the same way the
    upstream stock-selection query omits unset conditions.
    """

    min_roe: float = Field(default=8.0)
    min_netprofit_yoy_ratio: float = Field(default=0.0)
    min_toi_yoy_ratio: float = Field(default=0.0)
    min_dividend_yield: float = Field(default=0.0, ge=0)
    min_netprofit_growthrate_3y: float = Field(default=0.0)
    min_income_growthrate_3y: float = Field(default=0.0)
    min_listing_yield_year: float = Field(default=0.0, ge=0)
    min_pb_new_mrq: float = Field(default=0.0, ge=0)
    min_predict_netprofit_ratio: float = Field(default=0.0)
    min_predict_income_ratio: float = Field(default=0.0)
    min_total_market_cap: float = Field(default=0.0, ge=0)
    industry: str = Field(default="")
    min_price: float = Field(default=0.0, ge=0)
    max_price: float = Field(default=0.0, ge=0)
    listing_over_5y: bool = False
    exclude_growth_board: bool = True
    exclude_sci_tech_board: bool = True

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_price_range(self) -> "FilterConfig":
        if self.max_price > 0 and self.max_price < self.min_price:
            raise ValueError(
                f"max_price={self.max_price} is below min_price={self.min_price}"
            )
        return self


DEFAULT_FILTER = FilterConfig()


class ScreenerSettings(BaseModel):
    """Settings for the bounded concurrent screener."""

    max_worker_count: int = Field(default=64, ge=1)


class CheckerConfig(BaseModel):
    """Thresholds for the fundamental rule checker."""

    min_roe: float = Field(default=8.0)
    roe_average_threshold: float = Field(default=20.0)
    growth_years: int = Field(default=3, ge=2)
    max_debt_ratio: float = Field(default=60.0, ge=0, le=100)
    allowed_valuation_levels: List[str] = Field(
        default_factory=lambda: ["LOW", "MEDIUM"]
    )
    check_fair_price: bool = True
    require_fair_price: bool = False


class RetrySettings(BaseModel):
    """Retry policy for fetching the candidate list."""

    enabled: bool = False
    max_attempts: int = Field(default=3, ge=1)
    base_delay_seconds: float = Field(default=1.0, ge=0)
    max_delay_seconds: float = Field(default=30.0, ge=0)


class ScreeningConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    filter: FilterConfig = Field(default_factory=FilterConfig)
    screener: ScreenerSettings = Field(default_factory=ScreenerSettings)
    checker: CheckerConfig = Field(default_factory=CheckerConfig)
    retry: RetrySettings = Field(default_factory=RetrySettings)

    model_config = {"populate_by_name": True}
