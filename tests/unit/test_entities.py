"""
Unit Tests for Domain Entities.

Test Aspects Covered:
    ✅ Validation: Non-finite figures rejected at construction
    ✅ Business Logic: Ranking over validated records stays ordered
    ✅ Edge Cases: Optional ratios left unset
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fundamental_screener.domain.entities import AnnualFinancials
from fundamental_screener.pipeline.results import rank_by_roe
from tests.fixtures.fakes import make_candidate, make_record

NON_FINITE = [float("nan"), float("inf"), float("-inf")]


class TestCandidateValidation:
    """Test cases for Candidate field validation."""

    @pytest.mark.parametrize("value", NON_FINITE)
    def test_non_finite_roe_rejected(self, value: float) -> None:
        """
        SCENARIO: Source reports a NaN or infinite ROE
        EXPECTED: ValidationError, so the value never reaches ranking
        """
        with pytest.raises(ValidationError, match="roe"):
            make_candidate("600519.SH", roe=value)

    @pytest.mark.parametrize("value", NON_FINITE)
    def test_non_finite_optional_ratio_rejected(self, value: float) -> None:
        with pytest.raises(ValidationError, match="dividend_yield"):
            make_candidate("600519.SH", dividend_yield=value)

    def test_optional_ratios_may_be_unset(self) -> None:
        candidate = make_candidate("600519.SH")
        assert candidate.dividend_yield is None
        assert candidate.pb_new_mrq is None


class TestAnnualFinancialsValidation:
    """Test cases for AnnualFinancials field validation."""

    @pytest.mark.parametrize("field", ["roe", "eps", "revenue", "net_profit", "debt_ratio"])
    @pytest.mark.parametrize("value", NON_FINITE)
    def test_non_finite_figure_rejected(self, field: str, value: float) -> None:
        """
        SCENARIO: One yearly figure is NaN or infinite
        EXPECTED: ValidationError naming the field
        """
        # Arrange
        figures = dict(roe=12.0, eps=1.0, revenue=100.0, net_profit=10.0, debt_ratio=40.0)
        figures[field] = value

        # Act & Assert
        with pytest.raises(ValidationError, match=field):
            AnnualFinancials(year=2023, **figures)


class TestRankingOverValidRecords:
    """Ranking keys are always comparable once records are validated."""

    def test_ranking_is_non_increasing(self) -> None:
        """
        SCENARIO: Mixed ROEs including negatives and equal values
        EXPECTED: Ranked ROEs never increase
        """
        # Arrange
        roes = [10.0, -3.5, 30.0, 10.0, 0.0, 22.25]
        entries = [
            (i, make_record(make_candidate(f"{600000 + i}.SH", roe=roe)))
            for i, roe in enumerate(roes)
        ]

        # Act
        ranked = [r.roe for r in rank_by_roe(entries)]

        # Assert
        assert ranked == sorted(roes, reverse=True)
