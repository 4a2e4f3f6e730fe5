"""
Domain Layer - Core Business Entities and Value Objects.

This package contains the core domain model for the Fundamental Screener.
All entities here are pure Python with no external dependencies
(except Pydantic for validation).

Entities:
    - Candidate: Base info of a company returned by the candidate source
    - AnnualFinancials: One year of main financial indicators
    - EnrichedStockRecord: Candidate plus its financial history
    - ScreeningResult: Complete result of a screening run

Value Objects:
    - CandidateOutcome: Terminal state of a candidate in a run
    - CandidateReport: Per-candidate outcome with defects or error
"""

from fundamental_screener.domain.entities import (
    AnnualFinancials,
    Board,
    Candidate,
    EnrichedStockRecord,
    ScreeningResult,
    ValuationLevel,
)
from fundamental_screener.domain.exceptions import (
    CandidateSourceError,
    EnrichmentError,
    ScreenerError,
    ScreeningCancelled,
)
from fundamental_screener.domain.value_objects import (
    CandidateOutcome,
    CandidateReport,
    DefectList,
)

__all__ = [
    "AnnualFinancials",
    "Board",
    "Candidate",
    "EnrichedStockRecord",
    "ScreeningResult",
    "ValuationLevel",
    "CandidateSourceError",
    "EnrichmentError",
    "ScreenerError",
    "ScreeningCancelled",
    "CandidateOutcome",
    "CandidateReport",
    "DefectList",
]
