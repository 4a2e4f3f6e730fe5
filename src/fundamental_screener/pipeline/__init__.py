"""
Pipeline Package - Concurrent Screening Orchestration.

Components:
    - FundamentalScreener: Bounded concurrent screener and entry points
    - RunContext: Cooperative cancellation and correlation id
    - AdmissionGate: Counting semaphore bounding concurrent tasks
    - ResultCollection: Lock-guarded collection of task outcomes
    - rank_by_roe: Final ordering of the passing records

The screener is responsible for:
    - Fetching the candidate list (fatal on failure)
    - Running enrichment and rule evaluation per candidate
    - Isolating per-candidate failures
    - Generating the final ScreeningResult

Design Principles:
    - All dependencies injected via constructor
    - The result collection is the only state shared between tasks
"""

from fundamental_screener.pipeline.admission import AdmissionGate
from fundamental_screener.pipeline.results import ResultCollection, rank_by_roe
from fundamental_screener.pipeline.run_context import RunContext
from fundamental_screener.pipeline.screener import FundamentalScreener

__all__ = [
    "AdmissionGate",
    "ResultCollection",
    "rank_by_roe",
    "RunContext",
    "FundamentalScreener",
]
