"""
Value Objects for Domain Layer.

Value objects are immutable objects that describe characteristics of entities
but have no conceptual identity.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# Human-readable rule violations for one record; empty means "passes"
DefectList = List[str]

# Defects indexed by secucode
RejectionsDict = Dict[str, DefectList]

# Failure causes indexed by secucode
FailuresDict = Dict[str, str]


class CandidateOutcome(str, Enum):
    """Terminal state of one candidate in a screening run."""

    PASSED = "passed"
    REJECTED = "rejected"  # Failed one or more fundamental rules
    FAILED = "failed"  # Enrichment error
    FAULTED = "faulted"  # Unexpected exception in enrichment or evaluation


class CandidateReport(BaseModel):
    """What happened to one candidate."""

    secucode: str
    outcome: CandidateOutcome
    defects: DefectList = Field(default_factory=list)
    error: Optional[str] = None
    duration_seconds: float = 0.0

    model_config = {"frozen": True}
