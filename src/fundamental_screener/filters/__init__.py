"""
Filters Package - Candidate Pre-Filter.

    - CandidateFilter: Applies a FilterConfig to candidate base info

Design Principles:
    - Configuration injected via constructor
    - Stateless filtering
    - Clear rejection reasons
"""

from fundamental_screener.filters.candidate_filter import CandidateFilter

__all__ = ["CandidateFilter"]
