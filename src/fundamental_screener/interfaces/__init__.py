"""
Interfaces Layer - Abstract Protocols for Dependencies.

This package defines the abstract interfaces (using typing.Protocol) for all
external collaborators of the screener. High-level modules depend on these
abstractions, not on concrete implementations.

Protocols:
    - CandidateSource: Upstream pre-filtered candidate list
    - Enricher: Builds the financial history of one candidate
    - RuleEvaluator: Fundamental pass/fail decision for one record
    - AuditLogger: Audit trail of a screening run
    - MetricsCollector: Performance metrics abstraction
"""

from fundamental_screener.interfaces.audit_logger import AuditLogger
from fundamental_screener.interfaces.candidate_source import CandidateSource
from fundamental_screener.interfaces.enricher import Enricher, RuleEvaluator
from fundamental_screener.interfaces.metrics_collector import MetricsCollector

__all__ = [
    "AuditLogger",
    "CandidateSource",
    "Enricher",
    "RuleEvaluator",
    "MetricsCollector",
]
