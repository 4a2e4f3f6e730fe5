"""
Adapters Package - Infrastructure Implementations.

This package contains concrete implementations of the abstract
interfaces defined in the interfaces package (Ports & Adapters).

Sources:
    - MockCandidateSource: Deterministic A-share universe with pre-filter
    - MockEnricher: Deterministic financial histories, fault injection

Loggers:
    - ConsoleAuditLogger: Simple console output

Metrics:
    - InMemoryMetricsCollector: Thread-safe in-memory collection

Design Principles:
    - All adapters implement their respective protocols
    - Easily swappable via Dependency Injection
    - No screening logic in adapters
"""

from fundamental_screener.adapters.console_logger import ConsoleAuditLogger
from fundamental_screener.adapters.metrics_collector import InMemoryMetricsCollector
from fundamental_screener.adapters.mock_enricher import MockEnricher
from fundamental_screener.adapters.mock_source import MockCandidateSource

__all__ = [
    "ConsoleAuditLogger",
    "InMemoryMetricsCollector",
    "MockEnricher",
    "MockCandidateSource",
]
