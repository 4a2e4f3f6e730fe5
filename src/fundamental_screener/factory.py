"""
Screener Factory.

Wires a FundamentalScreener from a ScreeningConfig. Collaborators that
are not given fall back to the mock adapters and the default checker.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from fundamental_screener.adapters.metrics_collector import InMemoryMetricsCollector
from fundamental_screener.adapters.mock_enricher import MockEnricher
from fundamental_screener.adapters.mock_source import MockCandidateSource
from fundamental_screener.config.loader import load_config
from fundamental_screener.config.models import ScreeningConfig
from fundamental_screener.interfaces.audit_logger import AuditLogger
from fundamental_screener.interfaces.candidate_source import CandidateSource
from fundamental_screener.interfaces.enricher import Enricher, RuleEvaluator
from fundamental_screener.interfaces.metrics_collector import MetricsCollector
from fundamental_screener.pipeline.screener import FundamentalScreener
from fundamental_screener.resilience.error_handler import ErrorHandler, RetryConfig
from fundamental_screener.rules.checker import FundamentalChecker


def create_screener(
    config: Optional[ScreeningConfig] = None,
    config_path: Optional[Union[str, Path]] = None,
    profile: Optional[str] = None,
    candidate_source: Optional[CandidateSource] = None,
    enricher: Optional[Enricher] = None,
    rule_evaluator: Optional[RuleEvaluator] = None,
    audit_logger: Optional[AuditLogger] = None,
    metrics_collector: Optional[MetricsCollector] = None,
) -> FundamentalScreener:
    """
    Build a screener from configuration.

    Args:
        config: Configuration object (takes precedence over config_path)
        config_path: YAML file to load when no config object is given
        profile: Optional profile merged over config_path
        candidate_source: Defaults to MockCandidateSource
        enricher: Defaults to MockEnricher
        rule_evaluator: Defaults to FundamentalChecker(config.checker)
        audit_logger: Optional audit logger
        metrics_collector: Defaults to InMemoryMetricsCollector

    Returns:
        Configured FundamentalScreener

    Example:
        >>> screener = create_screener(config_path="config/default.yaml")
        >>> stocks = screener.screen_with_defaults(RunContext())
    """
    if config is None:
        config = load_config(config_path, profile) if config_path else ScreeningConfig()

    error_handler = None
    if config.retry.enabled:
        error_handler = ErrorHandler(RetryConfig.from_settings(config.retry))

    return FundamentalScreener(
        candidate_source=candidate_source or MockCandidateSource(),
        enricher=enricher or MockEnricher(),
        rule_evaluator=rule_evaluator or FundamentalChecker(config.checker),
        settings=config.screener,
        audit_logger=audit_logger,
        metrics_collector=metrics_collector or InMemoryMetricsCollector(),
        error_handler=error_handler,
    )
