"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import List

import pytest

from fundamental_screener.adapters.console_logger import ConsoleAuditLogger
from fundamental_screener.adapters.metrics_collector import InMemoryMetricsCollector
from fundamental_screener.adapters.mock_enricher import MockEnricher
from fundamental_screener.adapters.mock_source import MockCandidateSource
from fundamental_screener.config.models import CheckerConfig, ScreeningConfig
from fundamental_screener.domain.entities import Candidate
from fundamental_screener.pipeline.run_context import RunContext
from fundamental_screener.rules.checker import FundamentalChecker
from tests.fixtures.fakes import make_candidate


@pytest.fixture(autouse=True)
def set_random_seed():
    """Ensure all tests are deterministic."""
    random.seed(42)
    yield


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def run_context() -> RunContext:
    """Fresh run context with a fixed correlation id."""
    return RunContext(correlation_id="test-run-0001")


@pytest.fixture
def mock_source() -> MockCandidateSource:
    return MockCandidateSource(seed=42)


@pytest.fixture
def mock_enricher() -> MockEnricher:
    return MockEnricher(seed=42)


@pytest.fixture
def console_logger() -> ConsoleAuditLogger:
    return ConsoleAuditLogger(verbose=False)


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    return InMemoryMetricsCollector()


@pytest.fixture
def default_config() -> ScreeningConfig:
    return ScreeningConfig()


@pytest.fixture
def checker() -> FundamentalChecker:
    return FundamentalChecker(CheckerConfig())


@pytest.fixture
def sample_candidates() -> List[Candidate]:
    """Three candidates with distinct ROE."""
    return [
        make_candidate("600519.SH", roe=30.5, name="Kweichow Moutai"),
        make_candidate("000858.SZ", roe=24.1, name="Wuliangye Yibin"),
        make_candidate("000333.SZ", roe=22.0, name="Midea Group", industry="Home Appliances"),
    ]
