"""
Fundamental Screener - Concurrent Good-Company Stock Screen.

Screens a universe of listed companies against fundamental-quality rules
(ROE level and trend, EPS/revenue/net profit growth, valuation, debt
ratio) and returns the passing companies ranked by ROE.

Architecture:
    - Hexagonal Architecture (Ports & Adapters)
    - Dependency Injection for testability
    - Bounded thread fan-out with per-candidate fault isolation
    - Configuration-driven behavior via YAML

Main Components:
    - domain: Core entities (Candidate, EnrichedStockRecord, ScreeningResult)
    - interfaces: Protocols for candidate source, enricher, rule evaluator
    - filters: Candidate pre-filter
    - rules: Fundamental rule checker
    - pipeline: Concurrent screener, run context, result assembly
    - adapters: Mock source/enricher, console logger, metrics
    - config: Configuration models and loaders

Example:
    >>> from fundamental_screener import RunContext, create_screener
    >>> screener = create_screener(config_path="config/default.yaml")
    >>> stocks = screener.screen_with_defaults(RunContext())
    >>> print(f"Selected {len(stocks)} companies")

"""

import logging

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(threadName)s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Fundamental Screener.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import fundamental_screener
        >>> fundamental_screener.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("fundamental_screener").setLevel(level)


# Imported after __version__ so submodules can read it during import
from fundamental_screener.config.models import DEFAULT_FILTER, FilterConfig  # noqa: E402
from fundamental_screener.factory import create_screener  # noqa: E402
from fundamental_screener.pipeline.run_context import RunContext  # noqa: E402
from fundamental_screener.pipeline.screener import FundamentalScreener  # noqa: E402

__all__ = [
    "__version__",
    "configure_logging",
    "create_screener",
    "DEFAULT_FILTER",
    "FilterConfig",
    "FundamentalScreener",
    "RunContext",
]
