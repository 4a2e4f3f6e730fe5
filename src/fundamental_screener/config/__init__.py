"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - ScreeningConfig: Root configuration object
    - FilterConfig: Pre-filter thresholds passed to the candidate source
    - ScreenerSettings: Worker ceiling for the concurrent screener
    - CheckerConfig: Fundamental rule thresholds
    - RetrySettings: Retry policy for the candidate fetch
"""

from fundamental_screener.config.loader import ConfigLoader, load_config
from fundamental_screener.config.models import (
    DEFAULT_FILTER,
    CheckerConfig,
    FilterConfig,
    RetrySettings,
    ScreenerSettings,
    ScreeningConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "DEFAULT_FILTER",
    "CheckerConfig",
    "FilterConfig",
    "RetrySettings",
    "ScreenerSettings",
    "ScreeningConfig",
]
