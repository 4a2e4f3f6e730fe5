"""
Configuration Loader - YAML Loading with Validation.

Loads screening configuration from YAML files, optionally overlaid with
a named profile, and validates the merged result with Pydantic.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from fundamental_screener.config.models import FilterConfig, ScreeningConfig

logger = logging.getLogger(__name__)

PROFILE_DIR = Path("config") / "profiles"


class ConfigLoader:
    """Loads and validates screening configuration from YAML files."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config and profile paths
        """
        self._base_path = base_path or Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> ScreeningConfig:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML config file
            profile: Optional profile name merged over the base file

        Returns:
            Validated ScreeningConfig object

        Raises:
            FileNotFoundError: If config or profile file doesn't exist
            ValidationError: If config is invalid
        """
        path = self._resolve_path(config_path)
        config_dict = self._load_yaml(path)

        if profile:
            config_dict = self._merge_configs(config_dict, self._load_profile(profile))
            logger.debug(f"Applied profile '{profile}' to {path}")

        return ScreeningConfig.model_validate(config_dict)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> ScreeningConfig:
        """Validate configuration given as a dictionary."""
        return ScreeningConfig.model_validate(config_dict)

    def load_filter(self, config_path: Union[str, Path]) -> FilterConfig:
        """Load only the ``filter`` section of a config file."""
        config_dict = self._load_yaml(self._resolve_path(config_path))
        return FilterConfig.model_validate(config_dict.get("filter") or {})

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        return data

    def _load_profile(self, profile: str) -> Dict[str, Any]:
        profile_path = self._base_path / PROFILE_DIR / f"{profile}.yaml"
        if not profile_path.exists():
            raise FileNotFoundError(f"Profile not found: {profile}")
        return self._load_yaml(profile_path)

    def _merge_configs(
        self,
        base: Dict[str, Any],
        overlay: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Deep merge overlay into base config."""
        result = dict(base)
        for key, value in overlay.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value
        return result


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> ScreeningConfig:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to YAML config file
        profile: Optional profile name
        base_path: Base path for resolving relative paths

    Returns:
        Validated ScreeningConfig object
    """
    return ConfigLoader(base_path=base_path).load(config_path, profile)
