"""
Configuration Loader - YAML File Plus Environment Overrides.

Settings are resolved in layers, later layers winning:

    1. ClientConfig defaults
    2. YAML file (or a plain dict)
    3. Environment variables listed in ENV_OVERRIDES

The RapidAPI key travels the same way: `api_key` in the file, or the
RAPIDAPI_KEY variable.
"""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from latest_stock_price.config.models import ClientConfig

logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = "RAPIDAPI_KEY"

# Environment variable -> path of the config key it replaces
ENV_OVERRIDES: Dict[str, Tuple[str, ...]] = {
    API_KEY_ENV_VAR: ("api_key",),
    "LATEST_STOCK_PRICE_BASE_URL": ("base_url",),
    "LATEST_STOCK_PRICE_HOST": ("rapidapi_host",),
    "LATEST_STOCK_PRICE_TIMEOUT": ("timeout_seconds",),
    "LATEST_STOCK_PRICE_PAGE_SIZE": ("pagination", "default_limit"),
}


class ConfigLoader:
    """Builds a validated ClientConfig from YAML and the environment."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Args:
            base_path: Directory that relative config paths are read from
        """
        self._base_path = base_path or Path(".")

    def load(self, config_path: Union[str, Path]) -> ClientConfig:
        """
        Load a YAML config file and apply environment overrides.

        Raises:
            FileNotFoundError: If the config file doesn't exist
            ValidationError: If a file or environment value is invalid
        """
        path = Path(config_path)
        if not path.is_absolute():
            path = self._base_path / path
        with open(path, encoding="utf-8") as f:
            settings = yaml.safe_load(f) or {}
        logger.debug(f"Loaded client config from {path}")
        return self.load_from_dict(settings)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> ClientConfig:
        """Validate settings given as a dict, after environment overrides."""
        return ClientConfig.model_validate(self._apply_env(config_dict))

    def _apply_env(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        settings = copy.deepcopy(config_dict)
        for env_var, key_path in ENV_OVERRIDES.items():
            value = os.getenv(env_var)
            if not value:
                continue
            section = settings
            for key in key_path[:-1]:
                if not isinstance(section.get(key), dict):
                    section[key] = {}
                section = section[key]
            section[key_path[-1]] = value
            logger.debug(f"{env_var} overrides {'.'.join(key_path)}")
        return settings


def load_config(
    config_path: Union[str, Path],
    base_path: Optional[Path] = None,
) -> ClientConfig:
    """Load a YAML config file; see ConfigLoader.load."""
    return ConfigLoader(base_path=base_path).load(config_path)


def resolve_api_key(
    api_key: Optional[str], config: Optional[ClientConfig] = None
) -> str:
    """
    Pick the RapidAPI key: explicit argument, then config, then RAPIDAPI_KEY.

    Raises:
        ValueError: If none of them supplies a key
    """
    key = api_key or (config.api_key if config else None) or os.getenv(API_KEY_ENV_VAR)
    if not key:
        raise ValueError(
            f"An API key is required (pass api_key or set {API_KEY_ENV_VAR})"
        )
    return key
