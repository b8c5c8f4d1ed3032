"""
Configuration Package - Models and Loaders.

    - ClientConfig: Root configuration (endpoint, host header, timeout)
    - PaginationConfig: Default page and limit
    - ConfigLoader: YAML loader with environment overrides
"""

from latest_stock_price.config.loader import (
    API_KEY_ENV_VAR,
    ENV_OVERRIDES,
    ConfigLoader,
    load_config,
    resolve_api_key,
)
from latest_stock_price.config.models import ClientConfig, PaginationConfig

__all__ = [
    "API_KEY_ENV_VAR",
    "ClientConfig",
    "ConfigLoader",
    "ENV_OVERRIDES",
    "PaginationConfig",
    "load_config",
    "resolve_api_key",
]
