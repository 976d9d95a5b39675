"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, optional_float_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .items_api import ItemsApiConfig, get_items_api_config
from .logging import configure_logging

__all__ = [
    "ConfigurationError",
    "ItemsApiConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "configure_logging",
    "get_items_api_config",
    "optional_env_var",
    "optional_float_env_var",
    "require_env_vars",
]
