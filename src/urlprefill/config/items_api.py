"""Items API configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, optional_float_env_var, require_env_vars
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True, slots=True)
class ItemsApiConfig:
    """Connection settings for the items API.

    ``resilience`` drives item lookups, ``schema_resilience`` the relations and
    fields endpoints loaded before each prefill. Nothing is cached, so every
    prefill sees fresh data.
    """

    resilience: ResilienceConfig
    schema_resilience: ResilienceConfig


def get_items_api_config() -> ItemsApiConfig:
    values = require_env_vars(("ITEMS_API_URL",))
    base_url = values["ITEMS_API_URL"].rstrip("/") + "/"
    token = optional_env_var("ITEMS_API_TOKEN")
    timeout = optional_float_env_var("ITEMS_API_TIMEOUT_SECONDS") or DEFAULT_TIMEOUT_SECONDS
    calls_per_second = optional_float_env_var("ITEMS_API_MAX_CALLS_PER_SECOND")

    headers = {"Accept": "application/json"}
    if token is not None:
        headers["Authorization"] = f"Bearer {token}"

    ratelimit = _ratelimit(calls_per_second) if calls_per_second is not None else None

    resilience = ResilienceConfig(
        name="items",
        base_url=base_url,
        timeout_seconds=timeout,
        retry=RetryPolicy(total=2),
        ratelimit=ratelimit,
        default_headers=headers,
    )
    schema_resilience = ResilienceConfig(
        name="items-schema",
        base_url=base_url,
        timeout_seconds=timeout,
        retry=RetryPolicy(total=3),
        ratelimit=ratelimit,
        default_headers=headers,
    )
    return ItemsApiConfig(resilience=resilience, schema_resilience=schema_resilience)


def _ratelimit(calls_per_second: float) -> RateLimit:
    if calls_per_second.is_integer():
        return RateLimit(max_calls=int(calls_per_second), per_seconds=1.0)
    return RateLimit(max_calls=1, per_seconds=1.0 / calls_per_second)
