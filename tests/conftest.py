from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from urlprefill.adapters.http_resilience import ResilientClient
from urlprefill.config import ItemsApiConfig, ResilienceConfig, RetryPolicy

if TYPE_CHECKING:
    from collections.abc import Callable

    from urlprefill.adapters.items_api.client import ClientFactory

BASE_URL = "https://items.example.com/"


@pytest.fixture
def items_api_config() -> ItemsApiConfig:
    return ItemsApiConfig(
        resilience=ResilienceConfig(name="items", base_url=BASE_URL, retry=RetryPolicy(total=0)),
        schema_resilience=ResilienceConfig(
            name="items-schema", base_url=BASE_URL, retry=RetryPolicy(total=0)
        ),
    )


def make_client_factory(
    handler: Callable[[httpx.Request], httpx.Response],
) -> ClientFactory:
    async def async_handler(request: httpx.Request) -> httpx.Response:
        return handler(request)

    def factory(resilience: ResilienceConfig) -> ResilientClient:
        client = ResilientClient(resilience)
        client._client = httpx.AsyncClient(  # noqa: SLF001  # type: ignore[reportPrivateUsage]
            base_url=resilience.base_url or "",
            transport=httpx.MockTransport(async_handler),
        )
        return client

    return factory


@pytest.fixture
def client_factory_for() -> Callable[[Callable[[httpx.Request], httpx.Response]], ClientFactory]:
    return make_client_factory
