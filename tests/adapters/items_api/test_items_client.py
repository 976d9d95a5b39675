from __future__ import annotations

import asyncio
import json
from typing import TYPE_CHECKING

import httpx
import pytest

from urlprefill.adapters.items_api import ItemsApiError, ItemsClient, SchemaClient
from urlprefill.domain.ports import ItemQueryService, equals_filter

if TYPE_CHECKING:
    from collections.abc import Callable

    from urlprefill.adapters.items_api.client import ClientFactory
    from urlprefill.config import ItemsApiConfig

    FactoryBuilder = Callable[[Callable[[httpx.Request], httpx.Response]], ClientFactory]


def test_items_client_satisfies_port(items_api_config: ItemsApiConfig) -> None:
    assert isinstance(ItemsClient(config=items_api_config), ItemQueryService)


def test_query_items_sends_filter_fields_and_limit(
    items_api_config: ItemsApiConfig,
    client_factory_for: FactoryBuilder,
) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"data": [{"id": 42}]})

    async def run() -> list[object]:
        async with ItemsClient(
            config=items_api_config, client_factory=client_factory_for(handler)
        ) as client:
            return await client.query_items(
                "programs",
                filter=equals_filter("abbreviation", "ABC"),
                fields=["id"],
                limit=1,
            )

    items = asyncio.run(run())

    assert items == [{"id": 42}]
    (request,) = seen
    assert request.method == "GET"
    assert request.url.path == "/items/programs"
    assert json.loads(request.url.params["filter"]) == {"abbreviation": {"_eq": "ABC"}}
    assert request.url.params["fields"] == "id"
    assert request.url.params["limit"] == "1"


def test_query_items_raises_on_http_error(
    items_api_config: ItemsApiConfig,
    client_factory_for: FactoryBuilder,
) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, json={"errors": [{"message": "Forbidden"}]})

    async def run() -> None:
        async with ItemsClient(
            config=items_api_config, client_factory=client_factory_for(handler)
        ) as client:
            await client.query_items("programs", filter={}, fields=["id"], limit=1)

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(run())


@pytest.mark.parametrize("payload", [[{"id": 1}], {"items": []}, {"data": "nope"}])
def test_query_items_rejects_unexpected_payload(
    items_api_config: ItemsApiConfig,
    client_factory_for: FactoryBuilder,
    payload: object,
) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload)

    async def run() -> None:
        async with ItemsClient(
            config=items_api_config, client_factory=client_factory_for(handler)
        ) as client:
            await client.query_items("programs", filter={}, fields=["id"], limit=1)

    with pytest.raises(ItemsApiError):
        asyncio.run(run())


def test_query_items_outside_context_raises(items_api_config: ItemsApiConfig) -> None:
    client = ItemsClient(config=items_api_config)

    with pytest.raises(ItemsApiError):
        asyncio.run(client.query_items("programs", filter={}, fields=["id"], limit=1))


def test_schema_client_fetches_relations_and_fields(
    items_api_config: ItemsApiConfig,
    client_factory_for: FactoryBuilder,
) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/relations":
            return httpx.Response(
                200,
                json={
                    "data": [
                        {
                            "collection": "cases",
                            "field": "program",
                            "related_collection": "programs",
                            "meta": {"one_field": None},
                        }
                    ]
                },
            )
        return httpx.Response(
            200,
            json={
                "data": [
                    {"collection": "programs", "field": "id", "schema": {"is_primary_key": True}},
                    {"collection": "programs", "field": "name", "schema": None},
                ]
            },
        )

    async def run() -> tuple[list[object], list[object]]:
        async with SchemaClient(
            config=items_api_config, client_factory=client_factory_for(handler)
        ) as client:
            return await client.fetch_relations(), await client.fetch_fields()

    relations, fields = asyncio.run(run())

    assert [(r.collection, r.field, r.related_collection) for r in relations] == [
        ("cases", "program", "programs")
    ]
    assert [f.field for f in fields] == ["id", "name"]
