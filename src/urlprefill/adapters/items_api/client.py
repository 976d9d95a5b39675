"""HTTP clients for the items API."""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING, Any, Self

from pydantic import ValidationError

from urlprefill.adapters.http_resilience import ResilientClient

from .schema import FieldPayload, FieldsResponse, ItemsResponse, RelationPayload, RelationsResponse

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from types import TracebackType

    from pydantic import BaseModel

    from urlprefill.config.http_resilience import ResilienceConfig
    from urlprefill.config.items_api import ItemsApiConfig
    from urlprefill.domain.ports import Item, ItemFilter

log = getLogger(__name__)

type ClientFactory = Callable[[ResilienceConfig], ResilientClient]


class ItemsApiError(RuntimeError):
    """Raised when the items API returns an unexpected response."""


class _ItemsApiSession:
    def __init__(self, resilience: ResilienceConfig, client_factory: ClientFactory) -> None:
        self._resilience = resilience
        self._client_factory = client_factory
        self._client: ResilientClient | None = None

    async def __aenter__(self) -> Self:
        self._client = self._client_factory(self._resilience)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _get_json[M: BaseModel](
        self,
        path: str,
        model: type[M],
        params: dict[str, str] | None = None,
    ) -> M:
        if self._client is None:
            raise ItemsApiError(f"{type(self).__name__} used outside of 'async with'")
        if self._resilience.base_url is None:
            raise ItemsApiError("Missing items API base_url in resilience configuration")

        response = await self._client.get(path, params=params)
        response.raise_for_status()

        payload: Any = response.json()
        if not isinstance(payload, dict) or "data" not in payload:
            raise ItemsApiError(f"Unexpected items API payload from {path}")
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise ItemsApiError(f"Malformed items API payload from {path}: {exc}") from exc


class ItemsClient(_ItemsApiSession):
    """Item queries; one HTTP client shared by all lookups of a session."""

    def __init__(
        self,
        *,
        config: ItemsApiConfig,
        client_factory: ClientFactory | None = None,
    ) -> None:
        super().__init__(config.resilience, client_factory or ResilientClient)

    async def query_items(
        self,
        collection: str,
        *,
        filter: ItemFilter,  # noqa: A002
        fields: Sequence[str],
        limit: int,
    ) -> list[Item]:
        params = {
            "filter": json.dumps(filter, default=str),
            "fields": ",".join(fields),
            "limit": str(limit),
        }
        log.debug("Querying %s with %s", collection, params["filter"])
        response = await self._get_json(f"items/{collection}", ItemsResponse, params)
        return list(response.data)


class SchemaClient(_ItemsApiSession):
    """Relations and fields endpoints used to populate the directories."""

    def __init__(
        self,
        *,
        config: ItemsApiConfig,
        client_factory: ClientFactory | None = None,
    ) -> None:
        super().__init__(config.schema_resilience, client_factory or ResilientClient)

    async def fetch_relations(self) -> list[RelationPayload]:
        response = await self._get_json("relations", RelationsResponse)
        return response.data

    async def fetch_fields(self) -> list[FieldPayload]:
        response = await self._get_json("fields", FieldsResponse)
        return response.data
