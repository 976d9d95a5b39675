"""Application services wiring the prefill engine to the items API."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from urlprefill.adapters.items_api import ItemsClient, SchemaClient, load_schema_directory
from urlprefill.config import get_items_api_config
from urlprefill.domain.prefill import resolve_prefill_data

if TYPE_CHECKING:
    from collections.abc import Mapping

    from urlprefill.adapters.items_api.client import ClientFactory
    from urlprefill.config import ItemsApiConfig
    from urlprefill.domain.prefill import PrefillResult

log = getLogger(__name__)


def prefill_new_item(
    query: Mapping[str, object],
    collection: str,
    existing_edits: Mapping[str, object] | None = None,
    *,
    config: ItemsApiConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> PrefillResult:
    """Resolve prefill hints for a new ``collection`` item against the items API.

    Loads relations and fields first; failing to load them raises. Hint
    resolution itself never raises.
    """

    active_config = config or get_items_api_config()
    return asyncio.run(
        _prefill_new_item_async(
            query,
            collection,
            existing_edits,
            config=active_config,
            client_factory=client_factory,
        )
    )


async def _prefill_new_item_async(
    query: Mapping[str, object],
    collection: str,
    existing_edits: Mapping[str, object] | None,
    *,
    config: ItemsApiConfig,
    client_factory: ClientFactory | None,
) -> PrefillResult:
    async with SchemaClient(config=config, client_factory=client_factory) as schema_client:
        directory = await load_schema_directory(schema_client)

    async with ItemsClient(config=config, client_factory=client_factory) as items_client:
        prefill = await resolve_prefill_data(
            query,
            collection,
            existing_edits,
            relations=directory,
            fields=directory,
            items=items_client,
        )

    log.info("Prefilled %d field(s) for new %s item", len(prefill), collection)
    return prefill
