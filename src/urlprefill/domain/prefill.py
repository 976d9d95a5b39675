"""Build the initial field values of a new item from prefill hints."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from .params import DirectParam, RelationalParam, owning_field, parse_query_param
from .resolve import resolve_relational_lookup

if TYPE_CHECKING:
    from collections.abc import Coroutine, Mapping

    from .params import ResolvedEntry
    from .ports import FieldDirectory, ItemQueryService, RelationDirectory

log = getLogger(__name__)

type PrefillResult = dict[str, object]


async def resolve_prefill_data(
    query: Mapping[str, object],
    collection: str,
    existing_edits: Mapping[str, object] | None = None,
    *,
    relations: RelationDirectory,
    fields: FieldDirectory,
    items: ItemQueryService,
) -> PrefillResult:
    """Resolve every hint in ``query`` into a field map for a new ``collection`` item.

    Fields present in ``existing_edits`` are left alone, so a hint never
    overwrites something the user already changed. Relational lookups run
    concurrently and are all awaited before returning. Hints that are rejected
    or fail to resolve are simply absent from the result.

    When a direct and a relational hint target the same field, the resolved
    relational value wins; relational results are applied after all direct
    values, in hint order.
    """

    edits = existing_edits or {}
    prefill: PrefillResult = {}
    lookups: list[Coroutine[object, object, ResolvedEntry | None]] = []
    skipped = rejected = 0

    for key, value in query.items():
        field_name = owning_field(key)
        if field_name and field_name in edits:
            skipped += 1
            continue

        try:
            parsed = parse_query_param(key, value, collection, relations=relations)
        except Exception as exc:  # noqa: BLE001
            log.warning("Could not classify prefill hint %r for %s: %s", key, collection, exc)
            parsed = None
        match parsed:
            case None:
                rejected += 1
            case DirectParam(field=field, value=direct_value):
                prefill[field] = direct_value
            case RelationalParam():
                lookups.append(resolve_relational_lookup(parsed, fields=fields, items=items))

    direct_count = len(prefill)
    resolved = 0
    for entry in await asyncio.gather(*lookups):
        if entry is not None:
            prefill[entry.field] = entry.value
            resolved += 1

    log.debug(
        "Prefill for %s: %d direct, %d/%d resolved, %d skipped, %d rejected",
        collection,
        direct_count,
        resolved,
        len(lookups),
        skipped,
        rejected,
    )
    return prefill
