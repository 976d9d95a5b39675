"""Translate relational hints into primary-key values."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .params import ResolvedEntry
from .ports import equals_filter

if TYPE_CHECKING:
    from .params import RelationalParam
    from .ports import FieldDirectory, ItemQueryService

log = getLogger(__name__)


async def resolve_relational_lookup(
    param: RelationalParam,
    *,
    fields: FieldDirectory,
    items: ItemQueryService,
) -> ResolvedEntry | None:
    """Look up the related item a relational hint points at.

    Returns the first match's primary key under ``param.field``. No match, no
    primary key on the related collection and a failing query all return
    ``None``; callers cannot and need not tell them apart.
    """

    if not param.related_collection:
        return None

    primary_key = fields.get_primary_key_field(param.related_collection)
    if primary_key is None:
        log.debug("No primary key configured for %s", param.related_collection)
        return None

    try:
        found = await items.query_items(
            param.related_collection,
            filter=equals_filter(param.lookup_field, param.lookup_value),
            fields=[primary_key.field],
            limit=1,
        )
    except Exception as exc:  # noqa: BLE001
        log.warning(
            "Lookup of %s.%s=%r failed: %s",
            param.related_collection,
            param.lookup_field,
            param.lookup_value,
            exc,
        )
        return None

    if not found:
        log.debug(
            "No %s item with %s=%r",
            param.related_collection,
            param.lookup_field,
            param.lookup_value,
        )
        return None

    first = found[0]
    if primary_key.field not in first:
        log.warning(
            "%s item is missing primary key %s", param.related_collection, primary_key.field
        )
        return None

    return ResolvedEntry(field=param.field, value=first[primary_key.field])
