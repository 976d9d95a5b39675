"""Classification of raw prefill hints.

A hint is one key/value pair, usually taken from a URL query string. Two shapes
are understood:

- ``field=value`` sets ``field`` directly;
- ``field.lookup_field=value`` names a many-to-one relation ``field`` and asks
  for the related item whose ``lookup_field`` equals ``value``.

Anything else is rejected by returning ``None``. Rejection is an ordinary
outcome here, never an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from .ports import RelationDirectory

RESERVED_QUERY_PARAMS: Final[frozenset[str]] = frozenset({"bookmark", "version", "all", "archived"})
SEPARATOR: Final[str] = "."


@dataclass(slots=True, frozen=True, kw_only=True)
class DirectParam:
    field: str
    value: object


@dataclass(slots=True, frozen=True, kw_only=True)
class RelationalParam:
    field: str
    lookup_field: str
    lookup_value: object
    related_collection: str | None


type ParsedParam = DirectParam | RelationalParam


@dataclass(slots=True, frozen=True, kw_only=True)
class ResolvedEntry:
    field: str
    value: object


def owning_field(key: str) -> str:
    """Return the field a hint would write to: the first dot-segment, or the key itself."""

    return key.split(SEPARATOR, 1)[0]


def parse_query_param(
    key: str,
    value: object,
    collection: str,
    *,
    relations: RelationDirectory,
) -> ParsedParam | None:
    """Classify a single hint for ``collection``.

    Dotted keys only look at their first two segments: ``program.meta.value``
    behaves like ``program.meta``.
    """

    if key in RESERVED_QUERY_PARAMS:
        return None

    if SEPARATOR not in key:
        return DirectParam(field=key, value=value)

    field_name, lookup_field = key.split(SEPARATOR)[:2]
    if not field_name or not lookup_field:
        return None

    relation = relations.get_relation_for_field(collection, field_name)
    if relation is None or not relation.related_collection:
        return None

    return RelationalParam(
        field=field_name,
        lookup_field=lookup_field,
        lookup_value=value,
        related_collection=relation.related_collection,
    )
