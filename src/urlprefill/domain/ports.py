"""Ports the prefill engine reads from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

type Item = Mapping[str, object]
type ItemFilter = Mapping[str, Mapping[str, object]]

EQUALS = "_eq"


@dataclass(slots=True, frozen=True, kw_only=True)
class Relation:
    """Many-to-one relation attached to ``collection.field``."""

    collection: str
    field: str
    related_collection: str | None


@dataclass(slots=True, frozen=True, kw_only=True)
class PrimaryKeyField:
    collection: str
    field: str


@runtime_checkable
class RelationDirectory(Protocol):
    """Read-only lookup of relations; assumed loaded before prefill runs."""

    def get_relation_for_field(self, collection: str, field: str) -> Relation | None: ...


@runtime_checkable
class FieldDirectory(Protocol):
    """Read-only lookup of primary-key columns."""

    def get_primary_key_field(self, collection: str) -> PrimaryKeyField | None: ...


@runtime_checkable
class ItemQueryService(Protocol):
    """Query items of a collection; raises on transport failure."""

    async def query_items(
        self,
        collection: str,
        *,
        filter: ItemFilter,  # noqa: A002
        fields: Sequence[str],
        limit: int,
    ) -> list[Item]: ...


def equals_filter(field: str, value: object) -> ItemFilter:
    return {field: {EQUALS: value}}


__all__ = [
    "EQUALS",
    "FieldDirectory",
    "Item",
    "ItemFilter",
    "ItemQueryService",
    "PrimaryKeyField",
    "Relation",
    "RelationDirectory",
    "equals_filter",
]
