"""In-memory relation and field directories built from the items API schema."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from urlprefill.domain.ports import PrimaryKeyField, Relation

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .client import SchemaClient
    from .schema import FieldPayload, RelationPayload

log = getLogger(__name__)


class SchemaDirectory:
    """Answers relation and primary-key questions from a loaded schema snapshot."""

    def __init__(
        self,
        *,
        relations: Iterable[RelationPayload] = (),
        fields: Iterable[FieldPayload] = (),
    ) -> None:
        self._relations: dict[tuple[str, str], Relation] = {}
        for payload in relations:
            self._relations[(payload.collection, payload.field)] = Relation(
                collection=payload.collection,
                field=payload.field,
                related_collection=payload.related_collection,
            )

        self._primary_keys: dict[str, PrimaryKeyField] = {}
        for payload in fields:
            if payload.field_schema is None or not payload.field_schema.is_primary_key:
                continue
            # first primary key wins
            self._primary_keys.setdefault(
                payload.collection,
                PrimaryKeyField(collection=payload.collection, field=payload.field),
            )

    def get_relation_for_field(self, collection: str, field: str) -> Relation | None:
        return self._relations.get((collection, field))

    def get_primary_key_field(self, collection: str) -> PrimaryKeyField | None:
        return self._primary_keys.get(collection)


async def load_schema_directory(client: SchemaClient) -> SchemaDirectory:
    relations, fields = await asyncio.gather(client.fetch_relations(), client.fetch_fields())
    directory = SchemaDirectory(relations=relations, fields=fields)
    log.debug("Loaded %d relations and %d fields", len(relations), len(fields))
    return directory
