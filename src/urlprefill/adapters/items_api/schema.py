"""Items API response schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ItemsApiBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class ItemsResponse(ItemsApiBaseModel):
    data: list[dict[str, object]]


class RelationPayload(ItemsApiBaseModel):
    collection: str
    field: str
    related_collection: str | None = None


class RelationsResponse(ItemsApiBaseModel):
    data: list[RelationPayload]


class FieldSchemaPayload(ItemsApiBaseModel):
    is_primary_key: bool = False


class FieldPayload(ItemsApiBaseModel):
    collection: str
    field: str
    field_schema: FieldSchemaPayload | None = Field(default=None, alias="schema")


class FieldsResponse(ItemsApiBaseModel):
    data: list[FieldPayload]
