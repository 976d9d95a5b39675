"""Items API adapter."""

from __future__ import annotations

from .client import ItemsApiError, ItemsClient, SchemaClient
from .directory import SchemaDirectory, load_schema_directory

__all__ = [
    "ItemsApiError",
    "ItemsClient",
    "SchemaClient",
    "SchemaDirectory",
    "load_schema_directory",
]
