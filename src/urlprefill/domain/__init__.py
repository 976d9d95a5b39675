"""Prefill resolution engine."""

from __future__ import annotations

from .params import (
    RESERVED_QUERY_PARAMS,
    DirectParam,
    ParsedParam,
    RelationalParam,
    ResolvedEntry,
    owning_field,
    parse_query_param,
)
from .prefill import PrefillResult, resolve_prefill_data
from .query import parse_location_query
from .resolve import resolve_relational_lookup

__all__ = [
    "RESERVED_QUERY_PARAMS",
    "DirectParam",
    "ParsedParam",
    "PrefillResult",
    "RelationalParam",
    "ResolvedEntry",
    "owning_field",
    "parse_location_query",
    "parse_query_param",
    "resolve_prefill_data",
    "resolve_relational_lookup",
]
