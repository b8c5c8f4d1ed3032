"""
Domain Layer - Records, Queries and Field Semantics.

Entities:
    - StockRecord: One stock as returned by the API (plain mapping)
    - QueryParams: Caller-supplied filters, sort spec and pagination

Value Objects:
    - SortSpec: Parsed '<field>.<direction>' spec
    - SortDirection: asc / desc

Field Semantics:
    - FieldKind: How a field is compared when sorting
    - FIELD_KINDS: Explicit field -> FieldKind table
"""

from latest_stock_price.domain.entities import QueryParams, StockRecord, StockRecords
from latest_stock_price.domain.fields import (
    FIELD_KINDS,
    FILTER_FIELDS,
    META_KEY,
    FieldKind,
    classify,
)
from latest_stock_price.domain.value_objects import SortDirection, SortSpec

__all__ = [
    "QueryParams",
    "StockRecord",
    "StockRecords",
    "FieldKind",
    "FIELD_KINDS",
    "FILTER_FIELDS",
    "META_KEY",
    "classify",
    "SortDirection",
    "SortSpec",
]
