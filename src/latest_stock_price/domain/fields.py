"""
Stock Record Field Classification.

Sorting compares values differently depending on the kind of field.
The classification is an explicit table; any field not listed is
treated as numeric.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict


class FieldKind(str, Enum):
    """Comparison semantics of a record field."""

    DATETIME = "DATETIME"
    STRING_TOP = "STRING_TOP"
    STRING_META = "STRING_META"
    NUMERIC = "NUMERIC"


META_KEY = "meta"

FIELD_KINDS: Dict[str, FieldKind] = {
    "lastUpdateTime": FieldKind.DATETIME,
    "identifier": FieldKind.STRING_TOP,
    "symbol": FieldKind.STRING_TOP,
    "companyName": FieldKind.STRING_META,
    "industry": FieldKind.STRING_META,
    "isin": FieldKind.STRING_META,
}

# Query parameter name -> (record field, lives under "meta")
FILTER_FIELDS: Dict[str, tuple[str, bool]] = {
    "identifier": ("identifier", False),
    "symbol": ("symbol", False),
    "company_name": ("companyName", True),
    "industry": ("industry", True),
    "isin": ("isin", True),
}


def classify(field: str) -> FieldKind:
    """Return the comparison kind for a record field."""
    return FIELD_KINDS.get(field, FieldKind.NUMERIC)
