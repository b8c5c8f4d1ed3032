"""
Exact-Match Filter Implementation.

Keeps the records whose field equals a caller-supplied value exactly
(case-sensitive). Top-level fields (identifier, symbol) are read from
the record itself, company fields from its nested "meta" mapping.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from latest_stock_price.domain.entities import QueryParams, StockRecord
from latest_stock_price.domain.fields import FILTER_FIELDS, META_KEY


class ExactMatchFilter:
    """Filter records by exact equality on one field."""

    def __init__(self, field: str, value: str, in_meta: bool = False) -> None:
        """
        Initialize with the field to compare.

        Args:
            field: Record field name, e.g. "symbol" or "companyName"
            value: Value the field must equal
            in_meta: Read the field from the nested "meta" mapping
        """
        self.field = field
        self.value = value
        self.in_meta = in_meta

    @property
    def name(self) -> str:
        """Unique name of this filter stage."""
        prefix = f"{META_KEY}." if self.in_meta else ""
        return f"{prefix}{self.field}"

    def apply(self, records: List[StockRecord]) -> List[StockRecord]:
        """Return a new list holding only the matching records."""
        return [record for record in records if self.matches(record)]

    def matches(self, record: StockRecord) -> bool:
        return self._read(record) == self.value

    def _read(self, record: StockRecord) -> Optional[Any]:
        source: Any = record
        if self.in_meta:
            source = record.get(META_KEY)
        if not isinstance(source, dict):
            return None
        return source.get(self.field)


def build_filters(params: QueryParams) -> List[ExactMatchFilter]:
    """
    Create one filter stage per supplied exact-match parameter.

    Stages are ordered identifier, symbol, company_name, industry, isin;
    parameters left unset produce no stage.
    """
    supplied: Dict[str, str] = params.filter_values()
    return [
        ExactMatchFilter(field, supplied[param], in_meta=in_meta)
        for param, (field, in_meta) in FILTER_FIELDS.items()
        if param in supplied
    ]
