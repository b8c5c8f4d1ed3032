"""
Query Pipeline - Filter, Sort and Paginate Stock Records.

The QueryPipeline applies a query to a listing that has already been
fetched. Every stage returns a new list; input records and lists are
never modified.
"""

from __future__ import annotations

import logging
import math
import re
from datetime import timezone
from typing import Any, Callable, List, Optional, Union

from dateutil import parser as date_parser

from latest_stock_price.config.models import PaginationConfig
from latest_stock_price.domain.entities import QueryParams, StockRecord
from latest_stock_price.domain.fields import META_KEY, FieldKind, classify
from latest_stock_price.domain.value_objects import SortSpec
from latest_stock_price.filters.exact_match import build_filters

logger = logging.getLogger(__name__)

# Substituted for blank strings so they sort after every real value
MISSING_STRING = "zzz"

# Placeholder the API uses for "no value" in numeric fields
NO_VALUE = "-"

# Leading number of a string value; trailing text such as "-Nov-2022" is ignored
LEADING_NUMBER = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")

SortKey = Callable[[StockRecord], Any]


class QueryPipeline:
    """Applies exact-match filters, sorting and pagination to records."""

    def __init__(self, pagination: Optional[PaginationConfig] = None) -> None:
        """
        Initialize pipeline.

        Args:
            pagination: Defaults for page and limit when a query omits them
        """
        self.pagination = pagination or PaginationConfig()

    def resolve_page(self, params: QueryParams) -> tuple[int, int]:
        """Return (page, limit), substituting configured defaults."""
        page = self.pagination.default_page if params.page is None else params.page
        limit = (
            self.pagination.default_limit if params.limit is None else params.limit
        )
        return page, limit

    # -------------------------------------------------------------------------
    # Filter
    # -------------------------------------------------------------------------

    def filter(
        self, records: List[StockRecord], params: QueryParams
    ) -> List[StockRecord]:
        """
        Keep records matching every supplied exact-match parameter.

        Returns an empty list (not an error) when nothing matches.
        """
        result = list(records)
        for stage in build_filters(params):
            input_count = len(result)
            result = stage.apply(result)
            logger.debug(
                f"Filter {stage.name}={stage.value!r}: "
                f"{input_count} -> {len(result)} records"
            )
        return result

    # -------------------------------------------------------------------------
    # Sort
    # -------------------------------------------------------------------------

    def sort(
        self,
        records: List[StockRecord],
        sort_spec: Union[str, SortSpec],
    ) -> List[StockRecord]:
        """
        Sort records by a '<field>.<direction>' spec.

        Datetime and numeric fields negate their key for descending order.
        String fields are sorted ascending and the whole list is then
        reversed, so equal keys also come out in reverse input order.

        Raises:
            SortSpecError: If the spec has no '.' separator
        """
        if isinstance(sort_spec, SortSpec):
            spec = sort_spec
        else:
            spec = SortSpec.parse(sort_spec)
        kind = classify(spec.field)

        if kind is FieldKind.DATETIME:
            key = self._datetime_key(spec)
        elif kind in (FieldKind.STRING_TOP, FieldKind.STRING_META):
            key = self._string_key(spec.field, in_meta=kind is FieldKind.STRING_META)
        else:
            key = self._numeric_key(spec)

        result = sorted(records, key=key)
        if spec.descending and kind in (FieldKind.STRING_TOP, FieldKind.STRING_META):
            result.reverse()

        logger.debug(f"Sorted {len(result)} records by {spec.field} ({kind.value})")
        return result

    def _datetime_key(self, spec: SortSpec) -> SortKey:
        def key(record: StockRecord) -> float:
            value = record.get(spec.field)
            try:
                parsed = date_parser.parse(value)
            except (TypeError, ValueError, OverflowError):
                logger.warning(f"Unparseable {spec.field}={value!r}, sorting last")
                return math.inf
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=timezone.utc)
            timestamp = int(parsed.timestamp())
            return -timestamp if spec.descending else timestamp

        return key

    def _string_key(self, field: str, in_meta: bool) -> SortKey:
        def key(record: StockRecord) -> str:
            source = record.get(META_KEY) if in_meta else record
            value = source.get(field) if isinstance(source, dict) else None
            if value is None or not str(value).strip():
                return MISSING_STRING
            return str(value).lower()

        return key

    def _numeric_key(self, spec: SortSpec) -> SortKey:
        def key(record: StockRecord) -> float:
            value = record.get(spec.field)
            if value == NO_VALUE:
                return math.inf
            number = _to_number(value)
            return -number if spec.descending else number

        return key

    # -------------------------------------------------------------------------
    # Paginate
    # -------------------------------------------------------------------------

    def paginate(
        self, records: List[StockRecord], page: int, limit: int
    ) -> List[StockRecord]:
        """
        Return the records of a 1-based page.

        The page covers the closed index range
        [(page - 1) * limit, (page - 1) * limit + limit - 1]. Negative
        bounds count from the end of the list, the end is clamped to the
        list, and a start outside the list gives an empty page. Zero or
        negative page and limit values never raise.
        """
        start = (page - 1) * limit
        end = start + limit - 1
        return closed_range(records, start, end)


def closed_range(records: List[StockRecord], start: int, end: int) -> List[StockRecord]:
    """Slice the inclusive index range [start, end] out of records."""
    size = len(records)
    if start < 0:
        start += size
        if start < 0:
            return []
    if start > size:
        return []
    if end < 0:
        end += size
    stop = min(end + 1, size)
    if stop <= start:
        return []
    return records[start:stop]


def _to_number(value: Any) -> float:
    """
    Read a sort value as a float.

    Strings contribute their leading number ("17-Nov-2022" is 17.0);
    None and strings without one count as 0.0.
    """
    if isinstance(value, (int, float)):
        return float(value)
    if value is None:
        return 0.0
    match = LEADING_NUMBER.match(str(value))
    if match is None:
        logger.debug(f"No leading number in {value!r}, counting as 0")
        return 0.0
    return float(match.group(0))
