"""
Client Errors.

Every failure surfaced by the client derives from LatestStockPriceError,
so callers can catch the whole family with a single except clause.
"""

from __future__ import annotations

from typing import Optional


class LatestStockPriceError(Exception):
    """Base class for all client errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FetchError(LatestStockPriceError):
    """Raised when the stock listing could not be fetched."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class BadRequestError(LatestStockPriceError):
    """Raised when a single-stock lookup matches zero or several stocks."""

    def __init__(self, match_count: int) -> None:
        super().__init__("Error fetching data: Bad Request")
        self.match_count = match_count


class SortSpecError(LatestStockPriceError, ValueError):
    """Raised when a sort spec is not of the form '<field>.<direction>'."""

    def __init__(self, sort_spec: str) -> None:
        super().__init__(
            f"Invalid sort spec {sort_spec!r}: expected '<field>.<asc|desc>'"
        )
        self.sort_spec = sort_spec
