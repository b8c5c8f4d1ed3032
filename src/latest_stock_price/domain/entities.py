"""
Core Domain Entities.

Stock records are kept as the plain mappings returned by the API; only
the caller-supplied query is modelled explicitly.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

# One stock as returned by the API, with company data nested under "meta"
StockRecord = Dict[str, Any]

StockRecords = List[StockRecord]


class QueryParams(BaseModel):
    """Filter, sort and pagination parameters for a query."""

    identifier: Optional[str] = Field(default=None, description="Exact identifier")
    symbol: Optional[str] = Field(default=None, description="Exact ticker symbol")
    company_name: Optional[str] = Field(
        default=None, description="Exact meta.companyName"
    )
    industry: Optional[str] = Field(default=None, description="Exact meta.industry")
    isin: Optional[str] = Field(default=None, description="Exact meta.isin")
    sort: Optional[str] = Field(
        default=None, description="Sort spec of the form '<field>.<asc|desc>'"
    )
    page: Optional[int] = Field(default=None, description="1-based page number")
    limit: Optional[int] = Field(default=None, description="Records per page")

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("page", "limit", mode="before")
    @classmethod
    def _coerce_int(cls, value: Any) -> Any:
        """Accept integers given as strings, e.g. from a query string."""
        if isinstance(value, str):
            stripped = value.strip()
            if not stripped:
                return None
            try:
                return int(stripped)
            except ValueError:
                raise ValueError(f"expected an integer, got {value!r}") from None
        return value

    def filter_values(self) -> Dict[str, str]:
        """Return the exact-match filters that were supplied."""
        return {
            name: value
            for name, value in self.model_dump(
                include={"identifier", "symbol", "company_name", "industry", "isin"}
            ).items()
            if value is not None
        }
