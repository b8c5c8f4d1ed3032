"""
Value Objects for Domain Layer.

Immutable descriptions of how a query orders and slices its result.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from latest_stock_price.errors import SortSpecError


class SortDirection(str, Enum):
    """Sort order."""

    ASC = "asc"
    DESC = "desc"


class SortSpec(BaseModel):
    """Parsed '<field>.<direction>' sort spec."""

    field: str = Field(..., min_length=1, description="Record field to sort by")
    direction: SortDirection = Field(default=SortDirection.ASC)

    model_config = {"frozen": True}

    @classmethod
    def parse(cls, sort_spec: str) -> "SortSpec":
        """
        Parse a sort spec such as "symbol.asc" or "lastPrice.desc".

        The field is the text before the first '.' and the direction the
        text after it, up to any further '.'. A direction other than
        "desc" means ascending.

        Raises:
            SortSpecError: If there is no '.' separator or no field name
        """
        field, separator, rest = sort_spec.partition(".")
        direction = rest.split(".", 1)[0]
        if not separator or not field:
            raise SortSpecError(sort_spec)
        if direction == SortDirection.DESC.value:
            return cls(field=field, direction=SortDirection.DESC)
        return cls(field=field, direction=SortDirection.ASC)

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC
