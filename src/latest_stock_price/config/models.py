"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class PaginationConfig(BaseModel):
    """Defaults used when a query omits page or limit."""

    default_page: int = Field(default=1, ge=1)
    default_limit: int = Field(default=10, ge=1)


class ClientConfig(BaseModel):
    """Root configuration object."""

    api_key: Optional[str] = Field(default=None, repr=False)
    base_url: str = Field(default="https://latest-stock-price.p.rapidapi.com")
    rapidapi_host: str = Field(default="latest-stock-price.p.rapidapi.com")
    endpoint: str = Field(default="/any")
    timeout_seconds: float = Field(default=10.0, gt=0)
    pagination: PaginationConfig = Field(default_factory=PaginationConfig)
