"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from latest_stock_price.config.loader import ENV_OVERRIDES
from latest_stock_price.config.models import ClientConfig
from latest_stock_price.pipeline.query_pipeline import QueryPipeline
from tests.fixtures import make_stock


@pytest.fixture(autouse=True)
def clear_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's RAPIDAPI_KEY and overrides from leaking into tests."""
    for env_var in ENV_OVERRIDES:
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def default_config() -> ClientConfig:
    """Create default client configuration."""
    return ClientConfig()


@pytest.fixture
def pipeline() -> QueryPipeline:
    """Create pipeline with default pagination."""
    return QueryPipeline()


@pytest.fixture
def sample_stocks() -> List[Dict[str, Any]]:
    """Create a small listing covering every filterable field."""
    return [
        make_stock(
            "RELIANCE",
            company_name="Reliance Industries Limited",
            industry="Refineries",
            isin="INE002A01018",
            last_price=2456.1,
            last_update_time="17-Nov-2023 15:59:54",
        ),
        make_stock(
            "TCS",
            company_name="Tata Consultancy Services Limited",
            industry="Computers - Software",
            isin="INE467B01029",
            last_price=3490.0,
            last_update_time="17-Nov-2023 15:59:58",
        ),
        make_stock(
            "INFY",
            company_name="Infosys Limited",
            industry="Computers - Software",
            isin="INE009A01021",
            last_price="1432.55",
            last_update_time="17-Nov-2023 15:59:40",
        ),
        make_stock(
            "HDFCBANK",
            company_name="HDFC Bank Limited",
            industry="Banks",
            isin="INE040A01034",
            last_price="-",
            last_update_time="17-Nov-2023 15:59:59",
        ),
    ]


@pytest.fixture
def numbered_stocks() -> List[Dict[str, Any]]:
    """Create 25 stocks whose symbols encode their position."""
    return [make_stock(f"S{i:02d}") for i in range(25)]


@pytest.fixture
def mock_transport() -> Callable[..., httpx.MockTransport]:
    """
    Build an httpx.MockTransport that answers every request.

    The returned transport records requests on its `requests` attribute.
    """

    def factory(
        payload: Any = None,
        status_code: int = 200,
        content: Optional[bytes] = None,
    ) -> httpx.MockTransport:
        seen: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(
                status_code,
                content=json.dumps(payload).encode("utf-8"),
                headers={"Content-Type": "application/json"},
            )

        transport = httpx.MockTransport(handler)
        transport.requests = seen
        return transport

    return factory
