"""
Test Fixtures - Shared Test Data and Configurations.

This package contains reusable test fixtures:
    - sample_config.yaml: Sample client configuration
    - make_stock: Builder for API-shaped stock records

Usage:
    Import fixtures in test files via pytest fixtures or direct import.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


def make_stock(
    symbol: str,
    *,
    identifier: Optional[str] = None,
    company_name: Optional[str] = None,
    industry: str = "Banks",
    isin: Optional[str] = None,
    last_price: Any = 100.0,
    last_update_time: str = "17-Nov-2023 15:59:54",
    **extra: Any,
) -> Dict[str, Any]:
    """Build a record shaped like one item of the /any response."""
    record: Dict[str, Any] = {
        "identifier": identifier if identifier is not None else f"{symbol}EQN",
        "symbol": symbol,
        "lastPrice": last_price,
        "lastUpdateTime": last_update_time,
        "meta": {
            "companyName": company_name if company_name is not None else f"{symbol} Limited",
            "industry": industry,
            "isin": isin if isin is not None else f"INE{symbol[:6]:0<6}01",
        },
    }
    record.update(extra)
    return record
