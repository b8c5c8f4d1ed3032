"""
Static Stock Provider.

An in-memory provider for development and testing. Serves a fixed
listing shaped like the API response without touching the network.
"""

from __future__ import annotations

import copy
from typing import Any, List, Optional

from latest_stock_price.domain.entities import StockRecord


class StaticStockProvider:
    """Fake listing provider for development and testing."""

    # (symbol, company name, industry, isin, last price, 365d change, updated)
    SAMPLE_STOCKS = [
        ("RELIANCE", "Reliance Industries Limited", "Refineries", "INE002A01018",
         2456.1, 12.4, "17-Nov-2023 15:59:54"),
        ("TCS", "Tata Consultancy Services Limited", "Computers - Software",
         "INE467B01029", 3490.0, 8.1, "17-Nov-2023 15:59:58"),
        ("INFY", "Infosys Limited", "Computers - Software", "INE009A01021",
         1432.55, -3.7, "17-Nov-2023 15:59:40"),
        ("HDFCBANK", "HDFC Bank Limited", "Banks", "INE040A01034",
         1502.3, "-", "17-Nov-2023 15:59:59"),
        ("ITC", "ITC Limited", "Cigarettes", "INE154A01025",
         446.8, 29.9, "17-Nov-2023 15:58:12"),
    ]

    def __init__(self, records: Optional[List[StockRecord]] = None) -> None:
        """
        Initialize with a fixed listing.

        Args:
            records: Listing to serve; defaults to SAMPLE_STOCKS
        """
        self._records = records if records is not None else self._generate_records()
        self.fetch_count = 0

    def fetch_stocks(self) -> Any:
        """Return a fresh copy of the listing."""
        self.fetch_count += 1
        return copy.deepcopy(self._records)

    def _generate_records(self) -> List[StockRecord]:
        return [
            {
                "identifier": f"{symbol}EQN",
                "symbol": symbol,
                "lastPrice": last_price,
                "perChange365d": change_365d,
                "lastUpdateTime": updated,
                "meta": {
                    "companyName": company,
                    "industry": industry,
                    "isin": isin,
                },
            }
            for symbol, company, industry, isin, last_price, change_365d, updated
            in self.SAMPLE_STOCKS
        ]
