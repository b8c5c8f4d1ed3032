"""
Adapters Package - Stock Listing Providers.

Providers:
    - RapidApiStockProvider: Live listing over HTTP (httpx)
    - StaticStockProvider: Fixed in-memory listing for development/testing

Both expose fetch_stocks() and are interchangeable in the Client.
"""

from latest_stock_price.adapters.rapidapi_provider import RapidApiStockProvider
from latest_stock_price.adapters.static_provider import StaticStockProvider

__all__ = [
    "RapidApiStockProvider",
    "StaticStockProvider",
]
