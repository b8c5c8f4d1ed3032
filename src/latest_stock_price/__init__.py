"""
Latest Stock Price - Client for the RapidAPI Latest Stock Price API.

Fetches the complete stock listing in one request and applies
client-side filtering, sorting and pagination to it.

Main Components:
    - client: Public entry points (price, prices, price_all)
    - pipeline: In-memory filter -> sort -> paginate
    - filters: Exact-match filter stages
    - domain: Query parameters, sort specs, field classification
    - adapters: HTTP and static listing providers
    - validation: Presence checks on fetched listings
    - config: Configuration models and YAML loader

Example:
    >>> from latest_stock_price import Client
    >>> client = Client("my-rapidapi-key", {"industry": "Banks", "sort": "symbol.asc"})
    >>> for stock in client.prices():
    ...     print(stock["symbol"], stock["lastPrice"])
"""

import logging

from latest_stock_price.client import Client
from latest_stock_price.domain.entities import QueryParams
from latest_stock_price.errors import (
    BadRequestError,
    FetchError,
    LatestStockPriceError,
    SortSpecError,
)

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for the client.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import latest_stock_price
        >>> latest_stock_price.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("latest_stock_price").setLevel(level)


__all__ = [
    "Client",
    "QueryParams",
    "LatestStockPriceError",
    "FetchError",
    "BadRequestError",
    "SortSpecError",
    "configure_logging",
    "__version__",
]
