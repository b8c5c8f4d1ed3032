"""
Latest Stock Price Client - Public Entry Points.

Each call fetches the complete listing once and runs it through the
QueryPipeline:

    price()      fetch -> filter; exactly one stock must match
    prices()     fetch -> filter -> sort (optional) -> paginate
    price_all()  fetch -> sort (optional); no filters applied

Example:
    >>> client = Client(api_key, {"symbol": "TCS"})
    >>> stock = client.price()
    >>> top = Client(api_key, {"sort": "lastPrice.desc", "limit": 5}).prices()
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Protocol, Union

from latest_stock_price.adapters.rapidapi_provider import RapidApiStockProvider
from latest_stock_price.config.loader import resolve_api_key
from latest_stock_price.config.models import ClientConfig
from latest_stock_price.domain.entities import QueryParams, StockRecord
from latest_stock_price.domain.value_objects import SortSpec
from latest_stock_price.errors import BadRequestError, FetchError
from latest_stock_price.pipeline.query_pipeline import QueryPipeline
from latest_stock_price.validation.record_validator import RecordValidator

logger = logging.getLogger(__name__)


class StockProviderProtocol(Protocol):
    """Protocol for stock listing providers."""

    def fetch_stocks(self) -> Any:
        ...


class Client:
    """Fetches the stock listing and answers filter/sort/page queries on it."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        params: Union[QueryParams, Dict[str, Any], None] = None,
        config: Optional[ClientConfig] = None,
        provider: Optional[StockProviderProtocol] = None,
        validator: Optional[RecordValidator] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            api_key: RapidAPI key; falls back to config.api_key, then the
                RAPIDAPI_KEY variable.
                Not needed when a provider is injected.
            params: Filters, sort spec and pagination, as QueryParams or dict
            config: Client configuration
            provider: Listing provider (defaults to RapidApiStockProvider)
            validator: Presence checks run on every fetched listing

        Raises:
            ValueError: If no API key is available for the default provider
            pydantic.ValidationError: If page or limit is not an integer
        """
        self.config = config or ClientConfig()
        if isinstance(params, QueryParams):
            self.params = params
        else:
            self.params = QueryParams.model_validate(params or {})
        self.provider = provider or RapidApiStockProvider(
            resolve_api_key(api_key, self.config), self.config
        )
        self.validator = validator or RecordValidator()
        self.pipeline = QueryPipeline(self.config.pagination)

    def price(self) -> StockRecord:
        """
        Return the single stock matching the filters.

        Raises:
            FetchError: If the listing could not be fetched
            BadRequestError: If zero or more than one stock matches
        """
        stocks = self.pipeline.filter(self._get(), self.params)

        if len(stocks) != 1:
            logger.info(f"price() matched {len(stocks)} stocks, expected 1")
            raise BadRequestError(len(stocks))

        return stocks[0]

    def prices(self) -> List[StockRecord]:
        """
        Return one page of the filtered, optionally sorted listing.

        Raises:
            FetchError: If the listing could not be fetched
            SortSpecError: If the sort spec is malformed
        """
        sort_spec = self._sort_spec()
        page, limit = self.pipeline.resolve_page(self.params)

        stocks = self.pipeline.filter(self._get(), self.params)
        if sort_spec is not None:
            stocks = self.pipeline.sort(stocks, sort_spec)

        return self.pipeline.paginate(stocks, page, limit)

    def price_all(self) -> List[StockRecord]:
        """
        Return the complete listing, sorted when a sort spec is given.

        Filter parameters are not applied.

        Raises:
            FetchError: If the listing could not be fetched
            SortSpecError: If the sort spec is malformed
        """
        sort_spec = self._sort_spec()

        stocks = self._get()
        if sort_spec is not None:
            stocks = self.pipeline.sort(stocks, sort_spec)

        return stocks

    def _sort_spec(self) -> Optional[SortSpec]:
        """Parse the sort parameter before any request is made."""
        if self.params.sort is None:
            return None
        return SortSpec.parse(self.params.sort)

    def _get(self) -> List[StockRecord]:
        """Fetch the listing and run presence checks on it."""
        payload = self.provider.fetch_stocks()

        result = self.validator.validate(payload)
        if not result.is_valid:
            raise FetchError(f"Error fetching data: {'; '.join(result.errors)}")

        logger.debug(f"Fetched {len(payload)} stocks")
        return payload
