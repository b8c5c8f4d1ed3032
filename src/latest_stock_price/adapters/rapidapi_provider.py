"""
RapidAPI Stock Provider.

Fetches the complete stock listing from the Latest Stock Price API on
RapidAPI with a single GET request. No retries and no caching: every
call goes to the network once.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from latest_stock_price.config.models import ClientConfig
from latest_stock_price.errors import FetchError

logger = logging.getLogger(__name__)


class RapidApiStockProvider:
    """Stock listing provider backed by the RapidAPI HTTP endpoint."""

    def __init__(
        self,
        api_key: str,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """
        Initialize the provider.

        Args:
            api_key: RapidAPI key sent in the X-RapidAPI-Key header.
            config: Endpoint, host header and timeout settings.
            transport: Optional httpx transport (e.g. httpx.MockTransport).
        """
        self._api_key = api_key
        self.config = config or ClientConfig()
        self._transport = transport

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "X-RapidAPI-Key": self._api_key,
            "X-RapidAPI-Host": self.config.rapidapi_host,
        }

    def fetch_stocks(self) -> Any:
        """
        GET the listing endpoint and return the parsed JSON body.

        Raises:
            FetchError: On a non-success status, a transport failure or
                a body that is not JSON
        """
        url = f"{self.config.base_url}{self.config.endpoint}"
        logger.debug(f"GET {url}")

        try:
            with httpx.Client(
                headers=self.headers,
                timeout=self.config.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = client.get(url)
        except httpx.HTTPError as e:
            logger.error(f"Request to {url} failed: {e}")
            raise FetchError(f"Error fetching data: {e}") from e

        if not response.is_success:
            logger.error(
                f"Request to {url} returned {response.status_code} "
                f"{response.reason_phrase}"
            )
            raise FetchError(
                f"Error fetching data: {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise FetchError(
                "Error fetching data: response body is not JSON",
                status_code=response.status_code,
            ) from e
