"""Yahoo Finance (RapidAPI) market data provider."""

from __future__ import annotations

import logging
from typing import Any

import requests

from stockmetrics.config import ProviderConfig

logger = logging.getLogger(__name__)


class ProviderError(Exception):
    """Market data request failed or returned an unusable body."""


class MarketDataProvider:
    """Fetch raw quote, financial and price documents for a symbol.

    Each call makes exactly one request; there is no retry. Any transport
    error, non-2xx status or non-JSON body raises ProviderError.

    Args:
        config: Provider settings (credentials, host, timeout).
        session: Optional requests session, e.g. for connection reuse.
    """

    def __init__(
        self,
        config: ProviderConfig,
        session: requests.Session | None = None,
    ) -> None:
        self._config = config
        self._session = session if session is not None else requests.Session()
        self._session.headers.update(
            {
                "X-RapidAPI-Key": config.api_key,
                "X-RapidAPI-Host": config.api_host,
            }
        )

    def _get(self, endpoint: str, params: dict[str, str]) -> dict[str, Any]:
        url = f"{self._config.base_url}{endpoint}"
        params = {**params, "region": self._config.region}
        logger.debug("GET %s %s", url, params)

        try:
            response = self._session.get(
                url, params=params, timeout=self._config.timeout
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise ProviderError(f"{endpoint} request failed: {e}") from e
        except ValueError as e:
            raise ProviderError(f"{endpoint} returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ProviderError(
                f"{endpoint} returned {type(data).__name__}, expected object"
            )
        return data

    def get_summary(self, symbol: str) -> dict[str, Any]:
        """Quote summary: price, key statistics, summary detail."""
        return self._get("/stock/v2/get-summary", {"symbol": symbol})

    def get_financials(self, symbol: str) -> dict[str, Any]:
        """Annual income, balance sheet and cash flow statements."""
        return self._get("/stock/v2/get-financials", {"symbol": symbol})

    def get_historical(
        self,
        symbol: str,
        interval: str | None = None,
        range_: str | None = None,
    ) -> dict[str, Any]:
        """Historical price bars (defaults from config: monthly, 10 years)."""
        return self._get(
            "/stock/v3/get-historical-data",
            {
                "symbol": symbol,
                "interval": interval or self._config.history_interval,
                "range": range_ or self._config.history_range,
            },
        )

    def search(self, query: str) -> list[dict[str, Any]]:
        """Symbol autocomplete.

        Returns:
            Quote entries (symbol, shortname, exchange, ...) matching
            the query.
        """
        data = self._get("/auto-complete", {"q": query})
        quotes = data.get("quotes", [])
        if not isinstance(quotes, list):
            return []
        return [q for q in quotes if isinstance(q, dict) and q.get("symbol")]
