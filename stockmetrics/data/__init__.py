"""Document fetching orchestration."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from stockmetrics.data.fallback import fallback_documents
from stockmetrics.data.models import StockDocuments
from stockmetrics.data.provider import MarketDataProvider, ProviderError

logger = logging.getLogger(__name__)

__all__ = [
    "MarketDataProvider",
    "ProviderError",
    "StockDocuments",
    "fetch_documents",
]


def fetch_documents(symbol: str, provider: MarketDataProvider) -> StockDocuments:
    """Fetch summary, financials and price history for a symbol.

    Fetch sequence:
        1. Request all three documents concurrently, once each.
        2. If any request fails, discard the others and substitute the
           fixed fallback documents (``used_fallback=True``).

    There is no retry or backoff.

    Args:
        symbol: Ticker symbol, already normalised.
        provider: Market data provider.

    Returns:
        StockDocuments, from the provider or the fallback.
    """
    with ThreadPoolExecutor(max_workers=3) as pool:
        summary_f = pool.submit(provider.get_summary, symbol)
        financials_f = pool.submit(provider.get_financials, symbol)
        historical_f = pool.submit(provider.get_historical, symbol)

        try:
            documents = StockDocuments(
                summary=summary_f.result(),
                financials=financials_f.result(),
                historical=historical_f.result(),
            )
        except ProviderError as e:
            logger.warning("%s: provider failed, using fallback data: %s", symbol, e)
            return fallback_documents(symbol)

    logger.info("%s: fetched provider data", symbol)
    return documents
