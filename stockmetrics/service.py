"""Symbol analysis: fetch provider documents and run the ratio engine."""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass

import numpy as np

from stockmetrics.config import EngineConfig
from stockmetrics.data import MarketDataProvider, fetch_documents
from stockmetrics.data.models import ProcessedStockData
from stockmetrics.engine import process_stock_data

logger = logging.getLogger(__name__)


@dataclass
class StockAnalysis:
    """Engine output plus the fallback marker.

    Attributes:
        data: Processed metrics and synthetic history.
        used_fallback: True if provider data was unavailable and the
            fixed fallback documents were used. Presentation code shows
            a non-blocking notice.
    """

    data: ProcessedStockData
    used_fallback: bool


def analyze_symbol(
    symbol: str,
    provider: MarketDataProvider,
    rng: np.random.Generator | None = None,
    today: datetime.date | None = None,
    config: EngineConfig | None = None,
) -> StockAnalysis | None:
    """Fetch and process one ticker.

    Args:
        symbol: Ticker symbol (any case).
        provider: Market data provider.
        rng: Random source for the synthetic history.
        today: Date of the newest history point.
        config: Engine configuration.

    Returns:
        StockAnalysis, or None if processing failed.
    """
    symbol = symbol.strip().upper()
    logger.info("%s: processing request", symbol)

    documents = fetch_documents(symbol, provider)
    data = process_stock_data(
        documents.summary,
        documents.financials,
        documents.historical,
        rng=rng,
        today=today,
        config=config,
    )
    if data is None:
        logger.error("%s: failed to process stock data", symbol)
        return None

    return StockAnalysis(data=data, used_fallback=documents.used_fallback)
