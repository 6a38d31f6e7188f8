"""Data models for raw documents and the ratio engine output."""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from typing import Any

# Metric key -> downstream (camelCase) key.
_DOWNSTREAM_KEYS = {
    "pocf": "pocf",
    "pfcf": "pfcf",
    "pe": "pe",
    "peg": "peg",
    "dividend_yield": "dividendYield",
    "roe": "roe",
    "debt_to_equity": "debtToEquity",
    "profit_margin": "profitMargin",
    "pb": "pb",
}


@dataclass
class StockDocuments:
    """Raw provider documents for one symbol.

    Attributes:
        summary: Quote summary document (price, key statistics, detail).
        financials: Financial statements document.
        historical: Historical prices document. Not read by the engine.
        used_fallback: True if the provider failed and the fixed
            fallback documents were substituted.
    """

    summary: dict[str, Any]
    financials: dict[str, Any]
    historical: dict[str, Any]
    used_fallback: bool = False


@dataclass
class HistoricalPoint:
    """One synthetic yearly value of a ratio.

    ``average`` and ``median`` are only set on the oldest point of a series.
    """

    date: datetime.date
    value: float
    average: float | None = None
    median: float | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"date": self.date.isoformat(), "value": self.value}
        if self.average is not None:
            result["average"] = self.average
        if self.median is not None:
            result["median"] = self.median
        return result


@dataclass
class MetricResult:
    """Current value of a ratio plus its synthetic history.

    Attributes:
        current: Ratio computed from the latest reporting period.
            NaN when the ratio is undefined.
        historical: Ten yearly values, oldest first. None for PEG.
        avg: Mean of ``historical``. None for PEG.
        median: Median of ``historical``. None for PEG.
    """

    current: float
    historical: list[float] | None = None
    avg: float | None = None
    median: float | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"current": self.current}
        if self.historical is not None:
            result["historical"] = list(self.historical)
            result["avg"] = self.avg
            result["median"] = self.median
        return result


@dataclass
class ProcessedStockData:
    """Ratio engine output for one symbol."""

    symbol: str
    name: str
    price: float
    change: float
    change_percent: float
    market_cap: float
    currency: str
    metrics: dict[str, MetricResult] = field(default_factory=dict)
    historical_data: dict[str, list[HistoricalPoint]] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Downstream shape consumed by rendering code (camelCase keys)."""
        return {
            "symbol": self.symbol,
            "name": self.name,
            "price": self.price,
            "change": self.change,
            "changePercent": self.change_percent,
            "marketCap": self.market_cap,
            "currency": self.currency,
            "metrics": {
                _DOWNSTREAM_KEYS.get(key, key): metric.to_dict()
                for key, metric in self.metrics.items()
            },
            "historicalData": {
                _DOWNSTREAM_KEYS.get(key, key): [p.to_dict() for p in points]
                for key, points in self.historical_data.items()
            },
        }
