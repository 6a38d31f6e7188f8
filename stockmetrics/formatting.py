"""Display formatting. Undefined values (None, NaN) render as "N/A"."""

from __future__ import annotations

import math

NOT_AVAILABLE = "N/A"

_CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "AUD": "A$",
    "CAD": "CA$",
}

_SUFFIXES = ((1e12, "T"), (1e9, "B"), (1e6, "M"), (1e3, "K"))


def _missing(value: float | None) -> bool:
    return value is None or math.isnan(value)


def format_number(value: float | None, decimals: int = 2) -> str:
    """Thousands-separated number, e.g. ``1,234.50``."""
    if _missing(value):
        return NOT_AVAILABLE
    return f"{value:,.{decimals}f}"


def format_currency(
    value: float | None, currency: str = "USD", decimals: int = 2
) -> str:
    """Amount with currency symbol, falling back to the ISO code."""
    if _missing(value):
        return NOT_AVAILABLE
    symbol = _CURRENCY_SYMBOLS.get(currency)
    sign = "-" if value < 0 else ""
    body = f"{abs(value):,.{decimals}f}"
    if symbol is None:
        return f"{sign}{currency} {body}"
    return f"{sign}{symbol}{body}"


def format_large_number(value: float | None) -> str:
    """Abbreviated magnitude, e.g. ``3.16T`` or ``59.00B``."""
    if _missing(value):
        return NOT_AVAILABLE
    for threshold, suffix in _SUFFIXES:
        if abs(value) >= threshold:
            return format_number(value / threshold, 2) + suffix
    return format_number(value)


def format_percentage(value: float | None, decimals: int = 2) -> str:
    """Fraction as a percentage: ``0.0055`` -> ``0.55%``."""
    if _missing(value):
        return NOT_AVAILABLE
    return f"{value * 100:,.{decimals}f}%"


METRIC_LABELS: dict[str, str] = {
    "pe": "P/E Ratio",
    "pocf": "P/OCF Ratio",
    "pfcf": "P/FCF Ratio",
    "peg": "PEG Ratio",
    "pb": "P/B Ratio",
    "dividend_yield": "Dividend Yield",
    "roe": "Return on Equity",
    "debt_to_equity": "Debt to Equity",
    "profit_margin": "Profit Margin",
}

# Metrics already expressed in percent (72.0 means 72%).
PERCENT_METRICS = frozenset({"dividend_yield", "roe", "debt_to_equity", "profit_margin"})


def format_metric(key: str, value: float | None) -> str:
    """Format a ratio value, appending % for percent-valued metrics."""
    text = format_number(value)
    if key in PERCENT_METRICS and text != NOT_AVAILABLE:
        return f"{text}%"
    return text
