"""Fixed fallback documents used when the provider is unavailable.

Figures are a Microsoft snapshot; the symbol and name are rewritten to
the requested ticker so the dashboard still renders.
"""

from __future__ import annotations

import copy
from typing import Any

from stockmetrics.data.models import StockDocuments

FALLBACK_SUMMARY: dict[str, Any] = {
    "price": {
        "symbol": "MSFT",
        "shortName": "Microsoft Corporation",
        "regularMarketPrice": {"raw": 425.22},
        "regularMarketChange": {"raw": 2.34},
        "regularMarketChangePercent": {"raw": 0.55},
        "marketCap": {"raw": 3_160_000_000_000},
        "currency": "USD",
    },
    "defaultKeyStatistics": {
        "sharesOutstanding": {"raw": 7_420_000_000},
        "earningsGrowth": {"raw": 0.12},
    },
    "summaryDetail": {
        "dividendRate": {"raw": 3.00},
    },
}

FALLBACK_FINANCIALS: dict[str, Any] = {
    "timeSeries": {
        "annualEarnings": [{"reportedEPS": {"raw": 11.33}}],
    },
    "cashflowStatementHistory": {
        "cashflowStatements": [
            {
                "totalCashFromOperatingActivities": {"raw": 108_000_000_000},
                "freeCashFlow": {"raw": 59_000_000_000},
            }
        ],
    },
    "balanceSheetHistory": {
        "balanceSheetStatements": [
            {
                "totalStockholderEquity": {"raw": 166_000_000_000},
                "shortLongTermDebt": {"raw": 3_000_000_000},
                "longTermDebt": {"raw": 45_000_000_000},
            }
        ],
    },
    "incomeStatementHistory": {
        "incomeStatementHistory": [
            {
                "netIncome": {"raw": 72_000_000_000},
                "totalRevenue": {"raw": 212_000_000_000},
            }
        ],
    },
}

FALLBACK_HISTORICAL: dict[str, Any] = {"prices": []}


def fallback_documents(symbol: str) -> StockDocuments:
    """Fresh copies of the fallback documents relabelled as ``symbol``."""
    summary = copy.deepcopy(FALLBACK_SUMMARY)
    summary["price"]["symbol"] = symbol
    summary["price"]["shortName"] = f"{symbol} Corporation"
    return StockDocuments(
        summary=summary,
        financials=copy.deepcopy(FALLBACK_FINANCIALS),
        historical=copy.deepcopy(FALLBACK_HISTORICAL),
        used_fallback=True,
    )
