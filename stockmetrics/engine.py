"""Ratio engine: raw provider documents to ProcessedStockData.

Three stages:
    1. Extract scalar inputs from the quote summary and financial
       statements, defaulting anything missing.
    2. Compute the valuation ratios.
    3. Generate a synthetic yearly history for every ratio except PEG.
"""

from __future__ import annotations

import datetime
import logging
from typing import Any

import numpy as np

from stockmetrics.config import EngineConfig
from stockmetrics.data.lookup import lookup_number, lookup_text
from stockmetrics.data.models import (
    HistoricalPoint,
    MetricResult,
    ProcessedStockData,
)
from stockmetrics.metrics.history import generate_historical
from stockmetrics.metrics.ratios import RatioInputs, compute_ratios

logger = logging.getLogger(__name__)

# Ratios with a current value only.
_CURRENT_ONLY = frozenset({"peg"})


def extract_inputs(
    summary: dict[str, Any],
    financials: dict[str, Any],
    config: EngineConfig | None = None,
) -> RatioInputs:
    """Map provider documents onto flat ratio inputs.

    Only the most recent statement (index 0) of each list is read. Any
    field that does not resolve to a number becomes 0.0, except earnings
    growth, which becomes ``config.default_earnings_growth``.

    Args:
        summary: Quote summary document.
        financials: Financial statements document.
        config: Engine configuration.

    Returns:
        Populated RatioInputs.
    """
    if config is None:
        config = EngineConfig()

    cashflow = "cashflowStatementHistory.cashflowStatements.0"
    balance = "balanceSheetHistory.balanceSheetStatements.0"
    income = "incomeStatementHistory.incomeStatementHistory.0"

    return RatioInputs(
        price=lookup_number(summary, "price.regularMarketPrice"),
        earnings_per_share=lookup_number(
            financials, "timeSeries.annualEarnings.0.reportedEPS"
        ),
        shares_outstanding=lookup_number(
            summary, "defaultKeyStatistics.sharesOutstanding"
        ),
        operating_cash_flow=lookup_number(
            financials, f"{cashflow}.totalCashFromOperatingActivities"
        ),
        free_cash_flow=lookup_number(financials, f"{cashflow}.freeCashFlow"),
        stockholders_equity=lookup_number(
            financials, f"{balance}.totalStockholderEquity"
        ),
        total_debt=(
            lookup_number(financials, f"{balance}.shortLongTermDebt")
            + lookup_number(financials, f"{balance}.longTermDebt")
        ),
        net_income=lookup_number(financials, f"{income}.netIncome"),
        total_revenue=lookup_number(financials, f"{income}.totalRevenue"),
        dividend_rate=lookup_number(summary, "summaryDetail.dividendRate"),
        # Only an absent growth rate takes the default; a reported 0 stays 0.
        earnings_growth=lookup_number(
            summary,
            "defaultKeyStatistics.earningsGrowth",
            default=config.default_earnings_growth,
        ),
    )


def process_stock_data(
    summary: dict[str, Any] | None,
    financials: dict[str, Any] | None,
    historical: dict[str, Any] | None,
    rng: np.random.Generator | None = None,
    today: datetime.date | None = None,
    config: EngineConfig | None = None,
) -> ProcessedStockData | None:
    """Derive valuation metrics and synthetic history for one symbol.

    Never raises: a missing document or any internal error returns None.

    Args:
        summary: Quote summary document.
        financials: Financial statements document.
        historical: Historical prices document. Must be present but is
            otherwise unused, and may be empty.
        rng: Random source for the synthetic history. None is unseeded.
        today: Date of the newest history point. Defaults to today.
        config: Engine configuration.

    Returns:
        ProcessedStockData, or None if processing failed.
    """
    if summary is None or financials is None or historical is None:
        logger.warning("Missing input document, cannot process stock data")
        return None

    if config is None:
        config = EngineConfig()
    if rng is None:
        rng = np.random.default_rng()
    if today is None:
        today = datetime.date.today()

    try:
        inputs = extract_inputs(summary, financials, config)
        ratios = compute_ratios(inputs)

        metrics: dict[str, MetricResult] = {}
        historical_data: dict[str, list[HistoricalPoint]] = {}
        for key, current in ratios.items():
            if key in _CURRENT_ONLY:
                metrics[key] = MetricResult(current=current)
                continue

            points = generate_historical(
                current,
                variance=config.variance_for(key),
                rng=rng,
                today=today,
                points=config.history_points,
            )
            historical_data[key] = points
            metrics[key] = MetricResult(
                current=current,
                historical=[p.value for p in points],
                avg=points[0].average,
                median=points[0].median,
            )

        data = ProcessedStockData(
            symbol=lookup_text(summary, "price.symbol"),
            name=lookup_text(summary, "price.shortName"),
            price=inputs.price,
            change=lookup_number(summary, "price.regularMarketChange"),
            change_percent=lookup_number(
                summary, "price.regularMarketChangePercent"
            ),
            market_cap=lookup_number(summary, "price.marketCap"),
            currency=lookup_text(summary, "price.currency", default="USD"),
            metrics=metrics,
            historical_data=historical_data,
        )
    except Exception:
        logger.exception("Error processing stock data")
        return None

    logger.debug("%s: processed %d metrics", data.symbol, len(data.metrics))
    return data
