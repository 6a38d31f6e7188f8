"""Valuation ratio formulas.

Per-share cash-flow ratios (P/E, P/OCF, P/FCF, PEG) return NaN when a
qualifying input is non-positive. Balance-sheet ratios (ROE, D/E, profit
margin, dividend yield, P/B) return 0.0 when their denominator is
non-positive. The two policies differ per ratio and must not be unified.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class RatioInputs:
    """Flat scalar inputs extracted from the provider documents.

    Attributes:
        price: Regular market price.
        earnings_per_share: Latest reported annual EPS.
        shares_outstanding: Shares outstanding.
        operating_cash_flow: Latest annual operating cash flow.
        free_cash_flow: Latest annual free cash flow.
        stockholders_equity: Latest total stockholders' equity.
        total_debt: Short/current long-term debt plus long-term debt.
        net_income: Latest annual net income.
        total_revenue: Latest annual revenue.
        dividend_rate: Annual dividend per share.
        earnings_growth: Earnings growth as a fraction (0.12 = 12%).
    """

    price: float = 0.0
    earnings_per_share: float = 0.0
    shares_outstanding: float = 0.0
    operating_cash_flow: float = 0.0
    free_cash_flow: float = 0.0
    stockholders_equity: float = 0.0
    total_debt: float = 0.0
    net_income: float = 0.0
    total_revenue: float = 0.0
    dividend_rate: float = 0.0
    earnings_growth: float = 0.05


def _falsy(x: float) -> bool:
    """Zero or NaN."""
    return x == 0 or math.isnan(x)


def price_to_earnings(price: float, earnings_per_share: float) -> float:
    if price <= 0 or earnings_per_share <= 0:
        return math.nan
    return price / earnings_per_share


def _price_to_cash_flow(price: float, cash_flow: float, shares: float) -> float:
    if _falsy(price) or _falsy(cash_flow) or _falsy(shares) or cash_flow <= 0:
        return math.nan
    return price / (cash_flow / shares)


def price_to_operating_cash_flow(
    price: float, operating_cash_flow: float, shares_outstanding: float
) -> float:
    """P/OCF: price over operating cash flow per share."""
    return _price_to_cash_flow(price, operating_cash_flow, shares_outstanding)


def price_to_free_cash_flow(
    price: float, free_cash_flow: float, shares_outstanding: float
) -> float:
    """P/FCF: price over free cash flow per share."""
    return _price_to_cash_flow(price, free_cash_flow, shares_outstanding)


def peg_ratio(price_to_earnings: float, growth_rate_pct: float) -> float:
    """PEG: P/E over earnings growth expressed in percent (12.0 = 12%)."""
    if _falsy(price_to_earnings) or _falsy(growth_rate_pct) or growth_rate_pct <= 0:
        return math.nan
    return price_to_earnings / growth_rate_pct


def return_on_equity(net_income: float, stockholders_equity: float) -> float:
    """ROE in percent; 0.0 when equity is non-positive."""
    if stockholders_equity > 0:
        return net_income / stockholders_equity * 100
    return 0.0


def debt_to_equity(total_debt: float, stockholders_equity: float) -> float:
    """Debt/equity in percent; 0.0 when equity is non-positive."""
    if stockholders_equity > 0:
        return total_debt / stockholders_equity * 100
    return 0.0


def profit_margin(net_income: float, total_revenue: float) -> float:
    """Net profit margin in percent; 0.0 when revenue is non-positive."""
    if total_revenue > 0:
        return net_income / total_revenue * 100
    return 0.0


def price_to_book(
    price: float, stockholders_equity: float, shares_outstanding: float
) -> float:
    """P/B; 0.0 when book value per share is non-positive."""
    book_value_per_share = (
        stockholders_equity / shares_outstanding if shares_outstanding > 0 else 0.0
    )
    if book_value_per_share > 0:
        return price / book_value_per_share
    return 0.0


def dividend_yield(dividend_rate: float, price: float) -> float:
    """Dividend yield in percent; 0.0 when price is non-positive."""
    if price > 0:
        return dividend_rate / price * 100
    return 0.0


def compute_ratios(inputs: RatioInputs) -> dict[str, float]:
    """Compute every valuation ratio from extracted inputs.

    Args:
        inputs: Scalar inputs from the latest reporting period.

    Returns:
        Metric key -> current ratio value (NaN where undefined).
    """
    pe = price_to_earnings(inputs.price, inputs.earnings_per_share)
    ratios = {
        "pocf": price_to_operating_cash_flow(
            inputs.price, inputs.operating_cash_flow, inputs.shares_outstanding
        ),
        "pfcf": price_to_free_cash_flow(
            inputs.price, inputs.free_cash_flow, inputs.shares_outstanding
        ),
        "pe": pe,
        "peg": peg_ratio(pe, inputs.earnings_growth * 100),
        "dividend_yield": dividend_yield(inputs.dividend_rate, inputs.price),
        "roe": return_on_equity(inputs.net_income, inputs.stockholders_equity),
        "debt_to_equity": debt_to_equity(
            inputs.total_debt, inputs.stockholders_equity
        ),
        "profit_margin": profit_margin(inputs.net_income, inputs.total_revenue),
        "pb": price_to_book(
            inputs.price, inputs.stockholders_equity, inputs.shares_outstanding
        ),
    }

    undefined = sorted(k for k, v in ratios.items() if math.isnan(v))
    if undefined:
        logger.debug("Undefined ratios: %s", ", ".join(undefined))
    return ratios
