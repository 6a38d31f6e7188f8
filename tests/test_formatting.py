"""Tests for stockmetrics.formatting."""

from __future__ import annotations

import math

import pytest

from stockmetrics.formatting import (
    format_currency,
    format_large_number,
    format_metric,
    format_number,
    format_percentage,
)


class TestNotAvailable:

    @pytest.mark.parametrize(
        "func",
        [format_number, format_currency, format_large_number, format_percentage],
    )
    def test_nan(self, func) -> None:
        assert func(math.nan) == "N/A"

    @pytest.mark.parametrize(
        "func",
        [format_number, format_currency, format_large_number, format_percentage],
    )
    def test_none(self, func) -> None:
        assert func(None) == "N/A"


class TestFormatNumber:

    def test_thousands_separator(self) -> None:
        assert format_number(1234.5) == "1,234.50"

    def test_decimals(self) -> None:
        assert format_number(37.5318, 1) == "37.5"


class TestFormatCurrency:

    def test_usd(self) -> None:
        assert format_currency(425.22) == "$425.22"

    def test_negative(self) -> None:
        assert format_currency(-2.5, "EUR") == "-€2.50"

    def test_unknown_currency_uses_code(self) -> None:
        assert format_currency(10.0, "CHF") == "CHF 10.00"


class TestFormatLargeNumber:

    @pytest.mark.parametrize(
        "value, expected",
        [
            (3.16e12, "3.16T"),
            (59e9, "59.00B"),
            (-2.5e6, "-2.50M"),
            (1500.0, "1.50K"),
            (999.0, "999.00"),
        ],
    )
    def test_suffixes(self, value: float, expected: str) -> None:
        assert format_large_number(value) == expected


class TestFormatPercentage:

    def test_fraction(self) -> None:
        assert format_percentage(0.0055) == "0.55%"


class TestFormatMetric:

    def test_percent_metric(self) -> None:
        assert format_metric("roe", 43.373) == "43.37%"

    def test_plain_ratio(self) -> None:
        assert format_metric("pe", 37.531) == "37.53"

    def test_nan_percent_metric(self) -> None:
        assert format_metric("dividend_yield", math.nan) == "N/A"
