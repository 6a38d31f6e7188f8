"""Tests for stockmetrics.data.lookup."""

from __future__ import annotations

import math

from stockmetrics.data.lookup import lookup, lookup_number, lookup_text

DOC = {
    "price": {
        "regularMarketPrice": {"raw": 425.22, "fmt": "425.22"},
        "currency": "USD",
        "symbol": {"raw": "MSFT"},
        "plain": 12,
        "flag": True,
        "missing": None,
        "nan": {"raw": math.nan},
        "text": {"raw": "12.5"},
    },
    "statements": [{"netIncome": {"raw": 72e9}}, {"netIncome": {"raw": 1.0}}],
}


class TestLookup:

    def test_dotted_path(self) -> None:
        assert lookup(DOC, "price.currency") == "USD"

    def test_key_sequence(self) -> None:
        assert lookup(DOC, ["statements", 1, "netIncome", "raw"]) == 1.0

    def test_index_in_dotted_path(self) -> None:
        assert lookup(DOC, "statements.0.netIncome.raw") == 72e9

    def test_missing_key_returns_default(self) -> None:
        assert lookup(DOC, "price.nothing", default="x") == "x"

    def test_out_of_range_index_returns_default(self) -> None:
        assert lookup(DOC, "statements.5.netIncome") is None

    def test_step_into_scalar_returns_default(self) -> None:
        assert lookup(DOC, "price.currency.raw", default=0) == 0

    def test_none_value_returns_default(self) -> None:
        assert lookup(DOC, "price.missing", default=7) == 7

    def test_none_document(self) -> None:
        assert lookup(None, "price", default=1) == 1

    def test_string_not_indexed(self) -> None:
        assert lookup({"a": "abc"}, "a.0") is None


class TestLookupNumber:

    def test_unwraps_raw(self) -> None:
        assert lookup_number(DOC, "price.regularMarketPrice") == 425.22

    def test_plain_value(self) -> None:
        assert lookup_number(DOC, "price.plain") == 12.0

    def test_missing_defaults_to_zero(self) -> None:
        assert lookup_number(DOC, "price.marketCap") == 0.0

    def test_custom_default(self) -> None:
        assert lookup_number(DOC, "stats.earningsGrowth", default=0.05) == 0.05

    def test_bool_is_not_a_number(self) -> None:
        assert lookup_number(DOC, "price.flag") == 0.0

    def test_numeric_string_is_not_a_number(self) -> None:
        assert lookup_number(DOC, "price.text") == 0.0

    def test_nan_uses_default(self) -> None:
        assert lookup_number(DOC, "price.nan", default=0.05) == 0.05

    def test_wrapper_without_raw(self) -> None:
        assert lookup_number({"x": {"fmt": "1"}}, "x") == 0.0

    def test_zero_is_kept(self) -> None:
        assert lookup_number({"g": {"raw": 0}}, "g", default=0.05) == 0.0


class TestLookupText:

    def test_plain_string(self) -> None:
        assert lookup_text(DOC, "price.currency") == "USD"

    def test_wrapped_string(self) -> None:
        assert lookup_text(DOC, "price.symbol") == "MSFT"

    def test_missing_uses_default(self) -> None:
        assert lookup_text(DOC, "price.shortName", default="?") == "?"

    def test_number_is_not_text(self) -> None:
        assert lookup_text(DOC, "price.plain") == ""
