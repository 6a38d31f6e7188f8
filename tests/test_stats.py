"""Tests for stockmetrics.metrics.stats."""

from __future__ import annotations

import math

import pytest

from stockmetrics.metrics.stats import cagr, mean, median, percentile_rank


class TestMean:

    def test_empty_is_nan(self) -> None:
        assert math.isnan(mean([]))

    def test_single_value(self) -> None:
        assert mean([3.5]) == 3.5

    def test_ignores_nan(self) -> None:
        assert mean([1.0, math.nan, 3.0]) == 2.0

    def test_all_nan_is_nan(self) -> None:
        assert math.isnan(mean([math.nan, math.nan]))

    def test_returns_python_float(self) -> None:
        assert type(mean([1, 2])) is float


class TestMedian:

    def test_empty_is_nan(self) -> None:
        assert math.isnan(median([]))

    def test_single_value(self) -> None:
        assert median([7.0]) == 7.0

    def test_even_length_averages_middle(self) -> None:
        assert median([1, 2, 3, 4]) == 2.5

    def test_odd_length(self) -> None:
        assert median([5, 1, 3]) == 3.0

    def test_unsorted_even(self) -> None:
        assert median([4, 1, 3, 2]) == 2.5

    def test_ignores_nan(self) -> None:
        assert median([math.nan, 1.0, 9.0, 5.0]) == 5.0

    def test_all_nan_is_nan(self) -> None:
        assert math.isnan(median([math.nan]))


class TestPercentileRank:

    def test_below_all(self) -> None:
        assert percentile_rank(0.0, [1, 2, 3, 4]) == 0.0

    def test_above_all(self) -> None:
        assert percentile_rank(10.0, [1, 2, 3, 4]) == 1.0

    def test_first_index_at_or_above(self) -> None:
        assert percentile_rank(3.0, [4, 3, 2, 1]) == 0.5

    def test_between_values(self) -> None:
        assert percentile_rank(2.5, [1, 2, 3, 4]) == 0.5

    def test_duplicates_use_first_match(self) -> None:
        assert percentile_rank(2.0, [1, 2, 2, 2]) == 0.25

    def test_nan_value(self) -> None:
        assert math.isnan(percentile_rank(math.nan, [1, 2]))

    def test_empty_samples(self) -> None:
        assert math.isnan(percentile_rank(1.0, []))

    def test_nan_samples_stripped(self) -> None:
        assert percentile_rank(2.0, [math.nan, 1.0, 3.0]) == 0.5

    def test_all_nan_samples(self) -> None:
        assert math.isnan(percentile_rank(1.0, [math.nan]))


class TestCagr:

    def test_doubling_over_one_year(self) -> None:
        assert cagr(100.0, 200.0, 1) == pytest.approx(1.0)

    def test_multi_year(self) -> None:
        assert cagr(100.0, 121.0, 2) == pytest.approx(0.1)

    @pytest.mark.parametrize(
        "begin, end, years",
        [(0.0, 1.0, 1), (1.0, 0.0, 1), (1.0, 2.0, 0), (-1.0, 2.0, 1)],
    )
    def test_non_positive_inputs(self, begin: float, end: float, years: float) -> None:
        assert math.isnan(cagr(begin, end, years))

    def test_nan_input(self) -> None:
        assert math.isnan(cagr(math.nan, 2.0, 1))
