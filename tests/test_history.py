"""Tests for stockmetrics.metrics.history."""

from __future__ import annotations

import datetime
import math

import numpy as np
import pytest

from stockmetrics.metrics.history import generate_historical, years_before
from stockmetrics.metrics.stats import mean, median

SEED = 42
TODAY = datetime.date(2026, 10, 18)


def _series(current: float = 30.0, variance: float = 0.2, seed: int = SEED):
    return generate_historical(
        current, variance, rng=np.random.default_rng(seed), today=TODAY
    )


class TestYearsBefore:

    def test_same_month_day(self) -> None:
        assert years_before(TODAY, 3) == datetime.date(2023, 10, 18)

    def test_zero_years(self) -> None:
        assert years_before(TODAY, 0) == TODAY

    def test_leap_day_rolls_to_march(self) -> None:
        assert years_before(datetime.date(2024, 2, 29), 1) == datetime.date(2023, 3, 1)

    def test_leap_day_to_leap_year(self) -> None:
        assert years_before(datetime.date(2024, 2, 29), 4) == datetime.date(2020, 2, 29)


class TestGenerateHistorical:

    def test_ten_points(self) -> None:
        assert len(_series()) == 10

    def test_sorted_strictly_ascending(self) -> None:
        dates = [p.date for p in _series()]
        assert all(a < b for a, b in zip(dates, dates[1:]))

    def test_year_span(self) -> None:
        series = _series()
        assert series[0].date == datetime.date(2017, 10, 18)
        assert series[-1].date == TODAY

    def test_only_first_point_annotated(self) -> None:
        series = _series()
        assert series[0].average is not None
        assert series[0].median is not None
        for point in series[1:]:
            assert point.average is None
            assert point.median is None

    def test_annotation_matches_values(self) -> None:
        series = _series()
        values = [p.value for p in series]
        assert series[0].average == mean(values)
        assert series[0].median == median(values)

    @pytest.mark.parametrize("variance", [0.1, 0.15, 0.2])
    def test_values_within_variance(self, variance: float) -> None:
        for point in _series(current=50.0, variance=variance):
            assert 50.0 * (1 - variance) <= point.value <= 50.0 * (1 + variance)

    def test_seeded_is_reproducible(self) -> None:
        a = [p.value for p in _series(seed=7)]
        b = [p.value for p in _series(seed=7)]
        assert a == b

    def test_different_seeds_differ(self) -> None:
        a = [p.value for p in _series(seed=1)]
        b = [p.value for p in _series(seed=2)]
        assert a != b

    def test_nan_current(self) -> None:
        series = _series(current=math.nan)
        assert len(series) == 10
        assert all(math.isnan(p.value) for p in series)
        assert math.isnan(series[0].average)
        assert math.isnan(series[0].median)

    def test_zero_current(self) -> None:
        series = _series(current=0.0)
        assert all(p.value == 0.0 for p in series)
        assert series[0].average == 0.0

    def test_defaults_to_today(self) -> None:
        series = generate_historical(10.0, rng=np.random.default_rng(SEED))
        assert series[-1].date == datetime.date.today()
