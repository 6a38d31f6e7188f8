"""Synthetic yearly history for a ratio.

Stands in for real ratio history: each yearly point is the current value
perturbed by a uniform random fraction. The historical-prices document is
not consulted.
"""

from __future__ import annotations

import datetime

import numpy as np

from stockmetrics.config import DEFAULT_VARIANCE, HISTORY_POINTS
from stockmetrics.data.models import HistoricalPoint
from stockmetrics.metrics.stats import mean, median


def years_before(day: datetime.date, years: int) -> datetime.date:
    """Same month/day ``years`` earlier; Feb 29 rolls to Mar 1."""
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return datetime.date(day.year - years, 3, 1)


def generate_historical(
    current: float,
    variance: float = DEFAULT_VARIANCE,
    rng: np.random.Generator | None = None,
    today: datetime.date | None = None,
    points: int = HISTORY_POINTS,
) -> list[HistoricalPoint]:
    """Generate a yearly series ending at ``today``.

    Point ``i`` is dated ``i`` years before ``today`` and valued at
    ``current * (1 + u)`` with ``u ~ Uniform(-variance, variance)``. The
    series is sorted oldest first and the oldest point carries the mean
    and median of all values. A NaN ``current`` gives NaN values and a
    NaN average/median.

    Args:
        current: Current ratio value.
        variance: Maximum relative perturbation (0.2 = +/-20%).
        rng: Random source. None draws from an unseeded generator.
        today: Date of the newest point. Defaults to today.
        points: Number of yearly points.

    Returns:
        ``points`` HistoricalPoints sorted ascending by date.
    """
    if rng is None:
        rng = np.random.default_rng()
    if today is None:
        today = datetime.date.today()

    history: list[HistoricalPoint] = []
    for i in range(points):
        factor = 1.0 + float(rng.uniform(-variance, variance))
        history.append(
            HistoricalPoint(date=years_before(today, i), value=current * factor)
        )

    history.sort(key=lambda p: p.date)

    values = [p.value for p in history]
    if history:
        history[0].average = mean(values)
        history[0].median = median(values)

    return history
