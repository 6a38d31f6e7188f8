"""NaN-aware statistical helpers.

All helpers strip NaN before aggregating and return NaN (never raise)
when nothing is left.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np


def _valid(values: Iterable[float | None]) -> np.ndarray:
    """Values as a float array with NaN (and None) removed."""
    arr = np.asarray([math.nan if v is None else v for v in values], dtype=float)
    return arr[~np.isnan(arr)]


def mean(values: Iterable[float | None]) -> float:
    """Arithmetic mean of the non-NaN values.

    Args:
        values: Numbers, possibly containing NaN.

    Returns:
        Mean, or NaN if no valid values.
    """
    valid = _valid(values)
    if valid.size == 0:
        return math.nan
    return float(valid.mean())


def median(values: Iterable[float | None]) -> float:
    """Median of the non-NaN values.

    Even counts average the two central values.

    Args:
        values: Numbers, possibly containing NaN.

    Returns:
        Median, or NaN if no valid values.
    """
    valid = _valid(values)
    if valid.size == 0:
        return math.nan
    return float(np.median(valid))


def percentile_rank(value: float, values: Iterable[float | None]) -> float:
    """Fraction of samples ranked below ``value``.

    Sorts the samples ascending and finds the first index whose sample is
    >= ``value``; the rank is that index over the sample count. A value
    above every sample ranks 1.0.

    Args:
        value: Query value.
        values: Samples, possibly containing NaN.

    Returns:
        Rank in [0, 1], or NaN if ``value`` is NaN or no valid samples.
    """
    if value is None or math.isnan(value):
        return math.nan
    valid = _valid(values)
    if valid.size == 0:
        return math.nan
    ordered = np.sort(valid)
    position = int(np.searchsorted(ordered, value, side="left"))
    if position >= ordered.size:
        return 1.0
    return position / ordered.size


def cagr(begin_value: float, end_value: float, years: float) -> float:
    """Compound annual growth rate between two values.

    Returns:
        CAGR as a fraction, or NaN unless all inputs are positive.
    """
    if any(math.isnan(x) for x in (begin_value, end_value, years)):
        return math.nan
    if begin_value <= 0 or end_value <= 0 or years <= 0:
        return math.nan
    return (end_value / begin_value) ** (1.0 / years) - 1.0
