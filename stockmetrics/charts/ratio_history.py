"""Ratio charts for the stock dashboard.

Both public functions take ProcessedStockData and return a matplotlib
Figure. Uses the viridis colourmap throughout.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from stockmetrics.formatting import METRIC_LABELS, PERCENT_METRICS

if TYPE_CHECKING:
    from stockmetrics.data.models import ProcessedStockData

logger = logging.getLogger(__name__)

_VIRIDIS = plt.colormaps["viridis"]
_C0 = _VIRIDIS(0.2)
_C1 = _VIRIDIS(0.5)
_C2 = _VIRIDIS(0.8)


def _finite(value: float | None) -> bool:
    return value is not None and not math.isnan(value)


def ratio_history_chart(data: ProcessedStockData, key: str) -> Figure:
    """Line chart of a ratio's yearly history with average and median.

    Undefined (NaN) ratios produce an empty axis with an "N/A" note.

    Args:
        data: Engine output.
        key: Metric key with a history (not "peg").

    Returns:
        Matplotlib Figure.

    Raises:
        KeyError: If ``key`` has no history.
    """
    points = data.historical_data[key]
    label = METRIC_LABELS.get(key, key)
    unit = " (%)" if key in PERCENT_METRICS else ""

    fig, ax = plt.subplots(figsize=(8, 4))
    years = [p.date.year for p in points]
    values = np.array([p.value for p in points], dtype=float)

    ax.set_title(f"{data.symbol} — {label} History")
    ax.set_xlabel("Year")
    ax.set_ylabel(f"{label}{unit}")

    if np.isnan(values).all():
        ax.text(
            0.5, 0.5, "N/A", transform=ax.transAxes,
            ha="center", va="center", fontsize=14, color="grey",
        )
        fig.tight_layout()
        return fig

    ax.plot(years, values, marker="o", color=_C0, label=label)

    first = points[0]
    if _finite(first.average):
        ax.axhline(
            first.average, color=_C1, linestyle="--", linewidth=1,
            label=f"Average ({first.average:.2f})",
        )
    if _finite(first.median):
        ax.axhline(
            first.median, color=_C2, linestyle=":", linewidth=1,
            label=f"Median ({first.median:.2f})",
        )

    ax.set_xticks(years)
    ax.legend(loc="best", fontsize=8)
    fig.tight_layout()
    return fig


def metrics_comparison_chart(data: ProcessedStockData) -> Figure:
    """Grouped bars of current, average and median for each ratio.

    NaN values are drawn as missing bars.

    Args:
        data: Engine output.

    Returns:
        Matplotlib Figure.
    """
    keys = [k for k, m in data.metrics.items() if m.historical is not None]
    labels = [METRIC_LABELS.get(k, k) for k in keys]

    def _values(attr: str) -> np.ndarray:
        raw = [getattr(data.metrics[k], attr) for k in keys]
        return np.array([math.nan if v is None else v for v in raw], dtype=float)

    current = _values("current")
    avg = _values("avg")
    med = _values("median")

    fig, ax = plt.subplots(figsize=(10, 5))
    width = 0.25
    x = np.arange(len(keys))

    ax.bar(x - width, np.nan_to_num(current), width, label="Current", color=_C0)
    ax.bar(x, np.nan_to_num(avg), width, label="10Y Average", color=_C1)
    ax.bar(x + width, np.nan_to_num(med), width, label="10Y Median", color=_C2)

    ax.set_title(f"{data.symbol} — Current vs Historical")
    ax.set_xticks(x)
    ax.set_xticklabels(labels, rotation=30, ha="right")
    ax.axhline(y=0, color="grey", linewidth=0.8)
    ax.legend()

    missing = [METRIC_LABELS.get(k, k) for k, v in zip(keys, current) if np.isnan(v)]
    if missing:
        logger.debug("%s: undefined in comparison chart: %s", data.symbol, missing)

    fig.tight_layout()
    return fig
