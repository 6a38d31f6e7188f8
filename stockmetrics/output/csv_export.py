"""Tabular metrics summary and CSV export."""

from __future__ import annotations

import logging
import math
from pathlib import Path

import pandas as pd

from stockmetrics.data.models import ProcessedStockData
from stockmetrics.formatting import METRIC_LABELS
from stockmetrics.metrics.stats import cagr, percentile_rank

logger = logging.getLogger(__name__)

COLUMNS = [
    "metric",
    "label",
    "current",
    "avg",
    "median",
    "percentile",
    "trend_cagr",
]


def metrics_table(data: ProcessedStockData) -> pd.DataFrame:
    """One row per metric with current, average and median values.

    Columns:
        metric: Metric key.
        label: Display label.
        current: Current ratio (NaN where undefined).
        avg: Mean of the yearly history (NaN for PEG).
        median: Median of the yearly history (NaN for PEG).
        percentile: Rank of the current value within the history.
        trend_cagr: Annualised change from the oldest to the newest
            history point (NaN unless both are positive).

    Args:
        data: Engine output.

    Returns:
        DataFrame in metric order.
    """
    rows = []
    for key, metric in data.metrics.items():
        history = metric.historical or []
        if len(history) >= 2:
            trend = cagr(history[0], history[-1], len(history) - 1)
        else:
            trend = math.nan
        rows.append({
            "metric": key,
            "label": METRIC_LABELS.get(key, key),
            "current": metric.current,
            "avg": math.nan if metric.avg is None else metric.avg,
            "median": math.nan if metric.median is None else metric.median,
            "percentile": percentile_rank(metric.current, history),
            "trend_cagr": trend,
        })
    return pd.DataFrame(rows, columns=COLUMNS)


def export_csv(data: ProcessedStockData, output_path: Path) -> Path:
    """Write the metrics table to CSV. Undefined values are written as N/A.

    Returns:
        Path to the written file.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    table = metrics_table(data)
    table.insert(0, "symbol", data.symbol)
    table.to_csv(output_path, index=False, na_rep="N/A", float_format="%.4f")
    logger.info("%s: %d metrics written to %s", data.symbol, len(table), output_path)
    return output_path
