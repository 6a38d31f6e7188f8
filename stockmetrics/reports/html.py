"""HTML dashboard generation using Jinja2 templates.

Renders metric cards and embedded chart images (base64 PNG) for one
analysed symbol.
"""

from __future__ import annotations

import base64
import io
import logging
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

import jinja2
import matplotlib
import matplotlib.pyplot as plt

from stockmetrics.charts.ratio_history import (
    metrics_comparison_chart,
    ratio_history_chart,
)
from stockmetrics.formatting import (
    METRIC_LABELS,
    format_currency,
    format_large_number,
    format_metric,
    format_number,
    format_percentage,
)
from stockmetrics.metrics.stats import percentile_rank

if TYPE_CHECKING:
    from matplotlib.figure import Figure

    from stockmetrics.service import StockAnalysis

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"


def _figure_to_base64(fig: Figure) -> str:
    """Render a figure to a base64 PNG string and close it."""
    buf = io.BytesIO()
    try:
        fig.savefig(buf, format="png", dpi=100)
    finally:
        plt.close(fig)
    return base64.b64encode(buf.getvalue()).decode("ascii")


def _build_context(analysis: StockAnalysis) -> dict[str, Any]:
    """Build the Jinja2 template context with metric cards and charts."""
    data = analysis.data

    cards = []
    for key, metric in data.metrics.items():
        chart = None
        if key in data.historical_data:
            chart = _figure_to_base64(ratio_history_chart(data, key))
        cards.append({
            "key": key,
            "label": METRIC_LABELS.get(key, key),
            "current": format_metric(key, metric.current),
            "avg": format_metric(key, metric.avg) if metric.historical else None,
            "median": (
                format_metric(key, metric.median) if metric.historical else None
            ),
            "percentile": (
                format_percentage(percentile_rank(metric.current, metric.historical))
                if metric.historical
                else None
            ),
            "chart": chart,
        })

    return {
        "symbol": data.symbol,
        "name": data.name,
        "price": format_currency(data.price, data.currency),
        "change": format_number(data.change),
        "change_percent": format_number(data.change_percent),
        "change_positive": data.change >= 0,
        "market_cap": format_large_number(data.market_cap),
        "currency": data.currency,
        "used_fallback": analysis.used_fallback,
        "cards": cards,
        "comparison_chart": _figure_to_base64(metrics_comparison_chart(data)),
        "generated_at": datetime.now().strftime("%Y-%m-%d %H:%M"),
    }


def generate_dashboard_html(analysis: StockAnalysis) -> str:
    """Render the dashboard for one analysed symbol.

    Args:
        analysis: Engine output with fallback marker.

    Returns:
        Complete HTML document.
    """
    # Use non-interactive backend for rendering
    matplotlib.use("Agg")

    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=True,
    )
    template = env.get_template("dashboard.html")
    return template.render(**_build_context(analysis))


def write_dashboard(analysis: StockAnalysis, output_dir: Path) -> Path:
    """Write ``<SYMBOL>.html`` into ``output_dir``.

    Returns:
        Path to the written file.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / f"{analysis.data.symbol or 'stock'}.html"
    output_path.write_text(generate_dashboard_html(analysis), encoding="utf-8")
    logger.info("Dashboard written: %s", output_path)
    return output_path
