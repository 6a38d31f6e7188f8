"""CLI entry point for stock valuation metrics."""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from pathlib import Path
from typing import Any

import numpy as np

from stockmetrics.config import ProviderConfig
from stockmetrics.data import MarketDataProvider, ProviderError
from stockmetrics.formatting import (
    METRIC_LABELS,
    format_currency,
    format_large_number,
    format_metric,
    format_number,
)
from stockmetrics.output.csv_export import export_csv
from stockmetrics.reports.html import write_dashboard
from stockmetrics.service import StockAnalysis, analyze_symbol

logger = logging.getLogger(__name__)

FALLBACK_NOTICE = (
    "Note: live market data was unavailable; showing sample data."
)


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the synthetic history (default: unseeded)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:]).

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog="stockmetrics",
        description="Stock valuation metrics",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # show command
    show_parser = subparsers.add_parser(
        "show", help="Print valuation metrics for a ticker"
    )
    show_parser.add_argument("symbol", help="Ticker symbol (e.g. MSFT)")
    show_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result as JSON",
    )
    _add_common(show_parser)

    # report command
    report_parser = subparsers.add_parser(
        "report", help="Generate an HTML dashboard for a ticker"
    )
    report_parser.add_argument("symbol", help="Ticker symbol (e.g. MSFT)")
    report_parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("output"),
        help="Output directory for HTML reports (default: output/)",
    )
    _add_common(report_parser)

    # export command
    export_parser = subparsers.add_parser(
        "export", help="Export the metrics table to CSV"
    )
    export_parser.add_argument("symbol", help="Ticker symbol (e.g. MSFT)")
    export_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output CSV path (default: output/<SYMBOL>.csv)",
    )
    _add_common(export_parser)

    # search command
    search_parser = subparsers.add_parser(
        "search", help="Look up ticker symbols"
    )
    search_parser.add_argument("query", help="Company name or partial ticker")
    search_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def _build_provider() -> MarketDataProvider:
    config = ProviderConfig.from_env()
    if not config.api_key:
        logger.warning("RAPIDAPI_KEY not set, requests will fail over to sample data")
    return MarketDataProvider(config)


def _analyze(args: argparse.Namespace) -> StockAnalysis:
    """Run the analysis, exiting with status 1 on failure."""
    analysis = analyze_symbol(
        args.symbol,
        _build_provider(),
        rng=np.random.default_rng(args.seed),
    )
    if analysis is None:
        logger.error("Failed to process stock data for %s", args.symbol)
        sys.exit(1)
    if analysis.used_fallback:
        logger.warning(FALLBACK_NOTICE)
    return analysis


def _render_table(analysis: StockAnalysis) -> str:
    """Plain-text metrics summary."""
    data = analysis.data
    lines = [
        f"{data.name} ({data.symbol})",
        f"Price: {format_currency(data.price, data.currency)}  "
        f"Change: {format_number(data.change)} "
        f"({format_number(data.change_percent)}%)  "
        f"Market cap: {format_large_number(data.market_cap)}",
        "",
        f"{'Metric':<20}{'Current':>14}{'10Y Avg':>14}{'10Y Median':>14}",
    ]
    for key, metric in data.metrics.items():
        avg = format_metric(key, metric.avg) if metric.historical else ""
        med = format_metric(key, metric.median) if metric.historical else ""
        lines.append(
            f"{METRIC_LABELS.get(key, key):<20}"
            f"{format_metric(key, metric.current):>14}{avg:>14}{med:>14}"
        )
    if analysis.used_fallback:
        lines += ["", FALLBACK_NOTICE]
    return "\n".join(lines)


def _json_safe(value: Any) -> Any:
    """Replace NaN with None so the output is strict JSON."""
    if isinstance(value, float) and math.isnan(value):
        return None
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_json_safe(v) for v in value]
    return value


def run_show(args: argparse.Namespace) -> None:
    """Execute the show command."""
    analysis = _analyze(args)
    if args.json:
        payload = analysis.data.to_dict()
        payload["usedFallbackData"] = analysis.used_fallback
        print(json.dumps(_json_safe(payload), indent=2, allow_nan=False))
    else:
        print(_render_table(analysis))


def run_report(args: argparse.Namespace) -> None:
    """Execute the report command."""
    analysis = _analyze(args)
    write_dashboard(analysis, args.output_dir)


def run_export(args: argparse.Namespace) -> None:
    """Execute the export command."""
    analysis = _analyze(args)
    output = args.output or Path("output") / f"{analysis.data.symbol}.csv"
    export_csv(analysis.data, output)


def run_search(args: argparse.Namespace) -> None:
    """Execute the search command."""
    config = ProviderConfig.from_env()
    if not config.api_key:
        logger.error("RAPIDAPI_KEY is required for symbol search")
        sys.exit(1)
    provider = MarketDataProvider(config)
    try:
        quotes = provider.search(args.query)
    except ProviderError as e:
        logger.error("Search failed: %s", e)
        sys.exit(1)
    for quote in quotes:
        name = quote.get("shortname") or quote.get("longname") or ""
        exchange = quote.get("exchange", "")
        print(f"{quote['symbol']:<10}{name:<40}{exchange}")


COMMANDS = {
    "show": run_show,
    "report": run_report,
    "export": run_export,
    "search": run_search,
}


def main(argv: list[str] | None = None) -> None:
    """Main entry point.

    Args:
        argv: Argument list (defaults to sys.argv[1:]).
    """
    args = _parse_args(argv)

    # Configure logging
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    command = COMMANDS.get(args.command)
    if command is None:
        logger.error("Unknown command: %s", args.command)
        sys.exit(1)
    command(args)


if __name__ == "__main__":
    main()
