"""Configuration dataclasses and engine constants."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

# Number of synthetic yearly points generated per ratio.
HISTORY_POINTS: int = 10

# Substituted when the provider omits earnings growth (5%).
DEFAULT_EARNINGS_GROWTH: float = 0.05

# Default perturbation fraction for ratios not listed below.
DEFAULT_VARIANCE: float = 0.2

# Per-ratio perturbation fraction for the synthetic history.
HISTORY_VARIANCES: dict[str, float] = {
    "pocf": 0.2,
    "pfcf": 0.2,
    "pe": 0.2,
    "dividend_yield": 0.1,
    "roe": 0.15,
    "debt_to_equity": 0.1,
    "profit_margin": 0.15,
    "pb": 0.2,
}


@dataclass
class ProviderConfig:
    """Market data provider (Yahoo Finance via RapidAPI) settings.

    Attributes:
        api_key: RapidAPI key. Empty string sends an empty header, which
            the provider rejects; callers then fall back.
        api_host: RapidAPI host header.
        base_url: API base URL.
        region: Market region passed with every request.
        timeout: Per-request timeout in seconds.
        history_interval: Bar interval for historical prices.
        history_range: Lookback range for historical prices.
    """

    api_key: str = ""
    api_host: str = "yh-finance.p.rapidapi.com"
    base_url: str = "https://yh-finance.p.rapidapi.com"
    region: str = "US"
    timeout: float = 10.0
    history_interval: str = "1mo"
    history_range: str = "10y"

    @classmethod
    def from_env(cls) -> ProviderConfig:
        """Build a config from RAPIDAPI_KEY / RAPIDAPI_HOST."""
        config = cls(api_key=os.environ.get("RAPIDAPI_KEY", ""))
        host = os.environ.get("RAPIDAPI_HOST")
        if host:
            config.api_host = host
        return config


@dataclass
class EngineConfig:
    """Ratio engine parameters."""

    history_points: int = HISTORY_POINTS
    default_earnings_growth: float = DEFAULT_EARNINGS_GROWTH
    variances: dict[str, float] = field(
        default_factory=lambda: dict(HISTORY_VARIANCES)
    )

    def variance_for(self, metric: str) -> float:
        """Perturbation fraction for a metric key."""
        return self.variances.get(metric, DEFAULT_VARIANCE)
