from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import math

from stockcore.config.env import get_market_config

"""
Yahoo Finance chart endpoint (no key): daily closes for DMA inputs.
We build URLs and parse the chart payload only; fetching is the caller's job.
Tests are offline using tiny JSON fixtures.
"""


@dataclass(frozen=True)
class PricePoint:
    date: str  # YYYY-MM-DD (UTC)
    close: float


def format_symbol(symbol: str, suffix: Optional[str] = None) -> str:
    # Bare symbols are assumed to be NSE listings
    if "." in symbol:
        return symbol
    return f"{symbol}{suffix if suffix is not None else get_market_config().default_suffix}"


def build_chart_url(symbol: str, days: Optional[int] = None) -> str:
    cfg = get_market_config()
    span = days if days is not None else cfg.history_days
    return f"{cfg.chart_base_url}/{format_symbol(symbol, cfg.default_suffix)}?interval=1d&range={span}d"


def parse_chart_payload(payload: Dict[str, Any]) -> List[PricePoint]:
    """Parse a v8 chart payload into ascending PricePoints.
    Drops rows whose close is null, NaN or zero; returns [] on an unexpected shape.
    """
    chart = payload.get("chart") if isinstance(payload, dict) else None
    result = chart.get("result") if isinstance(chart, dict) else None
    if not isinstance(result, list) or not result or not isinstance(result[0], dict):
        return []
    first = result[0]
    timestamps = first.get("timestamp") or []
    indicators = first.get("indicators") or {}
    quotes = (indicators.get("quote") if isinstance(indicators, dict) else None) or [{}]
    if not isinstance(quotes, list) or not isinstance(quotes[0], dict):
        return []
    closes = quotes[0].get("close") or []
    if not isinstance(timestamps, list) or not isinstance(closes, list):
        return []

    out: List[PricePoint] = []
    for idx, ts in enumerate(timestamps):
        close = closes[idx] if idx < len(closes) else None
        if isinstance(ts, bool) or not isinstance(ts, (int, float)):
            continue
        try:
            value = float(close)
            day = datetime.fromtimestamp(int(ts), tz=timezone.utc).strftime("%Y-%m-%d")
        except (TypeError, ValueError, OverflowError, OSError):
            continue
        if not value or math.isnan(value):
            continue
        out.append(PricePoint(date=day, close=value))
    return out
