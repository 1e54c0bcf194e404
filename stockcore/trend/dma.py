from __future__ import annotations
from typing import Optional, Sequence

from stockcore.config.env import TrendConfig
from stockcore.ingestion.market_client import PricePoint
from stockcore.errors import InvalidArgument
from stockcore.trend.engine import TrendResult, classify


def calculate_dma(points: Sequence[PricePoint], period: int) -> Optional[float]:
    """Mean close of the last `period` points; None if the series is shorter."""
    if period <= 0:
        raise InvalidArgument("period must be positive")
    if not points or len(points) < period:
        return None
    recent = points[-period:]
    return sum(p.close for p in recent) / period


def analyze_trend(points: Sequence[PricePoint], config: Optional[TrendConfig] = None) -> TrendResult:
    cfg = config or TrendConfig()
    short_avg = calculate_dma(points, cfg.short_period)
    long_avg = calculate_dma(points, cfg.long_period)
    current = points[-1].close if points else None
    return classify(short_avg, long_avg, current, cfg)
