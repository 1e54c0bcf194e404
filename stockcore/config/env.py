from __future__ import annotations
import os
from dataclasses import dataclass


def _flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).lower() not in {"0", "false", ""}


@dataclass(frozen=True)
class ResolverConfig:
    min_similarity: float = 0.3  # strict floor: score must be greater than this
    containment_score: float = 0.8
    word_bonus_weight: float = 0.3


def get_resolver_config() -> ResolverConfig:
    return ResolverConfig(
        min_similarity=float(os.getenv("RESOLVER_MIN_SIMILARITY", "0.3")),
        containment_score=float(os.getenv("RESOLVER_CONTAINMENT_SCORE", "0.8")),
        word_bonus_weight=float(os.getenv("RESOLVER_WORD_BONUS_WEIGHT", "0.3")),
    )


@dataclass(frozen=True)
class TrendConfig:
    short_period: int = 50
    long_period: int = 200
    strict_finite: bool = False


def get_trend_config() -> TrendConfig:
    return TrendConfig(
        short_period=int(os.getenv("TREND_SHORT_PERIOD", "50")),
        long_period=int(os.getenv("TREND_LONG_PERIOD", "200")),
        strict_finite=_flag("TREND_STRICT_FINITE"),
    )


@dataclass(frozen=True)
class MarketConfig:
    chart_base_url: str = "https://query1.finance.yahoo.com/v8/finance/chart"
    default_suffix: str = ".NS"
    history_days: int = 250


def get_market_config() -> MarketConfig:
    return MarketConfig(
        chart_base_url=os.getenv("MARKET_CHART_BASE_URL", "https://query1.finance.yahoo.com/v8/finance/chart"),
        default_suffix=os.getenv("MARKET_DEFAULT_SUFFIX", ".NS"),
        history_days=int(os.getenv("MARKET_HISTORY_DAYS", "250")),
    )
