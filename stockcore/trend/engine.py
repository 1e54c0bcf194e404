from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Tuple
from decimal import Decimal, ROUND_HALF_UP
import logging
import math

from stockcore.config.env import TrendConfig
from stockcore.errors import CalculationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrendResult:
    trend: str  # bullish|bearish|unknown
    signal: str
    short_avg: Optional[float] = None
    long_avg: Optional[float] = None
    current_value: Optional[float] = None
    short_above_long: Optional[bool] = None
    value_above_short: Optional[bool] = None
    value_above_long: Optional[bool] = None
    short_vs_long_percent: Optional[float] = None
    value_vs_short_percent: Optional[float] = None
    value_vs_long_percent: Optional[float] = None

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


# (short_above_long, value_above_short, value_above_long) -> (trend, signal)
# None is "don't care"; first matching row wins.
RULES: Tuple[Tuple[bool, Optional[bool], Optional[bool], str, str], ...] = (
    (True, True, True, "bullish", "strong_buy"),
    (True, None, True, "bullish", "buy"),
    (True, None, None, "bullish", "weak_buy"),
    (False, False, False, "bearish", "strong_sell"),
    (False, None, False, "bearish", "sell"),
    (False, None, None, "bearish", "weak_sell"),
)


def _missing(v: Optional[float]) -> bool:
    return not v or (isinstance(v, float) and math.isnan(v))


def round_half_up(x: float, places: int = 2) -> float:
    # Halves go away from zero on the exact binary value, like JS toFixed
    if not math.isfinite(x) or abs(x) >= 2 ** 52:
        return x
    return float(Decimal(x).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))


def _pct(num: float, den: float, label: str, strict: bool) -> float:
    # den is non-zero here; tiny dens can still overflow to inf
    val = num / den * 100.0
    if not math.isfinite(val):
        if strict:
            raise CalculationError(f"{label} is not finite")
        logger.warning("%s is not finite (%r / %r)", label, num, den)
        return val
    return round_half_up(val)


def classify(
    short_avg: Optional[float],
    long_avg: Optional[float],
    current_value: Optional[float],
    config: Optional[TrendConfig] = None,
) -> TrendResult:
    """Classify trend from a short average, a long average and a current value.

    Any missing/zero/NaN input => trend 'unknown', signal 'insufficient_data'.
    Otherwise the RULES table decides; it covers every combination, so there is
    no neutral/hold outcome once all three values are present.
    Non-finite percentages pass through unless config.strict_finite is set.
    """
    if _missing(short_avg) or _missing(long_avg) or _missing(current_value):
        return TrendResult(
            trend="unknown",
            signal="insufficient_data",
            short_avg=short_avg,
            long_avg=long_avg,
            current_value=current_value,
        )

    cfg = config or TrendConfig()
    s, l, v = float(short_avg), float(long_avg), float(current_value)
    flags = (s > l, v > s, v > l)

    for sal, vas, val, trend, signal in RULES:
        if sal == flags[0] and vas in (None, flags[1]) and val in (None, flags[2]):
            break
    else:  # pragma: no cover
        raise AssertionError(f"no trend rule for {flags}")

    return TrendResult(
        trend=trend,
        signal=signal,
        short_avg=round_half_up(s),
        long_avg=round_half_up(l),
        current_value=round_half_up(v),
        short_above_long=flags[0],
        value_above_short=flags[1],
        value_above_long=flags[2],
        short_vs_long_percent=_pct(s - l, l, "short_vs_long_percent", cfg.strict_finite),
        value_vs_short_percent=_pct(v - s, s, "value_vs_short_percent", cfg.strict_finite),
        value_vs_long_percent=_pct(v - l, l, "value_vs_long_percent", cfg.strict_finite),
    )
