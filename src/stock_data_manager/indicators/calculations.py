"""Deterministic moving-average math over an ascending close series.

All functions are pure. Results are aligned with the input: position ``i``
holds the value at index ``i`` or None when fewer than ``period`` closes
exist up to and including ``i``. No rounding is applied.
"""

from collections.abc import Sequence
from typing import List, Optional

from ..core import IndicatorKind


def indicator_label(period: int, kind: IndicatorKind) -> str:
    """
    Return the stored field name for an indicator.

    Args:
        period: Look-back period in bars
        kind: Indicator family

    Returns:
        Label such as "20_day_sma" or "12_day_ema"
    """
    return f"{period}_day_{IndicatorKind(kind).value}"


def window_mean(values: Sequence[float], start: int, period: int) -> float:
    """
    Mean of ``period`` values starting at ``start``.

    Args:
        values: Sequence of closes
        start: Index of the first element in the window
        period: Window length

    Returns:
        Arithmetic mean using real division
    """
    total = 0.0
    for i in range(start, start + period):
        total += values[i]
    return total / period


def ema_multiplier(period: int) -> float:
    """Smoothing multiplier 2 / (period + 1)."""
    return 2.0 / (period + 1)


def sma_series(closes: Sequence[float], period: int) -> List[Optional[float]]:
    """
    Compute the simple moving average at every eligible index.

    SMA_i = mean(closes[i-period+1 .. i]) for i >= period-1.

    Args:
        closes: Closing prices in ascending date order
        period: Positive window length

    Returns:
        List aligned with closes; None before the first full window
    """
    if period <= 0:
        raise ValueError(f"period must be positive, got {period}")

    result: List[Optional[float]] = [None] * len(closes)
    for i in range(period - 1, len(closes)):
        result[i] = window_mean(closes, i - (period - 1), period)
    return result


def ema_series(closes: Sequence[float], period: int) -> List[Optional[float]]:
    """
    Compute the exponential moving average at every eligible index.

    Seed: EMA at i = period-1 is the mean of the first ``period`` closes.
    Recurrence: EMA_i = (close_i - EMA_{i-1}) * 2/(period+1) + EMA_{i-1}.

    Values depend on their predecessor, so the loop runs strictly in
    ascending index order.

    Args:
        closes: Closing prices in ascending date order
        period: Positive look-back period

    Returns:
        List aligned with closes; None before the seed index
    """
    if period <= 0:
        raise ValueError(f"period must be positive, got {period}")

    result: List[Optional[float]] = [None] * len(closes)
    if len(closes) < period:
        return result

    multiplier = ema_multiplier(period)
    ema = window_mean(closes, 0, period)
    result[period - 1] = ema
    for i in range(period, len(closes)):
        ema = (closes[i] - ema) * multiplier + ema
        result[i] = ema
    return result
