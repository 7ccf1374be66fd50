"""Simple and exponential moving average families."""

from typing import List, Optional, Sequence

from ..core import IndicatorKind
from .base import BaseIndicator
from .calculations import ema_series, sma_series


class SimpleMovingAverage(BaseIndicator):
    """Unweighted mean of the last ``period`` closes."""

    @property
    def name(self) -> str:
        return "simple_moving_average"

    @property
    def kind(self) -> IndicatorKind:
        return IndicatorKind.SMA

    def compute(self, closes: Sequence[float], period: int) -> List[Optional[float]]:
        return sma_series(closes, period)


class ExponentialMovingAverage(BaseIndicator):
    """Recursive average seeded with the SMA of the first ``period`` closes."""

    @property
    def name(self) -> str:
        return "exponential_moving_average"

    @property
    def kind(self) -> IndicatorKind:
        return IndicatorKind.EMA

    def compute(self, closes: Sequence[float], period: int) -> List[Optional[float]]:
        return ema_series(closes, period)
