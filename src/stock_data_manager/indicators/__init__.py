"""Indicator families and the engine that persists them."""

from .base import BaseIndicator
from .calculations import ema_multiplier, ema_series, indicator_label, sma_series
from .engine import IndicatorEngine
from .moving_averages import ExponentialMovingAverage, SimpleMovingAverage
from .registry import IndicatorRegistry, default_registry

__all__ = [
    "BaseIndicator",
    "SimpleMovingAverage",
    "ExponentialMovingAverage",
    "IndicatorRegistry",
    "default_registry",
    "IndicatorEngine",
    "indicator_label",
    "sma_series",
    "ema_series",
    "ema_multiplier",
]
