"""Indicator registry for governance and discovery."""

from typing import List

from .base import BaseIndicator
from .moving_averages import ExponentialMovingAverage, SimpleMovingAverage


class IndicatorRegistry:
    """Lightweight registry for indicator families."""

    def __init__(self):
        """Initialize empty registry."""
        self._indicators: List[BaseIndicator] = []

    def register_indicator(self, indicator: BaseIndicator) -> None:
        """
        Register an indicator family.

        Args:
            indicator: Indicator instance to register
        """
        if not isinstance(indicator, BaseIndicator):
            raise TypeError(
                f"Indicator must be instance of BaseIndicator, got {type(indicator)}"
            )

        # One family per kind
        if any(i.kind == indicator.kind for i in self._indicators):
            return

        self._indicators.append(indicator)

    def get_indicators(self) -> List[BaseIndicator]:
        """
        Get all registered indicator families.

        Returns:
            List of registered indicators, in registration order
        """
        return self._indicators.copy()

    def clear(self) -> None:
        """Remove all registered indicators."""
        self._indicators.clear()


def default_registry() -> IndicatorRegistry:
    """Build a registry holding the SMA and EMA families."""
    registry = IndicatorRegistry()
    registry.register_indicator(SimpleMovingAverage())
    registry.register_indicator(ExponentialMovingAverage())
    return registry
