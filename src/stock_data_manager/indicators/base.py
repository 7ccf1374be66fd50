"""Base interface for indicator families."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..core import IndicatorKind
from .calculations import indicator_label


class BaseIndicator(ABC):
    """
    Base interface for all indicator families.

    Each family must expose:
    - name: str
    - kind: IndicatorKind enum
    - compute(closes: Sequence[float], period: int) -> list[float | None]
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this indicator family."""
        pass

    @property
    @abstractmethod
    def kind(self) -> IndicatorKind:
        """Return the family this indicator computes."""
        pass

    @abstractmethod
    def compute(self, closes: Sequence[float], period: int) -> List[Optional[float]]:
        """
        Compute values for one period over an ascending close series.

        Args:
            closes: Closing prices in ascending date order
            period: Positive look-back period

        Returns:
            List aligned with closes, None where no value exists
        """
        pass

    def label(self, period: int) -> str:
        """Return the stored field name for one period."""
        return indicator_label(period, self.kind)
