"""Indicator engine: computes SMA/EMA over a stored series and writes them back."""

from typing import Dict, Iterable, List, Optional

from loguru import logger

from ..core import (
    Bar,
    FamilyOutcome,
    FamilyStatus,
    IndicatorKind,
    IndicatorReport,
    normalize_periods,
)
from ..storage import SeriesHandle
from .base import BaseIndicator
from .registry import IndicatorRegistry, default_registry


class IndicatorEngine:
    """Backfills indicator fields over a symbol's full ascending series."""

    def __init__(
        self,
        sma_periods: Iterable[int] = (),
        ema_periods: Iterable[int] = (),
        registry: Optional[IndicatorRegistry] = None,
    ):
        """
        Initialize the engine.

        Args:
            sma_periods: SMA periods; duplicates are collapsed, empty disables SMA
            ema_periods: EMA periods; duplicates are collapsed, empty disables EMA
            registry: Indicator families (defaults to SMA + EMA)

        Raises:
            ValueError: If any period is not a positive integer
        """
        self.periods: Dict[IndicatorKind, List[int]] = {
            IndicatorKind.SMA: normalize_periods("sma_periods", sma_periods),
            IndicatorKind.EMA: normalize_periods("ema_periods", ema_periods),
        }
        self.registry = registry or default_registry()

    def compute(self, series: SeriesHandle) -> IndicatorReport:
        """
        Compute and persist every configured indicator for one series.

        The full series is read once, ascending by date, before anything is
        computed. A family whose largest period exceeds the series length is
        skipped entirely and reported as insufficient history.

        Args:
            series: Handle to the symbol's stored series

        Returns:
            IndicatorReport with one outcome per registered family

        Raises:
            ValueError: If the store returned bars out of order or duplicated
        """
        bars = series.list_ascending_by_date()
        self._require_strictly_ascending(series.symbol, bars)
        closes = [bar.close for bar in bars]

        families = [
            self._compute_family(series, indicator, bars, closes)
            for indicator in self.registry.get_indicators()
        ]
        return IndicatorReport(symbol=series.symbol, bars=len(bars), families=families)

    def _compute_family(
        self,
        series: SeriesHandle,
        indicator: BaseIndicator,
        bars: List[Bar],
        closes: List[float],
    ) -> FamilyOutcome:
        periods = self.periods.get(indicator.kind, [])
        if not periods:
            return FamilyOutcome(kind=indicator.kind, status=FamilyStatus.SKIPPED)

        family = indicator.kind.value.upper()
        if len(bars) < max(periods):
            logger.info(
                f"Not enough data to calculate {family}s for {series.symbol} "
                f"({len(bars)} bars, need {max(periods)})"
            )
            return FamilyOutcome(
                kind=indicator.kind,
                status=FamilyStatus.INSUFFICIENT_HISTORY,
                periods=periods,
            )

        logger.info(f"Calculating {family}s {periods} for {series.symbol}")
        written = 0
        for period in periods:
            label = indicator.label(period)
            values = indicator.compute(closes, period)
            for bar, value in zip(bars, values):
                if value is None:
                    continue
                series.update_field(bar.date, label, value)
                written += 1

        logger.info(f"{family}s for {series.symbol} calculated and stored ({written} values)")
        return FamilyOutcome(
            kind=indicator.kind,
            status=FamilyStatus.COMPUTED,
            periods=periods,
            values_written=written,
        )

    @staticmethod
    def _require_strictly_ascending(symbol: str, bars: List[Bar]) -> None:
        for prev, curr in zip(bars, bars[1:]):
            if not prev.date < curr.date:
                raise ValueError(
                    f"Series for {symbol} is not strictly ascending at {prev.date} -> {curr.date}"
                )
