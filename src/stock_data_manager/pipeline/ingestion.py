"""Ingestion pipeline: idempotent merge of raw bars into a stored series."""

from typing import List, Set

from loguru import logger

from ..core import Bar, IngestionResult, SchemaError
from ..io.providers import BarSource, RawBar, validate_raw_bars
from ..storage import TimeSeriesStore


class IngestionPipeline:
    """Merges raw provider bars into the store; only unseen dates are inserted."""

    def __init__(self, source: BarSource, store: TimeSeriesStore):
        """
        Initialize the pipeline.

        Args:
            source: Raw bar source used by fetch_and_ingest()
            store: Time-series store receiving new bars
        """
        self.source = source
        self.store = store

    def fetch_and_ingest(self, symbol: str) -> IngestionResult:
        """
        Fetch a symbol's daily history and ingest it.

        Raises:
            TransportError: Source unreachable or non-success status
            SchemaError: Payload missing its time series or empty
        """
        raw_bars = self.source.fetch_daily_bars(symbol)
        if not raw_bars:
            raise SchemaError(f"No daily bars returned for {symbol}")
        return self.ingest(symbol, raw_bars)

    def ingest(self, symbol: str, raw_bars: List[RawBar]) -> IngestionResult:
        """
        Insert every raw bar whose date is not yet stored.

        Bars may arrive in any order. A date already in the store keeps its
        stored bar; a date repeated inside the batch is inserted once (first
        wins). The whole batch is validated before the first insert.

        Args:
            symbol: Ticker symbol
            raw_bars: Raw bars from a source

        Returns:
            IngestionResult; ``inserted`` equals the net growth of the series

        Raises:
            SchemaError: If any raw bar is invalid (nothing is written)
        """
        validate_raw_bars(raw_bars)
        series = self.store.get_series(symbol)

        inserted = 0
        skipped = 0
        seen: Set[str] = set()
        for raw in raw_bars:
            bar = self._to_bar(raw)
            if bar.date in seen or series.find_by_date(bar.date) is not None:
                skipped += 1
                continue
            seen.add(bar.date)
            if series.insert(bar):
                inserted += 1
            else:
                skipped += 1

        logger.info(
            f"Data for {symbol} stored: {inserted} new, {skipped} already present"
        )
        return IngestionResult(
            symbol=symbol,
            received=len(raw_bars),
            inserted=inserted,
            skipped=skipped,
        )

    @staticmethod
    def _to_bar(raw: RawBar) -> Bar:
        # One-to-one field mapping; no permutation of high/low/close
        return Bar(
            date=raw.date,
            open=raw.open,
            high=raw.high,
            low=raw.low,
            close=raw.close,
            volume=raw.volume,
        )
