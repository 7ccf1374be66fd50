"""Orchestrator: ingestion then indicators for every symbol in the universe."""

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

from loguru import logger

from ..config import Settings
from ..core import RunReport, SymbolResult, SymbolStatus
from ..indicators import IndicatorEngine
from ..io.providers import BarSource
from ..storage import TimeSeriesStore
from .ingestion import IngestionPipeline


class PipelineOrchestrator:
    """Drives the per-symbol pipeline and isolates per-symbol failures."""

    def __init__(
        self,
        settings: Settings,
        store: TimeSeriesStore,
        source: BarSource,
        ingestion: Optional[IngestionPipeline] = None,
        engine: Optional[IndicatorEngine] = None,
    ):
        """
        Initialize the pipeline orchestrator.

        Args:
            settings: Run configuration (periods, ticker collection, workers)
            store: Time-series store
            source: Raw bar source (passed to IngestionPipeline)
            ingestion: Ingestion pipeline (creates default if None)
            engine: Indicator engine (creates default from settings if None)
        """
        self.settings = settings
        self.store = store
        self.source = source
        self.ingestion = ingestion or IngestionPipeline(source=source, store=store)
        self.engine = engine or IndicatorEngine(
            sma_periods=settings.sma_periods,
            ema_periods=settings.ema_periods,
        )

    def run(self, symbols: Optional[Iterable[str]] = None) -> RunReport:
        """
        Run ingestion and indicators for each symbol.

        Args:
            symbols: Explicit universe; read from the ticker collection if None

        Returns:
            RunReport with one SymbolResult per symbol, in universe order

        Raises:
            StoreConnectionError: If the store is unreachable (nothing is processed)
        """
        self.store.ping()

        universe = self._resolve_universe(symbols)
        if not universe:
            logger.warning(
                f"No tickers found in collection '{self.settings.stocks_list_collection}'"
            )
            return RunReport()

        logger.info(f"Processing {len(universe)} symbols")
        workers = min(self.settings.max_workers, len(universe))
        if workers <= 1:
            results = [self.run_symbol(symbol) for symbol in universe]
        else:
            # Each symbol owns a disjoint collection; no locking needed
            with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="symbol") as pool:
                results = list(pool.map(self.run_symbol, universe))

        report = RunReport(results=results)
        logger.info(
            f"Run complete: {len(report.succeeded)} succeeded, {len(report.failed)} failed"
        )
        return report

    def run_symbol(self, symbol: str) -> SymbolResult:
        """
        Ingest then compute indicators for one symbol.

        Any failure is logged and returned as a failed SymbolResult. When
        ingestion fails the indicator step is skipped.
        """
        try:
            ingestion = self.ingestion.fetch_and_ingest(symbol)
        except Exception as e:
            logger.opt(exception=e).error(f"Error processing {symbol}: {e}")
            return SymbolResult(symbol=symbol, status=SymbolStatus.FAILED, error=str(e))

        try:
            indicators = self.engine.compute(self.store.get_series(symbol))
        except Exception as e:
            logger.opt(exception=e).error(f"Error calculating indicators for {symbol}: {e}")
            return SymbolResult(
                symbol=symbol,
                status=SymbolStatus.FAILED,
                ingestion=ingestion,
                error=str(e),
            )

        return SymbolResult(
            symbol=symbol,
            status=SymbolStatus.OK,
            ingestion=ingestion,
            indicators=indicators,
        )

    def reset(self) -> List[str]:
        """
        Drop every collection except the reserved ticker collection.

        Returns:
            Names of dropped collections
        """
        logger.info("Resetting data...")
        dropped = self.store.drop_all_except(self.settings.stocks_list_collection)
        logger.info(f"Data reset complete ({len(dropped)} collections dropped)")
        return dropped

    def _resolve_universe(self, symbols: Optional[Iterable[str]]) -> List[str]:
        if symbols is None:
            symbols = self.store.list_tickers(self.settings.stocks_list_collection)

        universe: List[str] = []
        for symbol in symbols:
            s = symbol.strip() if isinstance(symbol, str) else ""
            if s and s not in universe:
                universe.append(s)
        return universe
