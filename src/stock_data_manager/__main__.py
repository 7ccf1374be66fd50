"""CLI entrypoint for stock_data_manager.

Provider and store selection is explicit:
- Alpha Vantage and MongoDB are the defaults.
- Network/store modules are only imported when selected.
"""

import argparse
import sys
from typing import List, Optional

from loguru import logger

from .config import Settings, load_settings
from .core import StockDataError
from .logging_utils import setup_logging
from .pipeline import PipelineOrchestrator


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Stock Data Manager - daily bars and moving averages"
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=["run", "reset"],
        default="run",
        help="run: ingest and compute indicators (default); "
        "reset: drop every collection except the ticker list",
    )
    parser.add_argument(
        "--symbol",
        action="append",
        dest="symbols",
        help="Symbol to process (repeatable); defaults to the ticker collection",
    )
    parser.add_argument(
        "--provider",
        choices=["alphavantage", "fixtures"],
        default="alphavantage",
        help="Raw bar source (default: alphavantage)",
    )
    parser.add_argument(
        "--fixture-path",
        default="tests/fixtures/daily_bars.json",
        help="Path to fixtures JSON (used when provider=fixtures)",
    )
    parser.add_argument(
        "--store",
        choices=["mongo", "memory"],
        default="mongo",
        help="Time-series store (default: mongo)",
    )
    parser.add_argument(
        "--output",
        choices=["json", "pretty"],
        default="pretty",
        help="Output format (default: pretty)",
    )
    return parser.parse_args(argv)


def _build_store(settings: Settings, kind: str):
    if kind == "memory":
        from .storage import InMemoryTimeSeriesStore

        return InMemoryTimeSeriesStore()

    settings.require_store()
    from .storage.mongo import MongoTimeSeriesStore

    return MongoTimeSeriesStore(
        settings.mongo_uri,
        settings.mongo_database,
        timeout_ms=settings.mongo_timeout_ms,
    )


def _build_source(settings: Settings, args: argparse.Namespace):
    if args.provider == "fixtures":
        from .io.providers.fixtures import FixtureBarSource

        return FixtureBarSource(args.fixture_path)

    from .io.providers.alpha_vantage import AlphaVantageBarSource

    return AlphaVantageBarSource(
        settings.require_api_key(),
        base_url=settings.alpha_vantage_base_url,
        timeout=settings.request_timeout,
    )


def _print_report(report, output: str) -> None:
    if output == "json":
        print(report.to_json(indent=2))
        return

    print(f"\n{'='*60}")
    print("Stock Data Manager Run")
    print(f"{'='*60}\n")
    for result in report.results:
        print(f"{result.symbol}: {result.status.value}")
        if result.ingestion is not None:
            print(f"  Inserted: {result.ingestion.inserted}  "
                  f"Skipped: {result.ingestion.skipped}")
        if result.indicators is not None:
            for family in result.indicators.families:
                print(f"  {family.kind.value.upper()}: {family.status.value} "
                      f"(values written: {family.values_written})")
        if result.error:
            print(f"  Error: {result.error}")
    print(f"\nSucceeded: {len(report.succeeded)}  Failed: {len(report.failed)}")
    print(f"{'='*60}\n")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entrypoint."""
    args = _parse_args(argv)

    store = None
    try:
        settings = load_settings()
        setup_logging(settings.log_level, settings.log_dir)

        # Config is validated before any network or store activity
        source = _build_source(settings, args) if args.command == "run" else None
        store = _build_store(settings, args.store)

        if args.command == "reset":
            store.ping()
            orchestrator = PipelineOrchestrator(settings, store, source=None)
            dropped = orchestrator.reset()
            for name in dropped:
                print(f"Dropped collection: {name}")
            return 0

        orchestrator = PipelineOrchestrator(settings, store, source)
        report = orchestrator.run(args.symbols)
        _print_report(report, args.output)
        return 0
    except StockDataError as e:
        logger.error(f"{type(e).__name__}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        if store is not None:
            store.close()


if __name__ == "__main__":
    sys.exit(main())
