"""Pytest fixtures for ingestion, indicator and orchestrator tests."""

from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pytest

from stock_data_manager.config import Settings
from stock_data_manager.core import TransportError
from stock_data_manager.io.providers import RawBar
from stock_data_manager.storage import InMemoryTimeSeriesStore


FIXTURE_PATH = Path(__file__).parent / "fixtures" / "daily_bars.json"

# Worked example: closes 10..50 on consecutive trading days
WORKED_CLOSES = [10.0, 20.0, 30.0, 40.0, 50.0]
WORKED_DATES = ["2024-01-02", "2024-01-03", "2024-01-04", "2024-01-05", "2024-01-08"]


def make_raw_bars(
    closes: Iterable[float],
    dates: Optional[List[str]] = None,
    with_volume: bool = True,
) -> List[RawBar]:
    """Build raw bars with distinct open/high/low around each close."""
    closes = list(closes)
    if dates is None:
        dates = [f"2023-{1 + i // 28:02d}-{1 + i % 28:02d}" for i in range(len(closes))]
    return [
        RawBar(
            date=d,
            open=c - 1.0,
            high=c + 2.0,
            low=c - 3.0,
            close=c,
            volume=1000.0 + i if with_volume else None,
        )
        for i, (d, c) in enumerate(zip(dates, closes))
    ]


class FakeBarSource:
    """Fake bar source for testing (no network calls)."""

    def __init__(
        self,
        bars_by_symbol: Optional[Dict[str, List[RawBar]]] = None,
        failures: Optional[Dict[str, Exception]] = None,
    ):
        """
        Initialize fake source.

        Args:
            bars_by_symbol: Bars returned per symbol (missing symbol -> empty list)
            failures: Exceptions raised per symbol instead of returning bars
        """
        self.bars_by_symbol = bars_by_symbol or {}
        self.failures = failures or {}
        self.calls: List[str] = []

    def fetch_daily_bars(self, symbol: str) -> List[RawBar]:
        self.calls.append(symbol)
        if symbol in self.failures:
            raise self.failures[symbol]
        # Reversed to mimic the provider's newest-first ordering
        return list(reversed(self.bars_by_symbol.get(symbol, [])))


@pytest.fixture
def fixture_path() -> Path:
    return FIXTURE_PATH


@pytest.fixture
def store() -> InMemoryTimeSeriesStore:
    return InMemoryTimeSeriesStore(tickers={"stocks_list": ["AAA", "BBB", "CCC"]})


@pytest.fixture
def settings() -> Settings:
    """Deterministic settings, independent of the environment."""
    return Settings(
        _env_file=None,
        alpha_vantage_api_key="test-key",
        sma_periods=[3],
        ema_periods=[3],
        stocks_list_collection="stocks_list",
        max_workers=1,
    )


@pytest.fixture
def worked_bars() -> List[RawBar]:
    return make_raw_bars(WORKED_CLOSES, WORKED_DATES)


@pytest.fixture
def three_symbol_source(worked_bars) -> FakeBarSource:
    """AAA and CCC return the worked example; BBB fails at the transport layer."""
    return FakeBarSource(
        bars_by_symbol={"AAA": worked_bars, "CCC": worked_bars},
        failures={"BBB": TransportError("Alpha Vantage request for BBB failed with status 503.")},
    )
