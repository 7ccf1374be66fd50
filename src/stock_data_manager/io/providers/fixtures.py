"""Fixture bar source (offline, deterministic)."""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ...core.dates import parse_iso_date
from ...core.errors import SchemaError
from .alpha_vantage_parser import TIME_SERIES_KEY, parse_daily_series
from .base import BarSource, RawBar
from .validation import validate_raw_bars


class FixtureBarSource(BarSource):
    """
    Deterministic source that reads bars from a local fixture file.

    The fixture file is read only when fetch_daily_bars() is called.
    """

    def __init__(self, fixture_path: Union[str, Path]):
        self.fixture_path = Path(fixture_path)

    def fetch_daily_bars(self, symbol: str) -> List[RawBar]:
        """
        Load bars for a symbol from the fixture file.

        Fixture formats supported:
        - a single Alpha Vantage payload: {"Time Series (Daily)": {...}}
        - dict mapping symbol -> Alpha Vantage payload
        - dict mapping symbol -> list of dicts:
          [{"date": "...", "open":..., "high":..., "low":..., "close":..., "volume":...}, ...]
        """
        payload = self._load_fixture()

        if isinstance(payload, dict) and TIME_SERIES_KEY in payload:
            bars = parse_daily_series(payload, symbol)
        else:
            entry = self._select_entry(payload, symbol)
            if isinstance(entry, dict):
                bars = parse_daily_series(entry, symbol)
            else:
                bars = self._rows_to_bars(entry)

        validate_raw_bars(bars)
        return bars

    def _load_fixture(self) -> Any:
        try:
            with self.fixture_path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError as e:
            raise SchemaError(f"Fixture file not found: {self.fixture_path}") from e
        except json.JSONDecodeError as e:
            raise SchemaError(f"Fixture file is not valid JSON: {self.fixture_path}") from e

    @staticmethod
    def _select_entry(payload: Any, symbol: str) -> Any:
        if not isinstance(payload, dict):
            raise SchemaError("Unsupported fixture format; expected a dict.")
        entry = payload.get(symbol)
        if not isinstance(entry, (dict, list)):
            raise SchemaError(f"Fixture has no data for {symbol}")
        return entry

    @classmethod
    def _rows_to_bars(cls, rows: List[Dict[str, Any]]) -> List[RawBar]:
        bars: List[RawBar] = []
        for row in rows:
            if not isinstance(row, dict):
                continue
            date = parse_iso_date(row.get("date"))
            if date is None:
                continue

            o = cls._finite_float(row.get("open"))
            h = cls._finite_float(row.get("high"))
            l = cls._finite_float(row.get("low"))
            c = cls._finite_float(row.get("close"))
            if o is None or h is None or l is None or c is None:
                continue

            bars.append(
                RawBar(
                    date=date,
                    open=o,
                    high=h,
                    low=l,
                    close=c,
                    volume=cls._finite_float(row.get("volume")),
                )
            )
        return bars

    @staticmethod
    def _finite_float(x: Any) -> Optional[float]:
        if x is None:
            return None
        try:
            v = float(x)
        except (TypeError, ValueError):
            return None
        if not math.isfinite(v):
            return None
        return v
