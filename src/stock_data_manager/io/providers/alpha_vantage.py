"""
Alpha Vantage daily bar source.

No network calls happen at import time; requests is imported inside
fetch_daily_bars().
"""

from __future__ import annotations

from typing import Any, Dict, List

from loguru import logger

from ...core.errors import SchemaError, TransportError
from .alpha_vantage_parser import parse_daily_series
from .base import BarSource, RawBar
from .validation import validate_raw_bars


DEFAULT_BASE_URL = "https://www.alphavantage.co/query"


class AlphaVantageBarSource(BarSource):
    """
    Fetches TIME_SERIES_DAILY history from Alpha Vantage.

    Every request is bounded by ``timeout`` seconds.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        output_size: str = "full",
    ):
        if not api_key:
            raise ValueError("api_key is required")
        self._api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.output_size = output_size

    def fetch_daily_bars(self, symbol: str) -> List[RawBar]:
        params = {
            "function": "TIME_SERIES_DAILY",
            "symbol": symbol,
            "outputsize": self.output_size,
            "apikey": self._api_key,
        }

        try:
            import requests  # type: ignore
        except Exception as e:
            raise RuntimeError("requests is required to use AlphaVantageBarSource.") from e

        # Never log params: they carry the API key.
        logger.info(f"Fetching data for {symbol}")
        try:
            resp = requests.get(self.base_url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"Alpha Vantage request failed for {symbol}.") from e

        if resp.status_code != 200:
            raise TransportError(
                f"Alpha Vantage request for {symbol} failed with status {resp.status_code}."
            )

        try:
            payload: Dict[str, Any] = resp.json()
        except ValueError as e:
            raise SchemaError(f"Alpha Vantage response for {symbol} was not valid JSON.") from e

        bars = parse_daily_series(payload, symbol)
        validate_raw_bars(bars)
        return bars
