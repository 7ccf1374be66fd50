"""Pure, deterministic parsing utilities for Alpha Vantage daily payloads.

Security / invariants:
- No network calls.
- No environment variable reads.
- Fields map one-to-one: "1. open" -> open, "2. high" -> high,
  "3. low" -> low, "4. close" -> close, "5. volume" -> volume.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional

from ...core.dates import parse_iso_date
from ...core.errors import SchemaError
from .base import RawBar


TIME_SERIES_KEY = "Time Series (Daily)"

# Top-level keys Alpha Vantage uses instead of data (bad ticker, rate limit, premium endpoint)
_NOTICE_KEYS = ("Error Message", "Note", "Information")

_FIELD_KEYS = {
    "open": "1. open",
    "high": "2. high",
    "low": "3. low",
    "close": "4. close",
    "volume": "5. volume",
}


def _finite_float(x: Any) -> Optional[float]:
    """Convert to float and ensure finite."""
    if x is None:
        return None
    try:
        v = float(x)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(v):
        return None
    return v


def parse_daily_series(payload: Dict[str, Any], symbol: str = "") -> List[RawBar]:
    """
    Convert an Alpha Vantage TIME_SERIES_DAILY payload into list[RawBar].
    
    Requirements:
    - Read entries from payload["Time Series (Daily)"].
    - Each entry must carry a valid date key and the four price fields.
      Volume is optional.
    - Skip invalid entries deterministically (bad date, missing/non-finite price).
    - Return bars sorted ascending by date.
    - Raise SchemaError if the container is missing or not a mapping,
      surfacing the provider's notice text when it sent one.
    """
    if not isinstance(payload, dict):
        raise SchemaError("payload must be a dict")
    
    series = payload.get(TIME_SERIES_KEY)
    if not isinstance(series, dict):
        notice = next(
            (str(payload[k]) for k in _NOTICE_KEYS if payload.get(k)),
            None,
        )
        message = f"Could not retrieve time series data for {symbol or 'symbol'}"
        if notice:
            message += f": {notice}"
        else:
            message += (
                ". The API response might have changed, the ticker is invalid "
                "or the API limit was reached."
            )
        raise SchemaError(message)
    
    bars: List[RawBar] = []
    for raw_date, day in series.items():
        date = parse_iso_date(raw_date)
        if date is None or not isinstance(day, dict):
            continue
        
        o = _finite_float(day.get(_FIELD_KEYS["open"]))
        h = _finite_float(day.get(_FIELD_KEYS["high"]))
        l = _finite_float(day.get(_FIELD_KEYS["low"]))
        c = _finite_float(day.get(_FIELD_KEYS["close"]))
        if o is None or h is None or l is None or c is None:
            continue
        
        v = _finite_float(day.get(_FIELD_KEYS["volume"]))
        
        bars.append(RawBar(date=date, open=o, high=h, low=l, close=c, volume=v))
    
    bars.sort(key=lambda b: b.date)
    return bars
