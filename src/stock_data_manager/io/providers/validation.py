"""Provider-agnostic RawBar validation helpers."""

from __future__ import annotations

import math
from typing import List

from ...core.dates import parse_iso_date
from ...core.errors import SchemaError
from .base import RawBar


def validate_raw_bars(bars: List[RawBar]) -> None:
    """
    Validate RawBar[] invariants before anything is written.
    
    Order and duplicate dates are allowed here; ingestion resolves both.
    
    Raises SchemaError if:
    - bars is not a list
    - any date is not a valid ISO trading date
    - open/high/low/close are non-finite
    - volume is present and non-finite
    """
    if not isinstance(bars, list):
        raise SchemaError("bars must be a list")
    
    for i, b in enumerate(bars):
        if parse_iso_date(b.date) is None:
            raise SchemaError(f"bar[{i}].date is not a valid date: {b.date!r}")
        
        for field_name in ("open", "high", "low", "close"):
            v = getattr(b, field_name)
            if isinstance(v, bool) or not isinstance(v, (int, float)) or not math.isfinite(float(v)):
                raise SchemaError(f"bar[{i}].{field_name} is not finite")
        
        if b.volume is not None:
            v = b.volume
            if isinstance(v, bool) or not isinstance(v, (int, float)) or not math.isfinite(float(v)):
                raise SchemaError(f"bar[{i}].volume is not finite")
