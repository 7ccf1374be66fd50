"""Raw bar sources.

Network-backed sources are not imported here; import
``stock_data_manager.io.providers.alpha_vantage`` explicitly when needed.
"""

from .alpha_vantage_parser import TIME_SERIES_KEY, parse_daily_series
from .base import BarSource, RawBar
from .validation import validate_raw_bars

__all__ = [
    "RawBar",
    "BarSource",
    "TIME_SERIES_KEY",
    "parse_daily_series",
    "validate_raw_bars",
]
