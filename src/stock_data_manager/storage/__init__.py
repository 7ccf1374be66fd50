"""Time-series storage backends.

The MongoDB backend lives in ``stock_data_manager.storage.mongo`` and is only
imported when selected.
"""

from .base import SeriesHandle, TimeSeriesStore
from .memory import InMemorySeries, InMemoryTimeSeriesStore

__all__ = [
    "SeriesHandle",
    "TimeSeriesStore",
    "InMemorySeries",
    "InMemoryTimeSeriesStore",
]
