"""In-memory time-series store (offline, tests)."""

from typing import Dict, Iterable, List, Optional

from ..core import Bar, StoreConnectionError
from .base import SeriesHandle, TimeSeriesStore


class InMemorySeries(SeriesHandle):
    """Series backed by a dict of stored documents keyed by date."""

    def __init__(self, symbol: str):
        self._symbol = symbol
        self._docs: Dict[str, dict] = {}

    @property
    def symbol(self) -> str:
        return self._symbol

    def find_by_date(self, date: str) -> Optional[Bar]:
        doc = self._docs.get(date)
        return Bar.from_document(doc) if doc is not None else None

    def insert(self, bar: Bar) -> bool:
        if bar.date in self._docs:
            return False
        self._docs[bar.date] = bar.to_document()
        return True

    def list_ascending_by_date(self) -> List[Bar]:
        return [Bar.from_document(self._docs[d]) for d in sorted(self._docs)]

    def update_field(self, date: str, field_name: str, value: float) -> None:
        self._check_writable_field(field_name)
        doc = self._docs.get(date)
        # Matches Mongo update_one semantics: no bar, no write
        if doc is None:
            return
        doc[field_name] = value

    def count(self) -> int:
        return len(self._docs)

    def raw_document(self, date: str) -> Optional[dict]:
        """Return a copy of the stored document (for inspection in tests)."""
        doc = self._docs.get(date)
        return dict(doc) if doc is not None else None


class InMemoryTimeSeriesStore(TimeSeriesStore):
    """
    Dict-backed store mirroring the MongoDB layout: one series per symbol plus
    named ticker collections.
    """

    def __init__(self, tickers: Optional[Dict[str, Iterable[str]]] = None):
        """
        Initialize the store.

        Args:
            tickers: Optional mapping of collection name -> ticker symbols
        """
        self._series: Dict[str, InMemorySeries] = {}
        self._ticker_collections: Dict[str, List[str]] = {
            name: list(symbols) for name, symbols in (tickers or {}).items()
        }
        self.available = True

    def ping(self) -> None:
        if not self.available:
            raise StoreConnectionError("In-memory store marked unavailable")

    def get_series(self, symbol: str) -> InMemorySeries:
        if symbol not in self._series:
            self._series[symbol] = InMemorySeries(symbol)
        return self._series[symbol]

    def list_tickers(self, collection: str) -> List[str]:
        return list(self._ticker_collections.get(collection, []))

    def collection_names(self) -> List[str]:
        return sorted(set(self._series) | set(self._ticker_collections))

    def drop_all_except(self, reserved_collection: str) -> List[str]:
        dropped = [name for name in self.collection_names() if name != reserved_collection]
        for name in dropped:
            self._series.pop(name, None)
            self._ticker_collections.pop(name, None)
        return dropped
