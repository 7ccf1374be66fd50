"""Base interfaces for the per-symbol time-series store."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..core import OHLCV_FIELDS, Bar


class SeriesHandle(ABC):
    """
    One symbol's series, keyed by trading date.

    Each handle must expose:
    - symbol: str
    - find_by_date(date) -> Bar | None
    - insert(bar) -> bool
    - list_ascending_by_date() -> list[Bar]
    - update_field(date, field_name, value) -> None
    - count() -> int
    """

    @property
    @abstractmethod
    def symbol(self) -> str:
        """Return the symbol this series belongs to."""
        pass

    @abstractmethod
    def find_by_date(self, date: str) -> Optional[Bar]:
        """Return the stored bar for an ISO date, or None."""
        pass

    @abstractmethod
    def insert(self, bar: Bar) -> bool:
        """
        Insert a new bar as one record.

        Returns:
            True if written, False if a bar with the same date already exists
            (the stored bar is left untouched).
        """
        pass

    @abstractmethod
    def list_ascending_by_date(self) -> List[Bar]:
        """Return every bar sorted by date ascending."""
        pass

    @abstractmethod
    def update_field(self, date: str, field_name: str, value: float) -> None:
        """
        Set a single field on the bar for ``date``, leaving other fields as they are.

        Raises:
            ValueError: If field_name is one of the OHLCV fields
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored bars."""
        pass

    @staticmethod
    def _check_writable_field(field_name: str) -> None:
        if field_name in OHLCV_FIELDS or field_name.startswith("_"):
            raise ValueError(f"Field '{field_name}' is not writable after ingestion")


class TimeSeriesStore(ABC):
    """Persistent store holding one disjoint series per symbol."""

    @abstractmethod
    def ping(self) -> None:
        """
        Verify the store is reachable.

        Raises:
            StoreConnectionError: If it is not
        """
        pass

    @abstractmethod
    def get_series(self, symbol: str) -> SeriesHandle:
        """Return the series handle for a symbol (created lazily)."""
        pass

    @abstractmethod
    def list_tickers(self, collection: str) -> List[str]:
        """Return ticker symbols held in the reserved ticker collection."""
        pass

    @abstractmethod
    def drop_all_except(self, reserved_collection: str) -> List[str]:
        """
        Drop every collection except the reserved one.

        Returns:
            Names of the dropped collections
        """
        pass

    def close(self) -> None:
        """Release resources held by the store."""
        pass
