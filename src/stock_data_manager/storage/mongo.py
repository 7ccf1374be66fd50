"""
MongoDB time-series store.

One collection per symbol, one document per trading date. Not imported by
``stock_data_manager.storage``; select it explicitly at runtime.
"""

from __future__ import annotations

from typing import List, Optional

from loguru import logger
from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import ConfigurationError as MongoConfigurationError
from pymongo.errors import DuplicateKeyError, PyMongoError

from ..core import Bar, ConfigurationError, StoreConnectionError
from .base import SeriesHandle, TimeSeriesStore


class MongoSeries(SeriesHandle):
    """Series stored in a single Mongo collection with a unique index on date."""

    def __init__(self, symbol: str, collection: Collection):
        self._symbol = symbol
        self._collection = collection
        # Idempotent; enforces date uniqueness at the store level too
        self._collection.create_index([("date", ASCENDING)], unique=True)

    @property
    def symbol(self) -> str:
        return self._symbol

    def find_by_date(self, date: str) -> Optional[Bar]:
        doc = self._collection.find_one({"date": date})
        return Bar.from_document(doc) if doc is not None else None

    def insert(self, bar: Bar) -> bool:
        try:
            self._collection.insert_one(bar.to_document())
        except DuplicateKeyError:
            return False
        return True

    def list_ascending_by_date(self) -> List[Bar]:
        cursor = self._collection.find({}).sort("date", ASCENDING)
        return [Bar.from_document(doc) for doc in cursor]

    def update_field(self, date: str, field_name: str, value: float) -> None:
        self._check_writable_field(field_name)
        self._collection.update_one({"date": date}, {"$set": {field_name: value}})

    def count(self) -> int:
        return self._collection.count_documents({})


class MongoTimeSeriesStore(TimeSeriesStore):
    """Store backed by one Mongo database."""

    def __init__(
        self,
        uri: str,
        database: str,
        timeout_ms: int = 5000,
        client: Optional[MongoClient] = None,
    ):
        """
        Initialize the store. No I/O happens until ping() or a series call.

        Args:
            uri: Mongo connection string
            database: Database name
            timeout_ms: Server selection timeout
            client: Optional pre-built client (ownership stays with the caller)
        """
        self._owns_client = client is None
        if client is None:
            try:
                client = MongoClient(uri, serverSelectionTimeoutMS=timeout_ms)
            except MongoConfigurationError as e:
                raise ConfigurationError(f"Invalid MongoDB connection string: {e}") from e
        self._client = client
        self._db: Database = self._client[database]
        self.database_name = database

    def ping(self) -> None:
        try:
            self._client.admin.command("ping")
        except PyMongoError as e:
            raise StoreConnectionError(
                f"Could not reach MongoDB database '{self.database_name}'"
            ) from e

    def get_series(self, symbol: str) -> MongoSeries:
        return MongoSeries(symbol, self._db[symbol])

    def list_tickers(self, collection: str) -> List[str]:
        tickers: List[str] = []
        for doc in self._db[collection].find({}, {"ticker": 1}):
            ticker = doc.get("ticker")
            if isinstance(ticker, str):
                tickers.append(ticker)
        return tickers

    def drop_all_except(self, reserved_collection: str) -> List[str]:
        dropped: List[str] = []
        for name in self._db.list_collection_names():
            if name == reserved_collection:
                continue
            self._db.drop_collection(name)
            logger.info(f"Dropped collection: {name}")
            dropped.append(name)
        return dropped

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
