"""Tests for the MongoDB store against in-process fake collections (no server)."""

from typing import Dict, List

import pytest
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from stock_data_manager.core import Bar, StoreConnectionError
from stock_data_manager.storage.mongo import MongoTimeSeriesStore


class _FakeCursor:
    def __init__(self, docs: List[dict]):
        self._docs = docs

    def sort(self, key, direction):
        return _FakeCursor(sorted(self._docs, key=lambda d: d[key], reverse=direction < 0))

    def __iter__(self):
        return iter(self._docs)


class _FakeCollection:
    """Subset of pymongo Collection used by MongoSeries; unique on date."""

    def __init__(self):
        self.docs: List[dict] = []
        self.indexes = []

    def create_index(self, keys, unique=False):
        self.indexes.append((keys, unique))

    def find_one(self, query):
        return next((dict(d) for d in self.docs if d["date"] == query["date"]), None)

    def insert_one(self, doc):
        if any(d["date"] == doc["date"] for d in self.docs):
            raise DuplicateKeyError("E11000 duplicate key error")
        self.docs.append({"_id": len(self.docs), **doc})

    def find(self, query, projection=None):
        return _FakeCursor([dict(d) for d in self.docs])

    def update_one(self, query, update):
        for d in self.docs:
            if d["date"] == query["date"]:
                d.update(update["$set"])

    def count_documents(self, query):
        return len(self.docs)


class _FakeDatabase:
    def __init__(self):
        self.collections: Dict[str, _FakeCollection] = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, _FakeCollection())

    def list_collection_names(self):
        return list(self.collections)

    def drop_collection(self, name):
        self.collections.pop(name, None)


class _FakeAdmin:
    def __init__(self, reachable: bool):
        self.reachable = reachable

    def command(self, name):
        if not self.reachable:
            raise ServerSelectionTimeoutError("No servers found")
        return {"ok": 1}


class _FakeClient:
    def __init__(self, reachable: bool = True):
        self.db = _FakeDatabase()
        self.admin = _FakeAdmin(reachable)
        self.closed = False

    def __getitem__(self, name):
        return self.db

    def close(self):
        self.closed = True


def _store(reachable: bool = True):
    client = _FakeClient(reachable)
    return MongoTimeSeriesStore("mongodb://unused", "stock_data", client=client), client


def _bar(d: str, close: float) -> Bar:
    return Bar(date=d, open=close, high=close + 1, low=close - 1, close=close, volume=100.0)


class TestMongoSeries:
    def test_unique_date_index_created(self):
        store, client = _store()
        store.get_series("IBM")

        assert client.db.collections["IBM"].indexes == [([("date", 1)], True)]

    def test_duplicate_insert_returns_false(self):
        store, _ = _store()
        series = store.get_series("IBM")

        assert series.insert(_bar("2024-01-02", 1.0)) is True
        assert series.insert(_bar("2024-01-02", 9.0)) is False
        assert series.count() == 1
        assert series.find_by_date("2024-01-02").close == 1.0

    def test_list_sorted_and_id_ignored(self):
        store, _ = _store()
        series = store.get_series("IBM")
        series.insert(_bar("2024-01-05", 3.0))
        series.insert(_bar("2024-01-02", 1.0))

        bars = series.list_ascending_by_date()

        assert [b.date for b in bars] == ["2024-01-02", "2024-01-05"]

    def test_update_field_roundtrips_as_indicator(self):
        store, _ = _store()
        series = store.get_series("IBM")
        series.insert(_bar("2024-01-02", 1.0))

        series.update_field("2024-01-02", "12_day_ema", 1.25)

        assert series.find_by_date("2024-01-02").indicators == {"12_day_ema": 1.25}

    def test_update_field_rejects_ohlcv(self):
        store, _ = _store()
        with pytest.raises(ValueError):
            store.get_series("IBM").update_field("2024-01-02", "high", 1.0)


class TestMongoStore:
    def test_ping_unreachable_raises_store_connection_error(self):
        store, _ = _store(reachable=False)
        with pytest.raises(StoreConnectionError):
            store.ping()

    def test_list_tickers_skips_malformed_docs(self):
        store, client = _store()
        tickers = client.db["stocks_list"]
        tickers.docs = [{"ticker": "IBM"}, {"name": "no ticker"}, {"ticker": "MSFT"}]

        assert store.list_tickers("stocks_list") == ["IBM", "MSFT"]

    def test_drop_all_except_reserved(self):
        store, client = _store()
        client.db["stocks_list"]
        store.get_series("IBM")
        store.get_series("MSFT")

        dropped = store.drop_all_except("stocks_list")

        assert sorted(dropped) == ["IBM", "MSFT"]
        assert client.db.list_collection_names() == ["stocks_list"]

    def test_injected_client_is_not_closed(self):
        store, client = _store()
        store.close()
        assert client.closed is False
