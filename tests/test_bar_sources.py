"""Tests for bar sources: Alpha Vantage HTTP (stubbed) and fixtures."""

from __future__ import annotations

import pytest
import requests

from stock_data_manager.core import SchemaError, TransportError
from stock_data_manager.io.providers.alpha_vantage import AlphaVantageBarSource
from stock_data_manager.io.providers.fixtures import FixtureBarSource


class _FakeResponse:
    def __init__(self, status_code=200, payload=None, invalid_json=False):
        self.status_code = status_code
        self._payload = payload
        self._invalid_json = invalid_json

    def json(self):
        if self._invalid_json:
            raise ValueError("No JSON object could be decoded")
        return self._payload


def _install_get(monkeypatch, response=None, exc=None):
    calls = []

    def fake_get(url, params=None, timeout=None):
        calls.append({"url": url, "params": params, "timeout": timeout})
        if exc is not None:
            raise exc
        return response

    monkeypatch.setattr(requests, "get", fake_get)
    return calls


class TestAlphaVantageBarSource:
    PAYLOAD = {
        "Time Series (Daily)": {
            "2024-01-03": {"1. open": "2", "2. high": "3", "3. low": "1", "4. close": "2.5", "5. volume": "10"},
            "2024-01-02": {"1. open": "1", "2. high": "2", "3. low": "0.5", "4. close": "1.5", "5. volume": "20"},
        }
    }

    def test_fetch_builds_daily_full_request(self, monkeypatch):
        calls = _install_get(monkeypatch, _FakeResponse(payload=self.PAYLOAD))
        source = AlphaVantageBarSource("secret", timeout=7.5)

        bars = source.fetch_daily_bars("IBM")

        assert [b.date for b in bars] == ["2024-01-02", "2024-01-03"]
        params = calls[0]["params"]
        assert params["function"] == "TIME_SERIES_DAILY"
        assert params["symbol"] == "IBM"
        assert params["outputsize"] == "full"
        assert params["apikey"] == "secret"
        assert calls[0]["timeout"] == 7.5

    def test_non_success_status_is_transport_error(self, monkeypatch):
        _install_get(monkeypatch, _FakeResponse(status_code=503))

        with pytest.raises(TransportError):
            AlphaVantageBarSource("secret").fetch_daily_bars("IBM")

    def test_request_exception_is_transport_error(self, monkeypatch):
        _install_get(monkeypatch, exc=requests.ConnectionError("refused"))

        with pytest.raises(TransportError):
            AlphaVantageBarSource("secret").fetch_daily_bars("IBM")

    def test_invalid_json_is_schema_error(self, monkeypatch):
        _install_get(monkeypatch, _FakeResponse(invalid_json=True))

        with pytest.raises(SchemaError):
            AlphaVantageBarSource("secret").fetch_daily_bars("IBM")

    def test_rate_limit_note_is_schema_error(self, monkeypatch):
        _install_get(monkeypatch, _FakeResponse(payload={"Note": "rate limit reached"}))

        with pytest.raises(SchemaError, match="rate limit reached"):
            AlphaVantageBarSource("secret").fetch_daily_bars("IBM")

    def test_api_key_required(self):
        with pytest.raises(ValueError):
            AlphaVantageBarSource("")


class TestFixtureBarSource:
    def test_alpha_vantage_shaped_entry(self, fixture_path):
        bars = FixtureBarSource(fixture_path).fetch_daily_bars("IBM")

        assert len(bars) == 5
        assert bars[0].date == "2024-01-03"
        assert (bars[0].open, bars[0].high, bars[0].low, bars[0].close) == (4.0, 6.0, 3.0, 5.0)

    def test_row_list_entry(self, fixture_path):
        bars = FixtureBarSource(fixture_path).fetch_daily_bars("MSFT")

        assert [b.date for b in bars] == ["2024-01-02", "2024-01-03", "2024-01-04", "2024-01-05"]
        assert bars[2].volume is None

    def test_deterministic(self, fixture_path):
        source = FixtureBarSource(fixture_path)
        assert source.fetch_daily_bars("IBM") == source.fetch_daily_bars("IBM")

    def test_notice_entry_is_schema_error(self, fixture_path):
        with pytest.raises(SchemaError, match="rate limit"):
            FixtureBarSource(fixture_path).fetch_daily_bars("DOWN")

    def test_unknown_symbol_is_schema_error(self, fixture_path):
        with pytest.raises(SchemaError):
            FixtureBarSource(fixture_path).fetch_daily_bars("ZZZZ")

    def test_missing_file_is_schema_error(self, tmp_path):
        with pytest.raises(SchemaError):
            FixtureBarSource(tmp_path / "missing.json").fetch_daily_bars("IBM")
