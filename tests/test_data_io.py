import pytest
import requests

import data_io
from data_io import DataSourceError, fetch_csv, load_dataset, source_url


class FakeResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code

    @property
    def ok(self):
        return self.status_code < 400


def _stub_get(monkeypatch, response=None, exc=None):
    calls = []

    def fake_get(url, **kwargs):
        calls.append((url, kwargs))
        if exc is not None:
            raise exc
        return response

    monkeypatch.setattr(data_io.requests, "get", fake_get)
    return calls


def test_source_url():
    assert source_url("https://example.com/orders.csv") == "https://example.com/orders.csv"
    assert source_url(" abc123 ") == "https://docs.google.com/spreadsheets/d/abc123/export?format=csv"


def test_fetch_csv_passes_timeout_and_cache_buster(monkeypatch, single_order_csv):
    calls = _stub_get(monkeypatch, FakeResponse(single_order_csv))
    assert fetch_csv("https://example.com/o.csv", timeout=5) == single_order_csv
    url, kwargs = calls[0]
    assert url == "https://example.com/o.csv"
    assert kwargs["timeout"] == 5
    assert "cachebust" in kwargs["params"]


def test_fetch_csv_errors(monkeypatch):
    _stub_get(monkeypatch, FakeResponse("nope", status_code=404))
    with pytest.raises(DataSourceError, match="404"):
        fetch_csv("https://example.com/o.csv")
    _stub_get(monkeypatch, exc=requests.Timeout("slow"))
    with pytest.raises(DataSourceError, match="could not reach"):
        fetch_csv("https://example.com/o.csv")


def test_load_dataset_live(monkeypatch, single_order_csv):
    _stub_get(monkeypatch, FakeResponse(single_order_csv))
    dataset = load_dataset("https://example.com/o.csv")
    assert not dataset.is_fallback
    assert dataset.source == "https://example.com/o.csv"
    assert len(dataset.orders) == 1


def test_load_dataset_network_error_falls_back(monkeypatch):
    _stub_get(monkeypatch, exc=requests.ConnectionError("down"))
    dataset = load_dataset("sheet-id")
    assert dataset.is_fallback
    assert len(dataset.orders) == 24
    assert "sample data" in dataset.notice


def test_load_dataset_empty_body_falls_back(monkeypatch):
    _stub_get(monkeypatch, FakeResponse("   "))
    assert load_dataset("sheet-id").is_fallback


def test_load_dataset_without_source(monkeypatch):
    calls = _stub_get(monkeypatch, FakeResponse(""))
    dataset = load_dataset(None)
    assert dataset.is_fallback and dataset.source == "sample"
    assert calls == []


def test_load_dataset_keeps_live_data_with_malformed_row(monkeypatch, ragged_orders_csv):
    _stub_get(monkeypatch, FakeResponse(ragged_orders_csv))
    dataset = load_dataset("https://example.com/o.csv")
    assert not dataset.is_fallback
    assert len(dataset.orders) == 2
