"""Unit tests for source fetching."""

from __future__ import annotations

import pytest
import requests

from core.errors import FetchError, FetchTimeoutError
from ingest.fetch import open_source
from tests.fake_http import FakeResponse, install_fake_get


def test_open_source_yields_body_and_closes_response(monkeypatch) -> None:
    """Successful fetches expose the body and release the response."""
    response = FakeResponse(b"a,b\n1,2\n")
    requested = install_fake_get(monkeypatch, response)

    with open_source("https://example.org/confirmed.csv", 5.0) as stream:
        body = stream.read()

    assert body == b"a,b\n1,2\n" and response.closed
    assert requested == ["https://example.org/confirmed.csv"]


def test_open_source_raises_for_error_status(monkeypatch) -> None:
    """Non-success statuses are fetch failures."""
    response = FakeResponse(b"missing", status_code=404, reason="Not Found")
    install_fake_get(monkeypatch, response)

    with pytest.raises(FetchError):
        with open_source("https://example.org/deaths.csv", 5.0):
            pass

    assert response.closed


def test_open_source_closes_response_when_consumer_fails(monkeypatch) -> None:
    """Parse errors inside the block must still release the response."""
    response = FakeResponse(b"a,b\n")
    install_fake_get(monkeypatch, response)

    with pytest.raises(RuntimeError):
        with open_source("https://example.org/deaths.csv", 5.0):
            raise RuntimeError("parse failed")

    assert response.closed


def test_open_source_raises_timeout(monkeypatch) -> None:
    """Timeouts surface as a dedicated fetch error."""

    def _slow_get(url, **kwargs):
        raise requests.Timeout("read timed out")

    monkeypatch.setattr("ingest.fetch.requests.get", _slow_get)

    with pytest.raises(FetchTimeoutError):
        with open_source("https://example.org/deaths.csv", 0.1):
            pass


def test_open_source_passes_timeout_and_streams(monkeypatch) -> None:
    """Every request carries the configured timeout and streams its body."""
    captured: dict[str, object] = {}

    def _fake_get(url, **kwargs):
        captured.update(kwargs)
        return FakeResponse(b"a\n")

    monkeypatch.setattr("ingest.fetch.requests.get", _fake_get)

    with open_source("https://example.org/deaths.csv", 2.5):
        pass

    assert captured["timeout"] == 2.5 and captured["stream"] is True


def test_open_source_wraps_connection_errors(monkeypatch) -> None:
    """Transport errors are fetch failures, not timeouts."""

    def _broken_get(url, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr("ingest.fetch.requests.get", _broken_get)

    with pytest.raises(FetchError) as error_info:
        with open_source("https://example.org/deaths.csv", 1.0):
            pass

    assert not isinstance(error_info.value, FetchTimeoutError)
