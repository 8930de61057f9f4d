from __future__ import annotations

import logging
from typing import Any

import pytest
import requests

from boc_rate_graph.ingestion.boc_api import BOCRatesClient, FetchError, RequestFailed


class _DummyResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, *, invalid_json: bool = False) -> None:
        self.status_code = status_code
        self._payload = payload
        self._invalid_json = invalid_json

    def json(self) -> Any:
        if self._invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class _DummySession:
    def __init__(self, response: _DummyResponse | None = None, *, error: Exception | None = None) -> None:
        self.headers: dict[str, str] = {}
        self.response = response
        self.error = error
        self.calls: list[tuple[str, float | None]] = []
        self.closed = False

    def get(self, url: str, timeout: float | None = None) -> _DummyResponse:
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response

    def close(self) -> None:
        self.closed = True


def test_client_builds_endpoint_from_base_url() -> None:
    client = BOCRatesClient("http://rates.example:8081/", session=_DummySession())

    assert client.endpoint == "http://rates.example:8081/api/v1/aud-cny/boc/rates/last10"


def test_client_rejects_empty_base_url() -> None:
    with pytest.raises(ValueError):
        BOCRatesClient("", session=_DummySession())


def test_fetch_last10_returns_payload_unchanged(spread_records) -> None:
    session = _DummySession(_DummyResponse(200, spread_records))
    client = BOCRatesClient("http://rates.example", session=session)

    assert client.fetch_last10() == spread_records
    assert session.calls == [("http://rates.example/api/v1/aud-cny/boc/rates/last10", None)]
    assert session.headers["Accept"] == "application/json"


def test_fetch_last10_forwards_configured_timeout() -> None:
    session = _DummySession(_DummyResponse(200, []))
    client = BOCRatesClient("http://rates.example", timeout=7.5, session=session)

    assert client.fetch_last10() == []
    assert session.calls[0][1] == 7.5


@pytest.mark.parametrize("status", [301, 404, 500, 503])
def test_fetch_last10_raises_request_failed_for_non_2xx(status: int) -> None:
    client = BOCRatesClient("http://rates.example", session=_DummySession(_DummyResponse(status, [])))

    with pytest.raises(RequestFailed) as excinfo:
        client.fetch_last10()

    assert excinfo.value.status_code == status
    assert excinfo.value.url.endswith("/rates/last10")
    assert f"status {status}" in str(excinfo.value)
    assert isinstance(excinfo.value, FetchError)


def test_fetch_last10_wraps_network_errors() -> None:
    session = _DummySession(error=requests.ConnectionError("connection refused"))
    client = BOCRatesClient("http://rates.example", session=session)

    with pytest.raises(FetchError, match="connection refused") as excinfo:
        client.fetch_last10()

    assert not isinstance(excinfo.value, RequestFailed)
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


def test_fetch_last10_wraps_invalid_json() -> None:
    session = _DummySession(_DummyResponse(200, invalid_json=True))
    client = BOCRatesClient("http://rates.example", session=session)

    with pytest.raises(FetchError, match="not valid JSON"):
        client.fetch_last10()


def test_fetch_last10_requires_json_array() -> None:
    session = _DummySession(_DummyResponse(200, {"rates": []}))
    client = BOCRatesClient("http://rates.example", session=session)

    with pytest.raises(FetchError, match="JSON array"):
        client.fetch_last10()


def test_fetch_last10_warns_about_oversized_payloads(caplog: pytest.LogCaptureFixture) -> None:
    records = [{"timestamp": "2024-05-01T10:00:00", "rate": "4.7"}] * 12
    client = BOCRatesClient("http://rates.example", session=_DummySession(_DummyResponse(200, records)))

    with caplog.at_level(logging.WARNING, logger="boc_rate_graph"):
        assert len(client.fetch_last10()) == 12

    assert "returned 12 records" in caplog.text


def test_client_context_manager_closes_session() -> None:
    session = _DummySession(_DummyResponse(200, []))

    with BOCRatesClient("http://rates.example", session=session) as client:
        client.fetch_last10()

    assert session.closed is True
