"""requests-based client for the BOC AUD/CNY ``last10`` rates endpoint."""

from __future__ import annotations

from typing import Any

import requests

from boc_rate_graph.utils.boc import BOC_BASE_URL, EXPECTED_RECORD_COUNT, LAST10_PATH
from boc_rate_graph.utils.logger import get_logger

LOGGER = get_logger(__name__)


class FetchError(RuntimeError):
    """Raised when the rates could not be fetched or decoded."""


class RequestFailed(FetchError):
    """Raised when the endpoint answers with a non-2xx status."""

    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(f"API request failed with status {status_code} for {url}")
        self.status_code = status_code
        self.url = url


class BOCRatesClient:
    """Fetch the latest ten BOC observations in a single GET.

    No retries are attempted. ``timeout`` defaults to ``None`` which leaves the
    request waiting on the transport; pass a number of seconds to bound it.
    """

    def __init__(
        self,
        base_url: str = BOC_BASE_URL,
        *,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        if not base_url:
            raise ValueError("base_url must not be empty")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.setdefault("Accept", "application/json")

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}{LAST10_PATH}"

    def fetch_last10(self) -> list[dict[str, Any]]:
        """Return the decoded JSON array served by the endpoint (newest first)."""

        url = self.endpoint
        LOGGER.info("Fetching BOC rates from %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise FetchError(f"Network error while fetching {url}: {exc}") from exc

        if not 200 <= response.status_code < 300:
            raise RequestFailed(response.status_code, url)

        try:
            payload = response.json()
        except ValueError as exc:
            raise FetchError(f"Response from {url} is not valid JSON") from exc

        if not isinstance(payload, list):
            raise FetchError(
                f"Expected a JSON array from {url}, got {type(payload).__name__}"
            )
        if len(payload) > EXPECTED_RECORD_COUNT:
            LOGGER.warning(
                "Endpoint returned %s records; expected at most %s",
                len(payload),
                EXPECTED_RECORD_COUNT,
            )
        LOGGER.info("Fetched %s BOC rate records", len(payload))
        return payload

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "BOCRatesClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = ["BOCRatesClient", "FetchError", "RequestFailed"]
