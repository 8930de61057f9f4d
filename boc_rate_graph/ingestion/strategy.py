"""Abstractions for pluggable rate sources."""

from __future__ import annotations

from typing import Any, Protocol


class RatesSource(Protocol):
    """Contract for fetching raw BOC rate records.

    Concrete implementations perform a single blocking fetch and return the
    decoded JSON array exactly as served (newest first). Failures are reported
    by raising :class:`~boc_rate_graph.ingestion.boc_api.FetchError`.
    """

    def fetch_last10(self) -> list[dict[str, Any]]:
        ...  # pragma: no cover - protocol definition


__all__ = ["RatesSource"]
