"""Public interface for the boc_rate_graph package."""

from __future__ import annotations

from importlib import metadata as importlib_metadata

from boc_rate_graph.component import ExchangeRateGraph
from boc_rate_graph.ingestion.boc_api import BOCRatesClient, FetchError, RequestFailed
from boc_rate_graph.ingestion.models import ExchangeRateObservation, RateDomain, RateShape
from boc_rate_graph.ingestion.transform import compute_rate_domain, transform_records
from boc_rate_graph.view.state import Error, Loading, Ready, ViewState

__all__ = [
    "__version__",
    "BOCRatesClient",
    "Error",
    "ExchangeRateGraph",
    "ExchangeRateObservation",
    "FetchError",
    "Loading",
    "RateDomain",
    "RateShape",
    "Ready",
    "RequestFailed",
    "ViewState",
    "compute_rate_domain",
    "transform_records",
]

try:
    __version__ = importlib_metadata.version("boc-rate-graph")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"
