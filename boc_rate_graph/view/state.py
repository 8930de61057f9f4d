"""Tagged view states for the exchange rate graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from boc_rate_graph.ingestion.models import ExchangeRateObservation, RateDomain, RateShape


@dataclass(frozen=True, slots=True)
class Loading:
    """Initial state while the single fetch is in flight."""


@dataclass(frozen=True, slots=True)
class Ready:
    """Terminal state holding chronological observations and axis bounds."""

    observations: tuple[ExchangeRateObservation, ...] = field(default_factory=tuple)
    domain: RateDomain | None = None

    @property
    def shape(self) -> RateShape | None:
        if not self.observations:
            return None
        return self.observations[0].shape


@dataclass(frozen=True, slots=True)
class Error:
    """Terminal state carrying the user-facing message only."""

    message: str


ViewState = Union[Loading, Ready, Error]


def is_terminal(state: ViewState) -> bool:
    return isinstance(state, (Ready, Error))


__all__ = ["Error", "Loading", "Ready", "ViewState", "is_terminal"]
