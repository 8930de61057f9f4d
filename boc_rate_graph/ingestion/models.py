"""Data models shared across ingestion and view modules."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class RateShape(str, Enum):
    """Response variants served by the BOC rates endpoint."""

    SINGLE = "single"
    SPREAD = "spread"

    @property
    def series_keys(self) -> tuple[str, ...]:
        if self is RateShape.SPREAD:
            return ("buying_rate", "selling_rate")
        return ("rate",)


@dataclass(slots=True)
class ExchangeRateObservation:
    """Representation of a single AUD/CNY rate observation returned by BOC."""

    timestamp: datetime
    formatted_time: str
    shape: RateShape
    rate: float | None = None
    buying_rate: float | None = None
    selling_rate: float | None = None

    def series(self) -> dict[str, float]:
        """Return the numeric series carried by this observation, keyed by field name."""

        values: dict[str, float] = {}
        for key in self.shape.series_keys:
            value = getattr(self, key)
            if value is not None:
                values[key] = value
        return values


@dataclass(frozen=True, slots=True)
class RateDomain:
    """Vertical axis bounds for the rate chart."""

    min_rate: int
    max_rate: int

    def as_tuple(self) -> tuple[int, int]:
        return (self.min_rate, self.max_rate)
