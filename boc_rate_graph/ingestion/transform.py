"""Convert raw BOC JSON records into chart-ready observations."""

from __future__ import annotations

import math
import re
from datetime import datetime, tzinfo
from typing import Any, Iterable, Mapping, Sequence

import pandas as pd

from boc_rate_graph.ingestion.models import ExchangeRateObservation, RateDomain, RateShape
from boc_rate_graph.utils.boc import DOMAIN_LOWER_PADDING, DOMAIN_UPPER_PADDING

# Fixed English abbreviations so labels do not depend on the process locale.
_MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)
_DATE_ONLY = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_timestamp(value: object, *, tz: tzinfo | None = None) -> datetime:
    """Parse an ISO timestamp served by the endpoint.

    Offset-aware values are converted to ``tz`` (the local zone when ``tz`` is
    ``None``). Date-only values (``YYYY-MM-DD``) mean UTC midnight and are
    converted the same way. Other naive values are returned unchanged and read
    as local time.
    """

    if isinstance(value, datetime):
        moment = value
    else:
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"Invalid timestamp: {value!r}")
        text = value.strip()
        parsed = pd.to_datetime(text, utc=bool(_DATE_ONLY.fullmatch(text)))
        if pd.isna(parsed):
            raise ValueError(f"Invalid timestamp: {value!r}")
        moment = parsed.to_pydatetime()
    if moment.tzinfo is not None:
        moment = moment.astimezone(tz)
    return moment


def format_time_label(moment: datetime) -> str:
    """Return the ``MMM-DD HH:MM`` label shown on the x axis."""

    month = _MONTH_ABBREVIATIONS[moment.month - 1]
    return f"{month}-{moment.day:02d} {moment.hour:02d}:{moment.minute:02d}"


def parse_rate(value: object) -> float:
    """Coerce a rate served as a string or number into a finite float."""

    if isinstance(value, bool):
        raise ValueError(f"Invalid rate value: {value!r}")
    try:
        if isinstance(value, (int, float)):
            number = float(value)
        elif isinstance(value, str):
            number = float(value.strip())
        else:
            raise ValueError(f"Invalid rate value: {value!r}")
    except OverflowError as exc:
        raise ValueError(f"Rate value out of range: {value!r}") from exc
    if not math.isfinite(number):
        raise ValueError(f"Invalid rate value: {value!r}")
    return number


def detect_shape(record: Mapping[str, Any]) -> RateShape:
    """Return the response variant a single record belongs to."""

    if not isinstance(record, Mapping):
        raise ValueError(f"Expected an object per record, got {type(record).__name__}")
    if "buying_rate" in record and "selling_rate" in record:
        return RateShape.SPREAD
    if "rate" in record:
        return RateShape.SINGLE
    raise ValueError(
        "Record carries neither 'rate' nor 'buying_rate'/'selling_rate': "
        f"{sorted(record)}"
    )


def to_observation(
    record: Mapping[str, Any], *, tz: tzinfo | None = None
) -> ExchangeRateObservation:
    shape = detect_shape(record)
    if "timestamp" not in record:
        raise ValueError("Record is missing 'timestamp'")
    moment = parse_timestamp(record["timestamp"], tz=tz)
    observation = ExchangeRateObservation(
        timestamp=moment,
        formatted_time=format_time_label(moment),
        shape=shape,
    )
    for key in shape.series_keys:
        setattr(observation, key, parse_rate(record[key]))
    return observation


def transform_records(
    records: Iterable[Mapping[str, Any]], *, tz: tzinfo | None = None
) -> list[ExchangeRateObservation]:
    """Map newest-first records into oldest-first observations.

    Every record in one response must share the same shape.
    """

    observations = [to_observation(record, tz=tz) for record in records]
    shapes = {observation.shape for observation in observations}
    if len(shapes) > 1:
        raise ValueError("Response mixes single-rate and buying/selling records")
    observations.reverse()
    return observations


def compute_rate_domain(
    observations: Sequence[ExchangeRateObservation],
) -> RateDomain | None:
    """Return padded integer axis bounds, or ``None`` when there is nothing to plot."""

    values = [value for observation in observations for value in observation.series().values()]
    if not values:
        return None
    return RateDomain(
        min_rate=math.floor(min(values) * DOMAIN_LOWER_PADDING),
        max_rate=math.ceil(max(values) * DOMAIN_UPPER_PADDING),
    )


__all__ = [
    "compute_rate_domain",
    "detect_shape",
    "format_time_label",
    "parse_rate",
    "parse_timestamp",
    "to_observation",
    "transform_records",
]
