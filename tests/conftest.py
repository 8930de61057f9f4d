from __future__ import annotations

from typing import Any

import pytest

# Newest first, exactly as the endpoint serves them.
SPREAD_RECORDS: list[dict[str, Any]] = [
    {"timestamp": "2024-05-03T14:30:00", "buying_rate": "456.00", "selling_rate": "470.30"},
    {"timestamp": "2024-05-02T09:05:00", "buying_rate": "458.30", "selling_rate": "461.75"},
    {"timestamp": "2024-05-01T16:45:00", "buying_rate": "455.12", "selling_rate": "458.40"},
]

SINGLE_RECORDS: list[dict[str, Any]] = [
    {"timestamp": "2024-06-02T10:00:00", "rate": "4.7312"},
    {"timestamp": "2024-06-01T10:00:00", "rate": 4.7105},
]


class StaticSource:
    """Rates source returning canned records or raising a canned error."""

    def __init__(self, records: Any = None, *, error: BaseException | None = None) -> None:
        self.records = records if records is not None else []
        self.error = error
        self.calls = 0

    def fetch_last10(self) -> Any:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.records


@pytest.fixture
def spread_records() -> list[dict[str, Any]]:
    return [dict(record) for record in SPREAD_RECORDS]


@pytest.fixture
def single_records() -> list[dict[str, Any]]:
    return [dict(record) for record in SINGLE_RECORDS]


@pytest.fixture
def make_source():
    return StaticSource
