"""BOC endpoint defaults and display constants used across the package."""

from __future__ import annotations

BOC_BASE_URL = "http://180-one-glass.tech:8081"
LAST10_PATH = "/api/v1/aud-cny/boc/rates/last10"
EXPECTED_RECORD_COUNT = 10

# Axis padding applied before flooring/ceiling the bounds.
DOMAIN_LOWER_PADDING = 0.998
DOMAIN_UPPER_PADDING = 1.002

LOADING_MESSAGE = "Loading exchange rate data..."
FETCH_ERROR_MESSAGE = "Failed to fetch exchange rate data. Please try again later."

CHART_TITLE = "CNY to AUD Exchange Rate"
SPREAD_SUBTITLE = "Latest 10 records showing buying and selling rates"
SINGLE_SUBTITLE = "Latest 10 records"
RATE_AXIS_LABEL = "Rate (CNY)"
RATE_UNIT = "CNY"

# series key -> (display name, colour)
SERIES_STYLES: dict[str, tuple[str, str]] = {
    "buying_rate": ("Buying Rate", "#4f46e5"),
    "selling_rate": ("Selling Rate", "#ef4444"),
    "rate": ("Rate", "#4f46e5"),
}

CHART_NOTES: tuple[str, ...] = (
    "Buying rate: how much CNY you get when selling 100 AUD",
    "Selling rate: how much CNY you need to buy 100 AUD",
    "Each point represents the exchange rate at a specific date and time",
    "Data source: Bank of China",
)

__all__ = [
    "BOC_BASE_URL",
    "LAST10_PATH",
    "EXPECTED_RECORD_COUNT",
    "DOMAIN_LOWER_PADDING",
    "DOMAIN_UPPER_PADDING",
    "LOADING_MESSAGE",
    "FETCH_ERROR_MESSAGE",
    "CHART_TITLE",
    "SPREAD_SUBTITLE",
    "SINGLE_SUBTITLE",
    "RATE_AXIS_LABEL",
    "RATE_UNIT",
    "SERIES_STYLES",
    "CHART_NOTES",
]
