"""CLI entry point for rendering the latest BOC AUD/CNY rates."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from boc_rate_graph.component import ExchangeRateGraph
from boc_rate_graph.ingestion.boc_api import BOCRatesClient
from boc_rate_graph.utils.boc import BOC_BASE_URL
from boc_rate_graph.utils.logger import get_logger, set_debug
from boc_rate_graph.view.chart import save_figure
from boc_rate_graph.view.state import Ready

LOGGER = get_logger(__name__)


def _zone(value: str) -> ZoneInfo:
    try:
        return ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise argparse.ArgumentTypeError(f"Unknown timezone: {value}") from exc


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Fetch the last 10 BOC AUD/CNY rates and render them as a chart."
    )
    parser.add_argument("--base-url", default=BOC_BASE_URL, help="Rates API host")
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds (waits indefinitely when omitted)",
    )
    parser.add_argument("--output", type=Path, help="Write the chart image to this path")
    parser.add_argument(
        "--text",
        action="store_true",
        help="Print the rates as text (default when --output is not given)",
    )
    parser.add_argument(
        "--timezone",
        type=_zone,
        default=None,
        help="IANA zone used for the time labels (defaults to the local zone)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    if args.debug:
        set_debug()
    with BOCRatesClient(args.base_url, timeout=args.timeout) as client:
        graph = ExchangeRateGraph(client, tz=args.timezone)
        state = graph.load()

    if args.output is not None:
        target = save_figure(graph.render_figure(), args.output)
        LOGGER.info("Saved chart → %s", target)
    if args.text or args.output is None:
        print(graph.render_text())
    return 0 if isinstance(state, Ready) else 1


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
