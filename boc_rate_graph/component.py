"""The exchange rate graph component: one fetch per mount, three view states."""

from __future__ import annotations

import asyncio
from datetime import tzinfo

from matplotlib.figure import Figure

from boc_rate_graph.ingestion.boc_api import BOCRatesClient, FetchError, RequestFailed
from boc_rate_graph.ingestion.models import ExchangeRateObservation
from boc_rate_graph.ingestion.strategy import RatesSource
from boc_rate_graph.ingestion.transform import compute_rate_domain, transform_records
from boc_rate_graph.utils.boc import FETCH_ERROR_MESSAGE
from boc_rate_graph.utils.logger import get_logger
from boc_rate_graph.view.chart import render_figure
from boc_rate_graph.view.state import Error, Loading, Ready, ViewState, is_terminal
from boc_rate_graph.view.text import render_text

LOGGER = get_logger(__name__)


class ExchangeRateGraph:
    """Owns the view state of a single graph instance.

    ``mount`` schedules exactly one fetch on the running event loop. The
    blocking HTTP call runs in a worker thread; once it returns the records are
    transformed on the loop and the state moves from ``Loading`` to either
    ``Ready`` or ``Error``. Results arriving after ``unmount`` are dropped.
    """

    __slots__ = ("source", "tz", "_state", "_mounted", "_task")

    def __init__(self, source: RatesSource | None = None, *, tz: tzinfo | None = None) -> None:
        self.source: RatesSource = source if source is not None else BOCRatesClient()
        self.tz = tz
        self._state: ViewState = Loading()
        self._mounted = False
        self._task: asyncio.Task[ViewState] | None = None

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def mounted(self) -> bool:
        return self._mounted

    def mount(self) -> asyncio.Task[ViewState]:
        """Start the fetch; must be called from inside a running event loop."""

        if self._task is not None:
            raise RuntimeError("ExchangeRateGraph can only be mounted once")
        loop = asyncio.get_running_loop()
        self._mounted = True
        self._task = loop.create_task(self._fetch_data())
        return self._task

    def unmount(self) -> None:
        """End the component scope and cancel a pending fetch."""

        self._mounted = False
        if self._task is not None and not self._task.done():
            self._task.cancel()

    def load(self) -> ViewState:
        """Mount, wait for the fetch to settle and unmount, all in one call."""

        async def _run() -> ViewState:
            task = self.mount()
            try:
                return await task
            finally:
                self.unmount()

        return asyncio.run(_run())

    async def _fetch_data(self) -> ViewState:
        try:
            records = await asyncio.to_thread(self.source.fetch_last10)
            observations = self._transform(records)
            next_state: ViewState = Ready(
                observations=tuple(observations),
                domain=compute_rate_domain(observations),
            )
        except RequestFailed as exc:
            LOGGER.error(
                "Error fetching exchange rate data: HTTP %s from %s", exc.status_code, exc.url
            )
            next_state = Error(FETCH_ERROR_MESSAGE)
        except FetchError as exc:
            LOGGER.error("Error fetching exchange rate data: %s", exc)
            next_state = Error(FETCH_ERROR_MESSAGE)
        except Exception as exc:
            LOGGER.exception("Unexpected error fetching exchange rate data: %s", exc)
            next_state = Error(FETCH_ERROR_MESSAGE)

        if not self._mounted:
            LOGGER.debug("Discarding exchange rate result delivered after unmount")
            return self._state
        self._transition(next_state)
        return self._state

    def _transform(self, records: object) -> list[ExchangeRateObservation]:
        try:
            return transform_records(records, tz=self.tz)  # type: ignore[arg-type]
        except (KeyError, OverflowError, TypeError, ValueError) as exc:
            raise FetchError(f"Malformed exchange rate payload: {exc}") from exc

    def _transition(self, next_state: ViewState) -> None:
        if is_terminal(self._state):
            raise RuntimeError(
                f"View state already settled as {type(self._state).__name__}"
            )
        LOGGER.info("Exchange rate graph is now %s", type(next_state).__name__)
        self._state = next_state

    def render_figure(self) -> Figure:
        return render_figure(self._state)

    def render_text(self) -> str:
        return render_text(self._state)


__all__ = ["ExchangeRateGraph"]
