"""Plain-text rendering of view states for terminals and logs."""

from __future__ import annotations

from boc_rate_graph.utils.boc import CHART_TITLE, LOADING_MESSAGE, RATE_UNIT, SERIES_STYLES
from boc_rate_graph.view.state import Error, Loading, Ready, ViewState


def format_rate(value: float) -> str:
    return f"{value:.2f} {RATE_UNIT}"


def render_text(state: ViewState) -> str:
    if isinstance(state, Loading):
        return LOADING_MESSAGE
    if isinstance(state, Error):
        return state.message
    if not isinstance(state, Ready):
        raise TypeError(f"Unsupported view state: {state!r}")

    lines = [CHART_TITLE]
    for observation in state.observations:
        values = "  ".join(
            f"{SERIES_STYLES[key][0]}: {format_rate(value)}"
            for key, value in observation.series().items()
        )
        lines.append(f"Date/Time: {observation.formatted_time}  {values}")
    if not state.observations:
        lines.append("No exchange rate records available.")
    if state.domain is not None:
        lines.append(f"Axis: {state.domain.min_rate} - {state.domain.max_rate} {RATE_UNIT}")
    return "\n".join(lines)


__all__ = ["format_rate", "render_text"]
