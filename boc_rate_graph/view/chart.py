"""Render view states as matplotlib figures.

Figures are built on :class:`matplotlib.figure.Figure` with an Agg canvas so
rendering never touches pyplot's global state or an interactive backend.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pandas as pd
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from boc_rate_graph.ingestion.models import RateDomain, RateShape
from boc_rate_graph.utils.boc import (
    CHART_NOTES,
    CHART_TITLE,
    LOADING_MESSAGE,
    RATE_AXIS_LABEL,
    SERIES_STYLES,
    SINGLE_SUBTITLE,
    SPREAD_SUBTITLE,
)
from boc_rate_graph.view.state import Error, Loading, Ready, ViewState

FIGURE_SIZE = (10.0, 6.0)
LABEL_COLUMN = "formatted_time"


@dataclass(frozen=True)
class SeriesSpec:
    key: str
    name: str
    colour: str


@dataclass(frozen=True, eq=False)
class ChartSpec:
    """Everything the chart collaborator needs: ordered rows, series and bounds."""

    frame: pd.DataFrame
    series: tuple[SeriesSpec, ...] = field(default_factory=tuple)
    domain: RateDomain | None = None
    subtitle: str = SPREAD_SUBTITLE

    @property
    def labels(self) -> list[str]:
        return self.frame[LABEL_COLUMN].tolist()


def build_chart_spec(state: Ready) -> ChartSpec:
    """Lay out a ready state as a chronological frame plus series metadata."""

    shape = state.shape
    keys = shape.series_keys if shape is not None else ()
    rows = [
        {LABEL_COLUMN: observation.formatted_time, **observation.series()}
        for observation in state.observations
    ]
    frame = pd.DataFrame(rows, columns=[LABEL_COLUMN, *keys])
    series = tuple(
        SeriesSpec(key=key, name=SERIES_STYLES[key][0], colour=SERIES_STYLES[key][1])
        for key in keys
    )
    subtitle = SINGLE_SUBTITLE if shape is RateShape.SINGLE else SPREAD_SUBTITLE
    return ChartSpec(frame=frame, series=series, domain=state.domain, subtitle=subtitle)


def _message_figure(message: str, *, colour: str) -> Figure:
    figure = Figure(figsize=FIGURE_SIZE)
    FigureCanvasAgg(figure)
    figure.text(
        0.5,
        0.5,
        message,
        ha="center",
        va="center",
        fontsize=14,
        color=colour,
    )
    return figure


def _chart_figure(spec: ChartSpec) -> Figure:
    figure = Figure(figsize=FIGURE_SIZE)
    FigureCanvasAgg(figure)
    figure.suptitle(CHART_TITLE, fontsize=16, fontweight="bold")
    axes = figure.add_subplot(1, 1, 1)
    axes.set_title(spec.subtitle, fontsize=10, color="#4b5563")

    positions = list(range(len(spec.frame)))
    if positions:
        for series in spec.series:
            axes.plot(
                positions,
                spec.frame[series.key].tolist(),
                color=series.colour,
                linewidth=3,
                marker="o",
                markersize=4,
                label=series.name,
            )
        axes.legend(loc="upper center", ncol=len(spec.series), frameon=False)
    axes.set_xticks(positions)
    axes.set_xticklabels(spec.labels, rotation=45, ha="right", fontsize=9, color="#6b7280")
    axes.set_ylabel(RATE_AXIS_LABEL, color="#6b7280")
    axes.tick_params(axis="y", colors="#6b7280")
    axes.grid(True, linestyle="--", color="#e0e0e0")
    if spec.domain is not None:
        axes.set_ylim(spec.domain.min_rate, spec.domain.max_rate)

    notes = "\n".join(f"• {note}" for note in CHART_NOTES)
    figure.text(0.01, 0.01, notes, fontsize=8, color="#6b7280", va="bottom")
    figure.subplots_adjust(bottom=0.32, top=0.85)
    return figure


def render_figure(state: ViewState) -> Figure:
    """Return a figure for any of the three view states."""

    if isinstance(state, Loading):
        return _message_figure(LOADING_MESSAGE, colour="#3b82f6")
    if isinstance(state, Error):
        return _message_figure(state.message, colour="#b91c1c")
    if isinstance(state, Ready):
        return _chart_figure(build_chart_spec(state))
    raise TypeError(f"Unsupported view state: {state!r}")


def save_figure(figure: Figure, path: str | Path) -> Path:
    """Write ``figure`` to ``path`` (format inferred from the suffix)."""

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    figure.savefig(target)
    return target


__all__ = ["ChartSpec", "SeriesSpec", "build_chart_spec", "render_figure", "save_figure"]
