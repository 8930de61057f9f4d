"""View states and renderers for the exchange rate graph."""

from __future__ import annotations

from boc_rate_graph.view.chart import ChartSpec, SeriesSpec, build_chart_spec, render_figure, save_figure
from boc_rate_graph.view.state import Error, Loading, Ready, ViewState, is_terminal
from boc_rate_graph.view.text import render_text

__all__ = [
    "ChartSpec",
    "Error",
    "Loading",
    "Ready",
    "SeriesSpec",
    "ViewState",
    "build_chart_spec",
    "is_terminal",
    "render_figure",
    "render_text",
    "save_figure",
]
