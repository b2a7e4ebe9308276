"""
Plotly chart factory functions with consistent styling for the dashboard.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import plotly.graph_objects as go
import streamlit as st

from src.ui.components.formatting import format_percent


DEFAULT_TEMPLATE = "plotly_white"
PROGRESS_COLOR = "#6F00D0"
TRACK_COLOR = "#E9E6F5"
SALES_RADIUS = 45


@dataclass(frozen=True)
class SalesChart:
    """Circular progress for a sales target; ``percentage`` is not clamped."""

    percentage: float
    radius: float = SALES_RADIUS

    @property
    def circumference(self) -> float:
        return 2 * math.pi * self.radius

    @property
    def stroke_dashoffset(self) -> float:
        return self.circumference - (self.percentage / 100) * self.circumference

    @property
    def label(self) -> str:
        return format_percent(self.percentage)


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    height: int = 260,
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        title=title,
        showlegend=False,
        margin=dict(l=10, r=10, t=40 if title else 10, b=10),
        height=height,
    )
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, width="stretch", config={"displayModeBar": False})


def sales_donut(chart: SalesChart, title: Optional[str] = None) -> go.Figure:
    achieved = chart.circumference - chart.stroke_dashoffset
    fig = go.Figure(
        go.Pie(
            values=[achieved, chart.stroke_dashoffset],
            hole=0.82,
            sort=False,
            direction="clockwise",
            marker=dict(colors=[PROGRESS_COLOR, TRACK_COLOR]),
            textinfo="none",
            hoverinfo="skip",
        )
    )
    fig.add_annotation(text=chart.label, showarrow=False, font=dict(size=28))
    return _configure_layout(fig, title)


def render_sales_chart(percentage: float) -> None:
    with st.container(border=True):
        st.markdown("#### Sales")
        render_plotly(sales_donut(SalesChart(percentage)))
        st.caption("Sales target achievement")
