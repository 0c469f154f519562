"""Plotly pie charts for the fund type and sub-fund levels."""
from __future__ import annotations

from typing import Sequence

import plotly.graph_objects as go

from fund_dashboard.config import CHART_COLORS
from fund_dashboard.domain.models import AggregateRow
from fund_dashboard.presentation.formatting import slice_label, slice_shares, slice_tooltip

SELECTED_PULL = 0.08


def slice_colors(count: int, color_offset: int = 0) -> list[str]:
    return [CHART_COLORS[(idx + color_offset) % len(CHART_COLORS)] for idx in range(count)]


def pie_figure(
    rows: Sequence[AggregateRow],
    selected: str | None = None,
    color_offset: int = 0,
    title: str | None = None,
    min_label_share: float = 5.0,
    height: int = 380,
) -> go.Figure:
    labels = [row.key for row in rows]
    values = [row.sum for row in rows]
    shares = slice_shares(rows)
    fig = go.Figure(
        go.Pie(
            labels=labels,
            values=values,
            sort=False,
            direction="clockwise",
            marker=dict(colors=slice_colors(len(rows), color_offset), line=dict(color="white", width=2)),
            pull=[SELECTED_PULL if label == selected else 0 for label in labels],
            text=[slice_label(row.key, share, min_label_share) for row, share in zip(rows, shares)],
            textinfo="text",
            hovertext=[slice_tooltip(row.key, row.sum, share) for row, share in zip(rows, shares)],
            hoverinfo="text",
        )
    )
    fig.update_layout(
        height=height,
        margin=dict(l=10, r=10, t=40 if title else 10, b=10),
        showlegend=True,
        legend=dict(orientation="h", x=0.5, xanchor="center", y=-0.05),
    )
    if title:
        fig.update_layout(title=dict(text=title))
    return fig
