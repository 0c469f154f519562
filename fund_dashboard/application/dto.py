"""Application-level DTOs for the drill-down dashboard."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from fund_dashboard.domain.models import AggregateRow, DetailView
from fund_dashboard.domain.selection import Selection


@dataclass(slots=True, frozen=True)
class DashboardSnapshot:
    """Everything a front-end needs to render one state of the dashboard."""

    selection: Selection
    total_aum: float
    top_level: Sequence[AggregateRow]
    second_level: Sequence[AggregateRow]
    selected_type_total: float
    detail: DetailView
