"""Fund drill-down dashboard: aggregation, selection and view projection."""
from fund_dashboard.application.use_cases import DrillDownSession, LoadRecordsUseCase, open_session
from fund_dashboard.domain.aggregation import aggregate, group_by, sum_field, total_of
from fund_dashboard.domain.errors import DashboardError, RecordLoadError, SelectionError
from fund_dashboard.domain.models import AggregateRow, DetailView, FundRecord
from fund_dashboard.domain.selection import DrillLevel, Selection
from fund_dashboard.infrastructure.repositories.record_sources import (
    ExcelRecordSource,
    InMemoryRecordSource,
)

__all__ = [
    "AggregateRow",
    "DashboardError",
    "DetailView",
    "DrillDownSession",
    "DrillLevel",
    "ExcelRecordSource",
    "FundRecord",
    "InMemoryRecordSource",
    "LoadRecordsUseCase",
    "RecordLoadError",
    "Selection",
    "SelectionError",
    "aggregate",
    "group_by",
    "open_session",
    "sum_field",
    "total_of",
]
