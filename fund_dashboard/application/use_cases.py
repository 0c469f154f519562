"""Application services orchestrating loading and drill-down navigation."""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Sequence

from fund_dashboard.application.dto import DashboardSnapshot
from fund_dashboard.domain import views
from fund_dashboard.domain.aggregation import DEFAULT_VALUE_FIELD, total_of
from fund_dashboard.domain.errors import RecordLoadError
from fund_dashboard.domain.models import AggregateRow, DetailView, FundRecord
from fund_dashboard.domain.repositories import RecordSource
from fund_dashboard.domain.selection import Selection

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LoadRecordsUseCase:
    source: RecordSource

    def execute(self) -> Sequence[FundRecord]:
        try:
            return tuple(self.source.list_records())
        except RecordLoadError:
            logger.error("Failed to load fund records", exc_info=True)
            raise
        except (OSError, ValueError) as exc:
            logger.error("Failed to load fund records", exc_info=True)
            raise RecordLoadError(f"Failed to load data: {exc}") from exc


class DrillDownSession:
    """Loaded records plus the current selection.

    The two ``select_*`` commands are the only mutation path; they return the
    new selection so the caller can re-render from the read accessors.
    """

    def __init__(
        self,
        records: Sequence[FundRecord],
        selection: Selection | None = None,
        value_field: str = DEFAULT_VALUE_FIELD,
    ) -> None:
        self._records = tuple(records)
        self._selection = selection or Selection()
        self._value_field = value_field

    @property
    def records(self) -> tuple[FundRecord, ...]:
        return self._records

    @property
    def value_field(self) -> str:
        return self._value_field

    @property
    def selection(self) -> Selection:
        return self._selection

    def select_fund_type(self, value: str | None) -> Selection:
        self._selection = self._selection.select_fund_type(value)
        return self._selection

    def select_sub_fund(self, value: str | None) -> Selection:
        self._selection = self._selection.select_sub_fund(value)
        return self._selection

    def total_aum(self) -> float:
        return total_of(self._records, self._value_field)

    def top_level(self) -> list[AggregateRow]:
        return views.top_level(self._records, self._value_field)

    def second_level(self) -> list[AggregateRow]:
        return views.second_level(self._records, self._selection, self._value_field)

    def selected_type_total(self) -> float:
        return sum(row.sum for row in self.second_level())

    def detail_rows(self) -> DetailView:
        return views.detail_rows(self._records, self._selection)

    def snapshot(self) -> DashboardSnapshot:
        second = self.second_level()
        return DashboardSnapshot(
            selection=self._selection,
            total_aum=self.total_aum(),
            top_level=self.top_level(),
            second_level=second,
            selected_type_total=sum(row.sum for row in second),
            detail=self.detail_rows(),
        )


def open_session(source: RecordSource, value_field: str = DEFAULT_VALUE_FIELD) -> DrillDownSession:
    records = LoadRecordsUseCase(source).execute()
    return DrillDownSession(records, value_field=value_field)
