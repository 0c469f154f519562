"""Record sources backed by Excel workbooks or in-memory rows."""
from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

from fund_dashboard.domain.models import FundRecord
from fund_dashboard.domain.repositories import RecordSource
from fund_dashboard.infrastructure.parsing.utils import ensure_bytes
from fund_dashboard.infrastructure.parsing.workbook import LoadResult, rows_to_records, workbook_to_records


class ExcelRecordSource(RecordSource):
    def __init__(self, source: BytesIO | Path | str | bytes, sheet_name: str | None = None) -> None:
        self._source = source
        self._sheet_name = sheet_name
        self.last_result: LoadResult | None = None

    def list_records(self) -> Sequence[FundRecord]:
        self.last_result = workbook_to_records(ensure_bytes(self._source), sheet_name=self._sheet_name)
        return self.last_result.records


class InMemoryRecordSource(RecordSource):
    """Records given directly, either as ``FundRecord`` or as raw column-keyed rows.

    Raw rows go through the same parsing rules as workbook rows.
    """

    def __init__(self, records: Iterable[FundRecord | Mapping[str, Any]]) -> None:
        self._items = tuple(records)
        self.last_result: LoadResult | None = None

    def list_records(self) -> Sequence[FundRecord]:
        rows = [item.to_row() if isinstance(item, FundRecord) else item for item in self._items]
        self.last_result = rows_to_records(rows)
        return self.last_result.records
