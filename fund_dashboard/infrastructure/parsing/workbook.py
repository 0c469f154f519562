"""Fund workbook parser producing canonical fund records."""
from __future__ import annotations

from dataclasses import dataclass, field
from io import BytesIO
from pathlib import Path
import logging
from typing import Any, Iterable, Mapping

import pandas as pd

from fund_dashboard.domain.errors import RecordLoadError
from fund_dashboard.domain.models import (
    COLUMN_TO_ATTRIBUTE,
    NUMERIC_COLUMNS,
    REQUIRED_COLUMNS,
    TEXT_COLUMNS,
    FundRecord,
)
from fund_dashboard.infrastructure.parsing.utils import (
    detect_engine,
    ensure_bytes,
    list_sheets,
    parse_number,
    parse_text,
    pick_sheet,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadResult:
    records: tuple[FundRecord, ...] = field(default_factory=tuple)
    source_rows: int = 0
    skipped_rows: int = 0
    coerced_cells: int = 0

    def has_quality_issues(self) -> bool:
        return bool(self.skipped_rows or self.coerced_cells)


def read_fund_workbook(source: BytesIO | Path | str | bytes, sheet_name: str | None = None) -> pd.DataFrame:
    data = ensure_bytes(source)
    engine = detect_engine(data)
    try:
        chosen = pick_sheet(list_sheets(data, engine), sheet_name)
        frame = pd.read_excel(
            BytesIO(data),
            sheet_name=chosen,
            engine=engine,
            dtype=str,
            keep_default_na=False,
        )
    except RecordLoadError:
        raise
    except Exception as exc:
        raise RecordLoadError(f"Failed to load Excel data: {exc}") from exc
    frame.columns = [str(col).strip() for col in frame.columns]
    return frame


def dataframe_to_records(frame: pd.DataFrame) -> LoadResult:
    missing = [col for col in REQUIRED_COLUMNS if col not in frame.columns]
    if missing:
        raise RecordLoadError(f"Workbook is missing required columns: {', '.join(missing)}")
    return rows_to_records(row for _, row in frame.iterrows())


def rows_to_records(rows: Iterable[Mapping[str, Any]]) -> LoadResult:
    """Build records from rows keyed by spreadsheet column.

    Rows lacking a fund identifier are skipped; unparseable or negative
    numbers become 0. Both are counted on the result.
    """
    records: list[FundRecord] = []
    source_rows = 0
    skipped = 0
    coerced = 0
    for idx, row in enumerate(rows):
        source_rows += 1
        texts = {col: parse_text(row.get(col)) for col in TEXT_COLUMNS}
        if not all(texts.values()):
            if any(texts.values()):
                logger.debug("Skipping row %s: incomplete fund identifiers %s", idx, texts)
            skipped += 1
            continue
        numbers: dict[str, float] = {}
        for col in NUMERIC_COLUMNS:
            value = parse_number(row.get(col))
            if value is None or value < 0:
                logger.debug("Row %s: %s value %r treated as 0", idx, col, row.get(col))
                coerced += 1
                value = 0.0
            numbers[col] = value
        values = {**texts, **numbers}
        records.append(FundRecord(**{COLUMN_TO_ATTRIBUTE[col]: values[col] for col in REQUIRED_COLUMNS}))

    result = LoadResult(
        records=tuple(records),
        source_rows=source_rows,
        skipped_rows=skipped,
        coerced_cells=coerced,
    )
    if result.has_quality_issues():
        logger.warning(
            "Data quality: %d row(s) skipped, %d numeric cell(s) treated as 0",
            skipped,
            coerced,
        )
    return result


def workbook_to_records(source: BytesIO | Path | str | bytes, sheet_name: str | None = None) -> LoadResult:
    frame = read_fund_workbook(source, sheet_name=sheet_name)
    result = dataframe_to_records(frame)
    logger.info("Excel data loaded successfully: %d rows", len(result.records))
    return result
