"""Shared parsing utilities for Excel ingestion."""
from __future__ import annotations

from io import BytesIO
from pathlib import Path
import math

import pandas as pd

from fund_dashboard.domain.errors import RecordLoadError

XLSX_SIGNATURE = b"PK\x03\x04"
XLS_SIGNATURE = b"\xd0\xcf\x11\xe0"


def ensure_bytes(source: BytesIO | Path | str | bytes) -> bytes:
    if isinstance(source, bytes):
        return source
    if isinstance(source, BytesIO):
        return source.getvalue()
    if isinstance(source, (Path, str)):
        try:
            return Path(source).read_bytes()
        except OSError as exc:
            raise RecordLoadError(f"Cannot read workbook {source}: {exc}") from exc
    raise TypeError(f"Unsupported source type: {type(source)!r}")


def detect_engine(data: bytes) -> str:
    if data.startswith(XLSX_SIGNATURE):
        return "openpyxl"
    if data.startswith(XLS_SIGNATURE):
        return "xlrd"
    raise RecordLoadError("Unrecognised workbook format (expected .xlsx or .xls)")


def pick_sheet(sheets: list[str], preferred: str | None) -> str:
    if not sheets:
        raise RecordLoadError("Excel file contains no sheets")
    if not preferred:
        return sheets[0]
    if preferred in sheets:
        return preferred
    lower_map = {name.lower(): name for name in sheets}
    if preferred.lower() in lower_map:
        return lower_map[preferred.lower()]
    for name in sheets:
        if preferred.lower() in name.lower():
            return name
    return sheets[0]


def parse_number(value: object) -> float | None:
    """Parse a spreadsheet cell into a float.

    Blank cells give 0.0; text that is not a number gives None.
    """
    if value is None:
        return 0.0
    if isinstance(value, float) and math.isnan(value):
        return 0.0
    s = str(value).strip()
    if not s or s.upper() == "NAN":
        return 0.0
    negative = False
    if s.startswith("(") and s.endswith(")"):
        negative = True
        s = s[1:-1]
    for ch in [",", "$", " "]:
        s = s.replace(ch, "")
    if s.upper().endswith("MM"):
        s = s[:-2]
    try:
        result = float(s)
    except ValueError:
        return None
    if not math.isfinite(result):
        return None
    return -result if negative else result


def parse_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    return str(value).strip()


def list_sheets(data: bytes, engine: str) -> list[str]:
    xls = pd.ExcelFile(BytesIO(data), engine=engine)
    return list(xls.sheet_names)
