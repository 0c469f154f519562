"""Central configuration for the fund dashboard package."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = BASE_DIR / "data"
DEFAULT_DATA_PATH = DATA_DIR / "DummyDataSet.xlsx"
SETTINGS_OVERRIDE_PATH = BASE_DIR / "dashboard_settings.json"

DATA_PATH_ENV = "FUND_DASHBOARD_DATA"

# Slice colours, cycled from an offset so stacked charts look distinct.
CHART_COLORS = (
    "#3b82f6",
    "#10b981",
    "#8b5cf6",
    "#f97316",
    "#ef4444",
    "#ec4899",
    "#14b8a6",
    "#6366f1",
    "#f59e0b",
)


@dataclass(slots=True, frozen=True)
class Settings:
    data_path: Path = DEFAULT_DATA_PATH
    sheet_name: str | None = None
    value_field: str = "MV"
    detail_decimals: int = 2
    chart_decimals: int = 1
    min_label_share: float = 5.0
    second_chart_color_offset: int = 3
    log_level: str = "INFO"


SETTINGS = Settings()
