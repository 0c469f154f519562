"""Storage helpers for dashboard settings overrides."""
from __future__ import annotations

from dataclasses import fields, replace
from pathlib import Path
import json
import logging
import os
from typing import Any

from fund_dashboard.config import DATA_PATH_ENV, SETTINGS, SETTINGS_OVERRIDE_PATH, Settings
from fund_dashboard.domain.models import ATTRIBUTE_TO_COLUMN, NUMERIC_COLUMNS

logger = logging.getLogger(__name__)


def _log_level(value: object) -> str:
    level = str(value).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {value!r}")
    return level


def _value_field(value: object) -> str:
    field = str(value).strip()
    if field not in NUMERIC_COLUMNS and ATTRIBUTE_TO_COLUMN.get(field) not in NUMERIC_COLUMNS:
        raise ValueError(f"Not a numeric field: {value!r}")
    return field


_CASTS = {
    "data_path": str,
    "sheet_name": str,
    "value_field": _value_field,
    "detail_decimals": int,
    "chart_decimals": int,
    "min_label_share": float,
    "second_chart_color_offset": int,
    "log_level": _log_level,
}


def _normalize_overrides(raw: dict[str, Any] | None) -> dict[str, Any]:
    normalized: dict[str, Any] = {}
    if not isinstance(raw, dict):
        return normalized
    known = {f.name for f in fields(Settings)}
    for key, value in raw.items():
        if key not in known:
            continue
        if value is None:
            if key == "sheet_name":
                normalized[key] = None
            continue
        try:
            normalized[key] = _CASTS[key](value)
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid setting %s=%r", key, value)
    return normalized


def _apply(overrides: dict[str, Any]) -> Settings:
    values = dict(overrides)
    if "data_path" in values:
        values["data_path"] = Path(values["data_path"])
    return replace(SETTINGS, **values)


def load_settings(path: Path | None = None) -> Settings:
    override_path = path or SETTINGS_OVERRIDE_PATH
    overrides: dict[str, Any] = {}
    if override_path.exists():
        try:
            overrides = _normalize_overrides(json.loads(override_path.read_text(encoding="utf-8")))
        except json.JSONDecodeError:
            logger.warning("Settings file %s is not valid JSON; using defaults", override_path)
    env_path = os.environ.get(DATA_PATH_ENV)
    if env_path:
        overrides["data_path"] = env_path
    return _apply(overrides)


def save_settings(overrides: dict[str, Any], path: Path | None = None) -> Settings:
    override_path = path or SETTINGS_OVERRIDE_PATH
    normalized = _normalize_overrides(overrides)
    override_path.write_text(
        json.dumps(normalized, ensure_ascii=False, indent=2, sort_keys=True),
        encoding="utf-8",
    )
    return _apply(normalized)
