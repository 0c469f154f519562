"""Domain models for the fund drill-down dashboard.

These dataclasses capture the canonical shape of a spreadsheet row and the
derived summaries built from it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Spreadsheet column -> FundRecord attribute.
COLUMN_TO_ATTRIBUTE: dict[str, str] = {
    "FundType": "fund_type",
    "Fund": "fund",
    "Asset": "asset",
    "MV": "market_value",
    "Equity": "equity",
}
ATTRIBUTE_TO_COLUMN: dict[str, str] = {attr: col for col, attr in COLUMN_TO_ATTRIBUTE.items()}

REQUIRED_COLUMNS: tuple[str, ...] = tuple(COLUMN_TO_ATTRIBUTE)
TEXT_COLUMNS: tuple[str, ...] = ("FundType", "Fund", "Asset")
NUMERIC_COLUMNS: tuple[str, ...] = ("MV", "Equity")


@dataclass(frozen=True)
class FundRecord:
    """One asset row of the source spreadsheet. Values are in millions."""

    fund_type: str
    fund: str
    asset: str
    market_value: float = 0.0
    equity: float = 0.0

    def to_row(self) -> dict[str, Any]:
        return {ATTRIBUTE_TO_COLUMN[name]: getattr(self, name) for name in ATTRIBUTE_TO_COLUMN}


@dataclass(frozen=True)
class AggregateRow:
    """One group of a summary: the group key, the summed value and member count."""

    group_field: str
    value_field: str
    key: str
    sum: float
    count: int

    def as_dict(self) -> dict[str, Any]:
        return {self.group_field: self.key, self.value_field: self.sum, "count": self.count}


@dataclass(frozen=True)
class DetailTotal:
    market_value: float
    equity: float
    label: str = "Total"


@dataclass(frozen=True)
class DetailView:
    """Leaf records of the selected sub-fund plus their synthesized total row."""

    fund: str | None = None
    rows: tuple[FundRecord, ...] = field(default_factory=tuple)
    total: DetailTotal = field(default_factory=lambda: DetailTotal(market_value=0.0, equity=0.0))

    def is_empty(self) -> bool:
        return not self.rows
