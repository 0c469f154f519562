"""Two-level drill-down selection.

``Selection`` is an immutable value; each transition returns a new one and
the caller re-projects the views from it.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import SelectionError


class DrillLevel(str, Enum):
    TOP = "top"
    TYPE_SELECTED = "type_selected"
    FUND_SELECTED = "fund_selected"


@dataclass(frozen=True)
class Selection:
    fund_type: str | None = None
    sub_fund: str | None = None

    def __post_init__(self) -> None:
        if self.sub_fund is not None and self.fund_type is None:
            raise SelectionError("A sub-fund cannot be selected without a fund type")

    @property
    def level(self) -> DrillLevel:
        if self.fund_type is None:
            return DrillLevel.TOP
        if self.sub_fund is None:
            return DrillLevel.TYPE_SELECTED
        return DrillLevel.FUND_SELECTED

    def select_fund_type(self, value: str | None) -> Selection:
        # Re-clicking the active type deselects it; any other type drops the sub-fund.
        if value is None or value == self.fund_type:
            return Selection()
        return Selection(fund_type=value)

    def select_sub_fund(self, value: str | None) -> Selection:
        if self.fund_type is None:
            raise SelectionError(
                f"Cannot select sub-fund {value!r}: no fund type is selected"
            )
        if value is None or value == self.sub_fund:
            return Selection(fund_type=self.fund_type)
        return Selection(fund_type=self.fund_type, sub_fund=value)


def select_fund_type(selection: Selection, value: str | None) -> Selection:
    return selection.select_fund_type(value)


def select_sub_fund(selection: Selection, value: str | None) -> Selection:
    return selection.select_sub_fund(value)
