"""Projections of the record set onto the three drill-down levels.

Like the aggregation functions, the views accept ``FundRecord`` instances or
column-keyed row mappings.
"""
from __future__ import annotations

from typing import Any, Sequence

from .aggregation import DEFAULT_VALUE_FIELD, aggregate, field_value, sum_field
from .models import AggregateRow, DetailTotal, DetailView
from .selection import Selection


def top_level(records: Sequence[Any], value_field: str = DEFAULT_VALUE_FIELD) -> list[AggregateRow]:
    return aggregate(records, "FundType", value_field)


def second_level(
    records: Sequence[Any],
    selection: Selection,
    value_field: str = DEFAULT_VALUE_FIELD,
) -> list[AggregateRow]:
    if selection.fund_type is None:
        return []
    members = [record for record in records if field_value(record, "FundType") == selection.fund_type]
    return aggregate(members, "Fund", value_field)


def detail_rows(records: Sequence[Any], selection: Selection) -> DetailView:
    if selection.sub_fund is None:
        return DetailView()
    rows = tuple(record for record in records if field_value(record, "Fund") == selection.sub_fund)
    return DetailView(
        fund=selection.sub_fund,
        rows=rows,
        total=DetailTotal(
            market_value=sum_field(rows, "MV"),
            equity=sum_field(rows, "Equity"),
        ),
    )
