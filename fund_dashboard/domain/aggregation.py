"""Grouping and summing over fund records.

All functions accept records as ``FundRecord`` instances or as plain row
mappings keyed by spreadsheet column, and fields by either their column
name (``"MV"``) or attribute name (``"market_value"``).

Numeric fields are summed permissively: a missing, non-numeric or
non-finite value contributes 0 rather than raising.
"""
from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import Decimal
from numbers import Real
from typing import Any, Iterable, Sequence

from .models import ATTRIBUTE_TO_COLUMN, COLUMN_TO_ATTRIBUTE, AggregateRow

DEFAULT_VALUE_FIELD = "MV"

_MISSING = object()


def field_value(record: Any, field: str) -> Any:
    alias = COLUMN_TO_ATTRIBUTE.get(field) or ATTRIBUTE_TO_COLUMN.get(field)
    if isinstance(record, Mapping):
        if field in record:
            return record[field]
        if alias is not None:
            return record.get(alias)
        return None
    value = getattr(record, field, _MISSING)
    if value is _MISSING and alias is not None:
        value = getattr(record, alias, _MISSING)
    return None if value is _MISSING else value


def as_number(value: object) -> float:
    """Return ``value`` as a float, or 0.0 when it is not a finite number."""
    if isinstance(value, bool):
        return 0.0
    if not isinstance(value, (Real, Decimal)):
        return 0.0
    number = float(value)
    if not math.isfinite(number):
        return 0.0
    return number


def sum_field(records: Iterable[Any], value_field: str = DEFAULT_VALUE_FIELD) -> float:
    return sum((as_number(field_value(record, value_field)) for record in records), 0.0)


def group_by(records: Iterable[Any], group_field: str) -> dict[Any, list[Any]]:
    """Partition ``records`` by ``group_field``.

    Keys keep first-occurrence order and each group keeps the input order.
    """
    groups: dict[Any, list[Any]] = {}
    for record in records:
        groups.setdefault(field_value(record, group_field), []).append(record)
    return groups


def aggregate(
    records: Sequence[Any],
    group_field: str,
    value_field: str = DEFAULT_VALUE_FIELD,
) -> list[AggregateRow]:
    return [
        AggregateRow(
            group_field=group_field,
            value_field=value_field,
            key=key,
            sum=sum_field(members, value_field),
            count=len(members),
        )
        for key, members in group_by(records, group_field).items()
    ]


def total_of(records: Iterable[Any], value_field: str = DEFAULT_VALUE_FIELD) -> float:
    """Headline total. Always called with the complete, unfiltered record set."""
    return sum_field(records, value_field)
