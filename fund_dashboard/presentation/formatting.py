"""Display formatting for money values, slice shares and headings."""
from __future__ import annotations

import math
from typing import Sequence

from fund_dashboard.domain.models import AggregateRow


def format_millions(value: float, decimals: int = 1) -> str:
    return f"${value:,.{decimals}f}MM"


def slice_shares(rows: Sequence[AggregateRow]) -> list[float]:
    """Percentage of the chart total held by each row (0 when the total is 0)."""
    total = sum(row.sum for row in rows)
    if not total:
        return [0.0 for _ in rows]
    return [row.sum / total * 100 for row in rows]


def slice_label(key: object, share: float, min_share: float = 5.0) -> str:
    # Small slices get no on-chart label; the legend still names them.
    percent = math.floor(share + 0.5)
    if percent < min_share:
        return ""
    return f"{key}<br>{percent}%"


def slice_tooltip(key: object, value: float, share: float) -> str:
    return f"{key}: {format_millions(value)} ({share:.1f}%)"


def total_aum_heading(total: float, decimals: int = 1) -> str:
    return f"Total AUM: {format_millions(total, decimals)}"


def fund_type_heading(fund_type: str, total: float, decimals: int = 1) -> str:
    return f"{format_millions(total, decimals)} {fund_type} NAV"


def fund_heading(fund: str, total: float, decimals: int = 1) -> str:
    return f"Fund {fund} ({format_millions(total, decimals)} NAV)"
