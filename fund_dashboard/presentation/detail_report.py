"""Asset detail table rendering for the selected sub-fund."""
from __future__ import annotations

import csv
import html
import io

from fund_dashboard.domain.models import DetailView
from fund_dashboard.presentation.formatting import format_millions

DETAIL_COLUMNS = ("Asset", "MV", "Equity")


def detail_to_rows(view: DetailView, decimals: int = 2, formatted: bool = True) -> list[dict[str, object]]:
    """Table rows for ``view``; the last row is the total and is flagged as such."""
    if view.is_empty():
        return []

    def cell(value: float) -> object:
        return format_millions(value, decimals) if formatted else value

    rows: list[dict[str, object]] = [
        {"Asset": record.asset, "MV": cell(record.market_value), "Equity": cell(record.equity), "is_total": False}
        for record in view.rows
    ]
    rows.append(
        {
            "Asset": view.total.label,
            "MV": cell(view.total.market_value),
            "Equity": cell(view.total.equity),
            "is_total": True,
        }
    )
    return rows


def render_csv(view: DetailView) -> bytes:
    rows = detail_to_rows(view, formatted=False)
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=list(DETAIL_COLUMNS), extrasaction="ignore")
    if rows:
        writer.writeheader()
        writer.writerows(rows)
    return buffer.getvalue().encode("utf-8")


def render_html(view: DetailView, decimals: int = 2) -> str:
    rows = detail_to_rows(view, decimals=decimals)
    if not rows:
        return "<p>No fund selected.</p>"
    header = "".join(f"<th>{col}</th>" for col in DETAIL_COLUMNS)
    body_parts = []
    for row in rows:
        css = ' class="total-row"' if row["is_total"] else ""
        cells = "".join(f"<td>{html.escape(str(row[col]))}</td>" for col in DETAIL_COLUMNS)
        body_parts.append(f"<tr{css}>{cells}</tr>")
    body_html = "".join(body_parts)
    return f"<table><thead><tr>{header}</tr></thead><tbody>{body_html}</tbody></table>"
