"""Command-line entrypoint for the fund drill-down summary."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from fund_dashboard.application.use_cases import open_session
from fund_dashboard.domain.errors import RecordLoadError, SelectionError
from fund_dashboard.domain.models import AggregateRow
from fund_dashboard.infrastructure.repositories.record_sources import ExcelRecordSource
from fund_dashboard.infrastructure.storage.settings_store import load_settings
from fund_dashboard.presentation.detail_report import detail_to_rows, render_csv
from fund_dashboard.presentation.formatting import (
    format_millions,
    fund_heading,
    fund_type_heading,
    slice_shares,
    total_aum_heading,
)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Summarise a fund workbook by fund type, sub-fund and asset")
    parser.add_argument("workbook", type=str, nargs="?", help="Path to the fund Excel file")
    parser.add_argument("--fund-type", type=str, help="Drill into this fund type")
    parser.add_argument("--sub-fund", type=str, help="Drill into this sub-fund (requires --fund-type)")
    parser.add_argument("--sheet", type=str, help="Worksheet name (defaults to the first sheet)")
    parser.add_argument("--csv", type=str, help="Write the asset detail table to this CSV file")
    parser.add_argument("--settings", type=str, help="Path to a JSON settings override file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _print_level(title: str, rows: Sequence[AggregateRow], decimals: int) -> None:
    print(title)
    print("=" * len(title))
    for row, share in zip(rows, slice_shares(rows)):
        print(f"{row.key}: {format_millions(row.sum, decimals)} ({share:.1f}%, {row.count} assets)")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    settings = load_settings(Path(args.settings) if args.settings else None)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    workbook = Path(args.workbook) if args.workbook else settings.data_path
    try:
        session = open_session(
            ExcelRecordSource(workbook, sheet_name=args.sheet or settings.sheet_name),
            value_field=settings.value_field,
        )
    except RecordLoadError as exc:
        print(f"Error loading data: {exc}", file=sys.stderr)
        return 1

    try:
        if args.fund_type:
            session.select_fund_type(args.fund_type)
        if args.sub_fund:
            session.select_sub_fund(args.sub_fund)
    except SelectionError as exc:
        print(f"Invalid selection: {exc}", file=sys.stderr)
        return 2

    snapshot = session.snapshot()
    decimals = settings.chart_decimals
    _print_level(total_aum_heading(snapshot.total_aum, decimals), snapshot.top_level, decimals)

    fund_type = snapshot.selection.fund_type
    if fund_type is not None:
        print()
        _print_level(fund_type_heading(fund_type, snapshot.selected_type_total, decimals), snapshot.second_level, decimals)

    detail = snapshot.detail
    if detail.fund is not None:
        print()
        title = fund_heading(detail.fund, detail.total.market_value, decimals)
        print(title)
        print("=" * len(title))
        rows = detail_to_rows(detail, decimals=settings.detail_decimals)
        if not rows:
            print("No assets found for this fund.")
        for row in rows:
            print(f"{row['Asset']}\t{row['MV']}\t{row['Equity']}")
        if args.csv:
            Path(args.csv).write_bytes(render_csv(detail))
            print(f"\nDetail table written to {args.csv}")

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
