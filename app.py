"""Streamlit front-end for the fund drill-down dashboard."""
from __future__ import annotations

import logging
from io import BytesIO
from typing import Callable, Sequence

import pandas as pd
import streamlit as st

from fund_dashboard import DrillDownSession, ExcelRecordSource, RecordLoadError, open_session
from fund_dashboard.domain.models import AggregateRow
from fund_dashboard.infrastructure.storage.settings_store import load_settings
from fund_dashboard.presentation.charts import pie_figure
from fund_dashboard.presentation.detail_report import detail_to_rows, render_csv, render_html
from fund_dashboard.presentation.formatting import fund_heading, fund_type_heading, total_aum_heading

logger = logging.getLogger(__name__)

st.set_page_config(page_title="Fund Management Dashboard", layout="wide")
st.title("Fund Management Dashboard")

settings = load_settings()


def load_session(source: BytesIO | None) -> None:
    try:
        if source is not None:
            record_source = ExcelRecordSource(source, sheet_name=settings.sheet_name)
        else:
            record_source = ExcelRecordSource(settings.data_path, sheet_name=settings.sheet_name)
        st.session_state["session"] = open_session(record_source, value_field=settings.value_field)
        st.session_state["load_error"] = None
    except RecordLoadError as exc:
        logger.error("Dashboard data load failed: %s", exc)
        st.session_state["session"] = None
        st.session_state["load_error"] = str(exc)


def slice_buttons(rows: Sequence[AggregateRow], selected: str | None, on_click: Callable[[str], object], key: str) -> None:
    if not rows:
        return
    columns = st.columns(len(rows))
    for idx, (col, row) in enumerate(zip(columns, rows)):
        with col:
            clicked = st.button(
                str(row.key),
                key=f"{key}_{idx}",
                type="primary" if row.key == selected else "secondary",
                use_container_width=True,
            )
        if clicked:
            on_click(row.key)
            st.rerun()


uploaded = st.sidebar.file_uploader("Upload fund workbook", type=["xlsx", "xls"])
source_key = (uploaded.name, uploaded.size) if uploaded else None
reload_clicked = st.sidebar.button("Reload data")
if reload_clicked or "session" not in st.session_state or st.session_state.get("source_key") != source_key:
    st.session_state["source_key"] = source_key
    load_session(BytesIO(uploaded.getvalue()) if uploaded else None)

load_error = st.session_state.get("load_error")
if load_error:
    st.error(f"Error Loading Data: {load_error}")
    st.caption(f"Please check that the Excel file exists at {settings.data_path} or upload one.")
    st.stop()

session: DrillDownSession = st.session_state["session"]
snapshot = session.snapshot()
selection = snapshot.selection
decimals = settings.chart_decimals

col1, col2 = st.columns(2)
with col1:
    st.subheader("Fund Type Distribution")
    st.plotly_chart(
        pie_figure(
            snapshot.top_level,
            selected=selection.fund_type,
            title=total_aum_heading(snapshot.total_aum, decimals),
            min_label_share=settings.min_label_share,
        ),
        use_container_width=True,
    )
    slice_buttons(snapshot.top_level, selection.fund_type, session.select_fund_type, key="fund_type")

if selection.fund_type is not None:
    with col2:
        st.subheader("Sub-Fund Breakdown")
        st.plotly_chart(
            pie_figure(
                snapshot.second_level,
                selected=selection.sub_fund,
                color_offset=settings.second_chart_color_offset,
                title=fund_type_heading(selection.fund_type, snapshot.selected_type_total, decimals),
                min_label_share=settings.min_label_share,
            ),
            use_container_width=True,
        )
        slice_buttons(snapshot.second_level, selection.sub_fund, session.select_sub_fund, key="sub_fund")

detail = snapshot.detail
if detail.fund is not None and not detail.is_empty():
    st.subheader(fund_heading(detail.fund, detail.total.market_value, decimals))
    table = pd.DataFrame(detail_to_rows(detail, decimals=settings.detail_decimals))
    st.dataframe(table.drop(columns=["is_total"]), hide_index=True, use_container_width=True)
    dl1, dl2 = st.columns(2)
    with dl1:
        st.download_button(
            "Download detail CSV",
            data=render_csv(detail),
            file_name=f"{detail.fund}_assets.csv",
            mime="text/csv",
        )
    with dl2:
        st.download_button(
            "Download detail HTML",
            data=render_html(detail, decimals=settings.detail_decimals).encode("utf-8"),
            file_name=f"{detail.fund}_assets.html",
            mime="text/html",
        )
