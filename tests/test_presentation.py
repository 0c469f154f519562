import csv
import io

from fund_dashboard.config import CHART_COLORS
from fund_dashboard.domain.aggregation import aggregate
from fund_dashboard.domain.models import DetailView
from fund_dashboard.domain.selection import Selection
from fund_dashboard.domain.views import detail_rows
from fund_dashboard.presentation.charts import SELECTED_PULL, pie_figure, slice_colors
from fund_dashboard.presentation.detail_report import detail_to_rows, render_csv, render_html
from fund_dashboard.presentation.formatting import (
    format_millions,
    fund_heading,
    fund_type_heading,
    slice_label,
    slice_shares,
    total_aum_heading,
)


def test_headings():
    assert format_millions(35) == "$35.0MM"
    assert format_millions(1234.567, 2) == "$1,234.57MM"
    assert total_aum_heading(35) == "Total AUM: $35.0MM"
    assert fund_type_heading("Equity", 15) == "$15.0MM Equity NAV"
    assert fund_heading("A", 10) == "Fund A ($10.0MM NAV)"


def test_slice_shares_and_labels(records):
    rows = aggregate(records, "FundType", "MV")

    shares = slice_shares(rows)

    assert [round(s, 2) for s in shares] == [42.86, 57.14]
    assert slice_label("Equity", shares[0]) == "Equity<br>43%"
    assert slice_label("Tiny", 4.4) == ""


def test_slice_shares_zero_total():
    rows = aggregate([{"FundType": "X", "MV": 0}], "FundType", "MV")

    assert slice_shares(rows) == [0.0]


def test_slice_colors_wrap_with_offset():
    colors = slice_colors(8, color_offset=3)

    assert colors[0] == CHART_COLORS[3]
    assert colors[6] == CHART_COLORS[0]


def test_pie_figure_pulls_selected_slice(records):
    rows = aggregate(records, "FundType", "MV")

    fig = pie_figure(rows, selected="Fixed Income", title="Total AUM: $35.0MM")

    trace = fig.data[0]
    assert list(trace.labels) == ["Equity", "Fixed Income"]
    assert list(trace.values) == [15, 20]
    assert list(trace.pull) == [0, SELECTED_PULL]
    assert fig.layout.title.text == "Total AUM: $35.0MM"


def test_detail_rows_table_has_distinct_total(records):
    view = detail_rows(records, Selection(fund_type="Equity", sub_fund="A"))

    rows = detail_to_rows(view)

    assert rows == [
        {"Asset": "Stock1", "MV": "$10.00MM", "Equity": "$8.00MM", "is_total": False},
        {"Asset": "Total", "MV": "$10.00MM", "Equity": "$8.00MM", "is_total": True},
    ]


def test_render_csv(records):
    view = detail_rows(records, Selection(fund_type="Equity", sub_fund="B"))

    parsed = list(csv.DictReader(io.StringIO(render_csv(view).decode("utf-8"))))

    assert parsed == [
        {"Asset": "Stock2", "MV": "5.0", "Equity": "3.0"},
        {"Asset": "Total", "MV": "5.0", "Equity": "3.0"},
    ]


def test_render_html_marks_total_row(records):
    view = detail_rows(records, Selection(fund_type="Equity", sub_fund="A"))

    html = render_html(view)

    assert '<tr class="total-row"><td>Total</td>' in html
    assert render_html(DetailView()) == "<p>No fund selected.</p>"
    assert render_csv(DetailView()) == b""


def test_slice_label_rounds_half_up():
    assert slice_label("Small", 4.5) == "Small<br>5%"
    assert slice_label("Half", 42.5) == "Half<br>43%"
    assert slice_label("Tiny", 4.49) == ""
