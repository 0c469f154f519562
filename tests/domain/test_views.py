from fund_dashboard.domain.models import DetailView
from fund_dashboard.domain.selection import Selection
from fund_dashboard.domain.views import detail_rows, second_level, top_level


def test_top_level(records):
    assert [row.as_dict() for row in top_level(records)] == [
        {"FundType": "Equity", "MV": 15, "count": 2},
        {"FundType": "Fixed Income", "MV": 20, "count": 1},
    ]


def test_second_level_empty_without_fund_type(records):
    assert second_level(records, Selection()) == []


def test_second_level_filters_by_fund_type(records):
    rows = second_level(records, Selection(fund_type="Equity"))

    assert [row.as_dict() for row in rows] == [
        {"Fund": "A", "MV": 10, "count": 1},
        {"Fund": "B", "MV": 5, "count": 1},
    ]


def test_detail_rows_empty_without_sub_fund(records):
    assert detail_rows(records, Selection(fund_type="Equity")) == DetailView()


def test_detail_rows_for_selected_fund(records):
    view = detail_rows(records, Selection(fund_type="Equity", sub_fund="A"))

    assert view.fund == "A"
    assert [r.asset for r in view.rows] == ["Stock1"]
    assert view.total.market_value == 10
    assert view.total.equity == 8
    assert view.total.label == "Total"


def test_detail_rows_keep_input_order(interleaved_records):
    view = detail_rows(interleaved_records, Selection(fund_type="Real Estate", sub_fund="R1"))

    assert [r.asset for r in view.rows] == ["Tower", "Depot"]
    assert view.total.market_value == 8.5
    assert view.total.equity == 2.75


def test_views_are_deterministic(interleaved_records):
    selection = Selection(fund_type="Equity", sub_fund="E1")

    assert top_level(interleaved_records) == top_level(list(interleaved_records))
    assert second_level(interleaved_records, selection) == second_level(interleaved_records, selection)
    assert detail_rows(interleaved_records, selection) == detail_rows(interleaved_records, selection)


def test_views_accept_raw_rows():
    rows = [
        {"FundType": "Equity", "Fund": "A", "Asset": "Stock1", "MV": 10, "Equity": 8},
        {"FundType": "Equity", "Fund": "B", "Asset": "Stock2", "MV": "n/a", "Equity": 3},
        {"FundType": "Fixed Income", "Fund": "C", "Asset": "Bond1", "MV": 20, "Equity": 0},
    ]

    second = second_level(rows, Selection(fund_type="Equity"))
    view = detail_rows(rows, Selection(fund_type="Equity", sub_fund="B"))

    assert [row.as_dict() for row in second] == [
        {"Fund": "A", "MV": 10, "count": 1},
        {"Fund": "B", "MV": 0, "count": 1},
    ]
    assert view.rows == (rows[1],)
    assert (view.total.market_value, view.total.equity) == (0, 3)
