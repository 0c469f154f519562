import pytest

from fund_dashboard.domain.models import FundRecord


def make_record(fund_type: str, fund: str, asset: str, mv: float, equity: float = 0.0) -> FundRecord:
    return FundRecord(fund_type=fund_type, fund=fund, asset=asset, market_value=float(mv), equity=float(equity))


@pytest.fixture
def records() -> list[FundRecord]:
    return [
        make_record("Equity", "A", "Stock1", 10, 8),
        make_record("Equity", "B", "Stock2", 5, 3),
        make_record("Fixed Income", "C", "Bond1", 20, 0),
    ]


@pytest.fixture
def interleaved_records() -> list[FundRecord]:
    return [
        make_record("Real Estate", "R1", "Tower", 7.5, 2.5),
        make_record("Equity", "E1", "Stock1", 3, 1),
        make_record("Real Estate", "R2", "Mall", 2.5, 1),
        make_record("Equity", "E1", "Stock2", 4, 2),
        make_record("Credit", "C1", "Loan", 1, 0.5),
        make_record("Real Estate", "R1", "Depot", 1, 0.25),
    ]
