import pytest

from stock_ledger.database.repositories.sales_repo import Sale
from stock_ledger.database.repositories.stock_repo import StockReceipt
from stock_ledger.modules.dashboard.model import (
    DateRange,
    best_sellers,
    dashboard_summary,
    highest_sale,
    payment_totals,
    total_profit,
)

D1 = "2025-08-01"
TODAY = "2025-08-10"


def _receipt(name, qty, buy, sell, date=D1):
    return StockReceipt(None, date, name, "", "", qty, buy, sell, "")


def _sale(name, qty, price, mode="cash", date=D1, buyer=""):
    return Sale(None, date, name, "", "", qty, price, round(qty * price, 2), mode, buyer)


def test_date_range_is_inclusive_and_ignores_time():
    r = DateRange("2025-08-01", "2025-08-03")
    assert r.contains("2025-08-01")
    assert r.contains("2025-08-03T18:30:00")
    assert not r.contains("2025-08-04")


def test_profit_uses_first_receipt_buy_price():
    receipts = [_receipt("Rice", 10, 2.0, 3.0), _receipt("Rice", 10, 2.5, 3.5)]
    sales = [_sale("Rice", 4, 3.5)]
    assert total_profit(sales, receipts) == pytest.approx(6.0)


def test_sale_without_receipt_adds_no_profit():
    assert total_profit([_sale("Ghost", 2, 5.0)], []) == 0


def test_payment_totals_drop_unused_modes():
    sales = [_sale("Rice", 10, 5.0), _sale("Rice", 5, 5.0)]
    assert payment_totals(sales) == {"cash": 75.0}


def test_payment_totals_split_by_mode():
    sales = [_sale("Rice", 1, 3.0, "mpesa"), _sale("Rice", 2, 3.0, "cash"), _sale("Rice", 1, 1.0, "mpesa")]
    assert payment_totals(sales) == {"mpesa": 4.0, "cash": 6.0}


def test_best_sellers_top_three_ties_first_seen():
    sales = [
        _sale("Beans", 5, 1.0),
        _sale("Rice", 5, 1.0),
        _sale("Soap", 9, 1.0),
        _sale("Salt", 1, 1.0),
        _sale("Rice", 0.5, 1.0),
    ]
    assert best_sellers(sales) == [("Soap", 9.0), ("Rice", 5.5), ("Beans", 5.0)]
    assert best_sellers([_sale("A", 1, 1.0), _sale("B", 1, 1.0)]) == [("A", 1.0), ("B", 1.0)]


def test_highest_sale_first_of_equals():
    a = _sale("Rice", 2, 3.0)
    b = _sale("Soap", 3, 2.0)
    assert highest_sale([a, b]) is a
    assert highest_sale([]) is None


def test_summary_only_filters_sales_by_range():
    receipts = [_receipt("Rice", 100, 2.0, 3.0), _receipt("Soap", 4, 1.0, 1.5, date="2025-07-01")]
    sales = [
        _sale("Rice", 30, 3.0, date=D1),
        _sale("Rice", 10, 3.0, date="2025-07-20"),
    ]
    summary = dashboard_summary(receipts, sales, [], DateRange("2025-07-31", TODAY))

    assert summary.total_revenue == 90.0
    assert summary.total_profit == 30.0
    assert summary.sales_count == 1
    # stock value and alerts see everything
    assert summary.stock_value == 60 * 3.0 + 4 * 1.5
    assert [e.name for e in summary.low_stock] == ["Soap"]
    assert summary.out_of_stock == []
    assert summary.product_count == 2
    assert summary.stock_entries == 2


def test_summary_of_empty_history():
    summary = dashboard_summary([], [], [], DateRange("2025-08-03", TODAY))
    assert summary.total_revenue == 0
    assert summary.total_profit == 0
    assert summary.stock_value == 0
    assert summary.highest_sale is None
    assert summary.best_sellers == []
    assert summary.payment_totals == {}
