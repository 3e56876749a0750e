from stock_ledger.database.repositories.sales_repo import Sale
from stock_ledger.database.repositories.stock_repo import StockReceipt
from stock_ledger.errors import FutureDate, InsufficientStock, NotFound
from stock_ledger.modules.sales.admission import (
    check_date,
    check_new_sale,
    check_sale_edit,
)

TODAY = "2025-08-10"


def _receipt(qty, name="Rice"):
    return StockReceipt("r1", "2025-08-01", name, "Grain", "kg", qty, 2.0, 3.0, "")


def _sale(qty, sid=None, date="2025-08-02", name="Rice"):
    return Sale(sid, date, name, "Grain", "kg", qty, 3.0, qty * 3.0, "cash")


def test_today_is_not_future():
    assert check_date(TODAY, TODAY) is None
    assert isinstance(check_date("2025-08-11", TODAY), FutureDate)


def test_sell_up_to_available():
    receipts = [_receipt(10)]
    sales = [_sale(4, "s1")]
    assert check_new_sale(_sale(6), receipts, sales, TODAY) is None


def test_oversell_rejected_and_history_untouched():
    receipts = [_receipt(10)]
    sales = [_sale(4, "s1")]
    before = list(sales)

    err = check_new_sale(_sale(7), receipts, sales, TODAY)

    assert isinstance(err, InsufficientStock)
    assert err.available == 6
    assert err.requested == 7
    assert str(err) == "Only 6 units available for Rice. Cannot sell 7 units."
    assert sales == before


def test_unknown_product_has_nothing_to_sell():
    err = check_new_sale(_sale(1, name="Sugar"), [_receipt(10)], [], TODAY)
    assert isinstance(err, InsufficientStock)
    assert err.available == 0


def test_future_date_checked_first():
    err = check_new_sale(_sale(100, date="2025-09-01"), [_receipt(1)], [], TODAY)
    assert isinstance(err, FutureDate)


def test_edit_same_quantity_always_admitted():
    receipts = [_receipt(10)]
    sales = [_sale(10, "s1")]
    assert check_sale_edit("s1", _sale(10, "s1"), receipts, sales, TODAY) is None


def test_edit_returns_old_quantity_before_checking():
    receipts = [_receipt(10)]
    sales = [_sale(6, "s1"), _sale(2, "s2")]
    assert check_sale_edit("s1", _sale(8, "s1"), receipts, sales, TODAY) is None
    err = check_sale_edit("s1", _sale(9, "s1"), receipts, sales, TODAY)
    assert isinstance(err, InsufficientStock)
    assert err.available == 8


def test_edit_unknown_id():
    err = check_sale_edit("nope", _sale(1, "nope"), [_receipt(10)], [], TODAY)
    assert isinstance(err, NotFound)
