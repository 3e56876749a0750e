import logging

from stock_ledger.utils.loggers import get_logger


def test_get_logger_attaches_single_handler():
    logger = get_logger("stock_ledger.test_single")
    again = get_logger("stock_ledger.test_single")
    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO


def test_rejections_are_logged(rice_shop, caplog):
    with caplog.at_level(logging.INFO, logger="stock_ledger"):
        rice_shop.record_sale("2025-08-01", "Rice", 500, 3, "cash")
    assert any("sale rejected" in r.getMessage() for r in caplog.records)


def test_accepted_receipt_is_logged(shop, caplog):
    with caplog.at_level(logging.INFO, logger="stock_ledger"):
        shop.record_receipt("2025-08-01", "Beans", 12, 1, 2)
    assert any("received 12 x 'Beans'" in r.getMessage() for r in caplog.records)
