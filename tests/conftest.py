# tests/conftest.py
# ---------------------------------------------------------------------
# Ground rules:
# - Every test gets its own temp-file SQLite DB (schema applied fresh)
# - conn.row_factory = sqlite3.Row, PRAGMA foreign_keys=ON
# - The clock is frozen on TODAY so date checks are deterministic
# ---------------------------------------------------------------------

from __future__ import annotations

import os
import sqlite3
import tempfile

import pytest

from stock_ledger.database.repositories.entity_store import EntityStore
from stock_ledger.database.schema import init_schema
from stock_ledger.ledger import Ledger
from stock_ledger.utils.helpers import fixed_clock

TODAY = "2025-08-10"
D1 = "2025-08-01"
TENANT = "tenant-1"


@pytest.fixture()
def conn():
    # Use a real temp file so WAL/pragmas behave like production.
    tmp = tempfile.NamedTemporaryFile(delete=False, suffix=".db")
    tmp.close()
    c = None
    try:
        init_schema(tmp.name)
        c = sqlite3.connect(tmp.name, check_same_thread=False)
        c.row_factory = sqlite3.Row
        c.execute("PRAGMA foreign_keys=ON;")
        yield c
    finally:
        if c is not None:
            c.close()
        for suffix in ("", "-wal", "-shm"):
            if os.path.exists(tmp.name + suffix):
                os.unlink(tmp.name + suffix)


@pytest.fixture()
def store(conn) -> EntityStore:
    s = EntityStore(conn)
    s.register_tenant(TENANT, "Corner Shop")
    return s


@pytest.fixture()
def ledger(conn) -> Ledger:
    return Ledger(conn, clock=fixed_clock(TODAY))


@pytest.fixture()
def shop(ledger):
    """A registered tenant with an empty history."""
    return ledger.register_tenant(TENANT, "Corner Shop")


@pytest.fixture()
def rice_shop(shop):
    """100 Rice received (buy 2 / sell 3), 30 sold for cash, all on D1."""
    shop.record_receipt(D1, "Rice", 100, buy_price=2, sell_price=3, supplier="Mills Ltd").unwrap()
    shop.record_sale(D1, "Rice", 30, 3, "cash").unwrap()
    return shop
