# stock_ledger/ledger.py
"""
Entry point wiring the store, the controllers and the per-tenant write lock.

    ledger = Ledger(get_connection())
    ledger.register_tenant("t-1", "Mama Mboga Shop")
    shop = ledger.tenant("t-1")
    shop.record_receipt("2025-08-01", "Rice", 100, buy_price=2, sell_price=3)
    result = shop.record_sale("2025-08-01", "Rice", 30, 3, "cash")
    if not result:
        print(result.reason)

Check-then-write sequences (duplicate check -> append, availability check ->
append) are only safe with one writer per tenant, so every mutating call on
a TenantLedger runs under that tenant's lock. Reads are not locked.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from typing import Callable, Dict, Optional, TypeVar

from .constants import COLLECTION_BUYERS, COLLECTION_PRODUCTS, COLLECTION_SUPPLIERS
from .database import get_connection
from .database.repositories.entity_store import EntityStore
from .errors import Result
from .modules.buyer.controller import BuyerController
from .modules.dashboard.controller import DashboardController
from .modules.product.controller import ProductController
from .modules.sales.controller import SalesController
from .modules.stock.controller import StockController
from .modules.supplier.controller import SupplierController
from .utils.helpers import Clock, system_today

_log = logging.getLogger(__name__)

T = TypeVar("T")


class TenantLedger:
    """All ledger operations for one tenant."""

    def __init__(self, store: EntityStore, tenant_id: str, lock: threading.Lock, clock: Clock):
        self.tenant_id = tenant_id
        self._lock = lock
        self.products = ProductController(store, tenant_id)
        self.suppliers = SupplierController(store, tenant_id)
        self.buyers = BuyerController(store, tenant_id)
        self.stock = StockController(store, tenant_id, clock)
        self.sales = SalesController(store, tenant_id, clock)
        self.dashboard = DashboardController(store, tenant_id, clock)

    def _write(self, fn: Callable[..., Result[T]], *args, **kwargs) -> Result[T]:
        with self._lock:
            return fn(*args, **kwargs)

    # ---------------------------- Products ----------------------------

    def add_product(self, name, category="", unit="", default_sell_price=0.0):
        return self._write(self.products.add_product, name, category, unit, default_sell_price)

    def update_product(self, product_id, name, category="", unit="", default_sell_price=0.0):
        return self._write(
            self.products.update_product, product_id, name, category, unit, default_sell_price
        )

    def list_products(self):
        return self.products.list_products()

    # ---------------------------- Suppliers ----------------------------

    def add_supplier(self, name, phone, email=None):
        return self._write(self.suppliers.add_supplier, name, phone, email)

    def list_suppliers(self):
        return self.suppliers.list_suppliers()

    def find_supplier(self, name):
        return self.suppliers.find_by_name(name)

    # ---------------------------- Buyers ----------------------------

    def add_buyer(self, name, phone, email=None):
        return self._write(self.buyers.add_buyer, name, phone, email)

    def list_buyers(self):
        return self.buyers.list_buyers()

    def buyer_directory(self, term=""):
        return self.buyers.directory(term)

    # ---------------------------- Master data ----------------------------

    def try_add(self, collection: str, candidate) -> Result:
        """
        Add a Product, Supplier or Buyer record built by the caller
        (ids are ignored and assigned on acceptance).

        Raises:
            ValueError for collections without a uniqueness rule.
        """
        if collection == COLLECTION_PRODUCTS:
            return self.add_product(
                candidate.name, candidate.category, candidate.unit, candidate.default_sell_price
            )
        if collection == COLLECTION_SUPPLIERS:
            return self.add_supplier(candidate.name, candidate.phone, candidate.email)
        if collection == COLLECTION_BUYERS:
            return self.add_buyer(candidate.name, candidate.phone, candidate.email)
        raise ValueError(f"try_add does not handle {collection!r}")

    # ---------------------------- Stock ----------------------------

    def record_receipt(self, day, product_name, quantity, buy_price, sell_price, supplier="", **kw):
        return self._write(
            self.stock.record_receipt, day, product_name, quantity, buy_price, sell_price, supplier, **kw
        )

    def update_receipt(
        self, receipt_id, day, product_name, quantity, buy_price, sell_price, supplier="", **kw
    ):
        return self._write(
            self.stock.update_receipt,
            receipt_id, day, product_name, quantity, buy_price, sell_price, supplier, **kw,
        )

    def list_receipts(self):
        return self.stock.list_receipts()

    def available_stock(self, product_name):
        return self.stock.available(product_name)

    def catalog(self, term=""):
        return self.stock.catalog(term)

    def total_stock_value(self):
        return self.stock.stock_value()

    def stock_alerts(self):
        """(low_stock, out_of_stock) catalog entries over the full history."""
        return self.stock.alerts()

    # ---------------------------- Sales ----------------------------

    def record_sale(self, day, product_name, quantity, sell_price, payment_mode, buyer="", **kw):
        return self._write(
            self.sales.record_sale, day, product_name, quantity, sell_price, payment_mode, buyer, **kw
        )

    def update_sale(
        self, sale_id, day, product_name, quantity, sell_price, payment_mode, buyer="", **kw
    ):
        return self._write(
            self.sales.update_sale,
            sale_id, day, product_name, quantity, sell_price, payment_mode, buyer, **kw,
        )

    def list_sales(self):
        return self.sales.list_sales()

    def search_sales(self, term=""):
        return self.sales.search_sales(term)

    # ---------------------------- Dashboard ----------------------------

    def dashboard_summary(self, date_from=None, date_to=None):
        return self.dashboard.summary(date_from, date_to)


class Ledger:
    """
    Tenant registry over one sqlite connection.

    Args:
        conn:  an open connection; defaults to database.get_connection().
        clock: returns today's date; admission checks never read the wall
               clock directly.
    """

    def __init__(
        self,
        conn: Optional[sqlite3.Connection] = None,
        *,
        clock: Clock = system_today,
    ):
        self.conn = conn if conn is not None else get_connection()
        self.store = EntityStore(self.conn)
        self.clock = clock
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def _lock_for(self, tenant_id: str) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.get(tenant_id)
            if lock is None:
                lock = self._locks[tenant_id] = threading.Lock()
            return lock

    def register_tenant(self, tenant_id: str, display_name: str) -> TenantLedger:
        """Called once at signup; creates the tenant's five empty collections."""
        with self._lock_for(tenant_id):
            self.store.register_tenant(tenant_id, display_name)
        return self.tenant(tenant_id)

    def tenant(self, tenant_id: str) -> TenantLedger:
        """
        Raises:
            LookupError if the tenant was never registered.
        """
        if not self.store.has_tenant(tenant_id):
            raise LookupError(f"Unknown tenant: {tenant_id!r}")
        return TenantLedger(self.store, tenant_id, self._lock_for(tenant_id), self.clock)

    def close(self) -> None:
        self.conn.close()
        _log.debug("ledger connection closed")
