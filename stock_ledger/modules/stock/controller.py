import logging
import uuid
from datetime import date

from ...database.repositories.entity_store import EntityStore
from ...database.repositories.products_repo import ProductsRepo
from ...database.repositories.sales_repo import SalesRepo
from ...database.repositories.stock_repo import StockReceipt, StockRepo
from ...errors import NotFound, Result
from ...utils.helpers import Clock, fmt_qty, iso_date, system_today, today_str
from ...utils.validators import is_strictly_positive_number
from ..inventory import availability
from ..sales.admission import check_date

_log = logging.getLogger(__name__)


class StockController:
    """
    Stock intake (receipts) plus the read side of the availability engine.

    Receipts are admitted when their date is not in the future. Edits keep
    the receipt id and are not checked against sales already recorded, so a
    downward edit can leave a product with negative availability.
    """

    def __init__(self, store: EntityStore, tenant_id: str, clock: Clock = system_today):
        self.tenant_id = tenant_id
        self.clock = clock
        self.repo = StockRepo(store, tenant_id)
        self.sales = SalesRepo(store, tenant_id)
        self.products = ProductsRepo(store, tenant_id)

    # ---------------------------- Admission ----------------------------

    def _build(
        self,
        record_id: str | None,
        day: date | str,
        product_name: str,
        quantity: float,
        buy_price: float,
        sell_price: float,
        supplier: str,
        category: str | None,
        unit: str | None,
    ) -> StockReceipt:
        if not is_strictly_positive_number(quantity):
            raise ValueError("quantity must be greater than zero")
        # Category/unit default to the product master, as the intake form does.
        product = self.products.find_by_name(product_name)
        if category is None:
            category = product.category if product else ""
        if unit is None:
            unit = product.unit if product else ""
        return StockReceipt(
            id=record_id,
            date=iso_date(day),
            product_name=product_name,
            category=category,
            unit=unit,
            quantity=float(quantity),
            buy_price=float(buy_price),
            sell_price=float(sell_price),
            supplier=supplier or "",
        )

    def record_receipt(
        self,
        day: date | str,
        product_name: str,
        quantity: float,
        buy_price: float,
        sell_price: float,
        supplier: str = "",
        *,
        category: str | None = None,
        unit: str | None = None,
    ) -> Result[StockReceipt]:
        receipt = self._build(
            None, day, product_name, quantity, buy_price, sell_price, supplier, category, unit
        )
        rejection = check_date(receipt.date, today_str(self.clock))
        if rejection is not None:
            _log.info("tenant %s: receipt rejected: %s", self.tenant_id, rejection)
            return Result.rejected(rejection)

        receipt.id = str(uuid.uuid4())
        self.repo.append(receipt)
        _log.info(
            "tenant %s: received %s x %r on %s",
            self.tenant_id, fmt_qty(receipt.quantity), receipt.product_name, receipt.date,
        )
        return Result.accepted(receipt)

    def update_receipt(
        self,
        receipt_id: str,
        day: date | str,
        product_name: str,
        quantity: float,
        buy_price: float,
        sell_price: float,
        supplier: str = "",
        *,
        category: str | None = None,
        unit: str | None = None,
    ) -> Result[StockReceipt]:
        if self.repo.get(receipt_id) is None:
            return Result.rejected(NotFound(self.repo.collection, receipt_id))

        receipt = self._build(
            receipt_id, day, product_name, quantity, buy_price, sell_price, supplier, category, unit
        )
        rejection = check_date(receipt.date, today_str(self.clock))
        if rejection is not None:
            _log.info("tenant %s: receipt edit rejected: %s", self.tenant_id, rejection)
            return Result.rejected(rejection)

        self.repo.replace(receipt_id, receipt)
        _log.info("tenant %s: receipt %s updated", self.tenant_id, receipt_id)
        return Result.accepted(receipt)

    # ---------------------------- Queries ----------------------------

    def list_receipts(self) -> list[StockReceipt]:
        return self.repo.list_receipts()

    def available(self, product_name: str) -> float:
        return availability.available_stock(
            product_name, self.repo.list_receipts(), self.sales.list_sales()
        )

    def catalog(self, term: str = "") -> list[availability.CatalogEntry]:
        entries = availability.unique_product_catalog(
            self.repo.list_receipts(), self.sales.list_sales()
        )
        return availability.search_catalog(entries, term)

    def stock_value(self) -> float:
        return availability.total_stock_value(self.repo.list_receipts(), self.sales.list_sales())

    def alerts(self):
        """(low_stock, out_of_stock) catalog entries."""
        return availability.stock_alerts(self.catalog())
