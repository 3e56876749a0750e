import logging
import uuid
from datetime import date

from ...database.repositories.buyers_repo import Buyer
from ...database.repositories.entity_store import EntityStore
from ...database.repositories.products_repo import ProductsRepo
from ...database.repositories.sales_repo import Sale, SalesRepo
from ...database.repositories.stock_repo import StockRepo
from ...errors import Result
from ...utils.helpers import Clock, fmt_qty, iso_date, round_money, system_today, today_str
from ...utils.matching import contains_ci, first_named
from ...utils.validators import is_strictly_positive_number, non_empty
from ..buyer.controller import BuyerController
from . import payment_modes
from .admission import check_new_sale, check_sale_edit

_log = logging.getLogger(__name__)


class SalesController:
    """
    Records and edits sales behind the admission checks (no future dates, no
    oversell). totalAmount is fixed from quantity x sellPrice when the sale is
    written and is only recomputed when the sale itself is edited.
    """

    def __init__(self, store: EntityStore, tenant_id: str, clock: Clock = system_today):
        self.tenant_id = tenant_id
        self.clock = clock
        self.repo = SalesRepo(store, tenant_id)
        self.stock = StockRepo(store, tenant_id)
        self.products = ProductsRepo(store, tenant_id)
        self.buyers = BuyerController(store, tenant_id)

    # ---------------------------- Helpers ----------------------------

    def _build(
        self,
        record_id: str | None,
        day: date | str,
        product_name: str,
        quantity: float,
        sell_price: float,
        payment_mode: str,
        buyer: str,
        category: str | None,
        unit: str | None,
    ) -> Sale:
        if not is_strictly_positive_number(quantity):
            raise ValueError("quantity must be greater than zero")
        mode = payment_modes.ensure_valid(payment_mode)

        # Category/unit default to the product master, then to its first receipt.
        if category is None or unit is None:
            source = self.products.find_by_name(product_name) or first_named(
                self.stock.list_receipts(), product_name, attr="product_name"
            )
            if category is None:
                category = source.category if source else ""
            if unit is None:
                unit = source.unit if source else ""

        qty = float(quantity)
        price = float(sell_price)
        return Sale(
            id=record_id,
            date=iso_date(day),
            product_name=product_name,
            category=category,
            unit=unit,
            quantity=qty,
            sell_price=price,
            total_amount=round_money(qty * price),
            payment_mode=mode,
            buyer=(buyer or "").strip(),
        )

    def _new_buyer(self, sale: Sale, phone: str | None, email: str | None) -> Buyer | None:
        """A buyer to register alongside the sale, or None if nothing to add."""
        if not sale.buyer or not non_empty(phone):
            return None
        if self.buyers.find_by_name(sale.buyer) is not None:
            return None
        return self.buyers.make_buyer(sale.buyer, phone, email)  # type: ignore[arg-type]

    # ---------------------------- Admission ----------------------------

    def record_sale(
        self,
        day: date | str,
        product_name: str,
        quantity: float,
        sell_price: float,
        payment_mode: str,
        buyer: str = "",
        *,
        category: str | None = None,
        unit: str | None = None,
        buyer_phone: str | None = None,
        buyer_email: str | None = None,
    ) -> Result[Sale]:
        """
        Admit and store a new sale.

        When `buyer` names someone not yet in the buyer list and `buyer_phone`
        is given, the buyer is registered too. A phone/email clash rejects the
        whole sale and nothing is written.
        """
        sale = self._build(
            None, day, product_name, quantity, sell_price, payment_mode, buyer, category, unit
        )
        rejection = check_new_sale(
            sale, self.stock.list_receipts(), self.repo.list_sales(), today_str(self.clock)
        )
        new_buyer = self._new_buyer(sale, buyer_phone, buyer_email)
        if rejection is None and new_buyer is not None:
            rejection = self.buyers.check(new_buyer)
        if rejection is not None:
            _log.info("tenant %s: sale rejected: %s", self.tenant_id, rejection)
            return Result.rejected(rejection)

        if new_buyer is not None:
            self.buyers.repo.append(new_buyer)
            _log.info("tenant %s: buyer %r added with sale", self.tenant_id, new_buyer.name)

        sale.id = str(uuid.uuid4())
        self.repo.append(sale)
        _log.info(
            "tenant %s: sold %s x %r for %.2f (%s)",
            self.tenant_id, fmt_qty(sale.quantity), sale.product_name,
            sale.total_amount, sale.payment_mode,
        )
        return Result.accepted(sale)

    def update_sale(
        self,
        sale_id: str,
        day: date | str,
        product_name: str,
        quantity: float,
        sell_price: float,
        payment_mode: str,
        buyer: str = "",
        *,
        category: str | None = None,
        unit: str | None = None,
    ) -> Result[Sale]:
        """
        Edit a sale in place. Availability is checked with the old sale taken
        out of the history, so keeping the same quantity is always admitted.
        """
        sale = self._build(
            sale_id, day, product_name, quantity, sell_price, payment_mode, buyer, category, unit
        )
        rejection = check_sale_edit(
            sale_id, sale, self.stock.list_receipts(), self.repo.list_sales(), today_str(self.clock)
        )
        if rejection is not None:
            _log.info("tenant %s: sale edit rejected: %s", self.tenant_id, rejection)
            return Result.rejected(rejection)

        self.repo.replace(sale_id, sale)
        _log.info("tenant %s: sale %s updated", self.tenant_id, sale_id)
        return Result.accepted(sale)

    # ---------------------------- Queries ----------------------------

    def list_sales(self) -> list[Sale]:
        return self.repo.list_sales()

    def search_sales(self, term: str = "") -> list[Sale]:
        """Case-insensitive match on product name, category or buyer."""
        sales = self.repo.list_sales()
        term = (term or "").strip()
        if not term:
            return sales
        return [
            s for s in sales
            if contains_ci(s.product_name, term)
            or contains_ci(s.category, term)
            or contains_ci(s.buyer, term)
        ]
