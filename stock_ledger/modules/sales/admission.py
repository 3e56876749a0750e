# stock_ledger/modules/sales/admission.py
"""
Sale admission policy.

A candidate sale is admitted when:
  - its date is not after today, and
  - its quantity does not exceed the product's availability computed
    *before* the sale is added.

For edits, the sale being replaced is taken out of the history first, so
its old quantity is handed back to availability before the new quantity is
checked. Editing a sale without changing its quantity is always admitted.

All functions are pure: they read lists and return the rejection (or None).
"""

from __future__ import annotations

from typing import Optional, Sequence

from ...constants import COLLECTION_SALES
from ...database.repositories.sales_repo import Sale
from ...database.repositories.stock_repo import StockReceipt
from ...errors import DomainError, FutureDate, InsufficientStock, NotFound
from ..inventory.availability import available_stock


def check_date(date: str, today: str) -> Optional[FutureDate]:
    """Both dates are ISO 'YYYY-MM-DD' so string order is date order."""
    if date > today:
        return FutureDate(date, today)
    return None


def check_quantity(
    candidate: Sale,
    receipts: Sequence[StockReceipt],
    sales: Sequence[Sale],
) -> Optional[InsufficientStock]:
    available = available_stock(candidate.product_name, receipts, sales)
    if candidate.quantity > available:
        return InsufficientStock(candidate.product_name, available, candidate.quantity)
    return None


def check_new_sale(
    candidate: Sale,
    receipts: Sequence[StockReceipt],
    sales: Sequence[Sale],
    today: str,
) -> Optional[DomainError]:
    return check_date(candidate.date, today) or check_quantity(candidate, receipts, sales)


def check_sale_edit(
    sale_id: str,
    candidate: Sale,
    receipts: Sequence[StockReceipt],
    sales: Sequence[Sale],
    today: str,
) -> Optional[DomainError]:
    if not any(s.id == sale_id for s in sales):
        return NotFound(COLLECTION_SALES, sale_id)
    others = [s for s in sales if s.id != sale_id]
    return check_date(candidate.date, today) or check_quantity(candidate, receipts, others)
