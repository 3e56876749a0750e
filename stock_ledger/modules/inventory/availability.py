# stock_ledger/modules/inventory/availability.py
"""
Availability engine.

Stock on hand is never stored. It is re-derived on every call from the full
receipt and sale history:

    available(p) = sum(receipt.quantity for p) - sum(sale.quantity for p)

Nothing is cached; each call rescans both lists (O(receipts + sales)).
Product references are names, compared through utils.matching.

The result may go negative only when a receipt was edited downward after
sales had already been admitted against the old quantity; that is allowed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ...constants import LOW_STOCK_THRESHOLD
from ...database.repositories.sales_repo import Sale
from ...database.repositories.stock_repo import StockReceipt
from ...utils.matching import contains_ci, same_name


@dataclass(frozen=True)
class CatalogEntry:
    """One distinct product seen in the receipt history."""
    name: str
    category: str
    unit: str
    available: float


def received_quantity(product_name: str, receipts: Iterable[StockReceipt]) -> float:
    return sum(r.quantity for r in receipts if same_name(r.product_name, product_name))


def sold_quantity(product_name: str, sales: Iterable[Sale]) -> float:
    return sum(s.quantity for s in sales if same_name(s.product_name, product_name))


def available_stock(
    product_name: str,
    receipts: Sequence[StockReceipt],
    sales: Sequence[Sale],
) -> float:
    return received_quantity(product_name, receipts) - sold_quantity(product_name, sales)


def unique_product_catalog(
    receipts: Sequence[StockReceipt],
    sales: Sequence[Sale],
) -> list[CatalogEntry]:
    """
    One entry per product name in the order it first appears in the receipts.
    Category and unit come from that first receipt; availability is current.
    """
    seen: list[StockReceipt] = []
    for r in receipts:
        if not any(same_name(s.product_name, r.product_name) for s in seen):
            seen.append(r)
    return [
        CatalogEntry(
            name=r.product_name,
            category=r.category,
            unit=r.unit,
            available=available_stock(r.product_name, receipts, sales),
        )
        for r in seen
    ]


def most_recent_receipt(
    product_name: str,
    receipts: Sequence[StockReceipt],
) -> Optional[StockReceipt]:
    """
    Latest receipt for the product by date. Receipts sharing the latest date
    resolve to the one recorded last.
    """
    latest: Optional[StockReceipt] = None
    for r in receipts:
        if not same_name(r.product_name, product_name):
            continue
        if latest is None or r.date >= latest.date:
            latest = r
    return latest


def total_stock_value(
    receipts: Sequence[StockReceipt],
    sales: Sequence[Sale],
) -> float:
    """Sum over products of available x sell price of the most recent receipt."""
    total = 0.0
    for entry in unique_product_catalog(receipts, sales):
        latest = most_recent_receipt(entry.name, receipts)
        price = latest.sell_price if latest is not None else 0.0
        total += entry.available * price
    return total


def stock_alerts(
    catalog: Sequence[CatalogEntry],
    threshold: float = LOW_STOCK_THRESHOLD,
) -> tuple[list[CatalogEntry], list[CatalogEntry]]:
    """
    Split the catalog into (low_stock, out_of_stock):
      - low stock:     0 < available <= threshold
      - out of stock:  available == 0
    Negative availability (see module doc) is reported in neither list.
    """
    low = [e for e in catalog if 0 < e.available <= threshold]
    out = [e for e in catalog if e.available == 0]
    return low, out


def search_catalog(catalog: Sequence[CatalogEntry], term: str) -> list[CatalogEntry]:
    term = (term or "").strip()
    if not term:
        return list(catalog)
    return [e for e in catalog if contains_ci(e.name, term) or contains_ci(e.category, term)]
