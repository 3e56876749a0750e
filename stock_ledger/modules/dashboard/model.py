# stock_ledger/modules/dashboard/model.py
"""
Dashboard rollups computed from the raw sale and receipt history.

Everything here is a pure function of the lists passed in. Only the sales
are filtered by the date range; stock value and stock alerts always reflect
the full, unfiltered history.

Profit note: each sale is costed against the FIRST receipt (in recording
order) for the same product, not the receipt the units actually came from.
With varying buy prices this is an approximation; no FIFO/LIFO costing is
done.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from ...constants import BEST_SELLERS_LIMIT, LOW_STOCK_THRESHOLD
from ...database.repositories.buyers_repo import Buyer
from ...database.repositories.sales_repo import Sale
from ...database.repositories.stock_repo import StockReceipt
from ...utils.matching import first_named
from ..inventory.availability import (
    CatalogEntry,
    stock_alerts,
    total_stock_value,
    unique_product_catalog,
)


# --------------------------- Period helpers ---------------------------

@dataclass(frozen=True)
class DateRange:
    date_from: str  # ISO yyyy-mm-dd, inclusive
    date_to: str    # ISO yyyy-mm-dd, inclusive

    def contains(self, day: str) -> bool:
        # Sale dates may carry a time part; compare on the date only.
        d = day[:10]
        return self.date_from <= d <= self.date_to


# --------------------------- Summary ---------------------------

@dataclass
class DashboardSummary:
    date_from: str
    date_to: str

    # ---- KPI numbers ----
    total_revenue: float = 0.0
    total_profit: float = 0.0
    stock_value: float = 0.0
    highest_sale: Optional[Sale] = None

    # ---- Leaderboards ----
    best_sellers: List[Tuple[str, float]] = field(default_factory=list)
    payment_totals: Dict[str, float] = field(default_factory=dict)

    # ---- Stock alerts (full history) ----
    low_stock: List[CatalogEntry] = field(default_factory=list)
    out_of_stock: List[CatalogEntry] = field(default_factory=list)

    # ---- Counters ----
    product_count: int = 0
    buyer_count: int = 0
    stock_entries: int = 0
    sales_count: int = 0


# --------------------------- Rollups ---------------------------

def filter_sales(sales: Sequence[Sale], date_range: DateRange) -> List[Sale]:
    return [s for s in sales if date_range.contains(s.date)]


def total_revenue(sales: Sequence[Sale]) -> float:
    return sum(s.total_amount for s in sales)


def total_profit(sales: Sequence[Sale], receipts: Sequence[StockReceipt]) -> float:
    total = 0.0
    for s in sales:
        receipt = first_named(receipts, s.product_name, attr="product_name")
        if receipt is None:
            continue
        total += (s.sell_price - receipt.buy_price) * s.quantity
    return total


def highest_sale(sales: Sequence[Sale]) -> Optional[Sale]:
    best: Optional[Sale] = None
    for s in sales:
        if best is None or s.total_amount > best.total_amount:
            best = s
    return best


def best_sellers(
    sales: Sequence[Sale],
    limit: int = BEST_SELLERS_LIMIT,
) -> List[Tuple[str, float]]:
    """Top products by quantity sold; ties keep first-seen order (stable sort)."""
    qty: Dict[str, float] = {}
    for s in sales:
        qty[s.product_name] = qty.get(s.product_name, 0.0) + s.quantity
    ranked = sorted(qty.items(), key=lambda kv: kv[1], reverse=True)
    return ranked[:limit]


def payment_totals(sales: Sequence[Sale]) -> Dict[str, float]:
    totals: Dict[str, float] = {}
    for s in sales:
        totals[s.payment_mode] = totals.get(s.payment_mode, 0.0) + s.total_amount
    return {mode: amount for mode, amount in totals.items() if amount > 0}


def dashboard_summary(
    receipts: Sequence[StockReceipt],
    sales: Sequence[Sale],
    buyers: Sequence[Buyer],
    date_range: DateRange,
    *,
    low_stock_threshold: float = LOW_STOCK_THRESHOLD,
) -> DashboardSummary:
    in_range = filter_sales(sales, date_range)
    catalog = unique_product_catalog(receipts, sales)
    low, out = stock_alerts(catalog, low_stock_threshold)

    return DashboardSummary(
        date_from=date_range.date_from,
        date_to=date_range.date_to,
        total_revenue=total_revenue(in_range),
        total_profit=total_profit(in_range, receipts),
        stock_value=total_stock_value(receipts, sales),
        highest_sale=highest_sale(in_range),
        best_sellers=best_sellers(in_range),
        payment_totals=payment_totals(in_range),
        low_stock=low,
        out_of_stock=out,
        product_count=len(catalog),
        buyer_count=len(buyers),
        stock_entries=len(receipts),
        sales_count=len(in_range),
    )
