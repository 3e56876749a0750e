# stock_ledger/modules/dashboard/controller.py
from __future__ import annotations

from datetime import date
from typing import Optional, Union

from ...constants import DASHBOARD_DEFAULT_DAYS
from ...database.repositories.buyers_repo import BuyersRepo
from ...database.repositories.entity_store import EntityStore
from ...database.repositories.sales_repo import SalesRepo
from ...database.repositories.stock_repo import StockRepo
from ...utils.helpers import Clock, days_before, iso_date, system_today, today_str
from .model import DashboardSummary, DateRange, dashboard_summary

DateLike = Union[date, str]


class DashboardController:
    """
    Owns the date context for the dashboard. Without explicit dates the
    window is the last DASHBOARD_DEFAULT_DAYS days up to and including today.
    """

    def __init__(self, store: EntityStore, tenant_id: str, clock: Clock = system_today) -> None:
        self.tenant_id = tenant_id
        self.clock = clock
        self.stock = StockRepo(store, tenant_id)
        self.sales = SalesRepo(store, tenant_id)
        self.buyers = BuyersRepo(store, tenant_id)

    def resolve_range(
        self,
        date_from: Optional[DateLike] = None,
        date_to: Optional[DateLike] = None,
    ) -> DateRange:
        today = today_str(self.clock)
        df = iso_date(date_from) if date_from else days_before(today, DASHBOARD_DEFAULT_DAYS)
        dt = iso_date(date_to) if date_to else today
        return DateRange(df, dt)

    def summary(
        self,
        date_from: Optional[DateLike] = None,
        date_to: Optional[DateLike] = None,
    ) -> DashboardSummary:
        return dashboard_summary(
            self.stock.list_receipts(),
            self.sales.list_sales(),
            self.buyers.list_buyers(),
            self.resolve_range(date_from, date_to),
        )
