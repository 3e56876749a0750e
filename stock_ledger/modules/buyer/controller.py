import logging
from dataclasses import dataclass

from ...database.repositories.buyers_repo import Buyer, BuyersRepo
from ...database.repositories.entity_store import EntityStore
from ...database.repositories.sales_repo import SalesRepo
from ...errors import DuplicateContact, Result
from ...utils.helpers import round_money
from ...utils.matching import contains_ci, same_name
from ...utils.validators import optional_text
from ..uniqueness import check_contact

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuyerSummary:
    """Directory row: a buyer plus what they bought so far."""
    name: str
    phone: str
    email: str | None
    purchases: int
    total_spent: float


class BuyerController:
    def __init__(self, store: EntityStore, tenant_id: str):
        self.tenant_id = tenant_id
        self.repo = BuyersRepo(store, tenant_id)
        self.sales = SalesRepo(store, tenant_id)

    def list_buyers(self) -> list[Buyer]:
        return self.repo.list_buyers()

    def find_by_name(self, name: str) -> Buyer | None:
        return self.repo.find_by_name(name)

    @staticmethod
    def make_buyer(name: str, phone: str, email: str | None = None) -> Buyer:
        return Buyer(name=name.strip(), phone=phone.strip(), email=optional_text(email))

    def check(self, candidate: Buyer) -> DuplicateContact | None:
        """Duplicate check only; nothing is written."""
        return check_contact(candidate, self.repo.list_buyers(), kind="buyer")

    def add_buyer(self, name: str, phone: str, email: str | None = None) -> Result[Buyer]:
        candidate = self.make_buyer(name, phone, email)
        dup = self.check(candidate)
        if dup is not None:
            _log.info("tenant %s: buyer rejected: %s", self.tenant_id, dup)
            return Result.rejected(dup)

        self.repo.append(candidate)
        _log.info("tenant %s: buyer %r added", self.tenant_id, candidate.name)
        return Result.accepted(candidate)

    def directory(self, term: str = "") -> list[BuyerSummary]:
        """
        Every buyer with their purchase count and total spent, optionally
        filtered by a case-insensitive match on name, phone or email.
        Sales are attributed by buyer *name*.
        """
        sales = self.sales.list_sales()
        term = (term or "").strip()
        rows: list[BuyerSummary] = []
        for b in self.repo.list_buyers():
            if term and not (
                contains_ci(b.name, term) or contains_ci(b.phone, term) or contains_ci(b.email, term)
            ):
                continue
            mine = [s for s in sales if same_name(s.buyer, b.name)]
            rows.append(
                BuyerSummary(
                    name=b.name,
                    phone=b.phone,
                    email=b.email,
                    purchases=len(mine),
                    total_spent=round_money(sum(s.total_amount for s in mine)),
                )
            )
        return rows
