import logging
import uuid

from ...database.repositories.entity_store import EntityStore
from ...database.repositories.suppliers_repo import Supplier, SuppliersRepo
from ...errors import Result
from ...utils.validators import optional_text
from ..uniqueness import check_contact

_log = logging.getLogger(__name__)


class SupplierController:
    def __init__(self, store: EntityStore, tenant_id: str):
        self.tenant_id = tenant_id
        self.repo = SuppliersRepo(store, tenant_id)

    def list_suppliers(self) -> list[Supplier]:
        return self.repo.list_suppliers()

    def find_by_name(self, name: str) -> Supplier | None:
        return self.repo.find_by_name(name)

    def add_supplier(self, name: str, phone: str, email: str | None = None) -> Result[Supplier]:
        candidate = Supplier(
            id=None,
            name=name.strip(),
            phone=phone.strip(),
            email=optional_text(email),
        )
        dup = check_contact(candidate, self.repo.list_suppliers(), kind="supplier")
        if dup is not None:
            _log.info("tenant %s: supplier rejected: %s", self.tenant_id, dup)
            return Result.rejected(dup)

        candidate.id = str(uuid.uuid4())
        self.repo.append(candidate)
        _log.info("tenant %s: supplier %r added", self.tenant_id, candidate.name)
        return Result.accepted(candidate)
