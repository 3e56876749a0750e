from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ...constants import COLLECTION_SUPPLIERS
from ...utils.matching import first_named
from ...utils.validators import optional_text
from .entity_store import IdentifiedRepo


@dataclass
class Supplier:
    id: str | None
    name: str
    phone: str
    email: str | None = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Supplier":
        return cls(
            id=d.get("id"),
            name=d["name"],
            phone=str(d.get("phone") or ""),
            email=optional_text(d.get("email")),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"id": self.id, "name": self.name, "phone": self.phone}
        if self.email:
            out["email"] = self.email
        return out


class SuppliersRepo(IdentifiedRepo):
    """Append-only: suppliers are never edited or removed."""

    collection = COLLECTION_SUPPLIERS
    record_type = Supplier

    def list_suppliers(self) -> list[Supplier]:
        return self._load()

    def find_by_name(self, name: str) -> Supplier | None:
        return first_named(self._load(), name)
