from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ...constants import COLLECTION_BUYERS
from ...utils.matching import first_named
from ...utils.validators import optional_text
from .entity_store import CollectionRepo


@dataclass
class Buyer:
    # No id: a buyer is identified by name + phone.
    name: str
    phone: str
    email: str | None = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Buyer":
        return cls(
            name=d["name"],
            phone=str(d.get("phone") or ""),
            email=optional_text(d.get("email")),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"name": self.name, "phone": self.phone}
        if self.email:
            out["email"] = self.email
        return out


class BuyersRepo(CollectionRepo):
    collection = COLLECTION_BUYERS
    record_type = Buyer

    def list_buyers(self) -> list[Buyer]:
        return self._load()

    def find_by_name(self, name: str) -> Buyer | None:
        return first_named(self._load(), name)
