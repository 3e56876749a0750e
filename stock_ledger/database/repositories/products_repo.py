# stock_ledger/database/repositories/products_repo.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ...constants import COLLECTION_PRODUCTS
from ...utils.matching import first_named
from ...utils.validators import parse_float
from .entity_store import IdentifiedRepo


@dataclass
class Product:
    id: str | None
    name: str
    category: str
    unit: str
    default_sell_price: float

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Product":
        # early records stored the price under "sellPrice"
        price = d.get("defaultSellPrice", d.get("sellPrice"))
        return cls(
            id=d.get("id"),
            name=d["name"],
            category=d.get("category") or "",
            unit=d.get("unit") or "",
            default_sell_price=parse_float(price, default=0.0),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "unit": self.unit,
            "defaultSellPrice": self.default_sell_price,
        }


class ProductsRepo(IdentifiedRepo):
    collection = COLLECTION_PRODUCTS
    record_type = Product

    def list_products(self) -> list[Product]:
        return self._load()

    def find_by_name(self, name: str) -> Product | None:
        return first_named(self._load(), name)
