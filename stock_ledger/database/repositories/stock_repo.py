from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ...constants import COLLECTION_STOCK
from ...utils.validators import parse_float
from .entity_store import IdentifiedRepo


@dataclass
class StockReceipt:
    id: str | None
    date: str               # ISO 'YYYY-MM-DD'
    product_name: str
    category: str
    unit: str
    quantity: float
    buy_price: float
    sell_price: float
    supplier: str = ""

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "StockReceipt":
        return cls(
            id=d.get("id"),
            date=str(d["date"]),
            product_name=d["productName"],
            category=d.get("category") or "",
            unit=d.get("unit") or "",
            quantity=parse_float(d["quantity"]),
            buy_price=parse_float(d.get("buyPrice"), default=0.0),
            sell_price=parse_float(d.get("sellPrice"), default=0.0),
            supplier=d.get("supplier") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date,
            "productName": self.product_name,
            "category": self.category,
            "unit": self.unit,
            "quantity": self.quantity,
            "buyPrice": self.buy_price,
            "sellPrice": self.sell_price,
            "supplier": self.supplier,
        }


class StockRepo(IdentifiedRepo):
    """Stock receipt history, in the order the receipts were recorded."""

    collection = COLLECTION_STOCK
    record_type = StockReceipt

    def list_receipts(self) -> list[StockReceipt]:
        return self._load()
