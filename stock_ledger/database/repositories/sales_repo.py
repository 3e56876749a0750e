from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ...constants import COLLECTION_SALES
from ...utils.validators import parse_float
from .entity_store import IdentifiedRepo


@dataclass
class Sale:
    id: str | None
    date: str               # ISO 'YYYY-MM-DD'
    product_name: str
    category: str
    unit: str
    quantity: float
    sell_price: float
    total_amount: float
    payment_mode: str
    buyer: str = ""         # buyer name; empty for walk-in sales

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Sale":
        return cls(
            id=d.get("id"),
            date=str(d["date"]),
            product_name=d["productName"],
            category=d.get("category") or "",
            unit=d.get("unit") or "",
            quantity=parse_float(d["quantity"]),
            sell_price=parse_float(d.get("sellPrice"), default=0.0),
            total_amount=parse_float(d.get("totalAmount"), default=0.0),
            payment_mode=d.get("paymentMode") or "other",
            buyer=d.get("buyer") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date,
            "productName": self.product_name,
            "category": self.category,
            "unit": self.unit,
            "quantity": self.quantity,
            "sellPrice": self.sell_price,
            "totalAmount": self.total_amount,
            "buyer": self.buyer,
            "paymentMode": self.payment_mode,
        }


class SalesRepo(IdentifiedRepo):
    collection = COLLECTION_SALES
    record_type = Sale

    def list_sales(self) -> list[Sale]:
        return self._load()
