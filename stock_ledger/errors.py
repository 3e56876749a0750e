# stock_ledger/errors.py
"""
Domain errors and the Result value every ledger operation returns.

Rejections (duplicates, oversell, future dates, unknown ids) are business
outcomes the caller shows to the user, so controllers hand them back inside a
`Result` instead of raising. `Result.unwrap()` turns a rejection back into
the exception for callers that prefer try/except.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from .utils.helpers import fmt_qty

T = TypeVar("T")


class DomainError(Exception):
    """Domain-level error the caller can surface (toast/snackbar)."""


class DuplicateProduct(DomainError):
    """A product with the same name (ignoring case) already exists."""

    def __init__(self, name: str, record: Any = None):
        super().__init__(f'Product "{name}" already exists!')
        self.name = name
        self.record = record


class DuplicateContact(DomainError):
    """Phone or email already belongs to another supplier/buyer."""

    def __init__(self, name: str, record: Any = None, *, kind: str = "contact"):
        super().__init__(f'Phone/Email belongs to "{name}"!')
        self.name = name
        self.record = record
        self.kind = kind


class InsufficientStock(DomainError):
    def __init__(self, product_name: str, available: float, requested: float):
        super().__init__(
            f"Only {fmt_qty(available)} units available for {product_name}. "
            f"Cannot sell {fmt_qty(requested)} units."
        )
        self.product_name = product_name
        self.available = available
        self.requested = requested


class FutureDate(DomainError):
    def __init__(self, date: str, today: str):
        super().__init__(f"Date {date} is in the future (today is {today}).")
        self.date = date
        self.today = today


class NotFound(DomainError):
    """Update-by-id on an id the collection does not hold."""

    def __init__(self, collection: str, record_id: str):
        super().__init__(f"No record with id {record_id!r} in {collection}.")
        self.collection = collection
        self.record_id = record_id


@dataclass(frozen=True)
class Result(Generic[T]):
    ok: bool
    value: Optional[T] = None
    error: Optional[DomainError] = None

    @classmethod
    def accepted(cls, value: T) -> "Result[T]":
        return cls(ok=True, value=value)

    @classmethod
    def rejected(cls, error: DomainError) -> "Result[T]":
        return cls(ok=False, error=error)

    @property
    def reason(self) -> str:
        return "" if self.error is None else str(self.error)

    def unwrap(self) -> T:
        if not self.ok:
            if self.error is None:
                raise DomainError("Rejected without a reason.")
            raise self.error
        return self.value  # type: ignore[return-value]

    def __bool__(self) -> bool:
        return self.ok
