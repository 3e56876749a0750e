"""
stock_ledger: per-tenant stock intake, sales and dashboard ledger.

    from stock_ledger import Ledger, get_connection

    ledger = Ledger(get_connection())
    shop = ledger.register_tenant("t-1", "Corner Shop")
"""

from .database import get_connection
from .errors import (
    DomainError,
    DuplicateContact,
    DuplicateProduct,
    FutureDate,
    InsufficientStock,
    NotFound,
    Result,
)
from .ledger import Ledger, TenantLedger

__all__ = [
    "get_connection",
    "Ledger",
    "TenantLedger",
    "Result",
    "DomainError",
    "DuplicateProduct",
    "DuplicateContact",
    "InsufficientStock",
    "FutureDate",
    "NotFound",
]
