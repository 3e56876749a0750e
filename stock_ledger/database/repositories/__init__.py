# database/repositories/__init__.py
"""
Repository layer public API.

Usage:
    from stock_ledger.database.repositories import (
        EntityStore,
        ProductsRepo, Product,
        SuppliersRepo, Supplier,
        BuyersRepo, Buyer,
        StockRepo, StockReceipt,
        SalesRepo, Sale,
    )
"""

# -------------- Entity store ---------------
from .entity_store import EntityStore

# ---------------- Products -----------------
from .products_repo import ProductsRepo, Product

# ---------------- Suppliers ----------------
from .suppliers_repo import SuppliersRepo, Supplier

# ----------------- Buyers ------------------
from .buyers_repo import BuyersRepo, Buyer

# ----------------- Stock -------------------
from .stock_repo import StockRepo, StockReceipt

# ------------------ Sales ------------------
from .sales_repo import SalesRepo, Sale

__all__ = [
    "EntityStore",
    "ProductsRepo",
    "Product",
    "SuppliersRepo",
    "Supplier",
    "BuyersRepo",
    "Buyer",
    "StockRepo",
    "StockReceipt",
    "SalesRepo",
    "Sale",
]
