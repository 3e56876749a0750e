# stock_ledger/modules/uniqueness.py
"""
Duplicate detection for products, suppliers and buyers.

These checks only look at the current collection and the candidate; they
never write. Controllers run check + append together under the tenant lock.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..database.repositories.products_repo import Product
from ..errors import DuplicateContact, DuplicateProduct
from ..utils.matching import same_name_ci


class Contact(Protocol):
    name: str
    phone: str
    email: Optional[str]


def check_product(
    candidate_name: str,
    existing: Sequence[Product],
    *,
    exclude_id: Optional[str] = None,
) -> Optional[DuplicateProduct]:
    """
    DuplicateProduct if another product already uses the name (ignoring case).
    `exclude_id` lets a product being edited keep its own name.
    """
    for p in existing:
        if exclude_id is not None and p.id == exclude_id:
            continue
        if same_name_ci(p.name, candidate_name):
            return DuplicateProduct(p.name, p)
    return None


def contact_conflict(candidate: Contact, existing: Sequence[Contact]) -> Optional[Contact]:
    """First record sharing the candidate's phone, or its email when one is given."""
    for rec in existing:
        if rec.phone == candidate.phone:
            return rec
        if candidate.email and rec.email == candidate.email:
            return rec
    return None


def check_contact(
    candidate: Contact,
    existing: Sequence[Contact],
    *,
    kind: str = "contact",
) -> Optional[DuplicateContact]:
    clash = contact_conflict(candidate, existing)
    if clash is None:
        return None
    return DuplicateContact(clash.name, clash, kind=kind)
