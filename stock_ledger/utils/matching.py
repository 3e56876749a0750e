# utils/matching.py
"""
Single place deciding when two record names refer to the same thing.

Stock receipts and sales point at products (and sales at buyers) by *name*,
not by id. Every engine lookup goes through `same_name()` so the policy can
be switched in one spot. Product *uniqueness* is always case-insensitive
(see modules/uniqueness.py); reference matching defaults to exact.
"""

from __future__ import annotations

from typing import Iterable, Optional, TypeVar

T = TypeVar("T")

# Exact, case-sensitive matching of by-name references.
CASE_SENSITIVE = True


def normalize_name(name: Optional[str]) -> str:
    if name is None:
        return ""
    return name if CASE_SENSITIVE else name.casefold()


def same_name(a: Optional[str], b: Optional[str]) -> bool:
    return normalize_name(a) == normalize_name(b)


def same_name_ci(a: Optional[str], b: Optional[str]) -> bool:
    """Case-insensitive comparison (used for product uniqueness)."""
    return (a or "").casefold() == (b or "").casefold()


def first_named(records: Iterable[T], name: Optional[str], attr: str = "name") -> Optional[T]:
    """First record whose `attr` matches `name` under the reference policy."""
    for r in records:
        if same_name(getattr(r, attr), name):
            return r
    return None


def contains_ci(haystack: Optional[str], needle: str) -> bool:
    """Case-insensitive substring test used by the search boxes."""
    return needle.casefold() in (haystack or "").casefold()
