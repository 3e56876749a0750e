from __future__ import annotations
from typing import Optional

from ...constants import PAYMENT_MODES

# ---------- API ----------

def normalize(mode: Optional[str]) -> Optional[str]:
    """Lowercase & strip; return None if empty. Does NOT invent synonyms."""
    if mode is None:
        return None
    m = str(mode).strip().lower()
    return m or None


def ensure_valid(mode: str) -> str:
    """
    Return the normalized mode if valid; raise ValueError if not.
    """
    m = normalize(mode)
    if m not in PAYMENT_MODES:
        raise ValueError("paymentMode must be one of: " + ", ".join(PAYMENT_MODES))
    return m  # type: ignore[return-value]
