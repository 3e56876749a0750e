# utils/validators.py

def non_empty(text: str) -> bool:
    """
    True if `text` is not None/empty after stripping whitespace.
    """
    return bool(text and str(text).strip())


def optional_text(text) -> str | None:
    """Stripped text, or None for missing/blank values (e.g. an unset email)."""
    return str(text).strip() if non_empty(text) else None


# ---- Numeric parsing & validators ----

def try_parse_float(x):
    """
    Best-effort parse to float.

    Returns:
        (ok: bool, value: float|None)

    ok == False means parsing failed and value is None.
    """
    try:
        return True, float(x)
    except (TypeError, ValueError):
        return False, None


def parse_float(x, default: float | None = None) -> float:
    """
    Strict parse to float; raises ValueError with a clear message on failure.
    If `default` is given, None/blank inputs map to it instead of failing
    (stored records written before a field existed).
    """
    if default is not None and (x is None or str(x).strip() == ""):
        return default
    ok, val = try_parse_float(x)
    if not ok:
        raise ValueError(f"Could not parse '{x}' as a number.")
    return val  # type: ignore[return-value]


def is_strictly_positive_number(x) -> bool:
    """
    True iff x parses to a float and value > 0.
    """
    ok, val = try_parse_float(x)
    return bool(ok and val is not None and val > 0)
