# utils/helpers.py
from datetime import date, timedelta
import logging
from typing import Callable, Optional, Union

NumberLike = Union[float, int, str]

# Anything returning "today" as a datetime.date; injected into controllers.
Clock = Callable[[], date]

_log = logging.getLogger(__name__)


def system_today() -> date:
    """Default clock: the local calendar date."""
    return date.today()


def fixed_clock(day: Union[date, str]) -> Clock:
    """
    Return a clock frozen on `day` (a date or ISO 'YYYY-MM-DD' string).
    Handy for tests and for back-dating a whole session.
    """
    frozen = date.fromisoformat(day) if isinstance(day, str) else day
    return lambda: frozen


def today_str(clock: Optional[Clock] = None) -> str:
    """Return today's date as ISO string (YYYY-MM-DD)."""
    return (clock or system_today)().isoformat()


def days_before(day: str, days: int) -> str:
    """ISO date `days` calendar days before the ISO date `day`."""
    return (date.fromisoformat(day) - timedelta(days=days)).isoformat()


def iso_date(value: Union[date, str]) -> str:
    """
    Normalize a date or a date-like string to 'YYYY-MM-DD'.

    Strings carrying a time part ('2025-08-01T10:00:00') are cut to the date,
    since every comparison in the ledger is on calendar dates.
    """
    if isinstance(value, date):
        return value.isoformat()
    text = str(value).strip()
    return date.fromisoformat(text[:10]).isoformat()


def round_money(v: NumberLike, places: int = 2) -> float:
    """
    Round an amount to `places` decimals.

    Raises:
        ValueError if `v` does not parse as a number.
    """
    try:
        x = float(v)
    except (TypeError, ValueError) as e:
        _log.debug("round_money: failed to parse %r as float: %s", v, e)
        raise ValueError(f"Could not parse {v!r} as a number.") from e
    return round(x, places)


def fmt_qty(q: NumberLike) -> str:
    """
    Quantity for messages shown to people: whole numbers without '.0',
    anything else at full float precision (never rounded to fewer digits).
    """
    x = float(q)
    if x.is_integer():
        return str(int(x))
    return repr(x)
