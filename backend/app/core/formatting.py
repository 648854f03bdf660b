"""Formatting — pure conversions between stored values and display strings.

Invariants:
    - Amounts are stored as integer cents; conversion to cents rounds half-up
    - format_currency never raises for None/0 — both render as "$0.00"
    - No IO, no locale lookups (en-US display only)

Design Decisions:
    - Decimal for major-unit amounts: 19.99 * 100 must be 1999, not 1998.99...
"""

from datetime import date
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from app.core.domain_types import MAX_CENTS, MIN_CENTS, Cents


def to_cents(amount: Decimal) -> Cents:
    """Convert a major-unit amount (dollars) to integer cents."""
    return Cents(int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)))


def from_cents(cents: int) -> float:
    """Convert stored cents back to major units for form pre-fill."""
    return cents / 100


def format_currency(cents: int | None) -> str:
    """Render cents as a US dollar string, e.g. 123456 -> "$1,234.56"."""
    value = Decimal(cents or 0) / 100
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_date_to_local(date_str: str) -> str:
    """Render an ISO calendar date as "Dec 6, 2022"."""
    d = date.fromisoformat(date_str)
    return f"{d:%b} {d.day}, {d.year}"


def parse_amount_query(query: str) -> int | None:
    """Return the query as an integer amount, or None when it is not one.

    Free-text search matches invoice amounts by exact equality only, so a
    query such as "30" or "30.0" yields 30 while "pend", "30.5" or "1_0"
    yield None. Numbers outside the amount column's range yield None too.
    """
    text = query.strip()
    if not text or "_" in text:
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    if not value.is_finite() or value != value.to_integral_value():
        return None
    if not MIN_CENTS <= value <= MAX_CENTS:
        return None
    return int(value)
