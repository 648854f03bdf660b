"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Cents is an integer amount in minor currency units and fits the
      32-bit amount column (MIN_CENTS..MAX_CENTS)
    - Invoice status is one of the InvoiceStatus members — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

Cents = NewType("Cents", int)

MIN_CENTS = -2**31
MAX_CENTS = 2**31 - 1


# ─── Enums ───────────────────────────────────────────────────────

class InvoiceStatus(str, Enum):
    """Invoice lifecycle states — maps to DB `status` column."""
    PENDING = "pending"
    PAID = "paid"


# ─── Dashboard Constants ─────────────────────────────────────────

ITEMS_PER_PAGE = 6
LATEST_INVOICES_LIMIT = 5
INVOICES_PATH = "/dashboard/invoices"

MONTH_ORDER = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
