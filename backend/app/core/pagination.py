"""Pagination — pure page arithmetic for the invoices table.

Invariants:
    - Pages are 1-based; page < 1 is treated as page 1
    - total_pages(0) == 0 (an empty result has no pages)
    - generate_pagination output never exceeds 7 entries
"""

import math

from app.core.domain_types import ITEMS_PER_PAGE

ELLIPSIS = "..."


def page_offset(page: int, per_page: int = ITEMS_PER_PAGE) -> int:
    return (max(page, 1) - 1) * per_page


def total_pages(count: int, per_page: int = ITEMS_PER_PAGE) -> int:
    return math.ceil(count / per_page)


def generate_pagination(current_page: int, pages: int) -> list[int | str]:
    """Page links for the table footer, collapsing gaps into ELLIPSIS."""
    if pages <= 7:
        return list(range(1, pages + 1))

    # Near the start: first 3, ellipsis, last 2
    if current_page <= 3:
        return [1, 2, 3, ELLIPSIS, pages - 1, pages]

    # Near the end: first 2, ellipsis, last 3
    if current_page >= pages - 2:
        return [1, 2, ELLIPSIS, pages - 2, pages - 1, pages]

    return [
        1, ELLIPSIS,
        current_page - 1, current_page, current_page + 1,
        ELLIPSIS, pages,
    ]
