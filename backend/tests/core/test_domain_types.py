"""Domain Types — verifies type wrappers, enum values and dashboard constants."""

from app.core.domain_types import (
    MAX_CENTS, MIN_CENTS, Cents, InvoiceStatus, ITEMS_PER_PAGE, MONTH_ORDER,
)


def test_cents_wraps_int():
    assert Cents(1999) == 1999


def test_cents_bounds_match_32_bit_column():
    assert MAX_CENTS == 2_147_483_647
    assert MIN_CENTS == -2_147_483_648


def test_invoice_status_has_two_states():
    assert {s.value for s in InvoiceStatus} == {"pending", "paid"}


def test_page_size_is_six():
    assert ITEMS_PER_PAGE == 6


def test_month_order_covers_the_year():
    assert len(MONTH_ORDER) == 12
    assert MONTH_ORDER[0] == "Jan" and MONTH_ORDER[-1] == "Dec"
