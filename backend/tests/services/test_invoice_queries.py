"""Invoice Queries — search, pagination and single-invoice lookup.

Invariants:
    - Search ORs name, email, whole-number amount, exact date and status
    - Pages are 6 rows, newest first, and never overlap
    - Missing or malformed ids read as None
    - Store faults surface as FetchError with a generic message
"""

from uuid import uuid4

import pytest
from sqlalchemy import text

from app.core.errors import FetchError
from app.services.invoice_queries import InvoiceQueries


@pytest.fixture
def queries(db_manager):
    return InvoiceQueries(db_manager)


@pytest.fixture
async def two_customers(add_customer, add_invoice):
    delba = await add_customer("Delba de Oliveira", "delba@oliveira.com")
    lee = await add_customer("Lee Robinson", "lee@robinson.com")
    await add_invoice(delba, 30, "pending", "2023-06-27")
    await add_invoice(lee, 3000, "paid", "2023-06-09")
    return delba, lee


async def test_whole_number_query_matches_amount(queries, two_customers):
    rows = await queries.fetch_filtered_invoices("30", 1)
    assert [r.amount for r in rows] == [30]


async def test_text_query_matches_status_substring(queries, two_customers):
    rows = await queries.fetch_filtered_invoices("pend", 1)
    assert [r.status for r in rows] == ["pending"]


async def test_query_matches_name_case_insensitively(queries, two_customers):
    rows = await queries.fetch_filtered_invoices("ROBIN", 1)
    assert [r.name for r in rows] == ["Lee Robinson"]


async def test_query_matches_exact_date(queries, two_customers):
    rows = await queries.fetch_filtered_invoices("2023-06-09", 1)
    assert [r.email for r in rows] == ["lee@robinson.com"]


async def test_percent_is_literal(queries, two_customers):
    assert await queries.fetch_filtered_invoices("%", 1) == []


async def test_empty_query_matches_everything(queries, two_customers):
    rows = await queries.fetch_filtered_invoices("", 1)
    assert [r.date for r in rows] == ["2023-06-27", "2023-06-09"]


async def test_pages_cover_every_row_once(queries, add_customer, add_invoice):
    customer = await add_customer("Amy Burns", "amy@burns.com")
    for day in range(1, 14):
        await add_invoice(customer, 100 * day, "paid", f"2023-01-{day:02d}")

    pages = await queries.fetch_invoices_pages("")
    assert pages == 3

    seen = []
    for page in range(1, pages + 1):
        rows = await queries.fetch_filtered_invoices("", page)
        assert len(rows) <= 6
        seen.extend(rows)
    assert len({r.id for r in seen}) == 13
    dates = [r.date for r in seen]
    assert dates == sorted(dates, reverse=True)


async def test_pages_for_no_matches_is_zero(queries, two_customers):
    assert await queries.fetch_invoices_pages("nobody") == 0


async def test_page_past_the_end_is_empty(queries, two_customers):
    assert await queries.fetch_filtered_invoices("", 5) == []


async def test_latest_invoices_formats_amount(queries, add_customer, add_invoice):
    customer = await add_customer("Amy Burns", "amy@burns.com")
    for day in range(1, 8):
        await add_invoice(customer, 123456, "paid", f"2023-02-{day:02d}")

    latest = await queries.fetch_latest_invoices()
    assert len(latest) == 5
    assert latest[0].amount == "$1,234.56"
    assert latest[0].name == "Amy Burns"


async def test_invoice_by_id_in_dollars(queries, add_customer, add_invoice):
    customer = await add_customer("Amy Burns", "amy@burns.com")
    invoice_id = await add_invoice(customer, 1999, "pending", "2023-02-01")

    form = await queries.fetch_invoice_by_id(invoice_id)
    assert form.amount == 19.99
    assert str(form.customer_id) == customer
    assert form.status == "pending"


async def test_invoice_by_id_absent_or_malformed(queries, db_manager):
    assert await queries.fetch_invoice_by_id(str(uuid4())) is None
    assert await queries.fetch_invoice_by_id("not-a-uuid") is None


async def test_store_fault_raises_fetch_error(queries, db_manager):
    async with db_manager.engine.begin() as conn:
        await conn.execute(text("DROP TABLE invoices"))

    with pytest.raises(FetchError) as exc:
        await queries.fetch_filtered_invoices("", 1)
    assert exc.value.message == "Failed to fetch invoices."
    with pytest.raises(FetchError, match="Failed to fetch total number of invoices."):
        await queries.fetch_invoices_pages("")


async def test_number_too_large_for_amount_matches_nothing(queries, two_customers):
    assert await queries.fetch_filtered_invoices("99999999999999999999", 1) == []
    assert await queries.fetch_invoices_pages("99999999999999999999") == 0


async def test_digit_separator_is_not_an_amount(queries, add_customer, add_invoice):
    customer = await add_customer("Amy Burns", "amy@burns.com")
    await add_invoice(customer, 10, "paid", "2023-02-01")
    assert await queries.fetch_filtered_invoices("1_0", 1) == []
    assert [r.amount for r in await queries.fetch_filtered_invoices("10", 1)] == [10]
