"""Customer Queries — select options and the aggregated customers table."""

import pytest

from app.services.customer_queries import CustomerQueries


@pytest.fixture
def queries(db_manager):
    return CustomerQueries(db_manager)


@pytest.fixture
async def customers(add_customer, add_invoice):
    steph = await add_customer("Steph Dietz", "steph@dietz.com")
    amy = await add_customer("Amy Burns", "amy@burns.com")
    await add_customer("Balazs Orban", "balazs@orban.com")
    await add_invoice(steph, 3040, "paid", "2022-10-29")
    await add_invoice(steph, 1250, "pending", "2023-06-17")
    await add_invoice(amy, 500, "pending", "2023-08-19")
    return steph, amy


async def test_fetch_customers_sorted_by_name(queries, customers):
    rows = await queries.fetch_customers()
    assert [r.name for r in rows] == ["Amy Burns", "Balazs Orban", "Steph Dietz"]


async def test_table_aggregates_per_customer(queries, customers):
    rows = {r.name: r for r in await queries.fetch_filtered_customers("")}
    steph = rows["Steph Dietz"]
    assert steph.total_invoices == 2
    assert steph.total_paid == "$30.40"
    assert steph.total_pending == "$12.50"
    assert rows["Amy Burns"].total_paid == "$0.00"


async def test_customer_without_invoices_is_listed(queries, customers):
    rows = await queries.fetch_filtered_customers("orban")
    assert len(rows) == 1
    assert rows[0].total_invoices == 0
    assert rows[0].total_pending == "$0.00"


async def test_table_filters_by_email(queries, customers):
    rows = await queries.fetch_filtered_customers("DIETZ.COM")
    assert [r.name for r in rows] == ["Steph Dietz"]
