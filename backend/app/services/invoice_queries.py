"""Invoice Queries — latest invoices, filtered/paginated table, single-invoice lookup.

Invariants:
    - Free-text search is an OR over customer name, customer email (substring,
      case-insensitive), amount (exact, only if the query is a whole number),
      date (exact string) and status (substring, case-insensitive)
    - Table order is date DESC then id, so pages never overlap or skip rows
    - fetch_invoice_by_id returns None for absent or malformed ids (not an error)
    - Store faults surface as FetchError only

Design Decisions:
    - Explicit column selects over ORM entities: rows map straight onto view
      models and no lazy relationship loads happen in async context
    - icontains(autoescape=True): "%" and "_" in a query are literal characters
"""

import logging
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.sql.elements import ColumnElement

from app.core.domain_types import ITEMS_PER_PAGE, LATEST_INVOICES_LIMIT
from app.core.formatting import format_currency, from_cents, parse_amount_query
from app.core.pagination import page_offset, total_pages
from app.infrastructure.database import DatabaseSessionManager
from app.models.customer import Customer
from app.models.invoice import Invoice
from app.schemas.dashboard import InvoiceForm, InvoicesTableRow, LatestInvoice
from app.services.read_guard import read_session

logger = logging.getLogger(__name__)


def invoice_search_clause(query: str) -> ColumnElement[bool]:
    """WHERE clause for the invoices search box. Needs Customer joined in."""
    conditions = [
        Customer.name.icontains(query, autoescape=True),
        Customer.email.icontains(query, autoescape=True),
        Invoice.date == query,
        Invoice.status.icontains(query, autoescape=True),
    ]
    amount = parse_amount_query(query)
    if amount is not None:
        conditions.append(Invoice.amount == amount)
    return or_(*conditions)


class InvoiceQueries:
    """Read-only invoice views for the dashboard pages."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db = db_manager

    async def fetch_latest_invoices(self) -> list[LatestInvoice]:
        stmt = (
            select(
                Invoice.id, Invoice.amount,
                Customer.name, Customer.image_url, Customer.email,
            )
            .join(Customer, Invoice.customer_id == Customer.id)
            .order_by(Invoice.date.desc(), Invoice.id)
            .limit(LATEST_INVOICES_LIMIT)
        )
        async with read_session(
            self._db, "Failed to fetch the latest invoices.", "fetch_latest_invoices",
        ) as db:
            rows = (await db.execute(stmt)).mappings().all()

        return [
            LatestInvoice(
                id=row["id"],
                name=row["name"],
                image_url=row["image_url"],
                email=row["email"],
                amount=format_currency(row["amount"]),
            )
            for row in rows
        ]

    async def fetch_filtered_invoices(
        self, query: str, current_page: int,
    ) -> list[InvoicesTableRow]:
        stmt = (
            select(
                Invoice.id, Invoice.customer_id, Invoice.amount,
                Invoice.date, Invoice.status,
                Customer.name, Customer.email, Customer.image_url,
            )
            .join(Customer, Invoice.customer_id == Customer.id)
            .where(invoice_search_clause(query))
            .order_by(Invoice.date.desc(), Invoice.id)
            .limit(ITEMS_PER_PAGE)
            .offset(page_offset(current_page))
        )
        async with read_session(
            self._db, "Failed to fetch invoices.", "fetch_filtered_invoices",
        ) as db:
            rows = (await db.execute(stmt)).mappings().all()
        return [InvoicesTableRow(**row) for row in rows]

    async def fetch_invoices_pages(self, query: str) -> int:
        stmt = (
            select(func.count(Invoice.id))
            .join(Customer, Invoice.customer_id == Customer.id)
            .where(invoice_search_clause(query))
        )
        async with read_session(
            self._db, "Failed to fetch total number of invoices.",
            "fetch_invoices_pages",
        ) as db:
            count = (await db.execute(stmt)).scalar_one()
        return total_pages(count)

    async def fetch_invoice_by_id(self, invoice_id: str) -> InvoiceForm | None:
        try:
            key = UUID(str(invoice_id))
        except ValueError:
            logger.debug(f"Malformed invoice id {invoice_id!r}")
            return None

        stmt = select(
            Invoice.id, Invoice.customer_id, Invoice.amount, Invoice.status,
        ).where(Invoice.id == key)
        async with read_session(
            self._db, "Failed to fetch invoice.", "fetch_invoice_by_id",
        ) as db:
            row = (await db.execute(stmt)).mappings().one_or_none()

        if row is None:
            return None
        return InvoiceForm(
            id=row["id"],
            customer_id=row["customer_id"],
            amount=from_cents(row["amount"]),
            status=row["status"],
        )
