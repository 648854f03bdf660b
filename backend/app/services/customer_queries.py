"""Customer Queries — select-input options and the customers table.

Invariants:
    - Both lists are sorted by name ascending
    - fetch_filtered_customers matches name OR email (substring, case-insensitive)
    - Customers without invoices still appear, with 0 invoices and "$0.00" totals
"""

from sqlalchemy import case, func, or_, select

from app.core.domain_types import InvoiceStatus
from app.core.formatting import format_currency
from app.infrastructure.database import DatabaseSessionManager
from app.models.customer import Customer
from app.models.invoice import Invoice
from app.schemas.dashboard import CustomerField, CustomersTableRow
from app.services.read_guard import read_session


def _status_total(status: InvoiceStatus):
    return func.coalesce(
        func.sum(case((Invoice.status == status.value, Invoice.amount), else_=0)),
        0,
    )


class CustomerQueries:
    """Read-only customer views."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db = db_manager

    async def fetch_customers(self) -> list[CustomerField]:
        stmt = select(Customer.id, Customer.name).order_by(Customer.name.asc())
        async with read_session(
            self._db, "Failed to fetch all customers.", "fetch_customers",
        ) as db:
            rows = (await db.execute(stmt)).mappings().all()
        return [CustomerField(**row) for row in rows]

    async def fetch_filtered_customers(self, query: str) -> list[CustomersTableRow]:
        stmt = (
            select(
                Customer.id, Customer.name, Customer.email, Customer.image_url,
                func.count(Invoice.id).label("total_invoices"),
                _status_total(InvoiceStatus.PENDING).label("total_pending"),
                _status_total(InvoiceStatus.PAID).label("total_paid"),
            )
            .outerjoin(Invoice, Invoice.customer_id == Customer.id)
            .where(or_(
                Customer.name.icontains(query, autoescape=True),
                Customer.email.icontains(query, autoescape=True),
            ))
            .group_by(
                Customer.id, Customer.name, Customer.email, Customer.image_url,
            )
            .order_by(Customer.name.asc())
        )
        async with read_session(
            self._db, "Failed to fetch customer table.", "fetch_filtered_customers",
        ) as db:
            rows = (await db.execute(stmt)).mappings().all()

        return [
            CustomersTableRow(
                id=row["id"],
                name=row["name"],
                email=row["email"],
                image_url=row["image_url"],
                total_invoices=row["total_invoices"],
                total_pending=format_currency(row["total_pending"]),
                total_paid=format_currency(row["total_paid"]),
            )
            for row in rows
        ]
