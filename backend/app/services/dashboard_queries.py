"""Dashboard Queries — revenue series and the overview cards.

Invariants:
    - fetch_revenue re-reads the store on every call (nothing is cached here)
    - Revenue rows come back in calendar order; unknown month keys sort last
    - fetch_card_data issues its three reads concurrently, each on its own session
    - Missing status sums count as 0 before formatting

Design Decisions:
    - asyncio.gather over one combined SQL statement: the three reads are
      independent, and an AsyncSession cannot run statements concurrently,
      so each read takes its own pooled session
    - No atomicity across the three reads: a racing write may be seen by one
      and not the others
"""

import asyncio
import logging

from sqlalchemy import func, select

from app.core.domain_types import MONTH_ORDER, InvoiceStatus
from app.core.errors import DatabaseError, ErrorContext, FetchError
from app.core.formatting import format_currency
from app.infrastructure.database import DatabaseSessionManager
from app.models.customer import Customer
from app.models.invoice import Invoice
from app.models.revenue import Revenue
from app.schemas.dashboard import CardData, RevenueRow
from app.services.read_guard import read_session

logger = logging.getLogger(__name__)


def _month_index(month: str) -> int:
    try:
        return MONTH_ORDER.index(month)
    except ValueError:
        return len(MONTH_ORDER)


class DashboardQueries:
    """Aggregate views for the dashboard overview page."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db = db_manager

    async def fetch_revenue(self) -> list[RevenueRow]:
        async with read_session(
            self._db, "Failed to fetch revenue data.", "fetch_revenue",
        ) as db:
            rows = (await db.execute(select(Revenue))).scalars().all()
        ordered = sorted(rows, key=lambda r: _month_index(r.month))
        return [RevenueRow(month=r.month, revenue=r.revenue) for r in ordered]

    async def fetch_card_data(self) -> CardData:
        try:
            number_of_invoices, number_of_customers, totals = await asyncio.gather(
                self._count(Invoice.id),
                self._count(Customer.id),
                self._totals_by_status(),
            )
        except DatabaseError as e:
            logger.error(
                f"Database Error: {e.message}",
                exc_info=True,
                extra={"operation": "fetch_card_data", "error_code": e.code},
            )
            raise FetchError(
                "Failed to fetch card data.",
                ErrorContext(operation="fetch_card_data"),
            ) from e

        return CardData(
            number_of_customers=number_of_customers,
            number_of_invoices=number_of_invoices,
            total_paid_invoices=format_currency(
                totals.get(InvoiceStatus.PAID.value, 0),
            ),
            total_pending_invoices=format_currency(
                totals.get(InvoiceStatus.PENDING.value, 0),
            ),
        )

    async def _count(self, column) -> int:
        async with self._db.session() as db:
            return (await db.execute(select(func.count(column)))).scalar_one()

    async def _totals_by_status(self) -> dict[str, int]:
        stmt = select(Invoice.status, func.sum(Invoice.amount)).group_by(
            Invoice.status,
        )
        async with self._db.session() as db:
            rows = (await db.execute(stmt)).all()
        return {status: total or 0 for status, total in rows}
