"""Invoice Actions — create / update / delete form actions.

Invariants:
    - Each action runs validate -> persist -> invalidate -> redirect, stopping at
      the first failing stage with an InvoiceFormState
    - Validation failures perform no store write and are not logged as faults
    - Store faults are logged server-side; callers get a generic message only
    - Amounts are persisted in cents (amount x 100); date is stamped on create only
    - Successful create/update never return: they raise RedirectSignal
    - delete_invoice never raises and never redirects

Design Decisions:
    - Each write is one statement in its own session: no cross-write
      transaction, last write wins on concurrent edits
    - invalidate() runs after commit, outside the store transaction
    - A malformed or unknown invoice/customer id is reported as the same
      database error the store itself would produce
"""

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import delete, update

from app.core.boundary_protocols import Revalidator
from app.core.domain_types import INVOICES_PATH
from app.core.errors import DatabaseError
from app.core.formatting import to_cents
from app.core.navigation import redirect
from app.infrastructure.database import DatabaseSessionManager
from app.models.invoice import Invoice
from app.schemas.form_parsing import safe_parse
from app.schemas.invoice import (
    FIELD_MESSAGES, CreateInvoice, InvoiceFormState, UpdateInvoice,
)

logger = logging.getLogger(__name__)

CREATE_INVALID = "Missing Fields. Failed to Create Invoice."
UPDATE_INVALID = "Missing Fields. Failed to Update Invoice."
CREATE_FAILED = "Database Error: Failed to Create Invoice."
UPDATE_FAILED = "Database Error: Failed to Update Invoice."
DELETE_FAILED = "Database Error: Failed to Delete Invoice."


class InvoiceWriteFailed(Exception):
    """Internal: the write could not be applied (bad id, missing row)."""


def _invoice_fields(form: Mapping[str, str]) -> dict[str, str | None]:
    return {
        "customer_id": form.get("customer_id"),
        "amount": form.get("amount"),
        "status": form.get("status"),
    }


def _parse_uuid(value: str, what: str) -> UUID:
    try:
        return UUID(str(value))
    except ValueError:
        raise InvoiceWriteFailed(f"Malformed {what} {value!r}") from None


def _today() -> str:
    return datetime.now(timezone.utc).date().isoformat()


class InvoiceActions:
    """Form actions that write invoices."""

    def __init__(self, db_manager: DatabaseSessionManager, revalidator: Revalidator):
        self._db = db_manager
        self._revalidator = revalidator

    async def create_invoice(
        self, previous_state: InvoiceFormState | None, form: Mapping[str, str],
    ) -> InvoiceFormState:
        parsed = safe_parse(CreateInvoice, _invoice_fields(form), FIELD_MESSAGES)
        if not parsed.success:
            logger.debug(f"Create invoice rejected: {parsed.field_errors}")
            return InvoiceFormState(errors=parsed.field_errors, message=CREATE_INVALID)

        data = parsed.data
        try:
            invoice = Invoice(
                customer_id=_parse_uuid(data.customer_id, "customer id"),
                amount=to_cents(data.amount),
                status=data.status.value,
                date=_today(),
            )
            async with self._db.session() as db:
                db.add(invoice)
                await db.commit()
        except (DatabaseError, InvoiceWriteFailed) as e:
            logger.error(
                f"Database Error: {e}", exc_info=True,
                extra={"operation": "create_invoice", "customer_id": data.customer_id},
            )
            return InvoiceFormState(message=CREATE_FAILED)

        logger.info(
            "Invoice created",
            extra={"invoice_id": invoice.id, "customer_id": invoice.customer_id},
        )
        self._revalidator.invalidate(INVOICES_PATH)
        redirect(INVOICES_PATH)

    async def update_invoice(
        self,
        invoice_id: str,
        previous_state: InvoiceFormState | None,
        form: Mapping[str, str],
    ) -> InvoiceFormState:
        parsed = safe_parse(UpdateInvoice, _invoice_fields(form), FIELD_MESSAGES)
        if not parsed.success:
            logger.debug(f"Update invoice rejected: {parsed.field_errors}")
            return InvoiceFormState(errors=parsed.field_errors, message=UPDATE_INVALID)

        data = parsed.data
        try:
            stmt = (
                update(Invoice)
                .where(Invoice.id == _parse_uuid(invoice_id, "invoice id"))
                .values(
                    customer_id=_parse_uuid(data.customer_id, "customer id"),
                    amount=to_cents(data.amount),
                    status=data.status.value,
                )
            )
            async with self._db.session() as db:
                result = await db.execute(stmt)
                await db.commit()
            if result.rowcount == 0:
                raise InvoiceWriteFailed(f"Invoice {invoice_id} does not exist")
        except (DatabaseError, InvoiceWriteFailed) as e:
            logger.error(
                f"Database Error: {e}", exc_info=True,
                extra={"operation": "update_invoice", "invoice_id": invoice_id},
            )
            return InvoiceFormState(message=UPDATE_FAILED)

        logger.info("Invoice updated", extra={"invoice_id": invoice_id})
        self._revalidator.invalidate(INVOICES_PATH)
        redirect(INVOICES_PATH)

    async def delete_invoice(self, invoice_id: str) -> InvoiceFormState | None:
        try:
            stmt = delete(Invoice).where(
                Invoice.id == _parse_uuid(invoice_id, "invoice id"),
            )
            async with self._db.session() as db:
                result = await db.execute(stmt)
                await db.commit()
            if result.rowcount == 0:
                raise InvoiceWriteFailed(f"Invoice {invoice_id} does not exist")
        except (DatabaseError, InvoiceWriteFailed) as e:
            logger.error(
                f"Database Error: {e}", exc_info=True,
                extra={"operation": "delete_invoice", "invoice_id": invoice_id},
            )
            return InvoiceFormState(message=DELETE_FAILED)

        logger.info("Invoice deleted", extra={"invoice_id": invoice_id})
        self._revalidator.invalidate(INVOICES_PATH)
        return None
