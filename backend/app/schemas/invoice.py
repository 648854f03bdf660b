"""Invoice Schemas — declarative validation for invoice form input.

Invariants:
    - customer_id: non-empty string, else CUSTOMER_MESSAGE
    - amount: coerced to Decimal, > 0 once rounded to cents and at most
      MAX_CENTS in cents, else AMOUNT_MESSAGE
    - status: exactly "pending" or "paid", else STATUS_MESSAGE
    - CreateInvoice / UpdateInvoice carry the same fields as InvoiceSchema minus id and date

Design Decisions:
    - PydanticCustomError over ValueError: messages reach the form verbatim,
      without pydantic's "Value error, " prefix
    - Blank/absent amount coerces to 0 and is rejected by the > 0 rule, so an
      empty amount box reports the amount message rather than a type error
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from app.core.domain_types import MAX_CENTS, InvoiceStatus
from app.core.formatting import to_cents

CUSTOMER_MESSAGE = "Please select a customer."
AMOUNT_MESSAGE = "Please enter an amount greater than $0."
STATUS_MESSAGE = "Please select an invoice status."

FIELD_MESSAGES = {
    "customer_id": CUSTOMER_MESSAGE,
    "amount": AMOUNT_MESSAGE,
    "status": STATUS_MESSAGE,
}

CENT = Decimal("0.01")


class InvoiceFields(BaseModel):
    """Fields shared by every invoice form."""
    customer_id: str
    amount: Decimal
    status: InvoiceStatus

    @field_validator("customer_id", mode="before")
    @classmethod
    def require_customer(cls, v: object) -> str:
        if not isinstance(v, str) or not v.strip():
            raise PydanticCustomError("customer_required", CUSTOMER_MESSAGE)
        return v.strip()

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, v: object) -> Decimal:
        if v is None or (isinstance(v, str) and not v.strip()):
            v = 0
        text = str(v).strip()
        if "_" in text:
            raise PydanticCustomError("amount_invalid", AMOUNT_MESSAGE)
        try:
            amount = Decimal(text)
            in_range = (
                amount.is_finite()
                and amount.quantize(CENT, rounding=ROUND_HALF_UP) > 0
                and to_cents(amount) <= MAX_CENTS
            )
        except InvalidOperation:
            raise PydanticCustomError("amount_invalid", AMOUNT_MESSAGE) from None
        if not in_range:
            raise PydanticCustomError("amount_out_of_range", AMOUNT_MESSAGE)
        return amount

    @field_validator("status", mode="before")
    @classmethod
    def check_status(cls, v: object) -> str:
        if not isinstance(v, str) or v not in {s.value for s in InvoiceStatus}:
            raise PydanticCustomError("status_invalid", STATUS_MESSAGE)
        return v


class InvoiceSchema(InvoiceFields):
    """Full invoice shape, as stored."""
    id: str
    date: str


class CreateInvoice(InvoiceFields):
    """InvoiceSchema without id and date (date is stamped server-side)."""


class UpdateInvoice(InvoiceFields):
    """InvoiceSchema without id and date (date is never changed on update)."""


class InvoiceFormState(BaseModel):
    """What a failed invoice action hands back to the form for inline display."""
    errors: dict[str, list[str]] = Field(default_factory=dict)
    message: str | None = None
