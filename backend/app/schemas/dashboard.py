"""Dashboard View Models — shapes returned by the query services.

Invariants:
    - Monetary fields ending in a formatted string are display-ready ("$12.34")
    - InvoicesTableRow.amount stays in cents (the page formats it)
    - InvoiceForm.amount is in major units (dollars) for form pre-fill

Design Decisions:
    - Pydantic models double as FastAPI response_model: one contract for
      in-process callers and HTTP callers
"""

from uuid import UUID

from pydantic import BaseModel

from app.core.domain_types import InvoiceStatus


class RevenueRow(BaseModel):
    month: str
    revenue: int


class RevenueChart(BaseModel):
    revenue: list[RevenueRow]
    y_axis_labels: list[str]
    top_label: int


class LatestInvoice(BaseModel):
    id: UUID
    name: str
    image_url: str
    email: str
    amount: str


class CardData(BaseModel):
    number_of_customers: int
    number_of_invoices: int
    total_paid_invoices: str
    total_pending_invoices: str


class InvoicesTableRow(BaseModel):
    id: UUID
    customer_id: UUID
    name: str
    email: str
    image_url: str
    date: str
    amount: int
    status: InvoiceStatus


class InvoicesPage(BaseModel):
    """One page of the invoices table plus footer pagination."""
    invoices: list[InvoicesTableRow]
    total_pages: int
    current_page: int
    pagination: list[int | str]


class InvoiceForm(BaseModel):
    id: UUID
    customer_id: UUID
    amount: float
    status: InvoiceStatus


class CustomerField(BaseModel):
    id: UUID
    name: str


class CustomersTableRow(BaseModel):
    id: UUID
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: str
    total_paid: str


class UserRecord(BaseModel):
    """Internal only: carries the password hash, never serialized over HTTP."""
    id: UUID
    name: str
    email: str
    password: str
