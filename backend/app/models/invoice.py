"""Invoice ORM — persists a single bill issued to a customer.

Invariants:
    - Always belongs to a Customer (customer_id FK, non-nullable)
    - amount is integer cents and > 0 (enforced by a CHECK constraint too)
    - status is "pending" or "paid"
    - date is an ISO calendar date string (YYYY-MM-DD), set once on create

Design Decisions:
    - date stored as String(10): free-text search matches it by exact string
      equality, and ISO strings sort chronologically
"""

import uuid

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class Invoice(Base):
    """Invoice entity — amount in cents, pending or paid."""
    __tablename__ = "invoices"
    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_invoices_amount_positive"),
        CheckConstraint(
            "status IN ('pending', 'paid')", name="ck_invoices_status",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    customer_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("customers.id"), nullable=False, index=True,
    )
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    date: Mapped[str] = mapped_column(String(10), nullable=False, index=True)

    # Relationships
    customer: Mapped["Customer"] = relationship(
        "Customer", back_populates="invoices",
    )
