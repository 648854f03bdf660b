"""Customer ORM — persists a billed customer.

Invariants:
    - id is UUID primary key (client-side default)
    - email is unique; name and email are non-nullable
    - Customers are created by seeding only (no create-customer action)
"""

import uuid

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class Customer(Base):
    """Customer entity — owner of zero or more invoices."""
    __tablename__ = "customers"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True,
    )
    image_url: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships
    invoices: Mapped[list["Invoice"]] = relationship(
        "Invoice", back_populates="customer",
    )
