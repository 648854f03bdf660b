"""User ORM — dashboard login accounts.

Invariants:
    - email is unique
    - password holds a bcrypt hash, never plaintext
"""

import uuid

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class User(Base):
    """Login account checked by the credentials identity provider."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        Text, nullable=False, unique=True,
    )
    password: Mapped[str] = mapped_column(Text, nullable=False)
