"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Customer owns invoices; Revenue and User stand alone

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from app.models.customer import Customer  # noqa: F401
from app.models.invoice import Invoice  # noqa: F401
from app.models.revenue import Revenue  # noqa: F401
from app.models.user import User  # noqa: F401
