"""Revenue ORM — monthly revenue totals for the dashboard chart.

Invariants:
    - month is the primary key ("Jan".."Dec")
    - Seed-only: no mutation path writes this table
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Revenue(Base):
    __tablename__ = "revenue"

    month: Mapped[str] = mapped_column(String(4), primary_key=True)
    revenue: Mapped[int] = mapped_column(Integer, nullable=False)
