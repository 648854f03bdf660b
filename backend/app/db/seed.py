"""Seed Script — one-shot population of an empty store from placeholder data.

Invariants:
    - Users and customers are inserted only when their email is not taken
    - Revenue rows are inserted only when their month is absent
    - Invoices are inserted only into an empty invoices table
    - Passwords are bcrypt-hashed before storage
    - The engine is disposed when seeding ends, success or failure

Usage:
    python -m app.db.seed [--create-tables]
"""

import argparse
import asyncio
import logging
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.db import placeholder_data
from app.db.base import Base
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.identity import hash_password
from app.infrastructure.observability import setup_logging
from app.models import Customer, Invoice, Revenue, User

logger = logging.getLogger(__name__)


async def seed_users(db: AsyncSession) -> int:
    added = 0
    for row in placeholder_data.users:
        exists = await db.scalar(select(User.id).where(User.email == row["email"]))
        if exists:
            continue
        db.add(User(
            id=UUID(row["id"]), name=row["name"], email=row["email"],
            password=hash_password(row["password"]),
        ))
        added += 1
    await db.commit()
    return added


async def seed_customers(db: AsyncSession) -> int:
    added = 0
    for row in placeholder_data.customers:
        exists = await db.scalar(
            select(Customer.id).where(Customer.email == row["email"]),
        )
        if exists:
            continue
        db.add(Customer(
            id=UUID(row["id"]), name=row["name"], email=row["email"],
            image_url=row["image_url"],
        ))
        added += 1
    await db.commit()
    return added


async def seed_invoices(db: AsyncSession) -> int:
    if await db.scalar(select(func.count(Invoice.id))):
        return 0
    db.add_all([
        Invoice(
            customer_id=UUID(row["customer_id"]), amount=row["amount"],
            status=row["status"], date=row["date"],
        )
        for row in placeholder_data.invoices
    ])
    await db.commit()
    return len(placeholder_data.invoices)


async def seed_revenue(db: AsyncSession) -> int:
    added = 0
    for row in placeholder_data.revenue:
        if await db.get(Revenue, row["month"]):
            continue
        db.add(Revenue(month=row["month"], revenue=row["revenue"]))
        added += 1
    await db.commit()
    return added


async def seed(manager: DatabaseSessionManager, create_tables: bool = False) -> dict:
    """Populate the store; returns how many rows of each kind were added."""
    if create_tables:
        async with manager.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    counts = {}
    async with manager.session() as db:
        counts["users"] = await seed_users(db)
        counts["customers"] = await seed_customers(db)
        counts["invoices"] = await seed_invoices(db)
        counts["revenue"] = await seed_revenue(db)
    for kind, n in counts.items():
        logger.info(f"Seeded {n} {kind}")
    return counts


async def main(create_tables: bool) -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = DatabaseSessionManager(settings.database_url)
    try:
        await seed(manager, create_tables=create_tables)
    finally:
        await manager.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the invoice dashboard database.")
    parser.add_argument(
        "--create-tables", action="store_true",
        help="create tables from ORM metadata first (skip when using alembic)",
    )
    args = parser.parse_args()
    asyncio.run(main(args.create_tables))
