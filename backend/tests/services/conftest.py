"""Service test fixtures — file-backed SQLite store + FastAPI test client.

Invariants:
    - Every test gets a fresh SQLite database file under tmp_path
    - Foreign keys are enforced (PRAGMA foreign_keys=ON on every connection)
    - get_db_manager dependency overridden to use the test manager
    - Revalidator and session registry are fresh per test

Design Decisions:
    - File DB over :memory:: concurrent reads/writes (card data, concurrent
      creates) need separate pooled connections that see the same data
"""

from uuid import UUID

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event

import app.models  # noqa: F401
from app.api.dependencies import get_session_registry
from app.db.base import Base
from app.infrastructure.database import DatabaseSessionManager, get_db_manager
from app.infrastructure.identity import SessionRegistry, hash_password
from app.infrastructure.revalidation import PathRevalidator, get_revalidator
from app.main import app
from app.models import Customer, Invoice, Revenue, User


def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
async def db_manager(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'dashboard.db'}",
    )
    event.listen(manager.engine.sync_engine, "connect", _enable_foreign_keys)
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.dispose()


@pytest.fixture
def revalidator():
    return PathRevalidator()


@pytest.fixture
def sessions():
    return SessionRegistry()


@pytest.fixture
def add_customer(db_manager):
    """Factory: insert a customer, return its id as a string."""
    async def _add(name: str, email: str, image_url: str = "/customers/x.png") -> str:
        customer = Customer(name=name, email=email, image_url=image_url)
        async with db_manager.session() as db:
            db.add(customer)
            await db.commit()
        return str(customer.id)
    return _add


@pytest.fixture
def add_invoice(db_manager):
    """Factory: insert an invoice (amount in cents), return its id as a string."""
    async def _add(customer_id: str, amount: int, status: str, date: str) -> str:
        invoice = Invoice(
            customer_id=UUID(customer_id), amount=amount, status=status, date=date,
        )
        async with db_manager.session() as db:
            db.add(invoice)
            await db.commit()
        return str(invoice.id)
    return _add


@pytest.fixture
async def seed_user(db_manager):
    """A user who signs in with user@nextmail.com / 123456."""
    user = User(
        name="User", email="user@nextmail.com", password=hash_password("123456"),
    )
    async with db_manager.session() as db:
        db.add(user)
        await db.commit()
    return user


@pytest.fixture
async def seed_revenue(db_manager):
    rows = [("Mar", 2200), ("Jan", 2000), ("Dec", 4800), ("Feb", 1800)]
    async with db_manager.session() as db:
        db.add_all([Revenue(month=m, revenue=r) for m, r in rows])
        await db.commit()
    return rows


@pytest.fixture
async def client(db_manager, revalidator, sessions):
    """FastAPI test client with collaborators overridden."""
    app.dependency_overrides[get_db_manager] = lambda: db_manager
    app.dependency_overrides[get_revalidator] = lambda: revalidator
    app.dependency_overrides[get_session_registry] = lambda: sessions

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
