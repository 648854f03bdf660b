"""API Dependencies — wire the shared persistence client into services per request.

Invariants:
    - Services are cheap wrappers: built per request around the process-wide
      DatabaseSessionManager, PathRevalidator and SessionRegistry singletons
    - Tests swap collaborators through app.dependency_overrides
"""

from fastapi import Depends, Request

from app.config import Settings, get_settings
from app.infrastructure.database import DatabaseSessionManager, get_db_manager
from app.infrastructure.identity import (
    CredentialsIdentityProvider, SessionRegistry, session_registry,
)
from app.infrastructure.revalidation import PathRevalidator, get_revalidator
from app.services.auth_actions import AuthActions
from app.services.customer_queries import CustomerQueries
from app.services.dashboard_queries import DashboardQueries
from app.services.invoice_actions import InvoiceActions
from app.services.invoice_queries import InvoiceQueries
from app.services.user_queries import UserQueries


async def read_form(request: Request) -> dict[str, str]:
    """Flatten a submitted form into field -> value, dropping uploads."""
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


def get_session_registry() -> SessionRegistry:
    return session_registry


def get_invoice_queries(
    db: DatabaseSessionManager = Depends(get_db_manager),
) -> InvoiceQueries:
    return InvoiceQueries(db)


def get_customer_queries(
    db: DatabaseSessionManager = Depends(get_db_manager),
) -> CustomerQueries:
    return CustomerQueries(db)


def get_dashboard_queries(
    db: DatabaseSessionManager = Depends(get_db_manager),
) -> DashboardQueries:
    return DashboardQueries(db)


def get_invoice_actions(
    db: DatabaseSessionManager = Depends(get_db_manager),
    revalidator: PathRevalidator = Depends(get_revalidator),
) -> InvoiceActions:
    return InvoiceActions(db, revalidator)


def get_auth_actions(
    db: DatabaseSessionManager = Depends(get_db_manager),
    sessions: SessionRegistry = Depends(get_session_registry),
    settings: Settings = Depends(get_settings),
) -> AuthActions:
    identity = CredentialsIdentityProvider(
        UserQueries(db), sessions, settings.login_redirect_path,
    )
    return AuthActions(identity)
