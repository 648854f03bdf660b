"""Read Guard — one session per read, store faults turned into FetchError.

Invariants:
    - The original fault is logged with full detail, never returned to callers
    - Callers only ever see FetchError(failure_message)
    - Exceptions that are not store faults pass through untouched
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import DatabaseError, ErrorContext, FetchError
from app.infrastructure.database import DatabaseSessionManager

logger = logging.getLogger(__name__)


@asynccontextmanager
async def read_session(
    db_manager: DatabaseSessionManager, failure_message: str, operation: str,
) -> AsyncGenerator[AsyncSession, None]:
    try:
        async with db_manager.session() as db:
            yield db
    except DatabaseError as e:
        logger.error(
            f"Database Error: {e.message}",
            exc_info=True, extra={"operation": operation, "error_code": e.code},
        )
        raise FetchError(
            failure_message, ErrorContext(operation=operation),
        ) from e
