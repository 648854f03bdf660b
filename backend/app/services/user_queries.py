"""User Queries — credential lookup for the identity provider only.

Invariants:
    - get_user matches email exactly; no user → None
    - The returned record carries the password hash: never expose it over HTTP
"""

from sqlalchemy import select

from app.infrastructure.database import DatabaseSessionManager
from app.models.user import User
from app.schemas.dashboard import UserRecord
from app.services.read_guard import read_session


class UserQueries:

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db = db_manager

    async def get_user(self, email: str) -> UserRecord | None:
        async with read_session(self._db, "Failed to fetch user.", "get_user") as db:
            user = (
                await db.execute(select(User).where(User.email == email))
            ).scalar_one_or_none()
        if user is None:
            return None
        return UserRecord(
            id=user.id, name=user.name, email=user.email, password=user.password,
        )
