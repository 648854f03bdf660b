"""Credentials Identity Provider — email/password sign-in against the users table.

Invariants:
    - Only the "credentials" provider exists; any other name is UnknownProvider
    - Malformed credentials, unknown email and wrong password all raise the
      same AuthError("CredentialsSignin") — callers cannot tell them apart
    - On success a session token is issued and control leaves via RedirectSignal
    - Store faults during user lookup are NOT credential errors: they propagate

Design Decisions:
    - bcrypt.checkpw runs in a worker thread: hashing is CPU-bound and would
      otherwise stall the event loop
    - SessionRegistry is an in-process dict, pruned of expired entries on
      every sign-in (single-process uvicorn, sessions lost on restart)
    - Sessions expire session_max_age_seconds after sign-in
"""

import asyncio
import logging
import secrets
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

import bcrypt
from pydantic import BaseModel, Field, ValidationError

from app.config import get_settings
from app.core.errors import AuthError
from app.core.navigation import redirect
from app.services.user_queries import UserQueries

logger = logging.getLogger(__name__)

CREDENTIALS_PROVIDER = "credentials"
CREDENTIALS_SIGNIN = "CredentialsSignin"


class SignInCredentials(BaseModel):
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    password: str = Field(min_length=6)


@dataclass(frozen=True)
class AuthSession:
    user_id: str
    email: str
    name: str
    issued_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SessionRegistry:
    """Maps opaque session tokens to signed-in users until they expire."""

    def __init__(
        self,
        max_age_seconds: int = 86400,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._sessions: dict[str, AuthSession] = {}
        self._max_age = timedelta(seconds=max_age_seconds)
        self._clock = clock

    def open(self, user_id: str, email: str, name: str) -> str:
        self.prune()
        token = secrets.token_urlsafe(32)
        self._sessions[token] = AuthSession(
            user_id=user_id, email=email, name=name, issued_at=self._clock(),
        )
        return token

    def get(self, token: str | None) -> AuthSession | None:
        if not token:
            return None
        session = self._sessions.get(token)
        if session is None:
            return None
        if self._expired(session):
            del self._sessions[token]
            return None
        return session

    def close(self, token: str | None) -> None:
        if token:
            self._sessions.pop(token, None)

    def prune(self) -> int:
        """Drop every expired session; returns how many were removed."""
        expired = [t for t, s in self._sessions.items() if self._expired(s)]
        for token in expired:
            del self._sessions[token]
        return len(expired)

    def _expired(self, session: AuthSession) -> bool:
        return self._clock() - session.issued_at >= self._max_age


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=10)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(password.encode(), password_hash.encode())


class CredentialsIdentityProvider:
    """IdentityProvider backed by UserQueries and bcrypt hashes."""

    def __init__(
        self, users: UserQueries, sessions: SessionRegistry, redirect_to: str,
    ):
        self._users = users
        self._sessions = sessions
        self._redirect_to = redirect_to

    async def sign_in(
        self, provider: str, credentials: Mapping[str, str],
    ) -> None:
        if provider != CREDENTIALS_PROVIDER:
            raise AuthError("UnknownProvider", f"Provider '{provider}' is not configured")

        try:
            creds = SignInCredentials.model_validate(dict(credentials))
        except ValidationError:
            raise AuthError(CREDENTIALS_SIGNIN, "Invalid credentials") from None

        user = await self._users.get_user(creds.email)
        if user is None:
            logger.info("Sign-in for unknown email rejected")
            raise AuthError(CREDENTIALS_SIGNIN, "Invalid credentials")

        matches = await asyncio.to_thread(verify_password, creds.password, user.password)
        if not matches:
            logger.info("Sign-in with wrong password rejected")
            raise AuthError(CREDENTIALS_SIGNIN, "Invalid credentials")

        token = self._sessions.open(str(user.id), user.email, user.name)
        logger.info(f"User {user.id} signed in")
        redirect(self._redirect_to, session_token=token)


# Singleton (sessions survive across requests within the process)
session_registry = SessionRegistry(get_settings().session_max_age_seconds)
