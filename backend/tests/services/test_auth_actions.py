"""Auth Actions + Credentials Identity Provider.

Invariants:
    - Any credential failure surfaces as the "CredentialSignin" sentinel
    - Non-credential identity errors propagate
    - Successful sign-in issues a session and redirects to the dashboard
"""

from datetime import datetime, timedelta, timezone

import pytest

from app.core.errors import AuthError
from app.core.navigation import RedirectSignal
from app.infrastructure.identity import (
    CredentialsIdentityProvider, SessionRegistry, hash_password, verify_password,
)
from app.services.auth_actions import CREDENTIAL_SIGNIN_SENTINEL, AuthActions
from app.services.user_queries import UserQueries


class RaisingProvider:
    def __init__(self, error: Exception):
        self.error = error
        self.calls = []

    async def sign_in(self, provider, credentials):
        self.calls.append((provider, dict(credentials)))
        raise self.error


@pytest.fixture
def provider(db_manager, sessions):
    return CredentialsIdentityProvider(UserQueries(db_manager), sessions, "/dashboard")


@pytest.fixture
def auth(provider):
    return AuthActions(provider)


async def test_good_credentials_redirect_with_session(auth, seed_user, sessions):
    with pytest.raises(RedirectSignal) as signal:
        await auth.authenticate(
            None, {"email": "user@nextmail.com", "password": "123456"},
        )
    assert signal.value.location == "/dashboard"
    session = sessions.get(signal.value.session_token)
    assert session.email == "user@nextmail.com"
    assert session.user_id == str(seed_user.id)


@pytest.mark.parametrize("form", [
    {"email": "user@nextmail.com", "password": "wrong-password"},
    {"email": "nobody@nextmail.com", "password": "123456"},
    {"email": "not-an-email", "password": "123456"},
    {"email": "user@nextmail.com", "password": "123"},
    {},
])
async def test_bad_credentials_return_sentinel(auth, seed_user, form):
    assert await auth.authenticate(None, form) == CREDENTIAL_SIGNIN_SENTINEL


async def test_other_auth_errors_propagate():
    auth = AuthActions(RaisingProvider(AuthError("AccessDenied", "blocked")))
    with pytest.raises(AuthError) as exc:
        await auth.authenticate(None, {"email": "a@b.co", "password": "123456"})
    assert exc.value.error_type == "AccessDenied"


async def test_unknown_provider_is_not_a_credentials_error(provider):
    with pytest.raises(AuthError) as exc:
        await provider.sign_in("github", {})
    assert exc.value.error_type == "UnknownProvider"


async def test_form_is_passed_to_credentials_provider():
    stub = RaisingProvider(AuthError("CredentialsSignin", "nope"))
    await AuthActions(stub).authenticate("previous", {"email": "a@b.co", "password": "x"})
    assert stub.calls == [("credentials", {"email": "a@b.co", "password": "x"})]


def test_password_hashes_verify():
    hashed = hash_password("123456")
    assert hashed != "123456"
    assert verify_password("123456", hashed)
    assert not verify_password("654321", hashed)


def test_session_registry_close(sessions):
    token = sessions.open("id", "user@nextmail.com", "User")
    assert sessions.get(token) is not None
    sessions.close(token)
    assert sessions.get(token) is None
    assert sessions.get(None) is None


class FakeClock:
    def __init__(self):
        self.now = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += timedelta(seconds=seconds)


def test_session_expires_after_max_age():
    clock = FakeClock()
    registry = SessionRegistry(max_age_seconds=60, clock=clock)
    token = registry.open("id", "user@nextmail.com", "User")

    clock.advance(59)
    assert registry.get(token) is not None
    clock.advance(1)
    assert registry.get(token) is None
    assert registry.prune() == 0


def test_sign_in_prunes_expired_sessions():
    clock = FakeClock()
    registry = SessionRegistry(max_age_seconds=60, clock=clock)
    stale = [registry.open(str(n), f"u{n}@nextmail.com", "User") for n in range(3)]

    clock.advance(61)
    fresh = registry.open("new", "new@nextmail.com", "New")

    assert registry.prune() == 0
    assert registry.get(fresh).user_id == "new"
    assert all(registry.get(token) is None for token in stale)
