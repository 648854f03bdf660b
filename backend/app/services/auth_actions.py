"""Auth Actions — login form action.

Invariants:
    - A CredentialsSignin rejection becomes the sentinel "CredentialSignin"
    - Every other identity failure is re-raised (page-level error)
    - Success never returns: the identity provider raises RedirectSignal
"""

from collections.abc import Mapping

from app.core.boundary_protocols import IdentityProvider
from app.core.errors import AuthError

CREDENTIAL_SIGNIN_SENTINEL = "CredentialSignin"


class AuthActions:

    def __init__(self, identity: IdentityProvider):
        self._identity = identity

    async def authenticate(
        self, previous_state: str | None, form: Mapping[str, str],
    ) -> str | None:
        try:
            await self._identity.sign_in("credentials", dict(form))
        except AuthError as e:
            if "CredentialsSignin" in e.error_type:
                return CREDENTIAL_SIGNIN_SENTINEL
            raise
        return None
