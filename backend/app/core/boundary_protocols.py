"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Collaborators accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - invalidate() is sync: it only marks a path stale, it does no IO
"""

from collections.abc import Mapping
from typing import Protocol


class Revalidator(Protocol):
    """Marks cached renders of a logical path as stale."""
    def invalidate(self, path: str) -> None: ...


class IdentityProvider(Protocol):
    """Verifies submitted credentials and establishes a session.

    On success control is transferred away (RedirectSignal); on rejection an
    AuthError carrying a classifiable error_type is raised.
    """
    async def sign_in(
        self, provider: str, credentials: Mapping[str, str],
    ) -> None: ...
