"""Navigation — redirect as a terminal control transfer.

Invariants:
    - redirect() never returns; it raises RedirectSignal
    - RedirectSignal is not a DashboardError: it is the success path of an action
    - Callers that catch broad exceptions must re-raise RedirectSignal untouched

Design Decisions:
    - Exception over a return value: a redirect aborts further rendering, so it
      cannot be mixed with InvoiceFormState results returned for failures
"""

from typing import NoReturn


class RedirectSignal(Exception):
    """Raised to hand control to another page once an action has succeeded."""

    def __init__(self, location: str, session_token: str | None = None):
        super().__init__(location)
        self.location = location
        self.session_token = session_token


def redirect(location: str, session_token: str | None = None) -> NoReturn:
    raise RedirectSignal(location, session_token)
