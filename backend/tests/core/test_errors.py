"""Error hierarchy — envelope shape and status codes."""

from app.core.errors import (
    AuthError, DashboardError, DatabaseError, ErrorCategory, ErrorContext,
    FetchError, ResourceNotFoundError,
)
from app.core.navigation import RedirectSignal, redirect


def test_fetch_error_is_generic_and_503():
    err = FetchError("Failed to fetch invoices.", ErrorContext(operation="fetch_filtered_invoices"))
    body = err.to_response()["error"]
    assert err.http_status == 503
    assert body["message"] == "Failed to fetch invoices."
    assert body["code"] == "FETCH_FAILED"
    assert body["context"]["operation"] == "fetch_filtered_invoices"


def test_database_error_mentions_operation():
    err = DatabaseError("Integrity constraint violated", "commit")
    assert err.operation == "commit"
    assert err.category == ErrorCategory.DATABASE
    assert "commit" in err.message


def test_not_found_is_404():
    err = ResourceNotFoundError("Invoice", "abc")
    assert err.http_status == 404
    assert "Invoice 'abc' not found" == err.message


def test_auth_error_keeps_error_type():
    err = AuthError("CredentialsSignin", "Invalid credentials")
    assert isinstance(err, DashboardError)
    assert err.error_type == "CredentialsSignin"
    assert "CredentialsSignin" in str(err)


def test_redirect_raises_signal():
    try:
        redirect("/dashboard/invoices")
    except RedirectSignal as signal:
        assert signal.location == "/dashboard/invoices"
        assert signal.session_token is None
    else:
        raise AssertionError("redirect() returned")


def test_redirect_signal_is_not_a_dashboard_error():
    assert not issubclass(RedirectSignal, DashboardError)
