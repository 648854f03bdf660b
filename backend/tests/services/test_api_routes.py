"""HTTP surface — status codes, redirects and cookies for the dashboard API."""

from uuid import uuid4

from app.core.domain_types import INVOICES_PATH


async def test_health(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200


async def test_invoice_list_page(client, add_customer, add_invoice):
    customer = await add_customer("Amy Burns", "amy@burns.com")
    for day in range(1, 10):
        await add_invoice(customer, 100, "paid", f"2023-03-{day:02d}")

    res = await client.get("/api/v1/invoices", params={"query": "amy", "page": 2})
    body = res.json()
    assert res.status_code == 200
    assert res.headers["cache-control"] == "no-store"
    assert body["total_pages"] == 2
    assert body["current_page"] == 2
    assert body["pagination"] == [1, 2]
    assert len(body["invoices"]) == 3


async def test_invoice_page_must_be_positive(client):
    res = await client.get("/api/v1/invoices", params={"page": 0})
    assert res.status_code == 400


async def test_get_invoice_404(client):
    res = await client.get(f"/api/v1/invoices/{uuid4()}")
    assert res.status_code == 404


async def test_create_invoice_redirects(client, add_customer, revalidator):
    customer = await add_customer("Amy Burns", "amy@burns.com")
    res = await client.post(
        "/api/v1/invoices",
        data={"customer_id": customer, "amount": "12.34", "status": "paid"},
    )
    assert res.status_code == 303
    assert res.headers["location"] == INVOICES_PATH
    assert revalidator.version(INVOICES_PATH) == 1


async def test_create_invoice_invalid_form(client):
    res = await client.post("/api/v1/invoices", data={"amount": "0"})
    body = res.json()
    assert res.status_code == 422
    assert body["message"] == "Missing Fields. Failed to Create Invoice."
    assert set(body["errors"]) == {"customer_id", "amount", "status"}


async def test_delete_invoice(client, add_customer, add_invoice):
    customer = await add_customer("Amy Burns", "amy@burns.com")
    invoice_id = await add_invoice(customer, 100, "paid", "2023-03-01")

    res = await client.delete(f"/api/v1/invoices/{invoice_id}")
    assert res.status_code == 204
    res = await client.delete(f"/api/v1/invoices/{invoice_id}")
    assert res.status_code == 422
    assert res.json()["message"] == "Database Error: Failed to Delete Invoice."


async def test_revenue_chart(client, seed_revenue):
    res = await client.get("/api/v1/dashboard/revenue")
    body = res.json()
    assert [r["month"] for r in body["revenue"]] == ["Jan", "Feb", "Mar", "Dec"]
    assert body["top_label"] == 5000
    assert body["y_axis_labels"][0] == "$5K"


async def test_cards_empty(client):
    res = await client.get("/api/v1/dashboard/cards")
    assert res.json()["total_paid_invoices"] == "$0.00"


async def test_customers_table(client, add_customer):
    await add_customer("Amy Burns", "amy@burns.com")
    res = await client.get("/api/v1/customers/table", params={"query": "burns"})
    assert [r["name"] for r in res.json()] == ["Amy Burns"]


async def test_login_failure_returns_sentinel(client, seed_user):
    res = await client.post(
        "/api/v1/auth/login",
        data={"email": "user@nextmail.com", "password": "bad-password"},
    )
    assert res.status_code == 401
    assert res.json() == {"message": "CredentialSignin"}


async def test_login_session_logout(client, seed_user):
    res = await client.post(
        "/api/v1/auth/login",
        data={"email": "user@nextmail.com", "password": "123456"},
    )
    assert res.status_code == 303
    assert res.headers["location"] == "/dashboard"
    assert "dashboard_session" in res.cookies

    client.cookies.set("dashboard_session", res.cookies["dashboard_session"])
    me = await client.get("/api/v1/auth/session")
    assert me.json()["email"] == "user@nextmail.com"
    assert "password" not in me.json()

    assert (await client.post("/api/v1/auth/logout")).status_code == 204
    assert (await client.get("/api/v1/auth/session")).status_code == 401


async def test_fetch_error_is_503(client, db_manager):
    from sqlalchemy import text
    async with db_manager.engine.begin() as conn:
        await conn.execute(text("DROP TABLE customers"))
    res = await client.get("/api/v1/customers")
    assert res.status_code == 503
    assert res.json()["error"]["message"] == "Failed to fetch all customers."
