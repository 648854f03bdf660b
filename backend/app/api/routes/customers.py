"""Customers — select-input options and the searchable customers table."""

from fastapi import APIRouter, Depends, Query, Response

from app.api.dependencies import get_customer_queries
from app.schemas.dashboard import CustomerField, CustomersTableRow
from app.services.customer_queries import CustomerQueries

router = APIRouter(prefix="/api/v1/customers", tags=["customers"])


@router.get("", response_model=list[CustomerField])
async def list_customers(
    queries: CustomerQueries = Depends(get_customer_queries),
):
    """All customers (id, name) for the invoice form's customer select."""
    return await queries.fetch_customers()


@router.get("/table", response_model=list[CustomersTableRow])
async def customers_table(
    response: Response,
    query: str = Query(""),
    queries: CustomerQueries = Depends(get_customer_queries),
):
    response.headers["Cache-Control"] = "no-store"
    return await queries.fetch_filtered_customers(query)
