"""Dashboard Overview — revenue chart, latest invoices and summary cards.

Invariants:
    - Every response is marked Cache-Control: no-store (reads always hit the store)
    - FetchError propagates to the global handler (page-level error state)
"""

from fastapi import APIRouter, Depends, Response

from app.api.dependencies import get_dashboard_queries, get_invoice_queries
from app.core.revenue_chart import generate_y_axis
from app.schemas.dashboard import CardData, LatestInvoice, RevenueChart
from app.services.dashboard_queries import DashboardQueries
from app.services.invoice_queries import InvoiceQueries

router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])


@router.get("/revenue", response_model=RevenueChart)
async def get_revenue(
    response: Response,
    queries: DashboardQueries = Depends(get_dashboard_queries),
):
    """Monthly revenue with the chart's y-axis labels."""
    response.headers["Cache-Control"] = "no-store"
    revenue = await queries.fetch_revenue()
    labels, top_label = generate_y_axis([r.model_dump() for r in revenue])
    return RevenueChart(revenue=revenue, y_axis_labels=labels, top_label=top_label)


@router.get("/latest-invoices", response_model=list[LatestInvoice])
async def get_latest_invoices(
    response: Response,
    queries: InvoiceQueries = Depends(get_invoice_queries),
):
    response.headers["Cache-Control"] = "no-store"
    return await queries.fetch_latest_invoices()


@router.get("/cards", response_model=CardData)
async def get_cards(
    response: Response,
    queries: DashboardQueries = Depends(get_dashboard_queries),
):
    response.headers["Cache-Control"] = "no-store"
    return await queries.fetch_card_data()
