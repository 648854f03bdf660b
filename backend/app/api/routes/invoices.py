"""Invoices — table, single-invoice form data, and the create/update/delete actions.

Invariants:
    - Form bodies are flat string maps; file uploads are ignored
    - A failed action answers 422 with the InvoiceFormState ({errors, message})
    - A successful create/update answers 303 to the invoices list (RedirectSignal)
    - A successful delete answers 204 (no redirect)

Design Decisions:
    - Routes never contain business logic: they only translate HTTP to the
      query/action services and back
"""

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from app.api.dependencies import (
    get_invoice_actions, get_invoice_queries, read_form,
)
from app.core.errors import ResourceNotFoundError
from app.core.pagination import generate_pagination
from app.schemas.dashboard import InvoiceForm, InvoicesPage
from app.schemas.invoice import InvoiceFormState
from app.services.invoice_actions import InvoiceActions
from app.services.invoice_queries import InvoiceQueries

router = APIRouter(prefix="/api/v1/invoices", tags=["invoices"])


def _form_state_response(state: InvoiceFormState) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=state.model_dump(),
    )


@router.get("", response_model=InvoicesPage)
async def list_invoices(
    response: Response,
    query: str = Query(""),
    page: int = Query(1, ge=1),
    queries: InvoiceQueries = Depends(get_invoice_queries),
):
    """One page of invoices matching the search box, newest first."""
    response.headers["Cache-Control"] = "no-store"
    invoices = await queries.fetch_filtered_invoices(query, page)
    pages = await queries.fetch_invoices_pages(query)
    return InvoicesPage(
        invoices=invoices,
        total_pages=pages,
        current_page=page,
        pagination=generate_pagination(page, pages),
    )


@router.get("/{invoice_id}", response_model=InvoiceForm)
async def get_invoice(
    invoice_id: str, queries: InvoiceQueries = Depends(get_invoice_queries),
):
    """Invoice values for the edit form (amount in dollars)."""
    invoice = await queries.fetch_invoice_by_id(invoice_id)
    if invoice is None:
        raise ResourceNotFoundError("Invoice", invoice_id)
    return invoice


@router.post("")
async def create_invoice(
    request: Request, actions: InvoiceActions = Depends(get_invoice_actions),
):
    state = await actions.create_invoice(None, await read_form(request))
    return _form_state_response(state)


@router.post("/{invoice_id}")
async def update_invoice(
    invoice_id: str,
    request: Request,
    actions: InvoiceActions = Depends(get_invoice_actions),
):
    state = await actions.update_invoice(invoice_id, None, await read_form(request))
    return _form_state_response(state)


@router.delete("/{invoice_id}")
async def delete_invoice(
    invoice_id: str, actions: InvoiceActions = Depends(get_invoice_actions),
):
    state = await actions.delete_invoice(invoice_id)
    if state is not None:
        return _form_state_response(state)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
