# dashboard/api/invoices.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.engine import Engine

from dashboard.data.queries import (
    fetch_filtered_invoices,
    fetch_invoice_by_id,
    fetch_invoices_pages,
)
from dashboard.db.engine import get_engine
from dashboard.models.customers import PageCount
from dashboard.models.invoices import InvoiceForm, InvoiceTableRow

router = APIRouter(prefix="/invoices", tags=["invoices"])


@router.get("/", response_model=List[InvoiceTableRow])
def list_invoices(
    query: str = Query(
        "",
        description="Matched anywhere in customer name/email, amount, date or status",
    ),
    page: int = Query(1, ge=1),
    engine: Engine = Depends(get_engine),
) -> List[InvoiceTableRow]:
    """
    One page of invoices, newest first.
    """
    return fetch_filtered_invoices(engine, query, page)


@router.get("/pages", response_model=PageCount)
def invoices_pages(
    query: str = Query(""),
    engine: Engine = Depends(get_engine),
) -> PageCount:
    return PageCount(total_pages=fetch_invoices_pages(engine, query))


@router.get("/{invoice_id}", response_model=InvoiceForm)
def get_invoice(invoice_id: str, engine: Engine = Depends(get_engine)) -> InvoiceForm:
    """
    Look up a single invoice by id; amount is in dollars.
    """
    invoice = fetch_invoice_by_id(engine, invoice_id)

    if invoice is None:
        raise HTTPException(status_code=404, detail="Invoice not found")

    return invoice
