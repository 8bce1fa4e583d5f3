# dashboard/api/overview.py

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.engine import Engine

from dashboard.data.queries import fetch_card_data, fetch_latest_invoices, fetch_revenue
from dashboard.db.engine import get_engine
from dashboard.models.invoices import CardData, LatestInvoice, Revenue

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/revenue", response_model=List[Revenue])
def revenue(engine: Engine = Depends(get_engine)) -> List[Revenue]:
    return fetch_revenue(engine)


@router.get("/latest-invoices", response_model=List[LatestInvoice])
def latest_invoices(engine: Engine = Depends(get_engine)) -> List[LatestInvoice]:
    return fetch_latest_invoices(engine)


@router.get("/cards", response_model=CardData)
def cards(engine: Engine = Depends(get_engine)) -> CardData:
    return fetch_card_data(engine)
