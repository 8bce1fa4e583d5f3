# dashboard/api/customers.py

from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.engine import Engine

from dashboard.data.queries import (
    fetch_customers,
    fetch_customers_pages,
    fetch_filtered_customers,
)
from dashboard.db.engine import get_engine
from dashboard.models.customers import CustomerField, CustomerTableRow, PageCount

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("/", response_model=List[CustomerTableRow])
def list_customers(
    query: str = Query("", description="Name prefix, or any part of an email address"),
    page: int = Query(1, ge=1),
    engine: Engine = Depends(get_engine),
) -> List[CustomerTableRow]:
    """
    One page of the customers table, with invoice totals per customer.
    """
    return fetch_filtered_customers(engine, query, page)


@router.get("/pages", response_model=PageCount)
def customers_pages(
    query: str = Query(""),
    engine: Engine = Depends(get_engine),
) -> PageCount:
    return PageCount(total_pages=fetch_customers_pages(engine, query))


@router.get("/all", response_model=List[CustomerField])
def all_customers(engine: Engine = Depends(get_engine)) -> List[CustomerField]:
    """
    Every customer's id and name, for the invoice form's customer picker.
    """
    return fetch_customers(engine)
