# dashboard/data/queries.py

import math
from concurrent.futures import ThreadPoolExecutor, FIRST_EXCEPTION, wait
from typing import List, Optional

from sqlalchemy import case, func, select
from sqlalchemy.engine import Engine

from dashboard.data.errors import Operation, data_access
from dashboard.data.formatting import cents_to_dollars, format_currency
from dashboard.data.search import customer_search_clause, invoice_search_clause
from dashboard.db.schema import customers, invoices, revenue
from dashboard.models.customers import CustomerField, CustomerTableRow
from dashboard.models.invoices import (
    CardData,
    InvoiceForm,
    InvoiceTableRow,
    LatestInvoice,
    Revenue,
)


ITEMS_PER_PAGE = 6
LATEST_INVOICES_LIMIT = 5


def page_offset(page: int) -> int:
    # Pages are 1-indexed; anything below 1 is the first page
    return (max(page, 1) - 1) * ITEMS_PER_PAGE


def total_pages(count: int) -> int:
    return math.ceil(count / ITEMS_PER_PAGE)


def _sum_by_status(status: str):
    return func.coalesce(
        func.sum(case((invoices.c.status == status, invoices.c.amount), else_=0)),
        0,
    )


@data_access(Operation.REVENUE)
def fetch_revenue(engine: Engine) -> List[Revenue]:
    with engine.connect() as conn:
        rows = conn.execute(select(revenue.c.month, revenue.c.revenue)).mappings().all()

    return [Revenue(month=row["month"], revenue=row["revenue"]) for row in rows]


@data_access(Operation.LATEST_INVOICES)
def fetch_latest_invoices(engine: Engine) -> List[LatestInvoice]:
    stmt = (
        select(
            invoices.c.amount,
            customers.c.name,
            customers.c.image_url,
            customers.c.email,
            invoices.c.id,
        )
        .select_from(invoices.join(customers))
        .order_by(invoices.c.date.desc(), invoices.c.id)
        .limit(LATEST_INVOICES_LIMIT)
    )

    with engine.connect() as conn:
        rows = conn.execute(stmt).mappings().all()

    return [
        LatestInvoice(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            image_url=row["image_url"],
            amount=format_currency(row["amount"]),
        )
        for row in rows
    ]


def _one_row(engine: Engine, stmt):
    # Each worker checks out its own pooled connection
    with engine.connect() as conn:
        return conn.execute(stmt).one()


@data_access(Operation.CARD_DATA)
def fetch_card_data(engine: Engine) -> CardData:
    """
    Dashboard cards: invoice count, customer count and paid/pending totals.

    The three aggregates run concurrently and are only combined once all of
    them are in; the first one to fail fails the whole call.
    """
    invoice_count_stmt = select(func.count()).select_from(invoices)
    customer_count_stmt = select(func.count()).select_from(customers)
    invoice_status_stmt = select(
        _sum_by_status("paid").label("paid"),
        _sum_by_status("pending").label("pending"),
    ).select_from(invoices)

    with ThreadPoolExecutor(max_workers=3) as pool:
        futures = [
            pool.submit(_one_row, engine, invoice_count_stmt),
            pool.submit(_one_row, engine, customer_count_stmt),
            pool.submit(_one_row, engine, invoice_status_stmt),
        ]
        done, not_done = wait(futures, return_when=FIRST_EXCEPTION)
        for future in done:
            if future.exception() is not None:
                for pending in not_done:
                    pending.cancel()
                raise future.exception()

        invoice_count, customer_count, status_totals = (f.result() for f in futures)

    return CardData(
        number_of_invoices=int(invoice_count[0] or 0),
        number_of_customers=int(customer_count[0] or 0),
        total_paid_invoices=format_currency(status_totals.paid or 0),
        total_pending_invoices=format_currency(status_totals.pending or 0),
    )


@data_access(Operation.FILTERED_INVOICES)
def fetch_filtered_invoices(engine: Engine, query: str, current_page: int) -> List[InvoiceTableRow]:
    stmt = (
        select(
            invoices.c.id,
            invoices.c.amount,
            invoices.c.date,
            invoices.c.status,
            customers.c.name,
            customers.c.email,
            customers.c.image_url,
        )
        .select_from(invoices.join(customers))
        .where(invoice_search_clause(query))
        .order_by(invoices.c.date.desc(), invoices.c.id)
        .limit(ITEMS_PER_PAGE)
        .offset(page_offset(current_page))
    )

    with engine.connect() as conn:
        rows = conn.execute(stmt).mappings().all()

    return [
        InvoiceTableRow(
            id=row["id"],
            amount=format_currency(row["amount"]),
            date=row["date"],
            status=row["status"],
            name=row["name"],
            email=row["email"],
            image_url=row["image_url"],
        )
        for row in rows
    ]


@data_access(Operation.INVOICES_PAGES)
def fetch_invoices_pages(engine: Engine, query: str) -> int:
    stmt = (
        select(func.count())
        .select_from(invoices.join(customers))
        .where(invoice_search_clause(query))
    )

    with engine.connect() as conn:
        count = conn.execute(stmt).scalar_one()

    return total_pages(count)


@data_access(Operation.INVOICE_BY_ID)
def fetch_invoice_by_id(engine: Engine, invoice_id: str) -> Optional[InvoiceForm]:
    """
    Look up a single invoice for the edit form. Unlike the listings, the
    amount comes back in dollars rather than as a formatted string.
    """
    stmt = select(
        invoices.c.id,
        invoices.c.customer_id,
        invoices.c.amount,
        invoices.c.status,
    ).where(invoices.c.id == invoice_id)

    with engine.connect() as conn:
        row = conn.execute(stmt).mappings().first()

    if row is None:
        return None

    return InvoiceForm(
        id=row["id"],
        customer_id=row["customer_id"],
        amount=cents_to_dollars(row["amount"]),
        status=row["status"],
    )


@data_access(Operation.ALL_CUSTOMERS)
def fetch_customers(engine: Engine) -> List[CustomerField]:
    stmt = select(customers.c.id, customers.c.name).order_by(customers.c.name.asc())

    with engine.connect() as conn:
        rows = conn.execute(stmt).mappings().all()

    return [CustomerField(id=row["id"], name=row["name"]) for row in rows]


@data_access(Operation.CUSTOMER_TABLE)
def fetch_filtered_customers(engine: Engine, query: str, current_page: int = 1) -> List[CustomerTableRow]:
    stmt = (
        select(
            customers.c.id,
            customers.c.name,
            customers.c.email,
            customers.c.image_url,
            func.count(invoices.c.id).label("total_invoices"),
            _sum_by_status("pending").label("total_pending"),
            _sum_by_status("paid").label("total_paid"),
        )
        .select_from(customers.outerjoin(invoices))
        .where(customer_search_clause(query))
        .group_by(
            customers.c.id,
            customers.c.name,
            customers.c.email,
            customers.c.image_url,
        )
        .order_by(customers.c.name.asc(), customers.c.id)
        .limit(ITEMS_PER_PAGE)
        .offset(page_offset(current_page))
    )

    with engine.connect() as conn:
        rows = conn.execute(stmt).mappings().all()

    return [
        CustomerTableRow(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            image_url=row["image_url"],
            total_invoices=row["total_invoices"],
            total_pending=format_currency(row["total_pending"]),
            total_paid=format_currency(row["total_paid"]),
        )
        for row in rows
    ]


@data_access(Operation.CUSTOMERS_PAGES)
def fetch_customers_pages(engine: Engine, query: str) -> int:
    stmt = (
        select(func.count())
        .select_from(customers)
        .where(customer_search_clause(query))
    )

    with engine.connect() as conn:
        count = conn.execute(stmt).scalar_one()

    return total_pages(count)
