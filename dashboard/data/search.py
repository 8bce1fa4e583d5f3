# dashboard/data/search.py
"""
WHERE clauses for the customer and invoice search boxes.

Customer search is deliberately asymmetric. A query that looks like part of
an email address is matched anywhere in the email but only at the start of
the name; anything else is matched at the start of either field. Keep both
branches as they are: swapping prefix and substring changes what users see.

The query is always bound as a parameter and LIKE wildcards in it are
escaped, so "%" or "_" typed by a user match literally.
"""

import re

from sqlalchemy import String, cast, or_, true
from sqlalchemy.sql.elements import ColumnElement

from dashboard.db.schema import customers, invoices

_DIGIT = re.compile(r"[0-9]")


def looks_like_email(query: str) -> bool:
    # "123" counts too: any ASCII digit flips the query to the email strategy
    return (
        "@" in query
        or "." in query
        or "_" in query
        or _DIGIT.search(query) is not None
    )


def customer_search_clause(raw_query: str) -> ColumnElement[bool]:
    q = (raw_query or "").strip()
    if not q:
        return true()

    if looks_like_email(q):
        return or_(
            customers.c.email.icontains(q, autoescape=True),
            customers.c.name.istartswith(q, autoescape=True),
        )

    return or_(
        customers.c.name.istartswith(q, autoescape=True),
        customers.c.email.istartswith(q, autoescape=True),
    )


def invoice_search_clause(query: str) -> ColumnElement[bool]:
    # Needs invoices JOIN customers in the FROM clause
    q = query or ""
    return or_(
        customers.c.name.icontains(q, autoescape=True),
        customers.c.email.icontains(q, autoescape=True),
        cast(invoices.c.amount, String).icontains(q, autoescape=True),
        cast(invoices.c.date, String).icontains(q, autoescape=True),
        invoices.c.status.icontains(q, autoescape=True),
    )
