# dashboard/data/formatting.py

from decimal import Decimal
from typing import Optional, Union


def format_currency(cents: Optional[Union[int, Decimal, str]]) -> str:
    """Render an amount in cents as en-US dollars, e.g. 123456 -> "$1,234.56"."""
    if cents is None or cents == "":
        cents = 0
    dollars = Decimal(cents) / 100
    if dollars < 0:
        return f"-${-dollars:,.2f}"
    return f"${dollars:,.2f}"


def cents_to_dollars(cents: int) -> Decimal:
    return Decimal(cents) / 100
