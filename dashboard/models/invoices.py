# dashboard/models/invoices.py

from datetime import date
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel

InvoiceStatus = Literal["pending", "paid"]


class Revenue(BaseModel):
    month: str
    revenue: int

    class Config:
        from_attributes = True


class LatestInvoice(BaseModel):
    id: str
    name: str
    email: str
    image_url: Optional[str] = None
    amount: str


class CardData(BaseModel):
    number_of_customers: int
    number_of_invoices: int
    total_paid_invoices: str
    total_pending_invoices: str


class InvoiceTableRow(BaseModel):
    id: str
    amount: str
    date: date
    status: InvoiceStatus
    name: str
    email: str
    image_url: Optional[str] = None


class InvoiceForm(BaseModel):
    id: str
    customer_id: str
    amount: Decimal  # dollars
    status: InvoiceStatus
