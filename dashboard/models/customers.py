# dashboard/models/customers.py

from typing import Optional

from pydantic import BaseModel


class CustomerField(BaseModel):
    id: str
    name: str

    class Config:
        from_attributes = True


class CustomerTableRow(BaseModel):
    id: str
    name: str
    email: str
    image_url: Optional[str] = None
    total_invoices: int
    total_pending: str
    total_paid: str


class PageCount(BaseModel):
    total_pages: int
