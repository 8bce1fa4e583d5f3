# dashboard/db/schema.py

from sqlalchemy import (
    MetaData, Table, Column, Integer, String,
    Date, ForeignKey, CheckConstraint
)

metadata = MetaData()

customers = Table(
    "customers",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", String, nullable=False),
    Column("email", String, nullable=False),
    Column("image_url", String, nullable=True),
)

invoices = Table(
    "invoices",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("customer_id", String(36), ForeignKey("customers.id"), nullable=False),
    Column("amount", Integer, nullable=False),  # cents
    Column("status", String, nullable=False),
    Column("date", Date, nullable=False),
    CheckConstraint("status IN ('pending', 'paid')", name="ck_invoices_status"),
)

revenue = Table(
    "revenue",
    metadata,
    Column("month", String(4), primary_key=True),
    Column("revenue", Integer, nullable=False),
)
