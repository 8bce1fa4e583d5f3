"""Shared fixtures: a seeded SQLite database per test and an API client bound to it."""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from dashboard.db.engine import build_engine, get_engine
from dashboard.db.schema import customers, invoices, metadata, revenue
from dashboard.main import app

CUSTOMERS = [
    {"id": "c1", "name": "Amy", "email": "judge@z.com", "image_url": "/customers/amy.png"},
    {"id": "c2", "name": "Judge", "email": "x@y.com", "image_url": "/customers/judge.png"},
    {"id": "c3", "name": "Bob", "email": "bob_1@acme.io", "image_url": None},
    {"id": "c4", "name": "Carla", "email": "carla@acme.io", "image_url": None},
    {"id": "c5", "name": "Dan", "email": "dan@ju.do", "image_url": None},
    {"id": "c6", "name": "Eve", "email": "eve@acme.io", "image_url": None},
    {"id": "c7", "name": "Frank", "email": "frank@acme.io", "image_url": None},
    {"id": "c8", "name": "Gina", "email": "gina@acme.io", "image_url": None},
]

INVOICES = [
    {"id": "i1", "customer_id": "c1", "amount": 15795, "status": "pending", "date": date(2022, 12, 6)},
    {"id": "i2", "customer_id": "c2", "amount": 20348, "status": "pending", "date": date(2022, 11, 14)},
    {"id": "i3", "customer_id": "c1", "amount": 3040, "status": "paid", "date": date(2022, 10, 29)},
    {"id": "i4", "customer_id": "c3", "amount": 44800, "status": "paid", "date": date(2023, 9, 10)},
    {"id": "i5", "customer_id": "c4", "amount": 34577, "status": "pending", "date": date(2023, 8, 5)},
    {"id": "i6", "customer_id": "c5", "amount": 54246, "status": "pending", "date": date(2023, 7, 16)},
    {"id": "i7", "customer_id": "c6", "amount": 666, "status": "pending", "date": date(2023, 6, 27)},
    {"id": "i8", "customer_id": "c2", "amount": 32545, "status": "paid", "date": date(2023, 6, 9)},
]

REVENUE = [
    {"month": "Jan", "revenue": 2000},
    {"month": "Feb", "revenue": 1800},
]


@pytest.fixture
def empty_engine(tmp_path):
    """An engine on a database with the schema but no rows."""
    engine = build_engine(f"sqlite:///{tmp_path / 'dashboard.sqlite'}")
    metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def engine(empty_engine):
    with empty_engine.begin() as conn:
        conn.execute(customers.insert(), CUSTOMERS)
        conn.execute(invoices.insert(), INVOICES)
        conn.execute(revenue.insert(), REVENUE)
    return empty_engine


@pytest.fixture
def broken_engine(tmp_path):
    """An engine on a database that has no tables at all."""
    engine = build_engine(f"sqlite:///{tmp_path / 'broken.sqlite'}")
    yield engine
    engine.dispose()


@pytest.fixture
def client(engine):
    app.dependency_overrides[get_engine] = lambda: engine
    yield TestClient(app)
    app.dependency_overrides.clear()
