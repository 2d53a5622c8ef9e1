from __future__ import annotations

import os

import pytest
from fastapi.testclient import TestClient

os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SEED_ON_STARTUP"] = "false"

from stockapp.core.config import Settings  # noqa: E402
from stockapp.database import Database  # noqa: E402
from stockapp.main import create_app  # noqa: E402
from stockapp.models import Product, Stock  # noqa: E402


@pytest.fixture()
def db_session():
    database = Database("sqlite+pysqlite:///:memory:")
    database.create_all()
    session = database.session()
    try:
        yield session
    finally:
        session.close()
        database.dispose()


@pytest.fixture()
def client():
    app = create_app(
        Settings(
            DATABASE_URL="sqlite+pysqlite:///:memory:",
            SEED_ON_STARTUP=False,
        )
    )
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def client_db(client):
    session = client.app.state.database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def make_product():
    def _make(db, name="Widget", price=15.5, quantity: int | None = 5):
        product = Product(name=name, price=price)
        if quantity is not None:
            product.stock = Stock(quantity=quantity)
        db.add(product)
        db.commit()
        db.refresh(product)
        return product

    return _make
