from __future__ import annotations

from fastapi.testclient import TestClient

from stockapp.core.config import Settings
from stockapp.main import create_app
from stockapp.models import Product, Stock
from stockapp.services.seed import seed_products


def test_seed_empty_catalogue(db_session):
    created = seed_products(db_session)

    assert created == 10

    products = db_session.query(Product).order_by(Product.price).all()
    assert [p.price for p in products] == [float(n * 10000) for n in range(1, 11)]
    assert [p.name for p in products][:2] == ["Produk 1", "Produk 2"]
    assert all(p.stock is not None and p.stock.quantity == 100 for p in products)


def test_seed_uses_configured_quantity(db_session):
    seed_products(db_session, stock_quantity=7)

    quantities = {row.quantity for row in db_session.query(Stock).all()}
    assert quantities == {7}


def test_seed_skips_non_empty_catalogue(db_session, make_product):
    make_product(db_session)

    assert seed_products(db_session) == 0
    assert db_session.query(Product).count() == 1


def test_startup_seeds_once():
    app = create_app(
        Settings(
            DATABASE_URL="sqlite+pysqlite:///:memory:",
            SEED_ON_STARTUP=True,
        )
    )

    with TestClient(app) as client:
        db = client.app.state.database.session()
        try:
            assert db.query(Product).count() == 10
            assert seed_products(db) == 0
        finally:
            db.close()
