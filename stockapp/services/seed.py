# stockapp/services/seed.py

import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from stockapp.models.products import Product
from stockapp.services.ledger import add_stock

logger = logging.getLogger(__name__)

SEED_PRODUCT_COUNT = 10
SEED_PRICE_STEP = 10000


def seed_products(db: Session, stock_quantity: int = 100) -> int:
    """Fill an empty catalogue with placeholder products.

    Returns how many products were created; zero when the catalogue
    already had rows.
    """
    existing = db.query(func.count(Product.id)).scalar()

    if existing:
        logger.info(f"Skipping seed, {existing} products already present")
        return 0

    products = [
        Product(name=f"Produk {n}", price=float(n * SEED_PRICE_STEP))
        for n in range(1, SEED_PRODUCT_COUNT + 1)
    ]
    db.add_all(products)
    db.commit()

    for product in products:
        add_stock(db, product.id, stock_quantity)

    logger.info(f"Seeded {len(products)} products with stock {stock_quantity} each")
    return len(products)
