# =========================================================
# STOCK LEDGER
#
# Every quantity change on the stock table goes through here:
# - restock / add_stock: add to (or open) a product's stock row
# - purchase: record a purchase and debit stock
# - cancel_purchase: flag a purchase canceled and credit stock back
#
# Paired writes are committed together or not at all.
# =========================================================

import logging

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from stockapp.core.exceptions import (
    InsufficientStock,
    InvalidQuantity,
    ProductNotFound,
    PurchaseAlreadyCanceled,
    PurchaseNotFound,
)
from stockapp.models.products import Product
from stockapp.models.purchases import Purchase
from stockapp.models.stock import Stock

logger = logging.getLogger(__name__)


def _require_product(db: Session, product_id: int) -> Product:
    product = db.get(Product, product_id)
    if product is None:
        raise ProductNotFound(product_id)
    return product


def _stock_row(db: Session, product_id: int) -> Stock | None:
    return db.query(Stock).filter(Stock.product_id == product_id).first()


def _credit(product: Product, quantity: int) -> int:
    # Attach new rows through the relationship so the orphan cascade owns them
    if product.stock:
        product.stock.quantity = product.stock.quantity + quantity
    else:
        product.stock = Stock(quantity=quantity)

    return product.stock.quantity


# =========================================================
# ADD STOCK
# =========================================================
def restock(db: Session, product_id: int, quantity: int) -> int:
    """Add ``quantity`` units to a product's stock and return the new level.

    Opens the stock row when the product has none yet.
    """
    if quantity is None or quantity <= 0:
        raise InvalidQuantity(quantity)

    product = _require_product(db, product_id)

    try:
        new_quantity = _credit(product, quantity)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    logger.info(f"Stock updated for product {product_id}. New quantity: {new_quantity}")
    return new_quantity


def add_stock(db: Session, product_id: int, quantity: int) -> int | None:
    """Maintenance variant of ``restock`` that only logs failures.

    Returns the new quantity, or None when nothing was written.
    """
    try:
        return restock(db, product_id, quantity)
    except (InvalidQuantity, ProductNotFound) as exc:
        logger.error(f"Invalid input for add_stock: {exc}")
    except SQLAlchemyError:
        logger.exception(f"Database error in add_stock for product {product_id}")

    return None


# =========================================================
# PURCHASE
# =========================================================
def purchase(db: Session, product_id: int, quantity: int) -> Purchase:
    if quantity is None or quantity <= 0:
        raise InvalidQuantity(quantity)

    _require_product(db, product_id)

    stock = _stock_row(db, product_id)
    available = stock.quantity if stock else 0

    if available < quantity:
        raise InsufficientStock(product_id, quantity, available)

    try:
        record = Purchase(product_id=product_id, quantity=quantity)
        db.add(record)

        # Conditional decrement: a concurrent purchase that already took
        # the stock leaves zero rows matched here
        result = db.execute(
            update(Stock)
            .where(
                Stock.product_id == product_id,
                Stock.quantity >= quantity,
            )
            .values(quantity=Stock.quantity - quantity)
        )

        if result.rowcount != 1:
            db.rollback()
            raise InsufficientStock(product_id, quantity, available)

        db.commit()
        db.refresh(record)

    except SQLAlchemyError:
        db.rollback()
        raise

    logger.info(f"Purchase {record.id} recorded: product {product_id} x {quantity}")
    return record


# =========================================================
# CANCEL PURCHASE
# =========================================================
def cancel_purchase(db: Session, purchase_id: int) -> Purchase:
    record = db.get(Purchase, purchase_id)

    if record is None:
        raise PurchaseNotFound(purchase_id)

    if record.canceled:
        raise PurchaseAlreadyCanceled(purchase_id)

    product = db.get(Product, record.product_id)
    product_exists = product is not None

    try:
        record.canceled = True

        # A deleted product has no stock left to credit
        if product_exists:
            new_quantity = _credit(product, record.quantity)

        db.commit()
        db.refresh(record)

    except SQLAlchemyError:
        db.rollback()
        raise

    if product_exists:
        logger.info(
            f"Purchase {purchase_id} canceled. "
            f"Stock for product {record.product_id} restored to {new_quantity}"
        )
    else:
        logger.info(f"Purchase {purchase_id} canceled; product {record.product_id} no longer exists")

    return record
