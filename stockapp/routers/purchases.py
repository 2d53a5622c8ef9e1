# =========================================================
# PURCHASES ROUTER
#
# - Record a purchase (debits stock)
# - List purchases, newest first
# - Cancel a purchase (credits stock back)
# =========================================================

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from stockapp.database import get_db
from stockapp.core.exceptions import (
    InsufficientStock,
    ProductNotFound,
    PurchaseAlreadyCanceled,
    PurchaseNotFound,
)
from stockapp.core.forms import validate_form
from stockapp.core.rate_limiter import limiter, write_limit
from stockapp.models.products import Product
from stockapp.models.purchases import Purchase
from stockapp.schemas.product import ProductOption
from stockapp.schemas.purchase import PurchaseForm, PurchaseRow
from stockapp.services import ledger
from stockapp.templating import templates

router = APIRouter(tags=["Purchases"])


def product_options(db: Session):
    return [
        ProductOption.model_validate(product)
        for product in db.query(Product).order_by(Product.id).all()
    ]


def purchase_rows(db: Session):
    rows = (
        db.query(
            Purchase.id,
            Product.name,
            Purchase.quantity,
            Purchase.purchase_date,
            Purchase.canceled,
        )
        .join(Product, Purchase.product_id == Product.id)
        .order_by(Purchase.purchase_date.desc(), Purchase.id.desc())
        .all()
    )

    return [PurchaseRow.model_validate(row) for row in rows]


# =========================================================
# PURCHASE FORM
# =========================================================
@router.get("/purchase")
def purchase_form(request: Request, db: Session = Depends(get_db)):
    return templates.TemplateResponse(
        request,
        "purchase.html",
        {"products": product_options(db)},
    )


# =========================================================
# CREATE PURCHASE
# =========================================================
@router.post("/purchase")
@limiter.limit(write_limit)
def create_purchase(
    request: Request,
    produk_id: str | None = Form(None),
    quantity: str | None = Form(None),
    db: Session = Depends(get_db),
):
    form = validate_form(PurchaseForm, produk_id=produk_id, quantity=quantity)

    try:
        ledger.purchase(db, form.produk_id, form.quantity)

    except ProductNotFound:
        raise HTTPException(status_code=404, detail="Product not found")

    except InsufficientStock:
        raise HTTPException(status_code=400, detail="Not enough stock")

    return RedirectResponse("/purchases", status_code=status.HTTP_303_SEE_OTHER)


# =========================================================
# LIST PURCHASES
# =========================================================
@router.get("/purchases")
def list_purchases(request: Request, db: Session = Depends(get_db)):
    return templates.TemplateResponse(
        request,
        "purchases.html",
        {"purchases": purchase_rows(db)},
    )


# =========================================================
# CANCEL PURCHASE
# =========================================================
@router.post("/cancel/{purchase_id}")
@limiter.limit(write_limit)
def cancel_purchase(
    request: Request,
    purchase_id: int,
    db: Session = Depends(get_db),
):
    try:
        ledger.cancel_purchase(db, purchase_id)

    except PurchaseNotFound:
        raise HTTPException(status_code=404, detail="Purchase not found")

    except PurchaseAlreadyCanceled:
        raise HTTPException(status_code=400, detail="Purchase already canceled")

    return RedirectResponse("/purchases", status_code=status.HTTP_303_SEE_OTHER)
