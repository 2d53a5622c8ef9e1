# stockapp/routers/stock.py

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from stockapp.database import get_db
from stockapp.core.exceptions import ProductNotFound
from stockapp.core.forms import validate_form
from stockapp.core.rate_limiter import limiter, write_limit
from stockapp.routers.purchases import product_options
from stockapp.schemas.stock import StockForm
from stockapp.services import ledger
from stockapp.templating import templates

router = APIRouter(
    prefix="/stock",
    tags=["Stock"],
)


@router.get("/add")
def add_stock_form(request: Request, db: Session = Depends(get_db)):
    return templates.TemplateResponse(
        request,
        "add_stock.html",
        {"products": product_options(db)},
    )


@router.post("/add")
@limiter.limit(write_limit)
def add_stock(
    request: Request,
    produk_id: str | None = Form(None),
    quantity: str | None = Form(None),
    db: Session = Depends(get_db),
):
    form = validate_form(StockForm, produk_id=produk_id, quantity=quantity)

    try:
        ledger.restock(db, form.produk_id, form.quantity)
    except ProductNotFound:
        raise HTTPException(status_code=404, detail="Product not found")

    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
