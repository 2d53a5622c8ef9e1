# stockapp/routers/products.py

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from stockapp.database import get_db
from stockapp.core.forms import validate_form
from stockapp.models.products import Product
from stockapp.models.stock import Stock
from stockapp.schemas.product import ProductForm, ProductStockRow
from stockapp.templating import templates

router = APIRouter(tags=["Products"])


def product_rows(db: Session, product_id: int | None = None):
    # LEFT JOIN: products without a stock row still show up
    query = (
        db.query(Product.id, Product.name, Product.price, Stock.quantity)
        .outerjoin(Stock, Stock.product_id == Product.id)
    )

    if product_id is not None:
        query = query.filter(Product.id == product_id)

    return [
        ProductStockRow.model_validate(row)
        for row in query.order_by(Product.id).all()
    ]


def _get_product_or_404(db: Session, product_id: int) -> Product:
    product = db.get(Product, product_id)

    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )

    return product


def _create_product(db: Session, form: ProductForm) -> Product:
    product = Product(name=form.name, price=form.price)
    product.stock = Stock(quantity=form.stock)

    db.add(product)
    db.commit()
    db.refresh(product)

    return product


# =========================================================
# LISTINGS
# =========================================================
@router.get("/")
def index(request: Request, db: Session = Depends(get_db)):
    return templates.TemplateResponse(
        request,
        "index.html",
        {"products": product_rows(db)},
    )


@router.get("/products")
def list_products(request: Request, db: Session = Depends(get_db)):
    return templates.TemplateResponse(
        request,
        "products.html",
        {"products": product_rows(db)},
    )


# =========================================================
# ADD PRODUCT
# =========================================================
@router.get("/product/add")
def add_product_form(request: Request):
    return templates.TemplateResponse(
        request,
        "add_product.html",
        {"action": "/product/add"},
    )


@router.get("/products/add")
def add_product_form_products(request: Request):
    return templates.TemplateResponse(
        request,
        "add_product.html",
        {"action": "/products/add"},
    )


@router.post("/product/add")
def add_product(
    name: str | None = Form(None),
    price: str | None = Form(None),
    stock: str | None = Form(None),
    db: Session = Depends(get_db),
):
    form = validate_form(ProductForm, name=name, price=price, stock=stock)
    _create_product(db, form)

    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)


@router.post("/products/add")
def add_product_products(
    name: str | None = Form(None),
    price: str | None = Form(None),
    stock: str | None = Form(None),
    db: Session = Depends(get_db),
):
    form = validate_form(ProductForm, name=name, price=price, stock=stock)
    _create_product(db, form)

    return RedirectResponse("/products", status_code=status.HTTP_303_SEE_OTHER)


# =========================================================
# EDIT PRODUCT
# =========================================================
@router.get("/products/edit/{product_id}")
def edit_product_form(
    product_id: int,
    request: Request,
    db: Session = Depends(get_db),
):
    rows = product_rows(db, product_id)

    if not rows:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )

    return templates.TemplateResponse(
        request,
        "edit_product.html",
        {"product": rows[0]},
    )


@router.post("/products/edit/{product_id}")
def edit_product(
    product_id: int,
    name: str | None = Form(None),
    price: str | None = Form(None),
    stock: str | None = Form(None),
    db: Session = Depends(get_db),
):
    form = validate_form(ProductForm, name=name, price=price, stock=stock)
    product = _get_product_or_404(db, product_id)

    product.name = form.name
    product.price = form.price

    # Editing sets stock outright; open the row if the product never had one
    if product.stock:
        product.stock.quantity = form.stock
    else:
        product.stock = Stock(quantity=form.stock)

    db.commit()

    return RedirectResponse("/products", status_code=status.HTTP_303_SEE_OTHER)


# =========================================================
# DELETE PRODUCT
# =========================================================
@router.post("/products/delete/{product_id}")
def delete_product(
    product_id: int,
    db: Session = Depends(get_db),
):
    product = _get_product_or_404(db, product_id)

    # Cascade removes the stock row ahead of the product
    db.delete(product)
    db.commit()

    return RedirectResponse("/products", status_code=status.HTTP_303_SEE_OTHER)
