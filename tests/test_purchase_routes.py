from __future__ import annotations

from stockapp.models import Purchase
from stockapp.routers.products import product_rows
from stockapp.routers.purchases import purchase_rows


def _buy(client, product_id, quantity):
    return client.post(
        "/purchase",
        data={"produk_id": str(product_id), "quantity": str(quantity)},
        follow_redirects=False,
    )


def _stock(db, product_id):
    db.expire_all()
    return product_rows(db, product_id)[0].quantity


def test_widget_walkthrough(client, client_db):
    client.post("/products/add", data={"name": "Widget", "price": "15.5", "stock": "5"})
    product_id = product_rows(client_db)[0].id

    response = _buy(client, product_id, 3)
    assert response.status_code == 303
    assert response.headers["location"] == "/purchases"
    assert _stock(client_db, product_id) == 2

    purchases = purchase_rows(client_db)
    assert len(purchases) == 1
    assert (purchases[0].name, purchases[0].quantity, purchases[0].canceled) == ("Widget", 3, False)

    response = client.post(f"/cancel/{purchases[0].id}", follow_redirects=False)
    assert response.status_code == 303
    assert response.headers["location"] == "/purchases"
    assert _stock(client_db, product_id) == 5
    client_db.expire_all()
    assert purchase_rows(client_db)[0].canceled is True

    response = client.post(f"/cancel/{purchases[0].id}", follow_redirects=False)
    assert response.status_code == 400
    assert response.text == "Purchase already canceled"
    assert _stock(client_db, product_id) == 5


def test_purchase_not_enough_stock(client, client_db, make_product):
    product = make_product(client_db, quantity=2)

    response = _buy(client, product.id, 3)

    assert response.status_code == 400
    assert response.text == "Not enough stock"
    assert _stock(client_db, product.id) == 2
    assert client_db.query(Purchase).count() == 0


def test_purchase_unknown_product(client):
    response = _buy(client, 999, 1)

    assert response.status_code == 404
    assert response.text == "Product not found"


def test_purchase_invalid_input(client, client_db, make_product):
    product = make_product(client_db)

    for quantity in ("0", "-2", "abc", ""):
        response = _buy(client, product.id, quantity)
        assert response.status_code == 400
        assert response.text == "Invalid input"

    response = client.post("/purchase", data={"quantity": "1"}, follow_redirects=False)
    assert response.status_code == 400


def test_purchase_form_lists_products(client, client_db, make_product):
    make_product(client_db, name="Widget")
    make_product(client_db, name="Gadget")

    response = client.get("/purchase")

    assert response.status_code == 200
    assert "Widget" in response.text
    assert "Gadget" in response.text


def test_purchases_listed_newest_first(client, client_db, make_product):
    product = make_product(client_db, quantity=10)

    _buy(client, product.id, 1)
    _buy(client, product.id, 2)
    _buy(client, product.id, 3)

    rows = purchase_rows(client_db)
    assert [row.quantity for row in rows] == [3, 2, 1]

    page = client.get("/purchases")
    assert page.status_code == 200
    assert page.text.count("Active") == 3


def test_purchases_of_deleted_products_drop_out_of_listing(client, client_db, make_product):
    product = make_product(client_db, quantity=10)
    _buy(client, product.id, 1)

    client.post(f"/products/delete/{product.id}")

    client_db.expire_all()
    assert purchase_rows(client_db) == []
    assert client_db.query(Purchase).count() == 1


def test_cancel_unknown_purchase(client):
    response = client.post("/cancel/999", follow_redirects=False)

    assert response.status_code == 404
    assert response.text == "Purchase not found"
