# stockapp/core/exceptions.py


class LedgerError(Exception):
    """Base class for stock ledger failures a handler can answer for."""


class InvalidQuantity(LedgerError):
    def __init__(self, quantity):
        super().__init__(f"Quantity must be greater than zero, got {quantity}")
        self.quantity = quantity


class ProductNotFound(LedgerError):
    def __init__(self, product_id: int):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class PurchaseNotFound(LedgerError):
    def __init__(self, purchase_id: int):
        super().__init__(f"Purchase {purchase_id} not found")
        self.purchase_id = purchase_id


class PurchaseAlreadyCanceled(LedgerError):
    def __init__(self, purchase_id: int):
        super().__init__(f"Purchase {purchase_id} already canceled")
        self.purchase_id = purchase_id


class InsufficientStock(LedgerError):
    def __init__(self, product_id: int, requested: int, available: int):
        super().__init__(
            f"Not enough stock for product {product_id}: "
            f"requested {requested}, available {available}"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available
