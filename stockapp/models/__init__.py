from stockapp.models.products import Product
from stockapp.models.stock import Stock
from stockapp.models.purchases import Purchase

__all__ = ["Product", "Stock", "Purchase"]
