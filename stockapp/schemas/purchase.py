# schemas/purchase.py

from pydantic import BaseModel, Field
from datetime import datetime


class PurchaseForm(BaseModel):
    produk_id: int = Field(..., gt=0)
    quantity: int = Field(..., gt=0)


class PurchaseRow(BaseModel):
    id: int
    name: str
    quantity: int
    purchase_date: datetime
    canceled: bool

    class Config:
        from_attributes = True
