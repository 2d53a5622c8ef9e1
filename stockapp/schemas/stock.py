from pydantic import BaseModel, Field


class StockForm(BaseModel):
    produk_id: int = Field(..., gt=0)
    quantity: int = Field(..., gt=0)
