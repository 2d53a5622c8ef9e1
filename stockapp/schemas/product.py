from pydantic import BaseModel, Field


class ProductForm(BaseModel):
    name: str = Field(..., min_length=1)

    price: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Unit price, must be positive",
    )

    stock: int = Field(
        ...,
        ge=0,
        description="Quantity on hand, zero allowed",
    )


class ProductStockRow(BaseModel):
    id: int
    name: str
    price: float
    quantity: int | None = None

    class Config:
        from_attributes = True


class ProductOption(BaseModel):
    id: int
    name: str
    price: float

    class Config:
        from_attributes = True
