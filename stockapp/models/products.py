# stockapp/models/products.py

from sqlalchemy import CheckConstraint, Column, Float, Integer, String
from sqlalchemy.orm import relationship

from stockapp.database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    price = Column(Float, nullable=False)

    stock = relationship("Stock", back_populates="product", uselist=False, cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint("price > 0", name="ck_product_price_positive"),
    )
