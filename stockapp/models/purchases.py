# stockapp/models/purchases.py

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, ForeignKey, Index, Integer
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from stockapp.database import Base


class Purchase(Base):
    __tablename__ = "purchases"

    id = Column(Integer, primary_key=True, index=True)

    # No ON DELETE: purchases outlive the products they were made against
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)

    quantity = Column(Integer, nullable=False)

    purchase_date = Column(
        DateTime,
        server_default=func.now(),
        nullable=False,
    )

    canceled = Column(Boolean, default=False, server_default="0", nullable=False)

    product = relationship("Product")

    __table_args__ = (
        Index("ix_purchases_purchase_date", "purchase_date"),
        CheckConstraint("quantity > 0", name="ck_purchase_quantity_positive"),
    )
