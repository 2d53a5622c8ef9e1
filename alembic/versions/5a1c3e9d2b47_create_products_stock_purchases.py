"""create_products_stock_purchases

Revision ID: 5a1c3e9d2b47
Revises:
Create Date: 2026-10-19 09:12:44.318204
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5a1c3e9d2b47'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""

    # PRODUCTS
    op.create_table(
        "products",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.CheckConstraint("price > 0", name="ck_product_price_positive"),
    )
    op.create_index("ix_products_id", "products", ["id"], unique=False)

    # STOCK
    op.create_table(
        "stock",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "product_id",
            sa.Integer(),
            sa.ForeignKey("products.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.CheckConstraint("quantity >= 0", name="ck_stock_quantity_non_negative"),
    )
    op.create_index("ix_stock_id", "stock", ["id"], unique=False)
    op.create_index("ix_stock_product_id", "stock", ["product_id"], unique=True)

    # PURCHASES
    op.create_table(
        "purchases",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "product_id",
            sa.Integer(),
            sa.ForeignKey("products.id"),
            nullable=False,
        ),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column(
            "purchase_date",
            sa.DateTime(),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "canceled",
            sa.Boolean(),
            server_default="0",
            nullable=False,
        ),
        sa.CheckConstraint("quantity > 0", name="ck_purchase_quantity_positive"),
    )
    op.create_index("ix_purchases_id", "purchases", ["id"], unique=False)
    op.create_index("ix_purchases_product_id", "purchases", ["product_id"], unique=False)
    op.create_index("ix_purchases_purchase_date", "purchases", ["purchase_date"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index("ix_purchases_purchase_date", table_name="purchases")
    op.drop_index("ix_purchases_product_id", table_name="purchases")
    op.drop_index("ix_purchases_id", table_name="purchases")
    op.drop_table("purchases")

    op.drop_index("ix_stock_product_id", table_name="stock")
    op.drop_index("ix_stock_id", table_name="stock")
    op.drop_table("stock")

    op.drop_index("ix_products_id", table_name="products")
    op.drop_table("products")
