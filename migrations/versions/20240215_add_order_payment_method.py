"""add payment_method to orders"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "order_payment_20240215"
down_revision = "marketplace_20240101"
branch_labels = None
depends_on = None


def _has_payment_method() -> bool:
    inspector = sa.inspect(op.get_bind())
    return any(column["name"] == "payment_method" for column in inspector.get_columns("orders"))


def upgrade():
    # Databases created before revisions were tracked may already have it.
    if _has_payment_method():
        return
    op.add_column("orders", sa.Column("payment_method", sa.String(length=64), nullable=True))


def downgrade():
    if _has_payment_method():
        with op.batch_alter_table("orders") as batch_op:
            batch_op.drop_column("payment_method")
