"""Order model."""

from datetime import datetime

from . import db


class Order(db.Model):
    """A customer's purchase of an entrepreneur's product."""

    __tablename__ = "orders"

    id = db.Column(db.Integer, primary_key=True)
    customer_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    entrepreneur_id = db.Column(
        db.Integer, db.ForeignKey("users.id"), nullable=False, index=True
    )
    product_id = db.Column(db.Integer, db.ForeignKey("products.id"), nullable=False)
    # Free text; the owning entrepreneur chooses the values.
    status = db.Column(
        db.String(64),
        nullable=False,
        default="pending",
        server_default=db.text("'pending'"),
    )
    payment_method = db.Column(db.String(64), nullable=True)
    created_at = db.Column(
        db.DateTime,
        nullable=False,
        default=datetime.utcnow,
        server_default=db.func.now(),
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "customer_id": self.customer_id,
            "entrepreneur_id": self.entrepreneur_id,
            "product_id": self.product_id,
            "status": self.status,
            "payment_method": self.payment_method,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
