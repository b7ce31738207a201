"""Service and service request models."""

from datetime import datetime

from . import db


class Service(db.Model):
    """A service an entrepreneur offers, priced as a free-text range."""

    __tablename__ = "services"

    id = db.Column(db.Integer, primary_key=True)
    entrepreneur_id = db.Column(
        db.Integer, db.ForeignKey("users.id"), nullable=False, index=True
    )
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    price_range = db.Column(db.String(120), nullable=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "entrepreneur_id": self.entrepreneur_id,
            "name": self.name,
            "description": self.description,
            "price_range": self.price_range,
        }


class ServiceRequest(db.Model):
    """A customer's request for one of an entrepreneur's services."""

    __tablename__ = "service_requests"

    id = db.Column(db.Integer, primary_key=True)
    customer_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    entrepreneur_id = db.Column(
        db.Integer, db.ForeignKey("users.id"), nullable=False, index=True
    )
    service_id = db.Column(db.Integer, db.ForeignKey("services.id"), nullable=False)
    status = db.Column(
        db.String(64),
        nullable=False,
        default="pending",
        server_default=db.text("'pending'"),
    )
    request_date = db.Column(
        db.DateTime,
        nullable=False,
        default=datetime.utcnow,
        server_default=db.func.now(),
    )
    details = db.Column(db.Text, nullable=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "customer_id": self.customer_id,
            "entrepreneur_id": self.entrepreneur_id,
            "service_id": self.service_id,
            "status": self.status,
            "request_date": self.request_date.isoformat() if self.request_date else None,
            "details": self.details,
        }
