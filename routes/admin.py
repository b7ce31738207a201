"""Admin blueprint for platform statistics and entrepreneur verification."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify
from flask_jwt_extended import jwt_required
from sqlalchemy import func, select
from werkzeug.exceptions import NotFound

from models import db
from models.order import Order
from models.service import ServiceRequest
from models.user import Entrepreneur, User
from utils.auth import require_admin

admin_bp = Blueprint("admin", __name__)


def _count(statement) -> int:
    return db.session.scalar(statement) or 0


@admin_bp.route("/stats", methods=["GET"])
@jwt_required()
def stats():
    """Return platform-wide record counts."""

    require_admin()
    return jsonify(
        {
            "users": _count(select(func.count(User.id))),
            "entrepreneurs": _count(select(func.count(Entrepreneur.user_id))),
            "orders": _count(select(func.count(Order.id))),
            "requests": _count(select(func.count(ServiceRequest.id))),
            "pending_verifications": _count(
                select(func.count(Entrepreneur.user_id)).where(
                    Entrepreneur.verified.is_(False)
                )
            ),
        }
    )


@admin_bp.route("/pending-entrepreneurs", methods=["GET"])
@jwt_required()
def pending_entrepreneurs():
    """Return entrepreneurs still awaiting verification."""

    require_admin()
    rows = db.session.execute(
        select(User, Entrepreneur)
        .join(Entrepreneur, Entrepreneur.user_id == User.id)
        .where(Entrepreneur.verified.is_(False))
        .order_by(User.id)
    )
    return jsonify(
        [
            {
                "id": user.id,
                "name": user.name,
                "email": user.email,
                "business_name": profile.business_name,
                "category": profile.category,
                "verified": profile.verified,
            }
            for user, profile in rows
        ]
    )


@admin_bp.route("/verify/<int:user_id>", methods=["POST"])
@jwt_required()
def verify_entrepreneur(user_id: int):
    """Mark an entrepreneur as verified. There is no reverse operation."""

    admin = require_admin()
    profile = db.session.get(Entrepreneur, user_id)
    if profile is None:
        raise NotFound("Entrepreneur not found.")
    profile.mark_verified()
    db.session.commit()

    current_app.logger.info("Admin %s verified entrepreneur %s", admin["id"], user_id)
    return jsonify({"message": "Entrepreneur verified"})
