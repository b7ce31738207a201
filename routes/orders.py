"""Orders blueprint: placing orders and entrepreneur status changes."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import jwt_required
from sqlalchemy import select, update
from werkzeug.exceptions import NotFound

from models import db
from models.order import Order
from models.product import Product
from models.user import Entrepreneur, User
from utils.auth import current_session_user, require_role
from utils.persistence import commit_new_record
from utils.request_validation import parse_json_request, parse_positive_int, require_fields

orders_bp = Blueprint("orders", __name__)


@orders_bp.route("/orders", methods=["POST"])
@jwt_required()
def place_order():
    """Place an order for a product. Customers only."""

    user = require_role("customer")
    data = parse_json_request(request)
    require_fields(
        data,
        ("entrepreneur_id", "product_id", "payment_method"),
        message="Missing order details or payment method",
    )

    order = Order(
        customer_id=user["id"],
        entrepreneur_id=parse_positive_int(data["entrepreneur_id"], "entrepreneur_id"),
        product_id=parse_positive_int(data["product_id"], "product_id"),
        payment_method=str(data["payment_method"]).strip(),
    )
    db.session.add(order)
    commit_new_record()

    current_app.logger.info(
        "Customer %s placed order %s for product %s",
        user["id"],
        order.id,
        order.product_id,
    )
    return jsonify({"message": "Order placed", "orderId": order.id}), 201


@orders_bp.route("/orders/<int:order_id>/status", methods=["POST"])
@jwt_required()
def update_order_status(order_id: int):
    """Change an order's status. Only the entrepreneur who owns it may."""

    user = require_role("entrepreneur")
    data = parse_json_request(request)
    require_fields(data, ("status",), message="status is required")
    status = str(data["status"]).strip()

    # Ownership is part of the WHERE clause; no rows means missing or not theirs.
    result = db.session.execute(
        update(Order)
        .where(Order.id == order_id, Order.entrepreneur_id == user["id"])
        .values(status=status)
    )
    if result.rowcount == 0:
        db.session.rollback()
        raise NotFound("Order not found or unauthorized")
    db.session.commit()

    current_app.logger.info(
        "Entrepreneur %s set order %s to %r", user["id"], order_id, status
    )
    return jsonify({"message": f"Order {status}"})


@orders_bp.route("/my-orders", methods=["GET"])
@jwt_required()
def my_orders():
    """List the caller's orders.

    Customers see what they bought with the seller's business name; everyone
    else sees the orders placed with them, with the buyer's name.
    """

    user = current_session_user()
    columns = (Order, Product.name, Product.price, Product.image_url)
    if user["role"] == "customer":
        counterpart = "business_name"
        stmt = (
            select(*columns, Entrepreneur.business_name)
            .join(Product, Order.product_id == Product.id)
            .join(Entrepreneur, Order.entrepreneur_id == Entrepreneur.user_id)
            .where(Order.customer_id == user["id"])
        )
    else:
        counterpart = "customer_name"
        stmt = (
            select(*columns, User.name)
            .join(Product, Order.product_id == Product.id)
            .join(User, Order.customer_id == User.id)
            .where(Order.entrepreneur_id == user["id"])
        )

    payload = []
    for order, product_name, price, image_url, other_party in db.session.execute(
        stmt.order_by(Order.id.desc())
    ):
        entry = order.to_dict()
        entry.update(
            {
                "product_name": product_name,
                "price": price,
                "image_url": image_url,
                counterpart: other_party,
            }
        )
        payload.append(entry)
    return jsonify(payload)
