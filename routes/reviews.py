"""Reviews blueprint."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import jwt_required
from sqlalchemy import select
from werkzeug.exceptions import BadRequest

from models import db
from models.review import Review
from models.user import User
from utils.auth import require_role
from utils.persistence import commit_new_record
from utils.request_validation import (
    optional_text,
    parse_json_request,
    parse_positive_int,
    require_fields,
)

reviews_bp = Blueprint("reviews", __name__)


def _parse_rating(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise BadRequest("rating must be an integer between 1 and 5.")
    try:
        rating = int(value)
    except ValueError:
        raise BadRequest("rating must be an integer between 1 and 5.") from None
    if not 1 <= rating <= 5:
        raise BadRequest("rating must be an integer between 1 and 5.")
    return rating


@reviews_bp.route("/reviews", methods=["POST"])
@jwt_required()
def create_review():
    """Leave a rating and optional comment for an entrepreneur."""

    user = require_role("customer")
    data = parse_json_request(request)
    require_fields(data, ("entrepreneur_id", "rating"))

    review = Review(
        customer_id=user["id"],
        entrepreneur_id=parse_positive_int(data["entrepreneur_id"], "entrepreneur_id"),
        rating=_parse_rating(data["rating"]),
        comment=optional_text(data.get("comment")),
    )
    db.session.add(review)
    commit_new_record()

    current_app.logger.info(
        "Customer %s reviewed entrepreneur %s", user["id"], review.entrepreneur_id
    )
    return jsonify({"message": "Review added", "reviewId": review.id}), 201


@reviews_bp.route("/reviews/<int:entrepreneur_id>", methods=["GET"])
def list_reviews(entrepreneur_id: int):
    rows = db.session.execute(
        select(Review, User.name)
        .join(User, Review.customer_id == User.id)
        .where(Review.entrepreneur_id == entrepreneur_id)
        .order_by(Review.id.desc())
    )
    payload = []
    for review, customer_name in rows:
        entry = review.to_dict()
        entry["customer_name"] = customer_name
        payload.append(entry)
    return jsonify(payload)
