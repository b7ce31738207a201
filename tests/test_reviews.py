"""Tests for entrepreneur reviews."""

from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from models import db
from models.review import Review
from models.user import Entrepreneur, User

PASSWORD = "Passw0rd!"


def _create_user(email: str, role: str = "customer") -> int:
    user = User(name=email.split("@")[0].title(), email=email, role=role)
    user.set_password(PASSWORD)
    if role == "entrepreneur":
        user.entrepreneur = Entrepreneur(business_name="Potters")
    db.session.add(user)
    db.session.commit()
    return user.id


def _client_for(app: Flask, email: str) -> FlaskClient:
    client = app.test_client()
    response = client.post("/api/login", json={"email": email, "password": PASSWORD})
    assert response.status_code == 200
    return client


@pytest.fixture()
def seller_id(app: Flask) -> int:
    with app.app_context():
        _create_user("buyer@example.com")
        return _create_user("seller@example.com", "entrepreneur")


def test_customer_may_review_repeatedly(app, client, seller_id):
    buyer = _client_for(app, "buyer@example.com")

    first = buyer.post(
        "/api/reviews",
        json={"entrepreneur_id": seller_id, "rating": 5, "comment": "Lovely glaze"},
    )
    second = buyer.post("/api/reviews", json={"entrepreneur_id": seller_id, "rating": "3"})

    assert first.status_code == second.status_code == 201
    assert first.get_json()["message"] == "Review added"

    reviews = client.get(f"/api/reviews/{seller_id}").get_json()
    assert [review["rating"] for review in reviews] == [3, 5]
    assert {review["customer_name"] for review in reviews} == {"Buyer"}
    assert reviews[1]["comment"] == "Lovely glaze"
    assert reviews[0]["comment"] is None


@pytest.mark.parametrize("rating", [0, 6, 4.5, "great", True, None])
def test_rating_must_be_between_one_and_five(app, seller_id, rating):
    buyer = _client_for(app, "buyer@example.com")

    response = buyer.post("/api/reviews", json={"entrepreneur_id": seller_id, "rating": rating})

    assert response.status_code == 400
    with app.app_context():
        assert Review.query.count() == 0


def test_only_customers_review(app, client, seller_id):
    seller = _client_for(app, "seller@example.com")

    anonymous = client.post("/api/reviews", json={"entrepreneur_id": seller_id, "rating": 4})
    self_review = seller.post("/api/reviews", json={"entrepreneur_id": seller_id, "rating": 5})

    assert anonymous.status_code == 401
    assert self_review.status_code == 403


def test_review_for_unknown_entrepreneur(app, seller_id):
    buyer = _client_for(app, "buyer@example.com")

    response = buyer.post("/api/reviews", json={"entrepreneur_id": 999, "rating": 4})

    assert response.status_code == 400
    assert response.get_json()["detail"] == "Referenced record does not exist."


def test_reviews_are_public_and_empty_by_default(client, seller_id):
    response = client.get(f"/api/reviews/{seller_id}")

    assert response.status_code == 200
    assert response.get_json() == []
