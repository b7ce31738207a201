"""Tests for services and service requests."""

from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from models import db
from models.service import ServiceRequest
from models.user import Entrepreneur, User

PASSWORD = "Passw0rd!"


def _create_user(email: str, role: str = "customer") -> int:
    user = User(name=email.split("@")[0].title(), email=email, role=role)
    user.set_password(PASSWORD)
    if role == "entrepreneur":
        user.entrepreneur = Entrepreneur(business_name=f"{user.name} Studio")
    db.session.add(user)
    db.session.commit()
    return user.id


def _client_for(app: Flask, email: str) -> FlaskClient:
    client = app.test_client()
    response = client.post("/api/login", json={"email": email, "password": PASSWORD})
    assert response.status_code == 200
    return client


@pytest.fixture()
def people(app: Flask) -> dict:
    with app.app_context():
        return {
            "tailor": _create_user("tailor@example.com", "entrepreneur"),
            "rival": _create_user("rival@example.com", "entrepreneur"),
            "customer": _create_user("buyer@example.com"),
        }


def _add_service(client: FlaskClient, **fields):
    payload = {"name": "Alterations", "description": "Hems", "price_range": "5-20"}
    payload.update(fields)
    return client.post("/api/services", json=payload)


def test_entrepreneur_adds_and_lists_services(app, client, people):
    tailor = _client_for(app, "tailor@example.com")

    response = _add_service(tailor)

    assert response.status_code == 201
    service_id = response.get_json()["serviceId"]
    listing = client.get(f"/api/services/{people['tailor']}").get_json()
    assert listing == [
        {
            "id": service_id,
            "entrepreneur_id": people["tailor"],
            "name": "Alterations",
            "description": "Hems",
            "price_range": "5-20",
        }
    ]
    assert client.get(f"/api/services/{people['rival']}").get_json() == []


def test_service_requires_name_and_entrepreneur(app, client, people):
    tailor = _client_for(app, "tailor@example.com")
    buyer = _client_for(app, "buyer@example.com")

    missing_name = _add_service(tailor, name="")

    assert missing_name.status_code == 400
    assert missing_name.get_json()["detail"] == "Service name is required"
    assert _add_service(buyer).status_code == 403
    assert _add_service(client).status_code == 401


def _request_service(app: Flask, people: dict) -> tuple[FlaskClient, int]:
    tailor = _client_for(app, "tailor@example.com")
    service_id = _add_service(tailor).get_json()["serviceId"]
    buyer = _client_for(app, "buyer@example.com")
    response = buyer.post(
        "/api/service-requests",
        json={
            "entrepreneur_id": people["tailor"],
            "service_id": service_id,
            "details": "Shorten two trousers",
        },
    )
    assert response.status_code == 201
    return buyer, response.get_json()["requestId"]


def test_customer_requests_service(app, people):
    buyer, request_id = _request_service(app, people)
    tailor = _client_for(app, "tailor@example.com")

    customer_view = buyer.get("/api/service-requests").get_json()
    tailor_view = tailor.get("/api/service-requests").get_json()

    assert customer_view[0]["id"] == request_id
    assert customer_view[0]["status"] == "pending"
    assert customer_view[0]["service_name"] == "Alterations"
    assert customer_view[0]["business_name"] == "Tailor Studio"
    assert customer_view[0]["details"] == "Shorten two trousers"
    assert tailor_view[0]["customer_name"] == "Buyer"
    assert _client_for(app, "rival@example.com").get("/api/service-requests").get_json() == []


def test_service_request_validation(app, people):
    buyer = _client_for(app, "buyer@example.com")
    tailor = _client_for(app, "tailor@example.com")

    missing = buyer.post("/api/service-requests", json={"entrepreneur_id": people["tailor"]})
    unknown = buyer.post(
        "/api/service-requests",
        json={"entrepreneur_id": people["tailor"], "service_id": 777},
    )
    wrong_role = tailor.post(
        "/api/service-requests",
        json={"entrepreneur_id": people["tailor"], "service_id": 1},
    )

    assert missing.status_code == 400
    assert unknown.status_code == 400
    assert wrong_role.status_code == 403
    with app.app_context():
        assert ServiceRequest.query.count() == 0


def test_request_status_scoped_to_owner(app, people):
    _, request_id = _request_service(app, people)
    tailor = _client_for(app, "tailor@example.com")
    rival = _client_for(app, "rival@example.com")

    denied = rival.post(f"/api/service-requests/{request_id}/status", json={"status": "done"})
    accepted = tailor.post(
        f"/api/service-requests/{request_id}/status", json={"status": "accepted"}
    )

    assert denied.status_code == 404
    assert denied.get_json()["detail"] == "Request not found"
    assert accepted.status_code == 200
    assert accepted.get_json()["message"] == "Request accepted"
    with app.app_context():
        assert db.session.get(ServiceRequest, request_id).status == "accepted"
