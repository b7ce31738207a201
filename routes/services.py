"""Services blueprint: service listings and customer service requests."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import jwt_required
from sqlalchemy import select, update
from werkzeug.exceptions import BadRequest, NotFound

from models import db
from models.service import Service, ServiceRequest
from models.user import Entrepreneur, User
from utils.auth import current_session_user, require_role
from utils.persistence import commit_new_record
from utils.request_validation import (
    optional_text,
    parse_json_request,
    parse_positive_int,
    require_fields,
)

services_bp = Blueprint("services", __name__)


@services_bp.route("/services", methods=["POST"])
@jwt_required()
def create_service():
    """Add a service to the calling entrepreneur's catalog."""

    user = require_role("entrepreneur")
    data = parse_json_request(request)
    name = optional_text(data.get("name"))
    if not name:
        raise BadRequest("Service name is required")

    service = Service(
        entrepreneur_id=user["id"],
        name=name,
        description=optional_text(data.get("description")),
        price_range=optional_text(data.get("price_range")),
    )
    db.session.add(service)
    commit_new_record()

    current_app.logger.info("Entrepreneur %s added service %s", user["id"], service.id)
    return jsonify({"message": "Service added", "serviceId": service.id}), 201


@services_bp.route("/services/<int:entrepreneur_id>", methods=["GET"])
def list_services(entrepreneur_id: int):
    services = db.session.scalars(
        select(Service)
        .where(Service.entrepreneur_id == entrepreneur_id)
        .order_by(Service.id)
    ).all()
    return jsonify([service.to_dict() for service in services])


@services_bp.route("/service-requests", methods=["POST"])
@jwt_required()
def create_service_request():
    """Request a service from an entrepreneur. Customers only."""

    user = require_role("customer")
    data = parse_json_request(request)
    require_fields(
        data,
        ("entrepreneur_id", "service_id"),
        message="entrepreneur_id and service_id are required",
    )

    service_request = ServiceRequest(
        customer_id=user["id"],
        entrepreneur_id=parse_positive_int(data["entrepreneur_id"], "entrepreneur_id"),
        service_id=parse_positive_int(data["service_id"], "service_id"),
        details=optional_text(data.get("details")),
    )
    db.session.add(service_request)
    commit_new_record()

    current_app.logger.info(
        "Customer %s requested service %s (request %s)",
        user["id"],
        service_request.service_id,
        service_request.id,
    )
    return jsonify({"message": "Service requested", "requestId": service_request.id}), 201


@services_bp.route("/service-requests", methods=["GET"])
@jwt_required()
def list_service_requests():
    """List requests the caller made, or, for non-customers, received."""

    user = current_session_user()
    if user["role"] == "customer":
        counterpart = "business_name"
        stmt = (
            select(ServiceRequest, Service.name, Entrepreneur.business_name)
            .join(Service, ServiceRequest.service_id == Service.id)
            .join(Entrepreneur, ServiceRequest.entrepreneur_id == Entrepreneur.user_id)
            .where(ServiceRequest.customer_id == user["id"])
        )
    else:
        counterpart = "customer_name"
        stmt = (
            select(ServiceRequest, Service.name, User.name)
            .join(Service, ServiceRequest.service_id == Service.id)
            .join(User, ServiceRequest.customer_id == User.id)
            .where(ServiceRequest.entrepreneur_id == user["id"])
        )

    payload = []
    for service_request, service_name, other_party in db.session.execute(
        stmt.order_by(ServiceRequest.id.desc())
    ):
        entry = service_request.to_dict()
        entry["service_name"] = service_name
        entry[counterpart] = other_party
        payload.append(entry)
    return jsonify(payload)


@services_bp.route("/service-requests/<int:request_id>/status", methods=["POST"])
@jwt_required()
def update_service_request_status(request_id: int):
    """Change a request's status. Only the entrepreneur it was sent to may."""

    user = require_role("entrepreneur")
    data = parse_json_request(request)
    require_fields(data, ("status",), message="status is required")
    status = str(data["status"]).strip()

    result = db.session.execute(
        update(ServiceRequest)
        .where(
            ServiceRequest.id == request_id,
            ServiceRequest.entrepreneur_id == user["id"],
        )
        .values(status=status)
    )
    if result.rowcount == 0:
        db.session.rollback()
        raise NotFound("Request not found")
    db.session.commit()

    current_app.logger.info(
        "Entrepreneur %s set service request %s to %r", user["id"], request_id, status
    )
    return jsonify({"message": f"Request {status}"})
