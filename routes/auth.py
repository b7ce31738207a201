"""Authentication blueprint providing register, login, and logout endpoints."""

from __future__ import annotations

import re
from http import HTTPStatus

from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import create_access_token, set_access_cookies, unset_jwt_cookies
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import BadRequest, Conflict, Unauthorized

from models import db
from models.user import Entrepreneur, User
from utils.request_validation import optional_text, parse_json_request, require_fields

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
PASSWORD_PATTERN = re.compile(
    r"^(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{8,}$"
)
PUBLIC_ROLES = ("customer", "entrepreneur")

auth_bp = Blueprint("auth", __name__)


def _normalize_email(raw_email: object) -> str | None:
    """Strip and lowercase an email, or return None when it is not a string."""
    if raw_email is None:
        return ""
    if not isinstance(raw_email, str):
        return None
    return raw_email.strip().lower()


def _allowed_roles() -> tuple[str, ...]:
    if current_app.config.get("ALLOW_ADMIN_REGISTRATION"):
        return PUBLIC_ROLES + ("admin",)
    return PUBLIC_ROLES


@auth_bp.route("/register", methods=["POST"])
def register() -> tuple:
    """Register a user, plus an entrepreneur profile when the role asks for one."""
    payload = parse_json_request(request)
    require_fields(
        payload,
        ("name", "email", "password", "role"),
        message="Missing required fields",
    )

    name = str(payload["name"]).strip()
    email = _normalize_email(payload.get("email"))
    password = str(payload["password"])
    role = str(payload["role"]).strip().lower()

    if email is None or not EMAIL_PATTERN.match(email):
        raise BadRequest("Invalid email format")
    if not PASSWORD_PATTERN.match(password):
        raise BadRequest("Password too weak (8+ chars, 1 upper, 1 num, 1 special)")
    allowed_roles = _allowed_roles()
    if role not in allowed_roles:
        raise BadRequest(f"Role must be one of: {', '.join(allowed_roles)}.")

    business_name = optional_text(payload.get("business_name"))
    if role == "entrepreneur" and not business_name:
        raise BadRequest("Business name required for entrepreneurs")

    # Case-insensitive unique check
    existing = User.query.filter(func.lower(User.email) == email).first()
    if existing is not None:
        raise Conflict("Email already exists")

    user = User(name=name, email=email, role=role)
    user.set_password(password)
    if role == "entrepreneur":
        user.entrepreneur = Entrepreneur(
            business_name=business_name,
            bio=optional_text(payload.get("bio")),
            category=optional_text(payload.get("category")),
            location=optional_text(payload.get("location")),
        )

    # User and profile land in a single commit.
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError as exc:
        db.session.rollback()
        if "unique" in str(exc.orig).lower():
            raise Conflict("Email already exists") from None
        raise

    current_app.logger.info("Registered user %s with role %s", user.id, user.role)
    return (
        jsonify({"message": "User created successfully", "userId": user.id}),
        HTTPStatus.CREATED,
    )


@auth_bp.route("/login", methods=["POST"])
def login() -> tuple:
    """Authenticate a user and start a cookie session."""
    payload = parse_json_request(request)
    email = _normalize_email(payload.get("email"))
    password = payload.get("password") or ""

    if email is None:
        raise Unauthorized("Invalid credentials")
    if not email or not password:
        raise BadRequest("Email and password are required.")

    # Unknown email and wrong password must be indistinguishable.
    user = User.query.filter(func.lower(User.email) == email).first()
    if user is None or not user.check_password(str(password)):
        raise Unauthorized("Invalid credentials")

    session_user = user.session_payload()
    token = create_access_token(
        identity=str(user.id),
        additional_claims={"name": user.name, "role": user.role},
    )
    response = jsonify({"message": "Login successful", "user": session_user})
    set_access_cookies(response, token)
    current_app.logger.info("User %s logged in", user.id)
    return response, HTTPStatus.OK


@auth_bp.route("/logout", methods=["POST"])
def logout() -> tuple:
    """End the current session by clearing its cookie."""
    response = jsonify({"message": "Logged out successfully"})
    unset_jwt_cookies(response)
    return response, HTTPStatus.OK
