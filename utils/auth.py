"""Session identity helpers shared by the API blueprints."""

from __future__ import annotations

from flask_jwt_extended import get_jwt, get_jwt_identity, verify_jwt_in_request
from werkzeug.exceptions import Forbidden


def current_session_user() -> dict:
    """Return the ``{id, name, role}`` carried by the session cookie.

    Raises the extension's 401 error when there is no valid session.
    """

    verify_jwt_in_request()
    claims = get_jwt()
    return {
        "id": int(get_jwt_identity()),
        "name": claims.get("name"),
        "role": claims.get("role"),
    }


def require_role(*roles: str) -> dict:
    """Return the session user, or raise 403 when their role is not allowed."""

    user = current_session_user()
    if user["role"] not in roles:
        raise Forbidden("Unauthorized")
    return user


def require_admin() -> dict:
    user = current_session_user()
    if user["role"] != "admin":
        raise Forbidden("Admin privileges required.")
    return user
