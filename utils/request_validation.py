"""Utilities for validating incoming Flask requests."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Iterable, Mapping

from flask import Request
from werkzeug.exceptions import BadRequest

MAX_ID = 2**63 - 1


def parse_json_request(
    req: Request,
    *,
    required_keys: Iterable[str] | None = None,
    allow_empty: bool = False,
    message: str | None = None,
) -> dict:
    """Return the parsed JSON body or raise a 400 error.

    ``message`` replaces the default text used when required keys are missing.
    """

    if not req.is_json:
        raise BadRequest("Request content type must be application/json.")

    data = req.get_json(silent=True)
    if data is None:
        raise BadRequest("Request JSON body is required.")

    if not isinstance(data, dict):
        raise BadRequest("Request JSON payload must be an object.")

    if not data and not allow_empty:
        raise BadRequest("Request JSON body must not be empty.")

    if required_keys:
        require_fields(data, required_keys, message=message)

    return data


def require_fields(
    data: Mapping, keys: Iterable[str], *, message: str | None = None
) -> None:
    """Raise a 400 error if any of ``keys`` is missing or blank in ``data``."""

    missing = [key for key in keys if _is_blank(data.get(key))]
    if missing:
        raise BadRequest(
            message
            or "Missing required fields: {}.".format(", ".join(sorted(missing)))
        )


def parse_positive_int(value: object, field: str) -> int:
    """Coerce an identifier-like value to a positive integer."""

    if isinstance(value, bool):
        raise BadRequest(f"{field} must be an integer.")
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        raise BadRequest(f"{field} must be an integer.") from None
    if number <= 0:
        raise BadRequest(f"{field} must be a positive integer.")
    if number > MAX_ID:
        raise BadRequest(f"{field} is out of range.")
    return number


def parse_price(value: object) -> float:
    """Return a non-negative price parsed from a form or JSON value."""

    try:
        price = Decimal(str(value).strip())
    except (InvalidOperation, TypeError):
        raise BadRequest("price must be numeric.") from None
    if not price.is_finite() or price < 0:
        raise BadRequest("price must be a non-negative number.")
    return float(price)


def _is_blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def optional_text(value: object) -> str | None:
    """Return ``value`` as stripped text, or None when it is absent or blank."""

    if value is None:
        return None
    text = str(value).strip()
    return text or None
