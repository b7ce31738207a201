"""Commit helpers translating store constraint failures into HTTP errors."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import BadRequest

from models import db


def commit_new_record() -> None:
    """Commit pending inserts, reporting dangling references as a 400."""

    try:
        db.session.commit()
    except IntegrityError as exc:
        db.session.rollback()
        if "foreign key" in str(exc.orig).lower():
            raise BadRequest("Referenced record does not exist.") from None
        raise
