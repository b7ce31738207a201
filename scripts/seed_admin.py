"""Seed an administrator user."""

import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from app import create_app  # noqa: E402
from models import db  # noqa: E402
from models.user import User  # noqa: E402

ADMIN_NAME = os.getenv("ADMIN_NAME", "Admin User")
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@hunarhub.com")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "AdminPass123!")


def main() -> None:
    app = create_app()
    with app.app_context():
        admin = User.query.filter_by(email=ADMIN_EMAIL).first()
        if admin is None:
            admin = User(name=ADMIN_NAME, email=ADMIN_EMAIL, role="admin")
            admin.set_password(ADMIN_PASSWORD)
            db.session.add(admin)
            action = "created"
        elif admin.role != "admin":
            # Roles are immutable, so an existing non-admin account cannot be promoted.
            print(f"{ADMIN_EMAIL} already belongs to a {admin.role}; choose another ADMIN_EMAIL")
            sys.exit(1)
        else:
            admin.set_password(ADMIN_PASSWORD)
            action = "updated"
        db.session.commit()
        print(f"Admin user {action}: {ADMIN_EMAIL}")


if __name__ == "__main__":
    main()
