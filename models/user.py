"""User and entrepreneur profile models."""

from datetime import datetime

from sqlalchemy import false
from sqlalchemy.orm import validates
from werkzeug.security import check_password_hash, generate_password_hash

from . import db


ROLES = ("customer", "entrepreneur", "admin")


class User(db.Model):
    """Represents a platform account."""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(
        db.Enum(*ROLES, name="user_role", create_constraint=True),
        nullable=False,
    )
    created_at = db.Column(
        db.DateTime,
        nullable=False,
        default=datetime.utcnow,
        server_default=db.func.now(),
    )

    entrepreneur = db.relationship(
        "Entrepreneur",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )

    @validates("role")
    def _validate_role(self, key: str, value: str) -> str:
        if value not in ROLES:
            raise ValueError(f"role must be one of: {', '.join(ROLES)}")
        if self.role is not None and self.role != value:
            raise ValueError("role cannot be changed once set")
        return value

    def set_password(self, password: str) -> None:
        """Hash and store the password."""

        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        """Verify a password against the stored hash."""

        return check_password_hash(self.password_hash, password)

    def session_payload(self) -> dict:
        """Identity fields carried in the login session."""

        return {"id": self.id, "name": self.name, "role": self.role}

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<User {self.email}>"


class Entrepreneur(db.Model):
    """Seller profile extending a user whose role is entrepreneur."""

    __tablename__ = "entrepreneurs"

    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), primary_key=True)
    business_name = db.Column(db.String(200), nullable=False)
    bio = db.Column(db.Text, nullable=True)
    category = db.Column(db.String(120), nullable=True)
    location = db.Column(db.String(200), nullable=True)
    verified = db.Column(
        db.Boolean,
        nullable=False,
        default=False,
        server_default=false(),
    )

    user = db.relationship("User", back_populates="entrepreneur")

    def mark_verified(self) -> None:
        self.verified = True

    def to_dict(self) -> dict:
        return {
            "id": self.user_id,
            "name": self.user.name if self.user else None,
            "business_name": self.business_name,
            "bio": self.bio,
            "category": self.category,
            "location": self.location,
            "verified": self.verified,
        }
