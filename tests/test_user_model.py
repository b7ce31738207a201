"""Tests for the User and Entrepreneur model helpers."""

import pytest

from models import db
from models.product import Product, ProductImage
from models.user import Entrepreneur, User


def test_password_helpers(app):
    """Passwords are stored hashed and checked against the hash."""

    with app.app_context():
        user = User(name="Helper", email="helper@example.com", role="customer")
        user.set_password("Secret123!")
        db.session.add(user)
        db.session.commit()

        assert user.password_hash != "Secret123!"
        assert user.check_password("Secret123!") is True
        assert user.check_password("secret123!") is False
        assert user.created_at is not None
        assert user.session_payload() == {"id": user.id, "name": "Helper", "role": "customer"}


def test_role_is_immutable(app):
    """A role may be set once and never reassigned to a different value."""

    with app.app_context():
        user = User(name="Fixed", email="fixed@example.com", role="customer")
        user.set_password("Secret123!")
        db.session.add(user)
        db.session.commit()

        with pytest.raises(ValueError, match="cannot be changed"):
            user.role = "admin"

        user.role = "customer"
        db.session.commit()
        db.session.refresh(user)
        assert user.role == "customer"


def test_unknown_role_rejected():
    with pytest.raises(ValueError, match="role must be one of"):
        User(name="Nope", email="nope@example.com", role="moderator")


def test_entrepreneur_verification_defaults_false(app):
    with app.app_context():
        user = User(name="Maker", email="maker@example.com", role="entrepreneur")
        user.set_password("Secret123!")
        user.entrepreneur = Entrepreneur(business_name="Maker Goods")
        db.session.add(user)
        db.session.commit()

        profile = db.session.get(Entrepreneur, user.id)
        assert profile.verified is False
        assert profile.to_dict()["name"] == "Maker"

        profile.mark_verified()
        db.session.commit()
        db.session.refresh(profile)
        assert profile.verified is True


def test_product_images_cascade_with_product(app):
    with app.app_context():
        user = User(name="Maker", email="maker@example.com", role="entrepreneur")
        user.set_password("Secret123!")
        db.session.add(user)
        db.session.commit()

        product = Product(entrepreneur_id=user.id, name="Vase", price=10)
        product.images = [
            ProductImage(image_url="/uploads/1.png"),
            ProductImage(image_url="/uploads/2.png"),
        ]
        db.session.add(product)
        db.session.commit()
        assert product.image_urls() == ["/uploads/1.png", "/uploads/2.png"]

        db.session.delete(product)
        db.session.commit()
        assert ProductImage.query.count() == 0
