"""Catalog blueprint: entrepreneur directory, product listings, and uploads."""

from __future__ import annotations

import os
from typing import Iterable

from flask import Blueprint, current_app, jsonify, request, send_from_directory
from flask_jwt_extended import jwt_required
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload
from werkzeug.datastructures import FileStorage
from werkzeug.exceptions import BadRequest, NotFound

from models import db
from models.product import Product, ProductImage
from models.user import Entrepreneur, User
from storage.local_storage import LocalStorage, build_timestamped_filename
from utils.auth import require_role
from utils.request_validation import parse_price

products_bp = Blueprint("products", __name__)
uploads_bp = Blueprint("uploads", __name__)

ALLOWED_IMAGE_TYPES_DEFAULT = {"jpg", "jpeg", "png", "gif", "webp"}


def _allowed_extensions() -> set[str]:
    configured = current_app.config.get("ALLOWED_IMAGE_TYPES")
    if not configured:
        return set(ALLOWED_IMAGE_TYPES_DEFAULT)
    if isinstance(configured, str):
        values: Iterable[str] = configured.split(",")
    else:
        values = configured

    normalized = {
        item.strip().lower().lstrip(".")
        for item in values
        if isinstance(item, str) and item.strip()
    }
    if not normalized:
        return set(ALLOWED_IMAGE_TYPES_DEFAULT)
    if "jpeg" in normalized or "jpg" in normalized:
        normalized.update({"jpg", "jpeg"})
    return normalized


def _validate_image(file: FileStorage) -> None:
    if not file.filename or "." not in file.filename:
        raise BadRequest("Each image must have a filename with an extension.")

    extension = file.filename.rsplit(".", 1)[-1].lower()
    allowed = _allowed_extensions()
    if extension not in allowed:
        raise BadRequest(
            f"File type not allowed. Allowed types: {', '.join(sorted(allowed))}."
        )

    max_size = int(current_app.config.get("MAX_UPLOAD_SIZE", 5 * 1024 * 1024))
    file.stream.seek(0, os.SEEK_END)
    size = file.stream.tell()
    file.stream.seek(0)
    if size > max_size:
        raise BadRequest(f"Image {file.filename} exceeds the maximum upload size.")


def _collect_images() -> list[FileStorage]:
    files = [f for f in request.files.getlist("images") if f and f.filename]
    limit = int(current_app.config.get("MAX_PRODUCT_IMAGES", 5))
    if len(files) > limit:
        raise BadRequest(f"At most {limit} images may be uploaded per product.")
    for file in files:
        _validate_image(file)
    return files


def _public_url(stored_path: str) -> str:
    prefix = current_app.config.get("UPLOAD_URL_PATH", "/uploads").rstrip("/")
    return f"{prefix}/{stored_path}"


def _products_payload(products: Iterable[Product]) -> list[dict]:
    return [product.to_dict() for product in products]


@products_bp.route("/entrepreneurs", methods=["GET"])
def list_entrepreneurs():
    """Return every entrepreneur together with their business profile."""

    rows = db.session.execute(
        select(User, Entrepreneur)
        .join(Entrepreneur, Entrepreneur.user_id == User.id)
        .where(User.role == "entrepreneur")
        .order_by(User.id)
    ).all()
    return jsonify([profile.to_dict() for _, profile in rows])


@products_bp.route("/products/recent", methods=["GET"])
def recent_products():
    """Return the newest products, capped at RECENT_PRODUCTS_LIMIT."""

    limit = int(current_app.config.get("RECENT_PRODUCTS_LIMIT", 50))
    products = db.session.scalars(
        select(Product)
        .options(selectinload(Product.images))
        .order_by(Product.id.desc())
        .limit(limit)
    ).all()
    current_app.logger.debug("Returning %d recent products", len(products))
    return jsonify(_products_payload(products))


@products_bp.route("/products/<int:entrepreneur_id>", methods=["GET"])
def products_for_entrepreneur(entrepreneur_id: int):
    products = db.session.scalars(
        select(Product)
        .options(selectinload(Product.images))
        .where(Product.entrepreneur_id == entrepreneur_id)
        .order_by(Product.id)
    ).all()
    return jsonify(_products_payload(products))


@products_bp.route("/product/<int:product_id>", methods=["GET"])
def get_product(product_id: int):
    product = db.session.get(Product, product_id)
    if product is None:
        raise NotFound("Product not found")
    return jsonify(product.to_dict())


@products_bp.route("/products", methods=["POST"])
@jwt_required()
def create_product():
    """Create a product and its image gallery in one transaction.

    Expects multipart form data with ``name``, ``price``, an optional
    ``description`` and up to MAX_PRODUCT_IMAGES files under ``images``.
    The first image doubles as the legacy ``image_url`` thumbnail.
    """

    user = require_role("entrepreneur")

    name = (request.form.get("name") or "").strip()
    raw_price = request.form.get("price")
    if not name or raw_price is None or not raw_price.strip():
        raise BadRequest("Name and price are required")
    price = parse_price(raw_price)
    description = request.form.get("description") or None

    files = _collect_images()

    storage = LocalStorage(current_app.config.get("UPLOAD_DIR"))
    stored_paths: list[str] = []
    try:
        for file in files:
            stored_paths.append(
                storage.save(file, build_timestamped_filename(file.filename or ""))
            )

        urls = [_public_url(path) for path in stored_paths]
        product = Product(
            entrepreneur_id=user["id"],
            name=name,
            description=description,
            price=price,
            image_url=urls[0] if urls else None,
        )
        product.images = [ProductImage(image_url=url) for url in urls]
        db.session.add(product)
        db.session.commit()
    except (SQLAlchemyError, OSError):
        db.session.rollback()
        for path in stored_paths:
            storage.delete(path)
        raise

    current_app.logger.info(
        "Entrepreneur %s created product %s with %d image(s)",
        user["id"],
        product.id,
        len(stored_paths),
    )
    return jsonify({"message": "Product added", "productId": product.id}), 201


@uploads_bp.route("/<path:filename>", methods=["GET"])
def uploaded_file(filename: str):
    """Serve a stored product image."""

    return send_from_directory(
        os.path.abspath(current_app.config.get("UPLOAD_DIR")), filename
    )
