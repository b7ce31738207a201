"""Application configuration module."""

import os
from datetime import timedelta
from pathlib import Path


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "y"}


class Config:
    """Base configuration for the Flask application."""

    # Core
    SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///platform.sqlite")
    SQLALCHEMY_DATABASE_URI = DATABASE_URL
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Sessions (signed JWT carried in an HttpOnly cookie)
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    JWT_TOKEN_LOCATION = ["cookies"]
    JWT_ACCESS_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "hunarhub_session")
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(seconds=int(os.getenv("SESSION_MAX_AGE", "86400")))
    JWT_SESSION_COOKIE = False
    JWT_COOKIE_SECURE = _env_flag("SESSION_COOKIE_SECURE")
    JWT_COOKIE_SAMESITE = "Lax"
    JWT_COOKIE_CSRF_PROTECT = _env_flag("SESSION_CSRF_PROTECT")
    ALLOW_ADMIN_REGISTRATION = _env_flag("ALLOW_ADMIN_REGISTRATION")

    # Uploads
    UPLOAD_DIR = os.getenv("UPLOAD_DIR", str(Path("public") / "uploads"))
    UPLOAD_URL_PATH = os.getenv("UPLOAD_URL_PATH", "/uploads")
    MAX_PRODUCT_IMAGES = int(os.getenv("MAX_PRODUCT_IMAGES", "5"))
    MAX_UPLOAD_SIZE = int(os.getenv("MAX_UPLOAD_SIZE", str(5 * 1024 * 1024)))
    ALLOWED_IMAGE_TYPES = os.getenv("ALLOWED_IMAGE_TYPES", "jpg,jpeg,png,gif,webp")

    # Listings
    RECENT_PRODUCTS_LIMIT = int(os.getenv("RECENT_PRODUCTS_LIMIT", "50"))

    # CORS
    _raw_origins = os.getenv("ORIGINS", "*")
    if _raw_origins.strip() == "*":
        CORS_ORIGINS = "*"
    else:
        CORS_ORIGINS = [o.strip() for o in _raw_origins.split(",") if o.strip()]

    # Rate limiting
    RATE_LIMIT = os.getenv("RATE_LIMIT", "60 per minute")
    RATELIMIT_HEADERS_ENABLED = True
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")
    RATELIMIT_KEY_PREFIX = os.getenv("RATELIMIT_KEY_PREFIX", "")
