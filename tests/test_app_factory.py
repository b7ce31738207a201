"""Tests for the Flask application factory."""
from __future__ import annotations

import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


def test_health_endpoint_returns_ok(client, tmp_path):
    """The health endpoint should respond with an OK payload and create uploads dir."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}
    # uploads dir is configured via TestConfig in conftest and created on app init
    assert (tmp_path / "uploads").is_dir()


def test_blueprints_registered(app):
    """Application factory should register expected blueprints."""
    bps = set(app.blueprints.keys())
    required = {"auth", "products", "orders", "services", "reviews", "admin", "uploads"}
    assert required.issubset(bps)


def test_api_routes_registered(app):
    rules = {rule.rule for rule in app.url_map.iter_rules()}
    expected = {
        "/api/register",
        "/api/login",
        "/api/logout",
        "/api/entrepreneurs",
        "/api/products/recent",
        "/api/products/<int:entrepreneur_id>",
        "/api/product/<int:product_id>",
        "/api/products",
        "/api/orders",
        "/api/orders/<int:order_id>/status",
        "/api/my-orders",
        "/api/services",
        "/api/services/<int:entrepreneur_id>",
        "/api/service-requests",
        "/api/service-requests/<int:request_id>/status",
        "/api/reviews",
        "/api/reviews/<int:entrepreneur_id>",
        "/api/admin/stats",
        "/api/admin/pending-entrepreneurs",
        "/api/admin/verify/<int:user_id>",
        "/uploads/<path:filename>",
    }
    assert expected.issubset(rules)
