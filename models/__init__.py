"""Database initialization and model exports."""

from sqlite3 import Connection as SQLite3Connection

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine


db = SQLAlchemy()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """SQLite only enforces foreign keys when asked to, per connection."""

    if isinstance(dbapi_connection, SQLite3Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# Import models to register them with SQLAlchemy metadata.
from .user import User, Entrepreneur  # noqa: E402,F401
from .product import Product, ProductImage  # noqa: E402,F401
from .order import Order  # noqa: E402,F401
from .service import Service, ServiceRequest  # noqa: E402,F401
from .review import Review  # noqa: E402,F401

__all__ = [
    "db",
    "User",
    "Entrepreneur",
    "Product",
    "ProductImage",
    "Order",
    "Service",
    "ServiceRequest",
    "Review",
]
