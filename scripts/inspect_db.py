"""Print the contents of the main marketplace tables."""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from sqlalchemy import select  # noqa: E402

from app import create_app  # noqa: E402
from models import Entrepreneur, Order, Product, User, db  # noqa: E402

TABLES = (User, Entrepreneur, Product, Order)


def print_table(model) -> None:
    """Print every row of ``model``'s table, one column mapping per line."""

    table = model.__table__
    rows = db.session.execute(select(table)).mappings().all()
    print(f"\n=== {table.name.upper()} ({len(rows)} rows) ===")
    if not rows:
        print("No data found.")
        return
    for row in rows:
        print(", ".join(f"{key}={value!r}" for key, value in row.items()))


def main() -> None:
    app = create_app()
    with app.app_context():
        print(f"Inspecting database: {app.config['SQLALCHEMY_DATABASE_URI']}")
        for model in TABLES:
            print_table(model)


if __name__ == "__main__":
    main()
