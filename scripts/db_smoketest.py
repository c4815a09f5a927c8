"""Simple database connectivity check."""
from __future__ import annotations

import sys
from pathlib import Path

from sqlalchemy import inspect, text

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from social_insurance.core.config import get_settings  # noqa: E402  (import after sys.path manipulation)
from social_insurance.db.engine import create_sync_engine  # noqa: E402
from social_insurance.models import Base  # noqa: E402


def main() -> None:
    settings = get_settings()
    engine = create_sync_engine()
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
        print(f"Connected via {settings.database.masked_url}")
        existing = set(inspect(conn).get_table_names())
        for table in Base.metadata.tables:
            marker = "ok" if table in existing else "missing"
            print(f"  {table}: {marker}")


if __name__ == "__main__":
    main()
