#!/usr/bin/env python3
"""Create (or recreate) the city_standards, salaries and results tables."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from social_insurance.core import get_settings  # noqa: E402
from social_insurance.core.log import get_logger, init_logging  # noqa: E402
from social_insurance.db.engine import create_sync_engine  # noqa: E402
from social_insurance.models import Base  # noqa: E402

logger = get_logger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--drop", action="store_true", help="Drop existing tables first")
    parser.add_argument("--url", type=str, default=None, help="Override the configured database URL")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    engine = create_sync_engine(args.url)
    if args.drop:
        Base.metadata.drop_all(engine)
        logger.warning("Dropped tables: %s", ", ".join(Base.metadata.tables))
    Base.metadata.create_all(engine)
    logger.info("Tables ready: %s", ", ".join(Base.metadata.tables))


if __name__ == "__main__":
    init_logging(get_settings().logging)
    main()
