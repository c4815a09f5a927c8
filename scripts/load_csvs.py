#!/usr/bin/env python3
"""Import city standards and salaries from CSV exports, replacing stored rows.

Expected headers:

* cities:   city_name, year, rate, base_min, base_max
* salaries: employee_id, employee_name, month, salary_amount
"""
from __future__ import annotations

import argparse
import csv
import sys
from pathlib import Path
from typing import Sequence

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from social_insurance.core import get_settings  # noqa: E402
from social_insurance.core.errors import ValidationError  # noqa: E402
from social_insurance.core.log import get_logger, init_logging  # noqa: E402
from social_insurance.db import session_scope  # noqa: E402
from social_insurance.services import ImportService  # noqa: E402
from social_insurance.services.validation import (  # noqa: E402
    validate_city_standards,
    validate_salary_records,
)

logger = get_logger(__name__)


def read_rows(path: Path) -> Sequence[dict]:
    with path.open(newline="", encoding="utf-8-sig") as f:
        return [
            {key.strip(): (value or "").strip() for key, value in row.items() if key}
            for row in csv.DictReader(f)
            if any((value or "").strip() for value in row.values())
        ]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--cities", type=Path, default=None, help="CSV file with city standards")
    parser.add_argument("--salaries", type=Path, default=None, help="CSV file with monthly salaries")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    if args.cities is None and args.salaries is None:
        logger.error("Nothing to import; pass --cities and/or --salaries")
        return 2

    # Both files are checked before either table is replaced.
    parsed: dict[str, list] = {}
    rejected = False
    for name, validate in (("cities", validate_city_standards), ("salaries", validate_salary_records)):
        path = getattr(args, name)
        if path is None:
            continue
        try:
            parsed[name] = validate(read_rows(path))
        except ValidationError as exc:
            rejected = True
            for violation in exc.violations:
                logger.error("%s: %s", path.name, violation)
    if rejected:
        return 1

    service = ImportService()
    with session_scope() as session:
        if "cities" in parsed:
            logger.info(service.import_city_standards(session, parsed["cities"]).message)
        if "salaries" in parsed:
            logger.info(service.import_salaries(session, parsed["salaries"]).message)
    return 0


if __name__ == "__main__":
    init_logging(get_settings().logging)
    sys.exit(main())
