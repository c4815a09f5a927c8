#!/usr/bin/env python3
"""Run a contribution calculation from the command line."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from social_insurance.core import get_settings  # noqa: E402
from social_insurance.core.formatting import format_amount  # noqa: E402
from social_insurance.core.log import get_logger, init_logging  # noqa: E402
from social_insurance.db import session_scope  # noqa: E402
from social_insurance.services import ContributionService, summarize_results  # noqa: E402

logger = get_logger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("city", nargs="?", help="City name (aliases are accepted)")
    parser.add_argument("year", nargs="?", help="Four digit year")
    parser.add_argument("--list", action="store_true", help="List available city/year pairs and exit")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    service = ContributionService()
    console = Console()

    with session_scope() as session:
        if args.list or not (args.city and args.year):
            for pair in service.list_available_city_year_pairs(session):
                console.print(f"{pair.year}  {pair.city_name}")
            return 0
        outcome = service.execute_calculation(session, args.city, args.year)

    if not outcome.succeeded:
        logger.error("[%s] %s", outcome.error_code, outcome.message)
        return 1

    table = Table(title=f"{args.city} {args.year}")
    for column in ("Employee", "Average salary", "Contribution base", "Company fee"):
        table.add_column(column, justify="left" if column == "Employee" else "right")
    for result in outcome.results:
        table.add_row(
            result.employee_name,
            format_amount(result.avg_salary),
            format_amount(result.contribution_base),
            format_amount(result.company_fee),
        )
    summary = summarize_results(outcome.results)
    table.add_row(
        "Total",
        format_amount(summary.total_avg_salary),
        format_amount(summary.total_contribution_base),
        format_amount(summary.total_company_fee),
        style="bold",
    )
    console.print(table)
    logger.info(outcome.message)
    return 0


if __name__ == "__main__":
    init_logging(get_settings().logging)
    sys.exit(main())
