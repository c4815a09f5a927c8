"""Validated bulk imports of city standards and salary records."""
from __future__ import annotations

from typing import Any, Iterable

from sqlalchemy.orm import Session

from social_insurance.core.log import get_logger, timeit
from social_insurance.repositories import CityStandardRepository, SalaryRepository
from social_insurance.schemas import ImportSummary

from .calculation_service import write_lock
from .validation import validate_city_standards, validate_salary_records

LOGGER = get_logger(__name__)


class ImportService:
    """Replace a source table with a freshly uploaded batch.

    The whole batch is validated before the table is touched, so a rejected
    upload never costs the data already stored.
    """

    def import_city_standards(self, session: Session, records: Iterable[Any]) -> ImportSummary:
        standards = validate_city_standards(records)
        with write_lock, timeit(
            "City standard import", logger=LOGGER, unit="rows", total=len(standards)
        ):
            count = CityStandardRepository(session).replace_all(standards)
        return ImportSummary(
            table="city_standards",
            count=count,
            message=f"Imported {count} city standard record(s)",
        )

    def import_salaries(self, session: Session, records: Iterable[Any]) -> ImportSummary:
        salaries = validate_salary_records(records)
        with write_lock, timeit(
            "Salary import", logger=LOGGER, unit="rows", total=len(salaries)
        ):
            count = SalaryRepository(session).replace_all(salaries)
        return ImportSummary(
            table="salaries",
            count=count,
            message=f"Imported {count} salary record(s)",
        )
