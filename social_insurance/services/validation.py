"""Batch validation of imported records."""
from __future__ import annotations

from typing import Any, Iterable, TypeVar

import pydantic
from pydantic import BaseModel

from social_insurance.core.errors import ValidationError, Violation
from social_insurance.core.log import get_logger
from social_insurance.schemas import CityStandardInput, SalaryRecordInput

LOGGER = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def _field_name(loc: tuple[Any, ...]) -> str:
    if not loc:
        return "record"
    return ".".join(str(part) for part in loc)


def validate_records(
    schema: type[RecordT], records: Iterable[Any], *, kind: str
) -> list[RecordT]:
    """Validate every record against ``schema``.

    All records are checked before failing so the error lists every
    violation of the batch, not just the first.
    """

    parsed: list[RecordT] = []
    violations: list[Violation] = []
    for index, record in enumerate(records):
        try:
            if isinstance(record, schema):
                parsed.append(record)
            else:
                parsed.append(schema.model_validate(record))
        except pydantic.ValidationError as exc:
            for error in exc.errors(include_url=False):
                violations.append(
                    Violation(index=index, field=_field_name(error["loc"]), message=error["msg"])
                )

    if violations:
        LOGGER.warning("Rejected %s batch with %d violation(s)", kind, len(violations))
        raise ValidationError(kind, violations)
    return parsed


def validate_city_standards(records: Iterable[Any]) -> list[CityStandardInput]:
    return validate_records(CityStandardInput, records, kind="city standard")


def validate_salary_records(records: Iterable[Any]) -> list[SalaryRecordInput]:
    return validate_records(SalaryRecordInput, records, kind="salary")
