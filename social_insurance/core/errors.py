"""Typed errors raised by the contribution pipeline.

Every error carries a machine-readable ``code`` and a human-readable
``message`` that the presentation layer shows as-is. They only abort the
current run; nothing downstream branches on them beyond that.

    ContributionError
    +-- ValidationError
    +-- CityStandardNotFound
    +-- AmbiguousCityStandard
    +-- NoSalaryData
    +-- StorageOperationFailed
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


class ContributionError(Exception):
    """Base exception for contribution calculation failures."""

    code: str = "CONTRIBUTION_ERROR"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


@dataclass(frozen=True, slots=True)
class Violation:
    """One failed constraint on one record of a batch."""

    index: int
    field: str
    message: str

    def __str__(self) -> str:
        return f"record {self.index}: {self.field}: {self.message}"


class ValidationError(ContributionError):
    """One or more input records violate their schema."""

    code: str = "VALIDATION_FAILED"

    def __init__(self, kind: str, violations: Sequence[Violation]) -> None:
        self.kind = kind
        self.violations = tuple(violations)
        preview = "; ".join(str(v) for v in self.violations[:5])
        if len(self.violations) > 5:
            preview += f"; ... ({len(self.violations) - 5} more)"
        super().__init__(
            f"{kind} validation failed with {len(self.violations)} violation(s): {preview}"
        )


class CityStandardNotFound(ContributionError):
    """No city standard matches the requested city and year."""

    code: str = "CITY_STANDARD_NOT_FOUND"

    def __init__(self, city_name: str, year: str) -> None:
        self.city_name = city_name
        self.year = year
        super().__init__(f"No contribution standard found for city {city_name} in {year}")


class AmbiguousCityStandard(ContributionError):
    """Several city standards match the requested city and year."""

    code: str = "AMBIGUOUS_CITY_STANDARD"

    def __init__(self, city_name: str, year: str, matches: int) -> None:
        self.city_name = city_name
        self.year = year
        self.matches = matches
        super().__init__(
            f"Found {matches} contribution standards for city {city_name} in {year}; "
            "re-import the city standards so that each city and year appears once"
        )


class NoSalaryData(ContributionError):
    """The salary table is empty."""

    code: str = "NO_SALARY_DATA"

    def __init__(self) -> None:
        super().__init__("No salary data found; import salary records before calculating")


class StorageOperationFailed(ContributionError):
    """A select, delete or insert against storage failed."""

    code: str = "STORAGE_OPERATION_FAILED"

    def __init__(self, operation: str, table: str, detail: str) -> None:
        self.operation = operation
        self.table = table
        self.detail = detail
        super().__init__(f"Failed to {operation} {table}: {detail}; please re-run")


__all__ = [
    "AmbiguousCityStandard",
    "CityStandardNotFound",
    "ContributionError",
    "NoSalaryData",
    "StorageOperationFailed",
    "ValidationError",
    "Violation",
]
