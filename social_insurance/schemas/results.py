"""Schema definitions for calculation requests and results."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class CityYear(BaseModel):
    """A city and year combination that has a contribution standard."""

    model_config = ConfigDict(from_attributes=True)

    city_name: str
    year: str


class CalculationRequest(BaseModel):
    """Parameters of a calculation run."""

    city_name: str = Field(min_length=1)
    year: str = Field(pattern=r"^\d{4}$")


class ComputationResult(BaseModel):
    """Contribution figures for one employee, rounded to cents."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    employee_name: str
    avg_salary: Decimal
    contribution_base: Decimal
    company_fee: Decimal

    @field_serializer("avg_salary", "contribution_base", "company_fee", when_used="json")
    def _serialize_decimal(self, value: Decimal) -> str:
        return str(value)


class StoredResult(ComputationResult):
    """A persisted result row."""

    id: int
    created_at: datetime | None = None


class CalculationOutcome(BaseModel):
    """Either the committed results of a run or the reason it failed."""

    status: Literal["committed", "failed"]
    message: str
    error_code: str | None = None
    results: list[ComputationResult] = Field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.status == "committed"


class ResultsSummary(BaseModel):
    """Totals across a result set."""

    employee_count: int = 0
    total_avg_salary: Decimal = Decimal("0.00")
    total_contribution_base: Decimal = Decimal("0.00")
    total_company_fee: Decimal = Decimal("0.00")

    @field_serializer(
        "total_avg_salary", "total_contribution_base", "total_company_fee", when_used="json"
    )
    def _serialize_decimal(self, value: Decimal) -> str:
        return str(value)


class ResultsPage(BaseModel):
    """Stored results together with their totals."""

    results: list[StoredResult]
    summary: ResultsSummary


class DataStatistics(BaseModel):
    """Row counts across the three tables."""

    city_standards_count: int = 0
    salaries_count: int = 0
    results_count: int = 0
    employees_count: int = 0
