"""Schema definitions for imported records."""
from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer, model_validator


class CityStandardInput(BaseModel):
    """Contribution parameters for one city in one year."""

    model_config = ConfigDict(str_strip_whitespace=True, from_attributes=True)

    city_name: str = Field(min_length=1, max_length=64)
    year: str = Field(pattern=r"^\d{4}$")
    rate: Decimal = Field(ge=0, le=1, max_digits=8, decimal_places=6)
    base_min: Decimal = Field(ge=0, max_digits=14, decimal_places=2)
    base_max: Decimal = Field(ge=0, max_digits=14, decimal_places=2)

    @model_validator(mode="after")
    def _check_base_range(self) -> "CityStandardInput":
        if self.base_min > self.base_max:
            raise ValueError(
                f"base_min ({self.base_min}) must not exceed base_max ({self.base_max})"
            )
        return self

    @field_serializer("rate", "base_min", "base_max", when_used="json")
    def _serialize_decimal(self, value: Decimal) -> str:
        return str(value)


class SalaryRecordInput(BaseModel):
    """One month of salary for one employee."""

    model_config = ConfigDict(from_attributes=True)

    employee_id: str = Field(min_length=1, max_length=32)
    employee_name: str = Field(min_length=1, max_length=64)
    month: str = Field(pattern=r"^\d{6}$")
    salary_amount: Decimal = Field(ge=0, max_digits=14, decimal_places=2)

    @field_serializer("salary_amount", when_used="json")
    def _serialize_amount(self, value: Decimal) -> str:
        return str(value)


class ImportSummary(BaseModel):
    """Outcome of a bulk import."""

    table: str
    count: int
    message: str
