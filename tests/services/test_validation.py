"""Tests for batch validation of imported records."""
from __future__ import annotations

from decimal import Decimal

import pytest

from social_insurance.core.errors import ValidationError
from social_insurance.schemas import CityStandardInput
from social_insurance.services.validation import validate_city_standards, validate_salary_records


def _city(**overrides):
    record = {"city_name": "佛山", "year": "2024", "rate": 0.14, "base_min": 3523, "base_max": 26421}
    record.update(overrides)
    return record


def _salary(**overrides):
    record = {"employee_id": "E001", "employee_name": "张三", "month": "202401", "salary_amount": 5000}
    record.update(overrides)
    return record


def test_valid_city_standards_are_parsed() -> None:
    parsed = validate_city_standards([_city(), _city(city_name=" 广州 ", year="2023")])

    assert [p.city_name for p in parsed] == ["佛山", "广州"]
    assert parsed[0].rate == Decimal("0.14")
    assert parsed[0].base_min == Decimal("3523")


def test_models_pass_through_unchanged() -> None:
    model = CityStandardInput(**_city())

    assert validate_city_standards([model]) == [model]


def test_every_violation_in_the_batch_is_reported() -> None:
    records = [
        _city(year="24"),
        _city(),
        _city(rate=1.5, base_min=-1),
    ]

    with pytest.raises(ValidationError) as excinfo:
        validate_city_standards(records)

    violations = excinfo.value.violations
    assert {(v.index, v.field) for v in violations} == {(0, "year"), (2, "rate"), (2, "base_min")}
    assert excinfo.value.code == "VALIDATION_FAILED"
    assert "3 violation(s)" in excinfo.value.message


def test_base_min_above_base_max_is_rejected() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_city_standards([_city(base_min=30000)])

    (violation,) = excinfo.value.violations
    assert violation.index == 0
    assert violation.field == "record"
    assert "base_max" in violation.message


def test_missing_city_field_is_reported() -> None:
    record = _city()
    del record["base_max"]

    with pytest.raises(ValidationError) as excinfo:
        validate_city_standards([record])

    assert [v.field for v in excinfo.value.violations] == ["base_max"]


@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"employee_id": ""}, "employee_id"),
        ({"employee_name": ""}, "employee_name"),
        ({"month": "2024-01"}, "month"),
        ({"month": "2024"}, "month"),
        ({"salary_amount": -1}, "salary_amount"),
        ({"salary_amount": "0.004"}, "salary_amount"),
        ({"salary_amount": "123456789012345"}, "salary_amount"),
        ({"employee_id": "E" * 33}, "employee_id"),
        ({"employee_name": "张" * 65}, "employee_name"),
    ],
)
def test_invalid_salary_fields(overrides, field) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_salary_records([_salary(), _salary(**overrides)])

    assert [(v.index, v.field) for v in excinfo.value.violations] == [(1, field)]


def test_valid_salaries_are_parsed() -> None:
    (parsed,) = validate_salary_records([_salary(salary_amount="5000.50")])

    assert parsed.salary_amount == Decimal("5000.50")
    assert parsed.month == "202401"


def test_empty_batch_is_valid() -> None:
    assert validate_salary_records([]) == []


@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"city_name": "城" * 65}, "city_name"),
        ({"rate": "0.1234567"}, "rate"),
        ({"base_min": "3523.001"}, "base_min"),
        ({"base_max": "1234567890123.45"}, "base_max"),
    ],
)
def test_city_values_must_fit_storage_columns(overrides, field) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_city_standards([_city(**overrides)])

    assert [v.field for v in excinfo.value.violations] == [field]


def test_values_at_column_limits_are_accepted() -> None:
    (standard,) = validate_city_standards(
        [_city(city_name="城" * 64, rate="0.123456", base_max="999999999999.99")]
    )
    (salary,) = validate_salary_records(
        [_salary(employee_id="E" * 32, employee_name="张" * 64, salary_amount="0.01")]
    )

    assert standard.rate == Decimal("0.123456")
    assert salary.salary_amount == Decimal("0.01")
