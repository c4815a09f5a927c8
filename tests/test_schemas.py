"""Tests for the serialization of schema amounts."""
from __future__ import annotations

from decimal import Decimal

from social_insurance.schemas import ComputationResult, ResultsSummary, SalaryRecordInput


def _result() -> ComputationResult:
    return ComputationResult(
        employee_name="李四",
        avg_salary=Decimal("1000.00"),
        contribution_base=Decimal("3523.00"),
        company_fee=Decimal("493.22"),
    )


def test_python_dump_keeps_decimals() -> None:
    dumped = _result().model_dump()

    assert dumped["company_fee"] == Decimal("493.22")
    assert isinstance(dumped["contribution_base"], Decimal)


def test_json_dump_renders_amounts_as_strings() -> None:
    assert _result().model_dump(mode="json") == {
        "employee_name": "李四",
        "avg_salary": "1000.00",
        "contribution_base": "3523.00",
        "company_fee": "493.22",
    }


def test_input_and_summary_amounts() -> None:
    salary = SalaryRecordInput(
        employee_id="E002", employee_name="李四", month="202401", salary_amount="1000.50"
    )
    summary = ResultsSummary(employee_count=1, total_company_fee=Decimal("493.22"))

    assert salary.model_dump()["salary_amount"] == Decimal("1000.50")
    assert salary.model_dump(mode="json")["salary_amount"] == "1000.50"
    assert summary.model_dump(mode="json")["total_company_fee"] == "493.22"
