"""Contribution base and company fee arithmetic.

Everything here is pure. Amounts are ``Decimal`` throughout and only the
values placed on a :class:`ComputationResult` are rounded, to cents with
``ROUND_HALF_UP``.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Protocol

from social_insurance.core.formatting import round2, to_decimal
from social_insurance.schemas import ComputationResult

from .aggregation import SalaryLike, aggregate_salaries


class StandardLike(Protocol):
    rate: Decimal
    base_min: Decimal
    base_max: Decimal


def calculate_contribution_base(avg_salary: Decimal, base_min: Decimal, base_max: Decimal) -> Decimal:
    """Clamp ``avg_salary`` into ``[base_min, base_max]``."""

    if base_min > base_max:
        raise ValueError(f"base_min {base_min} exceeds base_max {base_max}")
    if avg_salary < base_min:
        return base_min
    if avg_salary > base_max:
        return base_max
    return avg_salary


def calculate_contribution(
    employee_name: str, avg_salary: Decimal, standard: StandardLike
) -> ComputationResult:
    avg_salary = to_decimal(avg_salary)
    contribution_base = calculate_contribution_base(
        avg_salary, to_decimal(standard.base_min), to_decimal(standard.base_max)
    )
    company_fee = contribution_base * to_decimal(standard.rate)
    return ComputationResult(
        employee_name=employee_name,
        avg_salary=round2(avg_salary),
        contribution_base=round2(contribution_base),
        company_fee=round2(company_fee),
    )


def calculate_results(
    standard: StandardLike, salaries: Iterable[SalaryLike]
) -> list[ComputationResult]:
    """Compute one result per employee, ordered by employee name."""

    return [
        calculate_contribution(name, avg_salary, standard)
        for name, avg_salary in aggregate_salaries(salaries).items()
    ]
