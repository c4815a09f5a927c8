"""Per-employee salary aggregation."""
from __future__ import annotations

from collections import defaultdict
from decimal import Decimal
from typing import Iterable, Protocol

from social_insurance.core.formatting import to_decimal
from social_insurance.core.log import get_logger

LOGGER = get_logger(__name__)


class SalaryLike(Protocol):
    employee_id: str
    employee_name: str
    salary_amount: Decimal


def group_salaries_by_employee(salaries: Iterable[SalaryLike]) -> dict[str, list[Decimal]]:
    """Group salary amounts by the exact ``employee_name``."""

    groups: dict[str, list[Decimal]] = defaultdict(list)
    employee_ids: dict[str, set[str]] = defaultdict(set)
    for salary in salaries:
        groups[salary.employee_name].append(to_decimal(salary.salary_amount))
        employee_ids[salary.employee_name].add(salary.employee_id)

    for name, ids in employee_ids.items():
        if len(ids) > 1:
            LOGGER.warning(
                "Employee name %r is shared by employee ids %s; their salaries are averaged together",
                name,
                ", ".join(sorted(ids)),
            )
    return dict(groups)


def aggregate_salaries(salaries: Iterable[SalaryLike]) -> dict[str, Decimal]:
    """Return the unrounded mean salary per employee, ordered by name."""

    groups = group_salaries_by_employee(salaries)
    return {
        name: sum(amounts, Decimal("0")) / len(amounts)
        for name, amounts in sorted(groups.items())
    }
