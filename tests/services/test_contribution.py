"""Unit tests for the contribution arithmetic."""
from __future__ import annotations

from decimal import Decimal
from types import SimpleNamespace

import pytest

from social_insurance.services.contribution import (
    calculate_contribution,
    calculate_contribution_base,
    calculate_results,
)

FOSHAN = SimpleNamespace(rate=Decimal("0.14"), base_min=Decimal("3523"), base_max=Decimal("26421"))


@pytest.mark.parametrize(
    ("avg_salary", "expected"),
    [
        (Decimal("1000"), Decimal("3523")),
        (Decimal("3523"), Decimal("3523")),
        (Decimal("6000"), Decimal("6000")),
        (Decimal("26421"), Decimal("26421")),
        (Decimal("40000"), Decimal("26421")),
    ],
)
def test_contribution_base_is_clamped(avg_salary: Decimal, expected: Decimal) -> None:
    base = calculate_contribution_base(avg_salary, FOSHAN.base_min, FOSHAN.base_max)

    assert base == expected
    assert FOSHAN.base_min <= base <= FOSHAN.base_max


def test_contribution_base_rejects_inverted_range() -> None:
    with pytest.raises(ValueError):
        calculate_contribution_base(Decimal("5000"), Decimal("9000"), Decimal("3000"))


def test_fee_within_range() -> None:
    result = calculate_contribution("张三", Decimal("6000"), FOSHAN)

    assert result.avg_salary == Decimal("6000.00")
    assert result.contribution_base == Decimal("6000.00")
    assert result.company_fee == Decimal("840.00")


def test_fee_uses_base_min_for_low_salary() -> None:
    result = calculate_contribution("李四", Decimal("1000"), FOSHAN)

    assert result.avg_salary == Decimal("1000.00")
    assert result.contribution_base == Decimal("3523.00")
    assert result.company_fee == Decimal("493.22")


def test_rounding_is_half_up_on_the_cent() -> None:
    standard = SimpleNamespace(rate=Decimal("0.5"), base_min=Decimal("0"), base_max=Decimal("100000"))

    result = calculate_contribution("王五", Decimal("1000.005"), standard)

    assert result.avg_salary == Decimal("1000.01")
    assert result.contribution_base == Decimal("1000.01")
    # Fee is computed from the unrounded base: 1000.005 * 0.5 = 500.0025
    assert result.company_fee == Decimal("500.00")


def test_zero_rate_yields_zero_fee() -> None:
    standard = SimpleNamespace(rate=Decimal("0"), base_min=Decimal("100"), base_max=Decimal("200"))

    assert calculate_contribution("赵六", Decimal("150"), standard).company_fee == Decimal("0.00")


def test_calculate_results_orders_by_employee_name() -> None:
    salaries = [
        SimpleNamespace(employee_id="E2", employee_name="b", salary_amount=Decimal("4000")),
        SimpleNamespace(employee_id="E1", employee_name="a", salary_amount=Decimal("30000")),
    ]

    results = calculate_results(FOSHAN, salaries)

    assert [r.employee_name for r in results] == ["a", "b"]
    assert results[0].contribution_base == Decimal("26421.00")
    assert results[0].company_fee == Decimal("3698.94")
