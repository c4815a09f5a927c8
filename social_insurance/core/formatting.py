"""Helper functions for money arithmetic and display."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def to_decimal(value: int | float | str | Decimal | None) -> Decimal:
    """Convert ``value`` without picking up binary float artefacts."""

    if isinstance(value, Decimal):
        return value
    if value is None:
        return Decimal(0)
    return Decimal(str(value))


def round2(value: int | float | str | Decimal) -> Decimal:
    """Round to cents, halves away from zero."""

    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def format_amount(value: int | float | Decimal, symbol: str = "¥") -> str:
    """Format an amount with thousands separators and two decimals."""

    d = round2(value)
    sign = "-" if d < 0 else ""
    return f"{sign}{symbol}{abs(d):,.2f}"
