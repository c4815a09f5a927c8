"""ORM model for the latest contribution results."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import ID_TYPE, Base


class ContributionResult(Base):
    """Per-employee outcome of the most recent calculation run."""

    __tablename__ = "results"

    id: Mapped[int] = mapped_column(ID_TYPE, primary_key=True, autoincrement=True)
    employee_name: Mapped[str] = mapped_column(String(64), nullable=False)
    avg_salary: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    contribution_base: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    company_fee: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.current_timestamp(), nullable=False
    )
