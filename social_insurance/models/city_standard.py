"""ORM model for city and year specific contribution parameters."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Index, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import ID_TYPE, Base


class CityStandard(Base):
    """Contribution rate and base range for one city in one year.

    ``(city_name, year)`` is the lookup key but is deliberately not unique;
    the resolver rejects ambiguous matches instead.
    """

    __tablename__ = "city_standards"
    __table_args__ = (Index("ix_city_standards_city_year", "city_name", "year"),)

    id: Mapped[int] = mapped_column(ID_TYPE, primary_key=True, autoincrement=True)
    city_name: Mapped[str] = mapped_column(String(64), nullable=False)
    year: Mapped[str] = mapped_column(String(4), nullable=False)
    rate: Mapped[Decimal] = mapped_column(Numeric(8, 6), nullable=False)
    base_min: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    base_max: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.current_timestamp(), nullable=False
    )

    def __repr__(self) -> str:
        return f"CityStandard(city_name={self.city_name!r}, year={self.year!r}, rate={self.rate})"
