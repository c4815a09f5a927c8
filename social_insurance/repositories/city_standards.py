"""Read access and bulk import for city standards."""
from __future__ import annotations

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from social_insurance.core.errors import AmbiguousCityStandard, StorageOperationFailed
from social_insurance.models import CityStandard
from social_insurance.schemas import CityStandardInput, CityYear

from .base import BaseRepository


class CityStandardRepository(BaseRepository):
    """Queries against the ``city_standards`` table."""

    def list_city_standards(self) -> list[CityStandard]:
        statement = select(CityStandard).order_by(
            CityStandard.year.desc(), CityStandard.city_name, CityStandard.id
        )
        try:
            return list(self._session.scalars(statement))
        except SQLAlchemyError as exc:
            raise StorageOperationFailed("select", CityStandard.__tablename__, str(exc)) from exc

    def find_city_standards(self, city_name: str, year: str) -> list[CityStandard]:
        """Return every row matching ``(city_name, year)`` in insertion order."""

        statement = (
            select(CityStandard)
            .where(CityStandard.city_name == city_name, CityStandard.year == year)
            .order_by(CityStandard.id)
        )
        try:
            return list(self._session.scalars(statement))
        except SQLAlchemyError as exc:
            raise StorageOperationFailed("select", CityStandard.__tablename__, str(exc)) from exc

    def find_city_standard(self, city_name: str, year: str) -> CityStandard | None:
        """Return the single matching row, ``None`` when absent.

        Raises :class:`AmbiguousCityStandard` when more than one row matches.
        """

        matches = self.find_city_standards(city_name, year)
        if not matches:
            return None
        if len(matches) > 1:
            raise AmbiguousCityStandard(city_name, year, len(matches))
        return matches[0]

    def list_city_year_pairs(self) -> list[CityYear]:
        statement = (
            select(CityStandard.city_name, CityStandard.year)
            .distinct()
            .order_by(CityStandard.year.desc(), CityStandard.city_name.asc())
        )
        try:
            rows = self._session.execute(statement).all()
        except SQLAlchemyError as exc:
            raise StorageOperationFailed("select", CityStandard.__tablename__, str(exc)) from exc
        return [CityYear(city_name=row.city_name, year=row.year) for row in rows]

    def replace_all(self, records: Sequence[CityStandardInput]) -> int:
        return self.bulk_replace(CityStandard, (record.model_dump(mode="python") for record in records))

    def count(self) -> int:
        return self._count(CityStandard)
