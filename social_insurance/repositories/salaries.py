"""Read access and bulk import for salary records."""
from __future__ import annotations

from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from social_insurance.core.errors import StorageOperationFailed
from social_insurance.models import Salary
from social_insurance.schemas import SalaryRecordInput

from .base import BaseRepository


class SalaryRepository(BaseRepository):
    """Queries against the ``salaries`` table."""

    def list_all_salaries(self) -> list[Salary]:
        statement = select(Salary).order_by(Salary.employee_name, Salary.month, Salary.id)
        try:
            return list(self._session.scalars(statement))
        except SQLAlchemyError as exc:
            raise StorageOperationFailed("select", Salary.__tablename__, str(exc)) from exc

    def replace_all(self, records: Sequence[SalaryRecordInput]) -> int:
        return self.bulk_replace(Salary, (record.model_dump(mode="python") for record in records))

    def count(self) -> int:
        return self._count(Salary)

    def count_employees(self) -> int:
        """Number of distinct employee names."""

        statement = select(func.count(func.distinct(Salary.employee_name)))
        try:
            value = self._session.execute(statement).scalar()
        except SQLAlchemyError as exc:
            raise StorageOperationFailed("count", Salary.__tablename__, str(exc)) from exc
        return int(value or 0)
