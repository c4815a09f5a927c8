"""Replace-all persistence for contribution results."""
from __future__ import annotations

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from social_insurance.core.errors import StorageOperationFailed
from social_insurance.models import ContributionResult
from social_insurance.schemas import ComputationResult

from .base import BaseRepository


class ResultRepository(BaseRepository):
    """Queries against the ``results`` table."""

    def replace_all_results(self, results: Sequence[ComputationResult]) -> int:
        """Swap the stored result set for ``results`` as one transaction."""

        return self.bulk_replace(
            ContributionResult, (result.model_dump(mode="python") for result in results)
        )

    def list_results(self) -> list[ContributionResult]:
        # Every stored row comes from the same run, so created_at carries no order.
        statement = select(ContributionResult).order_by(
            ContributionResult.employee_name, ContributionResult.id
        )
        try:
            return list(self._session.scalars(statement))
        except SQLAlchemyError as exc:
            raise StorageOperationFailed(
                "select", ContributionResult.__tablename__, str(exc)
            ) from exc

    def count(self) -> int:
        return self._count(ContributionResult)
