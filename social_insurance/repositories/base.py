"""Shared helpers for repositories."""
from __future__ import annotations

from typing import Any, Iterable, Mapping, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from social_insurance.core.errors import StorageOperationFailed
from social_insurance.core.log import get_logger
from social_insurance.models import Base

LOGGER = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository:
    """Base repository providing convenience helpers."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def _count(self, model: type[Base]) -> int:
        table = model.__tablename__
        try:
            value = self._session.execute(select(func.count()).select_from(model)).scalar()
        except SQLAlchemyError as exc:
            raise StorageOperationFailed("count", table, str(exc)) from exc
        return int(value or 0)

    def bulk_replace(self, model: type[ModelT], rows: Iterable[Mapping[str, Any]]) -> int:
        """Delete every row of ``model`` and insert ``rows`` in one transaction.

        On failure the transaction is rolled back so the table keeps its prior
        contents on transactional backends.
        """

        table = model.__tablename__
        rows = list(rows)
        operation = "delete"
        try:
            self._session.execute(delete(model))
            operation = "insert"
            self._session.add_all(model(**row) for row in rows)
            self._session.flush()
            self._session.commit()
        except SQLAlchemyError as exc:
            self._session.rollback()
            LOGGER.error(
                "Replacing %s failed during %s; transaction rolled back", table, operation
            )
            raise StorageOperationFailed(f"{operation} rows of", table, str(exc)) from exc

        LOGGER.info("Replaced contents of %s with %d rows", table, len(rows))
        return len(rows)
