"""Shared FastAPI dependency definitions."""
from __future__ import annotations

from collections.abc import Generator

from sqlalchemy.orm import Session

from social_insurance.db.session import get_default_sessionmaker
from social_insurance.services import ContributionService, ImportService, ReportingService


def get_db_session() -> Generator[Session, None, None]:
    """Yield a database session suitable for request-scoped usage."""

    session = get_default_sessionmaker()()
    try:
        yield session
    finally:
        session.close()


def get_contribution_service() -> ContributionService:
    return ContributionService()


def get_import_service() -> ImportService:
    return ImportService()


def get_reporting_service() -> ReportingService:
    return ReportingService()
