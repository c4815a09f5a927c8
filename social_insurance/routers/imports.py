"""Routes accepting already-parsed source records."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from social_insurance.core.log import get_logger
from social_insurance.schemas import ImportSummary
from social_insurance.services import ImportService

from .dependencies import get_db_session, get_import_service

router = APIRouter(prefix="/imports", tags=["imports"])
LOGGER = get_logger(__name__)


@router.post("/city-standards", response_model=ImportSummary)
def import_city_standards(
    records: list[dict[str, Any]] = Body(...),
    session: Session = Depends(get_db_session),
    service: ImportService = Depends(get_import_service),
) -> ImportSummary:
    """Replace every city standard with ``records``."""

    LOGGER.info("Received %d city standard records", len(records))
    return service.import_city_standards(session, records)


@router.post("/salaries", response_model=ImportSummary)
def import_salaries(
    records: list[dict[str, Any]] = Body(...),
    session: Session = Depends(get_db_session),
    service: ImportService = Depends(get_import_service),
) -> ImportSummary:
    """Replace every salary record with ``records``."""

    LOGGER.info("Received %d salary records", len(records))
    return service.import_salaries(session, records)
