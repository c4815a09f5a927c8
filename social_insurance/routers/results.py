"""Read-only routes for stored results and data statistics."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from social_insurance.schemas import DataStatistics, ResultsPage
from social_insurance.services import ReportingService

from .dependencies import get_db_session, get_reporting_service

router = APIRouter(tags=["results"])


@router.get("/results", response_model=ResultsPage)
def list_results(
    session: Session = Depends(get_db_session),
    service: ReportingService = Depends(get_reporting_service),
) -> ResultsPage:
    return service.list_results(session)


@router.get("/statistics", response_model=DataStatistics)
def get_statistics(
    session: Session = Depends(get_db_session),
    service: ReportingService = Depends(get_reporting_service),
) -> DataStatistics:
    return service.get_data_statistics(session)
