"""Routes that trigger and parameterise calculation runs."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from social_insurance.core.log import get_logger
from social_insurance.schemas import CalculationOutcome, CalculationRequest, CityYear
from social_insurance.services import ContributionService

from .dependencies import get_contribution_service, get_db_session
from .errors import status_for_code

router = APIRouter(prefix="/calculations", tags=["calculations"])
LOGGER = get_logger(__name__)


@router.get("/city-years", response_model=list[CityYear])
def list_city_years(
    session: Session = Depends(get_db_session),
    service: ContributionService = Depends(get_contribution_service),
) -> list[CityYear]:
    return service.list_available_city_year_pairs(session)


@router.post("", response_model=CalculationOutcome)
def run_calculation(
    request: CalculationRequest,
    session: Session = Depends(get_db_session),
    service: ContributionService = Depends(get_contribution_service),
):
    """Calculate contributions for every employee and replace the stored results."""

    LOGGER.info("Calculation requested for %s/%s", request.city_name, request.year)
    outcome = service.execute_calculation(session, request.city_name, request.year)
    if not outcome.succeeded:
        return JSONResponse(
            status_code=status_for_code(outcome.error_code),
            content=outcome.model_dump(mode="json"),
        )
    return outcome
