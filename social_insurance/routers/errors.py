"""Translate pipeline errors into HTTP responses."""
from __future__ import annotations

from fastapi import Request, status
from fastapi.responses import JSONResponse

from social_insurance.core.errors import (
    AmbiguousCityStandard,
    CityStandardNotFound,
    ContributionError,
    NoSalaryData,
    StorageOperationFailed,
    ValidationError,
)
from social_insurance.core.log import get_logger

LOGGER = get_logger(__name__)

STATUS_BY_CODE: dict[str, int] = {
    ValidationError.code: 422,
    CityStandardNotFound.code: status.HTTP_404_NOT_FOUND,
    AmbiguousCityStandard.code: status.HTTP_409_CONFLICT,
    NoSalaryData.code: status.HTTP_409_CONFLICT,
    StorageOperationFailed.code: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_for_code(code: str | None) -> int:
    return STATUS_BY_CODE.get(code or "", status.HTTP_400_BAD_REQUEST)


async def contribution_error_handler(request: Request, exc: ContributionError) -> JSONResponse:
    LOGGER.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    content: dict[str, object] = {"error_code": exc.code, "message": exc.message}
    if isinstance(exc, ValidationError):
        content["violations"] = [
            {"index": v.index, "field": v.field, "message": v.message} for v in exc.violations
        ]
    return JSONResponse(status_code=status_for_code(exc.code), content=content)
