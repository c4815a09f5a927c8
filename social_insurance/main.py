"""FastAPI application instance and startup hooks."""
from __future__ import annotations

from fastapi import FastAPI

from social_insurance import __version__
from social_insurance.core import get_logger, get_settings
from social_insurance.core.errors import ContributionError
from social_insurance.core.log import init_logging
from social_insurance.routers import calculations_router, imports_router, results_router
from social_insurance.routers.errors import contribution_error_handler

LOGGER = get_logger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = get_settings()
    init_logging(settings.logging)

    app = FastAPI(title="Social Insurance Contribution Calculator", version=__version__)
    app.add_exception_handler(ContributionError, contribution_error_handler)
    app.include_router(imports_router)
    app.include_router(calculations_router)
    app.include_router(results_router)

    LOGGER.info("FastAPI application initialised")
    return app


app = create_app()
