"""FastAPI routers for the contribution calculator."""

from .calculations import router as calculations_router
from .imports import router as imports_router
from .results import router as results_router

__all__ = [
    "calculations_router",
    "imports_router",
    "results_router",
]
