"""Service layer entrypoints for domain logic."""

from .calculation_service import ContributionService
from .city_resolver import CityAliasTable, CityStandardResolver
from .import_service import ImportService
from .reporting_service import ReportingService, summarize_results

__all__ = [
    "CityAliasTable",
    "CityStandardResolver",
    "ContributionService",
    "ImportService",
    "ReportingService",
    "summarize_results",
]
