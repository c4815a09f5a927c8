"""Pydantic schemas for request and response payloads."""

from .records import CityStandardInput, ImportSummary, SalaryRecordInput
from .results import (
    CalculationOutcome,
    CalculationRequest,
    CityYear,
    ComputationResult,
    DataStatistics,
    ResultsPage,
    ResultsSummary,
    StoredResult,
)

__all__ = [
    "CalculationOutcome",
    "CalculationRequest",
    "CityStandardInput",
    "CityYear",
    "ComputationResult",
    "DataStatistics",
    "ImportSummary",
    "ResultsPage",
    "ResultsSummary",
    "SalaryRecordInput",
    "StoredResult",
]
