"""Read-side views over stored results and source data."""
from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from sqlalchemy.orm import Session

from social_insurance.core.log import get_logger
from social_insurance.repositories import (
    CityStandardRepository,
    ResultRepository,
    SalaryRepository,
)
from social_insurance.schemas import (
    ComputationResult,
    DataStatistics,
    ResultsPage,
    ResultsSummary,
    StoredResult,
)

LOGGER = get_logger(__name__)


def summarize_results(results: Iterable[ComputationResult]) -> ResultsSummary:
    """Employee count and column totals for a result set."""

    count = 0
    total_avg_salary = Decimal("0.00")
    total_base = Decimal("0.00")
    total_fee = Decimal("0.00")
    for result in results:
        count += 1
        total_avg_salary += result.avg_salary
        total_base += result.contribution_base
        total_fee += result.company_fee
    return ResultsSummary(
        employee_count=count,
        total_avg_salary=total_avg_salary,
        total_contribution_base=total_base,
        total_company_fee=total_fee,
    )


class ReportingService:
    """Service backing the results and overview pages."""

    def list_results(self, session: Session) -> ResultsPage:
        rows = ResultRepository(session).list_results()
        results = [StoredResult.model_validate(row) for row in rows]
        LOGGER.debug("Loaded %d stored results", len(results))
        return ResultsPage(results=results, summary=summarize_results(results))

    def get_data_statistics(self, session: Session) -> DataStatistics:
        salaries = SalaryRepository(session)
        return DataStatistics(
            city_standards_count=CityStandardRepository(session).count(),
            salaries_count=salaries.count(),
            results_count=ResultRepository(session).count(),
            employees_count=salaries.count_employees(),
        )
