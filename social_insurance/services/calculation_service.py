"""Service orchestrating a contribution calculation run."""
from __future__ import annotations

from decimal import Decimal
from threading import Lock

from sqlalchemy.orm import Session

from social_insurance.core.errors import ContributionError, NoSalaryData
from social_insurance.core.formatting import format_amount
from social_insurance.core.log import get_logger, log_context, timeit
from social_insurance.repositories import (
    CityStandardRepository,
    ResultRepository,
    SalaryRepository,
)
from social_insurance.schemas import CalculationOutcome, CityYear, ComputationResult

from .city_resolver import CityAliasTable, CityStandardResolver
from .contribution import calculate_results

LOGGER = get_logger(__name__)

# There is a single results dataset, so every run and import in this process
# shares one lock. Runs from other processes need a database-level lock.
write_lock = Lock()


class ContributionService:
    """Resolve, aggregate, calculate and replace the stored results."""

    def __init__(self, aliases: CityAliasTable | None = None) -> None:
        self._aliases = aliases

    def _resolver(self, session: Session) -> CityStandardResolver:
        aliases = self._aliases if self._aliases is not None else CityAliasTable.from_settings()
        return CityStandardResolver(CityStandardRepository(session), aliases)

    def list_available_city_year_pairs(self, session: Session) -> list[CityYear]:
        """City and year combinations, newest year first then by city name."""

        return CityStandardRepository(session).list_city_year_pairs()

    def compute_contributions(
        self, session: Session, city_name: str, year: str
    ) -> list[ComputationResult]:
        """Run a full calculation and replace the stored results.

        Resolution and salary checks happen before anything is deleted, so a
        failure there leaves the previous results in place. A storage failure
        while replacing rolls the transaction back.
        """

        with write_lock, log_context.bound(city=city_name, year=year):
            with timeit(
                "Contribution run", logger=LOGGER, unit="employees", session=session
            ) as timer:
                standard = self._resolver(session).resolve(city_name, year)
                LOGGER.info(
                    "Using standard %s/%s rate=%s base=[%s, %s]",
                    standard.city_name,
                    standard.year,
                    standard.rate,
                    standard.base_min,
                    standard.base_max,
                )

                salaries = SalaryRepository(session).list_all_salaries()
                if not salaries:
                    raise NoSalaryData()

                results = calculate_results(standard, salaries)
                timer.set_total(len(results))

                ResultRepository(session).replace_all_results(results)
        return results

    def execute_calculation(self, session: Session, city_name: str, year: str) -> CalculationOutcome:
        """Like :meth:`compute_contributions` but reports failures as an outcome."""

        try:
            results = self.compute_contributions(session, city_name, year)
        except ContributionError as exc:
            return CalculationOutcome(status="failed", message=exc.message, error_code=exc.code)

        total_fee = sum((result.company_fee for result in results), Decimal("0"))
        return CalculationOutcome(
            status="committed",
            message=(
                f"Calculated and saved contributions for {len(results)} employee(s); "
                f"company fees total {format_amount(total_fee)}"
            ),
            results=results,
        )
