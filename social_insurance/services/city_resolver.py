"""Resolve the contribution standard that applies to a city and year."""
from __future__ import annotations

from typing import Mapping

from social_insurance.core.config import get_settings
from social_insurance.core.errors import AmbiguousCityStandard, CityStandardNotFound
from social_insurance.core.log import get_logger
from social_insurance.models import CityStandard
from social_insurance.repositories import CityStandardRepository

LOGGER = get_logger(__name__)


class CityAliasTable:
    """Maps alternative city names onto the canonical name used in storage."""

    def __init__(self, aliases: Mapping[str, str] | None = None) -> None:
        self._aliases = dict(aliases or {})

    @classmethod
    def from_settings(cls) -> "CityAliasTable":
        return cls(get_settings().calculation.city_aliases)

    def normalize(self, city_name: str) -> str:
        name = city_name.strip()
        return self._aliases.get(name, name)

    def __len__(self) -> int:
        return len(self._aliases)


class CityStandardResolver:
    """Looks up exactly one city standard for a requested city and year."""

    def __init__(
        self, repository: CityStandardRepository, aliases: CityAliasTable | None = None
    ) -> None:
        self._repository = repository
        self._aliases = aliases if aliases is not None else CityAliasTable.from_settings()

    def resolve(self, city_name: str, year: str) -> CityStandard:
        normalized = self._aliases.normalize(city_name)
        if normalized != city_name:
            LOGGER.debug("Normalised city %r to %r", city_name, normalized)

        try:
            standard = self._repository.find_city_standard(normalized, year)
        except AmbiguousCityStandard as exc:
            raise AmbiguousCityStandard(city_name, year, exc.matches) from exc
        if standard is None:
            LOGGER.warning("No city standard for %s/%s", city_name, year)
            raise CityStandardNotFound(city_name, year)
        return standard
