"""Database models for the contribution calculator."""
from __future__ import annotations

from .base import Base
from .city_standard import CityStandard
from .result import ContributionResult
from .salary import Salary

__all__ = [
    "Base",
    "CityStandard",
    "ContributionResult",
    "Salary",
]
