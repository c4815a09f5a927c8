"""Repositories wrapping the three storage tables."""

from .base import BaseRepository
from .city_standards import CityStandardRepository
from .results import ResultRepository
from .salaries import SalaryRepository

__all__ = [
    "BaseRepository",
    "CityStandardRepository",
    "ResultRepository",
    "SalaryRepository",
]
