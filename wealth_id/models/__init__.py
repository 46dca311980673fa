"""Pydantic domain models for the Global Wealth ID API."""

from .constants import COUNTRY_BASE_RATES, VALID_COUNTRIES  # re-export
from .conversion import ConversionRecord, CountryRate, HealthStatus

__all__ = [
    "COUNTRY_BASE_RATES",
    "VALID_COUNTRIES",
    "ConversionRecord",
    "CountryRate",
    "HealthStatus",
]
